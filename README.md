# crashlog

Tools for the containers that carry Crash Log records captured by platform
firmware after an error. The package parses and writes these containers and
gives names to the product-specific collateral files used to interpret the
records.

## What it handles

- **BERT / BERR** (`crashlog.bert`): the ACPI Boot Error Record Table (`Bert`)
  and the Boot Error Region it points to (`Berr`, made of a
  `GenericErrorStatusBlock` and a list of `GenericErrorDataEntry`).
  - `Berr.from_bert_file` accepts data that starts with either `BERT` or
    `BERR` and returns `None` for anything else or for truncated data.
  - `Berr.from_bytes` parses a raw region; `Berr.to_bytes` writes one, with
    the lengths recomputed from the entries.
  - `Berr.to_bert_file` writes a zeroed BERT header followed by the region.
  - `Berr.region_payloads` returns the payloads of the Firmware Error Record
    sections; `Berr.from_region_payloads` wraps payloads back into such
    sections.
- **CPER** (`crashlog.cper`): Common Platform Error Records. `Cper.from_bytes`
  decodes the record header (`CperHeader`) and every section (`Section`, with
  its `CperSectionDescriptor`), or returns `None` if the data is not a
  well-formed CPER. `section_from_bytes` picks the section type from its GUID.
- **Firmware Error Records** (`crashlog.fer`): `FirmwareErrorRecord` and
  `FirmwareErrorRecordHeader`. The header carries a GUID only from revision 2.
  `RECORD_ID_CRASHLOG` identifies records that hold Crash Log data.
- **Collateral names** (`crashlog.collateral`):
  - `crashlog.collateral.pvss.PVSS` identifies a product by product, variant,
    stepping and security level. The defaults are `all/all/all/green`.
    `PVSS.to_path` turns it into a relative directory and leaves out `.` and
    `..` components.
  - `crashlog.collateral.path.ItemPath` is a `/`-separated path to an item.
    It provides `parse`, `push` and `to_path`.
- **Shell arguments** (`crashlog.shell_args`): `Args.parse` reads a token
  list in the `extract [OUTPUT_PATH]`, `info [INPUT_PATH] ...` and
  `decode INPUT_PATH` syntax, with the options `-h/--help`, `-w/--wait` and
  `-v`. It raises `ArgsError` on bad input. If `tokens` is `None`, it falls
  back to `-w extract`. `Args.help_text` renders the matching usage text.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pathlib import Path

from crashlog.bert import Berr
from crashlog.cper import Cper

data = Path("sample.bert").read_bytes()
berr = Berr.from_bert_file(data)
if berr is not None:
    for payload in berr.region_payloads():
        print(len(payload))
    Path("copy.bert").write_bytes(berr.to_bert_file())

cper = Cper.from_bytes(Path("sample.whea").read_bytes())
if cper is not None:
    print(cper.record_header.section_count, len(cper.sections))
```

## What it does not do

- It does not read Crash Log records from a running system.
- It does not decode the contents of the records.
- It does not load or search collateral trees. Only the `PVSS` and
  `ItemPath` identifiers are provided.
- It installs no command. `Args` only parses and describes the command line.