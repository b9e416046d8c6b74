"""Boot Error Record Table (BERT) and Boot Error Region (BERR) handling."""

from __future__ import annotations

import dataclasses
import struct
import uuid
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from crashlog.cper import FW_ERROR_RECORD_GUID, CperSection, section_from_bytes
from crashlog.fer import (
    RECORD_ID_CRASHLOG,
    ZERO_GUID,
    FirmwareErrorRecord,
    FirmwareErrorRecordHeader,
)

_BERT = struct.Struct("<4sIBB6s8sIIIIQ")
BERT_SIZE = _BERT.size

_STATUS_BLOCK = struct.Struct("<IIIII")
_ENTRY_HEADER = struct.Struct("<16sIHBBI16s20s")
_TIMESTAMP = struct.Struct("<Q")
_TIMESTAMP_REVISION = 0x300


@dataclass
class Bert:
    """Boot Error Record Table (ACPI 6.3 - Table 18-381)."""

    length: int = 0
    revision: int = 0
    checksum: int = 0
    oem_id: bytes = bytes(6)
    oem_table_id: bytes = bytes(8)
    oem_revision: int = 0
    creator_id: int = 0
    creator_revision: int = 0
    region_length: int = 0
    region: int = 0

    @classmethod
    def dummy(cls) -> Bert:
        """A table with every field set to zero."""
        return cls()

    def to_bytes(self) -> bytes:
        return _BERT.pack(
            b"BERT",
            self.length,
            self.revision,
            self.checksum,
            self.oem_id,
            self.oem_table_id,
            self.oem_revision,
            self.creator_id,
            self.creator_revision,
            self.region_length,
            self.region,
        )


@dataclass
class GenericErrorStatusBlock:
    """Generic Error Status Block (ACPI 6.3 - Table 18-391)."""

    block_status: int = 0
    raw_data_offset: int = 0
    raw_data_length: int = 0
    data_length: int = 0
    error_severity: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[GenericErrorStatusBlock]:
        """Parse a status block; None if the data is too short."""
        if len(data) < _STATUS_BLOCK.size:
            return None
        return cls(*_STATUS_BLOCK.unpack_from(data))

    def to_bytes(self) -> bytes:
        return _STATUS_BLOCK.pack(
            self.block_status,
            self.raw_data_offset,
            self.raw_data_length,
            self.data_length,
            self.error_severity,
        )

    def size(self) -> int:
        return _STATUS_BLOCK.size


@dataclass
class GenericErrorDataEntryHeader:
    """Generic Error Data Entry header (ACPI 6.3 - Table 18-392)."""

    section: uuid.UUID = ZERO_GUID
    error_severity: int = 0
    revision: int = 0
    validation_bits: int = 0
    flags: int = 0
    error_data_length: int = 0
    fru_id: bytes = bytes(16)
    fru_text: bytes = bytes(20)
    timestamp: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[GenericErrorDataEntryHeader]:
        """Parse an entry header; None if the data is too short."""
        if len(data) < _ENTRY_HEADER.size:
            return None
        (
            section,
            error_severity,
            revision,
            validation_bits,
            flags,
            error_data_length,
            fru_id,
            fru_text,
        ) = _ENTRY_HEADER.unpack_from(data)
        timestamp = 0
        if revision >= _TIMESTAMP_REVISION:
            if len(data) < _ENTRY_HEADER.size + _TIMESTAMP.size:
                return None
            (timestamp,) = _TIMESTAMP.unpack_from(data, _ENTRY_HEADER.size)
        return cls(
            section=uuid.UUID(bytes_le=section),
            error_severity=error_severity,
            revision=revision,
            validation_bits=validation_bits,
            flags=flags,
            error_data_length=error_data_length,
            fru_id=fru_id,
            fru_text=fru_text,
            timestamp=timestamp,
        )

    def to_bytes(self) -> bytes:
        data = _ENTRY_HEADER.pack(
            self.section.bytes_le,
            self.error_severity,
            self.revision,
            self.validation_bits,
            self.flags,
            self.error_data_length,
            self.fru_id,
            self.fru_text,
        )
        if self.revision >= _TIMESTAMP_REVISION:
            data += _TIMESTAMP.pack(self.timestamp)
        return data

    def size(self) -> int:
        """Encoded size; the timestamp is only present from revision 0x300."""
        if self.revision >= _TIMESTAMP_REVISION:
            return _ENTRY_HEADER.size + _TIMESTAMP.size
        return _ENTRY_HEADER.size


@dataclass
class GenericErrorDataEntry:
    """A Generic Error Data Entry: its header and the CPER section it carries."""

    header: GenericErrorDataEntryHeader
    cper_section: CperSection

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[GenericErrorDataEntry]:
        """Parse an entry; None if it is truncated or malformed."""
        data = bytes(data)
        header = GenericErrorDataEntryHeader.from_bytes(data)
        if header is None:
            return None
        start = header.size()
        end = start + header.error_data_length
        if end > len(data):
            return None
        section = section_from_bytes(header.section, data[start:end])
        if section is None:
            return None
        return cls(header, section)

    def to_bytes(self) -> bytes:
        section = self.cper_section.to_bytes()
        header = dataclasses.replace(self.header, error_data_length=len(section))
        return header.to_bytes() + section

    def size(self) -> int:
        return self.header.size() + self.header.error_data_length


@dataclass
class Berr:
    """Boot Error Region: a status block followed by error data entries."""

    header: GenericErrorStatusBlock = field(default_factory=GenericErrorStatusBlock)
    entries: List[GenericErrorDataEntry] = field(default_factory=list)

    @classmethod
    def from_region_payloads(cls, payloads: Iterable[bytes]) -> Berr:
        """Wrap each Crash Log region in a Firmware Error Record entry."""
        entries = [
            GenericErrorDataEntry(
                header=GenericErrorDataEntryHeader(
                    section=FW_ERROR_RECORD_GUID, revision=_TIMESTAMP_REVISION
                ),
                cper_section=FirmwareErrorRecord(
                    header=FirmwareErrorRecordHeader(
                        error_type=2, revision=2, guid=RECORD_ID_CRASHLOG
                    ),
                    payload=bytes(payload),
                ),
            )
            for payload in payloads
        ]
        return cls(GenericErrorStatusBlock(), entries)

    @classmethod
    def from_bert_file(cls, data: bytes) -> Optional[Berr]:
        """Parse a file that starts with either a BERR or a BERT signature."""
        data = bytes(data)
        if data.startswith(b"BERR"):
            return cls.from_bytes(data[4:])
        if data.startswith(b"BERT"):
            if len(data) < BERT_SIZE:
                return None
            return cls.from_bytes(data[BERT_SIZE:])
        return None

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[Berr]:
        """Parse a raw Boot Error Region; None if it is truncated."""
        data = bytes(data)
        header = GenericErrorStatusBlock.from_bytes(data)
        if header is None:
            return None

        ptr = header.size()
        end = ptr + header.data_length
        if end > len(data):
            return None

        entries = []
        while (entry := GenericErrorDataEntry.from_bytes(data[ptr:end])) is not None:
            ptr += entry.size()
            entries.append(entry)
            if ptr >= end:
                break

        return cls(header, entries)

    def to_bytes(self) -> bytes:
        payload = b"".join(entry.to_bytes() for entry in self.entries)
        header = dataclasses.replace(self.header, data_length=len(payload))
        return header.to_bytes() + payload

    def to_bert_file(self) -> bytes:
        """Encode as a BERT table immediately followed by this region."""
        berr = self.to_bytes()
        bert = dataclasses.replace(Bert.dummy(), region=0, region_length=len(berr))
        return bert.to_bytes() + berr

    def region_payloads(self) -> List[bytes]:
        """Payloads of the Firmware Error Record sections, in entry order."""
        return [
            entry.cper_section.payload
            for entry in self.entries
            if isinstance(entry.cper_section, FirmwareErrorRecord)
        ]