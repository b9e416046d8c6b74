"""Command-line arguments of the firmware shell application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "iclg.efi"
MAX_VERBOSITY_LEVEL = 3


class ArgsError(Exception):
    """The command line could not be parsed."""

    def __init__(self, argument: str, missing: bool = False) -> None:
        self.argument = argument
        self.missing = missing
        prefix = "Missing argument" if missing else "Invalid argument"
        super().__init__(f"{prefix}: {argument}")

    @classmethod
    def invalid_argument(cls, argument: str) -> ArgsError:
        return cls(argument, missing=False)

    @classmethod
    def missing_argument(cls, argument: str) -> ArgsError:
        return cls(argument, missing=True)


@dataclass
class ExtractCommand:
    """Extract the Crash Log records, optionally into a given file."""

    output_path: Optional[str] = None


@dataclass
class InfoCommand:
    """List the Crash Log records stored in the input files."""

    input_paths: List[str] = field(default_factory=list)


@dataclass
class DecodeCommand:
    """Decode the Crash Log records stored in the input file."""

    input_path: str


Command = Union[ExtractCommand, InfoCommand, DecodeCommand]


@dataclass
class Args:
    """Options and command selected on the command line."""

    app_name: str = ""
    help: bool = False
    wait: bool = False
    command: Optional[Command] = None
    verbosity: int = 0

    @classmethod
    def parse(cls, tokens: Optional[Iterable[str]]) -> Args:
        """Parse the shell tokens, the first being the application name.

        When `tokens` is None the arguments could not be read, and the
        options "-w extract" are used instead.
        """
        if tokens is None:
            logger.warning("The command line arguments could not be read.")
            logger.warning("Using the following options instead: -w extract")
            return cls(command=ExtractCommand(), wait=True)

        stream = iter(tokens)
        args = cls(app_name=next(stream, DEFAULT_APP_NAME))

        for token in stream:
            if token in ("-h", "--help"):
                args.help = True
            elif token in ("-w", "--wait"):
                args.wait = True
            elif token.startswith("-v"):
                args.verbosity += min(token.count("v"), MAX_VERBOSITY_LEVEL)
            elif token == "extract":
                args.command = ExtractCommand(next(stream, None))
                extra = next(stream, None)
                if extra is not None:
                    raise ArgsError.invalid_argument(extra)
            elif token == "info":
                args.command = InfoCommand(list(stream))
                break
            elif token == "decode":
                input_path = next(stream, None)
                if input_path is None:
                    raise ArgsError.missing_argument("FILENAME")
                args.command = DecodeCommand(input_path)
                extra = next(stream, None)
                if extra is not None:
                    raise ArgsError.invalid_argument(extra)
            else:
                raise ArgsError.invalid_argument(token)

        return args

    def help_text(self, version: str) -> str:
        """Usage text for the selected command, or for the application."""
        name = self.app_name
        lines = [f"Lightweight Crash Log Framework - UEFI Application, version: {version}"]

        command = self.command
        if command is None:
            lines += [
                f"Usage: {name} [OPTIONS] [COMMAND] [ARGUMENTS]",
                "",
                "Commands:",
                "    extract",
                "    info",
                "    decode",
            ]
        elif isinstance(command, ExtractCommand):
            lines += [
                f"Usage: {name} [OPTIONS] extract [OUTPUT_PATH]",
                "",
                "Examples:",
                f"    > {name} extract",
                f"    > {name} extract sample.crashlog",
            ]
        elif isinstance(command, InfoCommand):
            lines += [
                f"Usage: {name} [OPTIONS] info [INPUT_PATH] ...",
                "",
                "Examples:",
                f"    > {name} info sample.crashlog",
                f"    > {name} info sample0.crashlog sample1.crashlog",
            ]
        else:
            lines += [
                f"Usage: {name} [OPTIONS] decode [INPUT_PATH]",
                "",
                "Examples:",
                f"    > {name} decode sample.crashlog",
            ]

        lines += [
            "Options:",
            "     -h, --help      print this help",
            "     -w, --wait      wait for input before exiting",
            "     -v, -vv, --vvv  set the verbosity level (warn, info, debug, trace)",
        ]
        return "\n".join(lines) + "\n"