"""Firmware Error Record sections of a CPER."""

from __future__ import annotations

import struct
import uuid
from dataclasses import dataclass, field
from typing import Optional

RECORD_ID_CRASHLOG = uuid.UUID("8f87f311-c998-4d9e-a0c4-6065518c4f6d")
ZERO_GUID = uuid.UUID(int=0)

_FIXED = struct.Struct("<BB6sQ")
_GUID_SIZE = 16


@dataclass
class FirmwareErrorRecordHeader:
    """Header of a Firmware Error Record section."""

    error_type: int = 0
    revision: int = 0
    reserved: bytes = bytes(6)
    record_identifier: int = 0
    guid: uuid.UUID = field(default=ZERO_GUID)

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[FirmwareErrorRecordHeader]:
        """Parse a header; return None if the data is too short."""
        if len(data) < _FIXED.size:
            return None
        error_type, revision, reserved, record_identifier = _FIXED.unpack_from(data)
        guid = ZERO_GUID
        if revision >= 2:
            end = _FIXED.size + _GUID_SIZE
            if len(data) < end:
                return None
            guid = uuid.UUID(bytes_le=bytes(data[_FIXED.size:end]))
        return cls(error_type, revision, bytes(reserved), record_identifier, guid)

    def to_bytes(self) -> bytes:
        return (
            _FIXED.pack(self.error_type, self.revision, self.reserved, self.record_identifier)
            + self.guid.bytes_le
        )

    def size(self) -> int:
        """Size of the header in the encoded section, which depends on the revision."""
        if self.revision >= 2:
            return _FIXED.size + _GUID_SIZE
        return _FIXED.size


@dataclass
class FirmwareErrorRecord:
    """A Firmware Error Record: a header followed by its payload."""

    header: FirmwareErrorRecordHeader
    payload: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[FirmwareErrorRecord]:
        """Parse a record; return None if the data is too short."""
        header = FirmwareErrorRecordHeader.from_bytes(data)
        if header is None:
            return None
        return cls(header, bytes(data[header.size():]))

    def to_bytes(self) -> bytes:
        return self.header.to_bytes() + self.payload