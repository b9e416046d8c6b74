"""Common Platform Error Record (CPER) parsing."""

from __future__ import annotations

import struct
import uuid
from dataclasses import dataclass
from typing import List, Optional, Union

from crashlog.fer import FirmwareErrorRecord

FW_ERROR_RECORD_GUID = uuid.UUID("81212a96-09ed-4996-9471-8d729c8e69ed")
RECORD_HEADER_SIZE = 128
SECTION_DESCRIPTOR_SIZE = 72

_HEADER = struct.Struct("<4sBBIHIIIQ16s16s16s16sQIQ12s")
_DESCRIPTOR = struct.Struct("<IIBBBBI16s16sI20s")


@dataclass
class UnknownSection:
    """A CPER section of a type that is not interpreted."""

    data: bytes

    def to_bytes(self) -> bytes:
        return self.data


CperSection = Union[FirmwareErrorRecord, UnknownSection]


def section_from_bytes(guid: uuid.UUID, data: bytes) -> Optional[CperSection]:
    """Parse a section body according to its type GUID; None if it is malformed."""
    if guid == FW_ERROR_RECORD_GUID:
        return FirmwareErrorRecord.from_bytes(data)
    return UnknownSection(bytes(data))


@dataclass
class Revision:
    minor: int
    major: int


@dataclass
class CperSectionDescriptor:
    section_offset: int
    section_length: int
    revision: Revision
    validation_bits: int
    reserved: int
    flags: int
    section_type: uuid.UUID
    fru_id: uuid.UUID
    section_severity: int
    fru_text: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[CperSectionDescriptor]:
        """Parse a section descriptor; None if the data is too short."""
        if len(data) < _DESCRIPTOR.size:
            return None
        (
            offset,
            length,
            minor,
            major,
            validation_bits,
            reserved,
            flags,
            section_type,
            fru_id,
            severity,
            fru_text,
        ) = _DESCRIPTOR.unpack_from(data)
        return cls(
            section_offset=offset,
            section_length=length,
            revision=Revision(minor, major),
            validation_bits=validation_bits,
            reserved=reserved,
            flags=flags,
            section_type=uuid.UUID(bytes_le=section_type),
            fru_id=uuid.UUID(bytes_le=fru_id),
            section_severity=severity,
            fru_text=fru_text,
        )


@dataclass
class Section:
    descriptor: CperSectionDescriptor
    section: CperSection


@dataclass
class CperHeader:
    signature_start: int
    revision: Revision
    signature_end: int
    section_count: int
    error_severity: int
    validation_bits: int
    record_length: int
    timestamp: int
    platform_id: uuid.UUID
    partition_id: uuid.UUID
    creator_id: uuid.UUID
    notification_type: uuid.UUID
    record_id: int
    flags: int
    persistence_information: int
    reserved: bytes

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[CperHeader]:
        """Parse a record header; None if the signature or length does not match."""
        if not bytes(data[:4]) == b"CPER" or len(data) < _HEADER.size:
            return None
        (
            signature,
            minor,
            major,
            signature_end,
            section_count,
            error_severity,
            validation_bits,
            record_length,
            timestamp,
            platform_id,
            partition_id,
            creator_id,
            notification_type,
            record_id,
            flags,
            persistence,
            reserved,
        ) = _HEADER.unpack_from(data)
        return cls(
            signature_start=int.from_bytes(signature, "little"),
            revision=Revision(minor, major),
            signature_end=signature_end,
            section_count=section_count,
            error_severity=error_severity,
            validation_bits=validation_bits,
            record_length=record_length,
            timestamp=timestamp,
            platform_id=uuid.UUID(bytes_le=platform_id),
            partition_id=uuid.UUID(bytes_le=partition_id),
            creator_id=uuid.UUID(bytes_le=creator_id),
            notification_type=uuid.UUID(bytes_le=notification_type),
            record_id=record_id,
            flags=flags,
            persistence_information=persistence,
            reserved=reserved,
        )


@dataclass
class Cper:
    """A CPER record: its header and its sections."""

    record_header: CperHeader
    sections: List[Section]

    @classmethod
    def from_bytes(cls, data: bytes) -> Optional[Cper]:
        """Decode a CPER; None if the data is not a well-formed CPER."""
        if len(data) < RECORD_HEADER_SIZE:
            return None
        header = CperHeader.from_bytes(data[:RECORD_HEADER_SIZE])
        if header is None:
            return None

        sections = []
        for i in range(header.section_count):
            index = RECORD_HEADER_SIZE + i * SECTION_DESCRIPTOR_SIZE
            descriptor = CperSectionDescriptor.from_bytes(data[index:])
            if descriptor is None:
                return None
            start = descriptor.section_offset
            end = start + descriptor.section_length
            if end > len(data):
                return None
            section = section_from_bytes(descriptor.section_type, data[start:end])
            if section is None:
                return None
            sections.append(Section(descriptor, section))

        return cls(header, sections)