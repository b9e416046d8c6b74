import struct
import uuid

from crashlog.cper import (
    FW_ERROR_RECORD_GUID,
    Cper,
    CperHeader,
    CperSectionDescriptor,
    UnknownSection,
    section_from_bytes,
)
from crashlog.fer import RECORD_ID_CRASHLOG, FirmwareErrorRecord, FirmwareErrorRecordHeader

HEADER = struct.Struct("<4sBBIHIIIQ16s16s16s16sQIQ12s")
DESCRIPTOR = struct.Struct("<IIBBBBI16s16sI20s")
ZERO = bytes(16)


def build_cper(bodies, section_type=FW_ERROR_RECORD_GUID, signature=b"CPER"):
    count = len(bodies)
    offset = HEADER.size + count * DESCRIPTOR.size
    descriptors = b""
    for body in bodies:
        descriptors += DESCRIPTOR.pack(
            offset, len(body), 0, 1, 0, 0, 0, section_type.bytes_le, ZERO, 0, bytes(20)
        )
        offset += len(body)
    total = offset
    header = HEADER.pack(
        signature, 1, 2, 0xFFFFFFFF, count, 0, 0, total, 0,
        ZERO, ZERO, ZERO, ZERO, 0, 0, 0, bytes(12),
    )
    return header + descriptors + b"".join(bodies)


def fer_body(payload):
    return FirmwareErrorRecord(
        FirmwareErrorRecordHeader(error_type=2, revision=2, guid=RECORD_ID_CRASHLOG),
        payload,
    ).to_bytes()


def test_from_bytes_five_firmware_sections():
    data = build_cper([fer_body(bytes([i]) * 8) for i in range(5)])
    cper = Cper.from_bytes(data)

    signature = cper.record_header.signature_start.to_bytes(4, "little")
    assert signature == b"CPER"
    assert cper.record_header.section_count == 5
    assert len(cper.sections) == 5
    for section in cper.sections:
        assert section.descriptor.section_type == FW_ERROR_RECORD_GUID


def test_section_payloads_are_decoded():
    payloads = [b"first", b"second"]
    cper = Cper.from_bytes(build_cper([fer_body(p) for p in payloads]))
    assert [s.section.payload for s in cper.sections] == payloads
    assert all(s.section.header.guid == RECORD_ID_CRASHLOG for s in cper.sections)


def test_unknown_section_type_keeps_raw_data():
    other = uuid.UUID(int=1)
    cper = Cper.from_bytes(build_cper([b"abcdef"], section_type=other))
    section = cper.sections[0].section
    assert section == UnknownSection(b"abcdef")
    assert section.to_bytes() == b"abcdef"


def test_section_from_bytes_dispatches_on_guid():
    body = fer_body(b"xyz")
    fer = section_from_bytes(FW_ERROR_RECORD_GUID, body)
    assert fer.to_bytes() == body
    assert section_from_bytes(uuid.UUID(int=5), body) == UnknownSection(body)


def test_wrong_signature_is_rejected():
    data = build_cper([fer_body(b"x")], signature=b"XXXX")
    assert Cper.from_bytes(data) is None
    assert CperHeader.from_bytes(data[:128]) is None


def test_truncated_section_is_rejected():
    data = build_cper([fer_body(b"payload")])
    assert Cper.from_bytes(data[:-3]) is None


def test_short_input_is_rejected():
    assert Cper.from_bytes(b"CPER") is None
    assert CperSectionDescriptor.from_bytes(bytes(10)) is None


def test_descriptor_fields():
    raw = DESCRIPTOR.pack(200, 40, 3, 1, 0, 0, 0, FW_ERROR_RECORD_GUID.bytes_le, ZERO, 0, bytes(20))
    descriptor = CperSectionDescriptor.from_bytes(raw)
    assert descriptor.section_offset == 200
    assert descriptor.section_length == 40
    assert (descriptor.revision.minor, descriptor.revision.major) == (3, 1)
    assert descriptor.section_type == FW_ERROR_RECORD_GUID