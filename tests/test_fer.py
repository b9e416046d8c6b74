from crashlog.fer import (
    RECORD_ID_CRASHLOG,
    ZERO_GUID,
    FirmwareErrorRecord,
    FirmwareErrorRecordHeader,
)


def test_header_round_trip_revision_2():
    header = FirmwareErrorRecordHeader(
        error_type=2, revision=2, record_identifier=0x1234, guid=RECORD_ID_CRASHLOG
    )
    raw = header.to_bytes()
    assert len(raw) == header.size()
    assert FirmwareErrorRecordHeader.from_bytes(raw) == header


def test_guid_is_stored_little_endian():
    header = FirmwareErrorRecordHeader(revision=2, guid=RECORD_ID_CRASHLOG)
    raw = header.to_bytes()
    assert raw[16:20] == bytes([0x11, 0xF3, 0x87, 0x8F])


def test_revision_1_has_no_guid():
    header = FirmwareErrorRecordHeader(error_type=2, revision=1, guid=RECORD_ID_CRASHLOG)
    raw = header.to_bytes()
    assert header.size() < len(raw)
    parsed = FirmwareErrorRecordHeader.from_bytes(raw)
    assert parsed.guid == ZERO_GUID
    assert parsed.revision == 1


def test_record_round_trip():
    record = FirmwareErrorRecord(
        FirmwareErrorRecordHeader(error_type=2, revision=2, guid=RECORD_ID_CRASHLOG),
        b"\x01\x02\x03\x04",
    )
    assert FirmwareErrorRecord.from_bytes(record.to_bytes()) == record


def test_revision_1_payload_starts_after_short_header():
    header = FirmwareErrorRecordHeader(revision=1)
    data = header.to_bytes()[: header.size()] + b"payload"
    record = FirmwareErrorRecord.from_bytes(data)
    assert record.payload == b"payload"


def test_short_data_is_rejected():
    assert FirmwareErrorRecordHeader.from_bytes(b"\x02\x02\x00") is None
    full = FirmwareErrorRecordHeader(revision=2).to_bytes()
    assert FirmwareErrorRecord.from_bytes(full[:20]) is None