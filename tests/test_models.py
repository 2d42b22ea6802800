"""Tests for the link record model."""

import json

import pytest
from link_redirector.errors import CorruptRecordError
from link_redirector.models import LinkRecord


class TestLinkRecord:
    """Test LinkRecord encoding."""

    def test_to_json(self):
        record = LinkRecord(destination="https://example.com")
        assert json.loads(record.to_json()) == {"destination": "https://example.com"}

    def test_from_json(self):
        record = LinkRecord.from_json('{"destination": "https://example.com"}')
        assert record.destination == "https://example.com"

    def test_from_json_ignores_extra_fields(self):
        record = LinkRecord.from_json('{"destination": "https://example.com", "owner": "x"}')
        assert record == LinkRecord(destination="https://example.com")

    @pytest.mark.parametrize(
        "value",
        [
            "not json",
            "",
            "[]",
            '"https://example.com"',
            "{}",
            '{"destination": 5}',
            '{"destination": null}',
        ],
    )
    def test_corrupt_values(self, value):
        with pytest.raises(CorruptRecordError):
            LinkRecord.from_json(value)

    def test_corrupt_record_status(self):
        assert CorruptRecordError.status_code == 500
