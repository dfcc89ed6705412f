"""Tests for the custom column types."""

from datetime import datetime, timedelta, timezone

from sqlalchemy.dialects import sqlite

from inkwell.core.models.types import UTCDateTime


class TestUTCDateTime:
    dialect = sqlite.dialect()

    def test_naive_values_load_as_utc(self):
        loaded = UTCDateTime().process_result_value(datetime(2024, 5, 1, 12, 0), self.dialect)
        assert loaded.tzinfo is not None
        assert loaded.utcoffset() == timedelta(0)
        assert loaded.hour == 12

    def test_offsets_are_converted_before_write(self):
        plus_two = timezone(timedelta(hours=2))
        stored = UTCDateTime().process_bind_param(datetime(2024, 5, 1, 14, 0, tzinfo=plus_two), self.dialect)
        assert stored == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert stored.utcoffset() == timedelta(0)

    def test_none_passes_through(self):
        assert UTCDateTime().process_result_value(None, self.dialect) is None
        assert UTCDateTime().process_bind_param(None, self.dialect) is None
