"""Tests for data models."""

import pytest
from pydantic import ValidationError

from lancelog.levels import Level
from lancelog.models import Caller, LogRecord


class TestLogRecord:
    """Tests for the LogRecord model."""

    def test_record_creation(self, fixed_time) -> None:
        """✅ Test creating a record with fields and caller info."""
        caller = Caller(file="/srv/app.py", line=3, function="main")
        record = LogRecord(
            time=fixed_time,
            level=Level.ERROR,
            message=" failed ",
            fields={"component": "db"},
            caller=caller,
        )

        assert record.time == fixed_time
        assert record.level is Level.ERROR
        assert record.message == " failed "
        assert record.fields == {"component": "db"}
        assert record.caller == caller
        assert record.has_caller

    def test_record_defaults(self, fixed_time) -> None:
        """✅ Test fields default to empty and caller to None."""
        record = LogRecord(time=fixed_time, level=Level.INFO, message="hi")

        assert record.fields == {}
        assert record.caller is None
        assert not record.has_caller

    def test_record_is_frozen(self, make_record) -> None:
        """❌ Test records cannot be reassigned after creation."""
        record = make_record()

        with pytest.raises(ValidationError):
            record.message = "changed"

    def test_record_copies_fields(self, fixed_time) -> None:
        """✅ Test later changes to the source mapping do not leak into the record."""
        fields = {"a": 1}
        record = LogRecord(time=fixed_time, level=Level.INFO, message="m", fields=fields)
        fields["b"] = 2

        assert record.fields == {"a": 1}

    def test_level_from_int(self, fixed_time) -> None:
        """✅ Test levels validate from their numeric value."""
        record = LogRecord(time=fixed_time, level=30, message="m")

        assert record.level is Level.WARNING


class TestCaller:
    """Tests for the Caller model."""

    def test_caller_requires_all_fields(self) -> None:
        """❌ Test a caller without a line number is rejected."""
        with pytest.raises(ValidationError):
            Caller(file="/srv/app.py", function="main")
