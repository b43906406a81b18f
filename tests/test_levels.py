"""Tests for severity levels."""

import pytest

from lancelog.levels import Level, parse_level


class TestLevelOrdering:
    """Test the severity ordering."""

    def test_levels_ascend_from_trace_to_panic(self):
        """✅ Test trace < debug < info < warning < error < fatal < panic."""
        assert (
            Level.TRACE
            < Level.DEBUG
            < Level.INFO
            < Level.WARNING
            < Level.ERROR
            < Level.FATAL
            < Level.PANIC
        )

    def test_text_is_lowercase_name(self):
        """✅ Test the display name of a level."""
        assert Level.WARNING.text == "warning"
        assert str(Level.PANIC) == "panic"


class TestParseLevel:
    """Tests for parse_level."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("trace", Level.TRACE),
            ("DEBUG", Level.DEBUG),
            ("Info", Level.INFO),
            ("warn", Level.WARNING),
            ("WARNING", Level.WARNING),
            (" error ", Level.ERROR),
            ("fatal", Level.FATAL),
            ("panic", Level.PANIC),
        ],
    )
    def test_known_names(self, name, expected):
        """✅ Test parsing known level names in any case."""
        assert parse_level(name) is expected

    def test_unknown_name_raises(self):
        """❌ Test an unknown level name raises ValueError."""
        with pytest.raises(ValueError, match="not a valid lancelog level"):
            parse_level("verbose")

