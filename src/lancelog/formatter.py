"""Nested-style text formatter for log records."""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

from lancelog.levels import Level
from lancelog.models import Caller, LogRecord

COLOR_RED = 31
COLOR_YELLOW = 33
COLOR_BLUE = 36
COLOR_GRAY = 37

_LEVEL_COLORS = {
    Level.TRACE: COLOR_GRAY,
    Level.DEBUG: COLOR_GRAY,
    Level.WARNING: COLOR_YELLOW,
    Level.ERROR: COLOR_RED,
    Level.FATAL: COLOR_RED,
    Level.PANIC: COLOR_RED,
}

RESET = "\x1b[0m"


class Formatter(Protocol):
    """
    🎭 Protocol for record formatters.

    Anything with a `format()` method turning a LogRecord into one line of
    bytes can be plugged into a Logger.

    Example:
        class UpperFormatter:
            def format(self, record: LogRecord) -> bytes:
                return record.message.upper().encode() + b"\\n"
    """

    def format(self, record: LogRecord) -> bytes: ...


def color_for_level(level: Level | int) -> int:
    """Return the ANSI SGR color code for a severity; blue for anything unmapped."""
    return _LEVEL_COLORS.get(level, COLOR_BLUE)


def format_timestamp(time: datetime, pattern: str | None = None) -> str:
    """
    Render a timestamp with a strftime pattern.

    Without a pattern the stamp looks like ``"Jan  2 15:04:05.000"``: abbreviated
    month, space-padded day and millisecond precision.
    """
    if pattern:
        return time.strftime(pattern)
    return (
        f"{time:%b} {time.day:>2} {time:%H:%M:%S}.{time.microsecond // 1000:03d}"
    )


class NestedFormatter(BaseModel):
    """
    🪺 Render a record as ``time [LEVL] [field] message (caller)``.

    The layout follows nested-logrus-formatter: bracketed level and fields,
    optional ANSI colors picked by severity, and a configurable field order.
    """

    model_config = ConfigDict(frozen=True)

    fields_order: list[str] | None = Field(
        None, description="Fields rendered first, in this order; the rest sorted"
    )
    timestamp_format: str | None = Field(
        None, description="strftime pattern; default is a millisecond stamp"
    )
    hide_keys: bool = Field(False, description="Show [value] instead of [key:value]")
    no_colors: bool = Field(False, description="Disable ANSI colors")
    no_fields_colors: bool = Field(
        False, description="Color only the level, not level + fields"
    )
    no_fields_space: bool = Field(False, description="No space between fields")
    show_full_level: bool = Field(
        False, description="Show [WARNING] instead of [WARN]"
    )
    no_uppercase_level: bool = Field(False, description="Keep the level lowercase")
    trim_messages: bool = Field(False, description="Strip whitespace around messages")
    caller_first: bool = Field(False, description="Render caller info before the level")
    custom_caller_formatter: Callable[[Caller], str] | None = Field(
        None, description="Custom rendering for caller info"
    )

    def format(self, record: LogRecord) -> bytes:
        parts: list[str] = [format_timestamp(record.time, self.timestamp_format)]

        level = record.level.text
        if not self.no_uppercase_level:
            level = level.upper()

        if self.caller_first:
            self._write_caller(parts, record)

        if not self.no_colors:
            parts.append(f"\x1b[{color_for_level(record.level)}m")

        parts.append(" [")
        parts.append(level if self.show_full_level else level[:4])
        parts.append("]")

        if not self.no_fields_space:
            parts.append(" ")

        if not self.no_colors and self.no_fields_colors:
            parts.append(RESET)

        for name in self.ordered_field_names(record.fields):
            self._write_field(parts, name, record.fields[name])

        if self.no_fields_space:
            parts.append(" ")

        if not self.no_colors and not self.no_fields_colors:
            parts.append(RESET)

        parts.append(record.message.strip() if self.trim_messages else record.message)

        if not self.caller_first:
            self._write_caller(parts, record)

        parts.append("\n")
        return "".join(parts).encode("utf-8")

    def ordered_field_names(self, fields: dict[str, Any]) -> list[str]:
        """Configured order first (absent names skipped), then the rest sorted."""
        if self.fields_order is None:
            return sorted(fields)

        ordered: list[str] = []
        seen: set[str] = set()
        for name in self.fields_order:
            if name in fields and name not in seen:
                seen.add(name)
                ordered.append(name)

        ordered.extend(sorted(name for name in fields if name not in seen))
        return ordered

    def _write_caller(self, parts: list[str], record: LogRecord) -> None:
        caller = record.caller
        if caller is None:
            return
        if self.custom_caller_formatter is not None:
            parts.append(self.custom_caller_formatter(caller))
        else:
            parts.append(f" ({caller.file}:{caller.line} {caller.function})")

    def _write_field(self, parts: list[str], name: str, value: Any) -> None:
        if self.hide_keys:
            parts.append(f"[{value}]")
        else:
            parts.append(f"[{name}:{value}]")

        if not self.no_fields_space:
            parts.append(" ")
