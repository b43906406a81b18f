"""Logger facade with pluggable formatting, hooks and levels."""

import io
import sys
import threading
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any, Protocol

from lancelog.formatter import Formatter, NestedFormatter
from lancelog.levels import Level
from lancelog.logging import logger
from lancelog.models import Caller, LogRecord

ERROR_KEY = "error"

# Frames between Logger._log and user code: _log -> public emit method -> caller
_CALLER_DEPTH = 2


class Hook(Protocol):
    """
    🪝 Protocol for per-record side channels.

    A hook receives every record emitted at one of its levels, independent of
    the logger's output sink.

    Example:
        class ErrorCounter:
            def __init__(self) -> None:
                self.count = 0

            def levels(self) -> Iterable[Level]:
                return [Level.ERROR, Level.FATAL, Level.PANIC]

            def fire(self, record: LogRecord) -> None:
                self.count += 1
    """

    def levels(self) -> Iterable[Level]: ...

    def fire(self, record: LogRecord) -> None: ...


class PanicError(Exception):
    """Raised after a PANIC record has been written."""

    def __init__(self, message: str, fields: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.fields = dict(fields or {})


def sprint(*args: Any) -> str:
    """Concatenate values, adding a space only between two non-string operands."""
    parts: list[str] = []
    for index, arg in enumerate(args):
        if index > 0 and not isinstance(arg, str) and not isinstance(args[index - 1], str):
            parts.append(" ")
        parts.append(str(arg))
    return "".join(parts)


def write_line(out: Any, data: bytes) -> None:
    """Write one formatted line to a text or binary sink in a single call."""
    if isinstance(out, io.TextIOBase):
        out.write(data.decode("utf-8"))
    else:
        out.write(data)

    flush = getattr(out, "flush", None)
    if flush is not None:
        flush()


class Logger:
    """
    📣 A logger with its own output sink, formatter, level and hooks.

    A Logger does not register anything with loguru: records are built,
    handed to hooks, formatted and written by the logger itself under one
    lock, so the application's loguru handler table has no effect on it.
    With ``propagate=True`` every written record is also forwarded to loguru
    for the application's own handlers. Setters take the lock and apply to
    every later call.
    """

    def __init__(
        self,
        out: Any = None,
        formatter: Formatter | None = None,
        level: Level = Level.INFO,
        report_caller: bool = False,
        exit_func: Callable[[int], Any] = sys.exit,
        propagate: bool = False,
    ) -> None:
        """
        Create a logger.

        Args:
            out: Writable text or binary sink (default: sys.stderr)
            formatter: Record formatter (default: NestedFormatter())
            level: Minimum level that gets written
            report_caller: Whether records carry caller info
            exit_func: Called with status 1 by fatal()
            propagate: Also forward written records to loguru
        """
        self._lock = threading.RLock()
        self._out = out if out is not None else sys.stderr
        self._formatter: Formatter = formatter if formatter is not None else NestedFormatter()
        self._level = level
        self._report_caller = report_caller
        self._exit_func = exit_func
        self._propagate = propagate
        self._hooks: list[tuple[Hook, frozenset[Level]]] = []

    # Configuration

    def set_output(self, out: Any) -> None:
        with self._lock:
            self._out = out

    def set_formatter(self, formatter: Formatter) -> None:
        with self._lock:
            self._formatter = formatter

    def set_level(self, level: Level) -> None:
        with self._lock:
            self._level = level

    def get_level(self) -> Level:
        with self._lock:
            return self._level

    def is_level_enabled(self, level: Level) -> bool:
        return level >= self.get_level()

    def set_report_caller(self, include: bool) -> None:
        with self._lock:
            self._report_caller = include

    def set_propagate(self, propagate: bool) -> None:
        with self._lock:
            self._propagate = propagate

    def add_hook(self, hook: Hook) -> None:
        """Register a hook; its failures are reported on stderr, never raised."""
        with self._lock:
            self._hooks.append((hook, frozenset(hook.levels())))
        logger.debug("Hook registered hook={hook}", hook=type(hook).__name__)

    def replace_hooks(self, hooks: Iterable[Hook]) -> list[Hook]:
        """Swap every registered hook for `hooks` and return the old ones."""
        new_hooks = [(hook, frozenset(hook.levels())) for hook in hooks]
        with self._lock:
            old_hooks, self._hooks = self._hooks, new_hooks
        return [hook for hook, _ in old_hooks]

    def exit(self, code: int) -> None:
        """Call the configured exit function."""
        self._exit_func(code)

    # Structured emission

    def with_fields(self, fields: Mapping[str, Any]) -> "Entry":
        return Entry(self, fields)

    def with_field(self, key: str, value: Any) -> "Entry":
        return Entry(self, {key: value})

    def with_error(self, err: BaseException) -> "Entry":
        return Entry(self, {ERROR_KEY: err})

    # Emission

    def log(self, level: Level, *args: Any) -> None:
        """Write a record at `level`. Never exits or raises for FATAL/PANIC."""
        self._log(level, args)

    def trace(self, *args: Any) -> None:
        self._log(Level.TRACE, args)

    def debug(self, *args: Any) -> None:
        self._log(Level.DEBUG, args)

    def info(self, *args: Any) -> None:
        self._log(Level.INFO, args)

    def warning(self, *args: Any) -> None:
        self._log(Level.WARNING, args)

    def warn(self, *args: Any) -> None:
        self._log(Level.WARNING, args)

    def error(self, *args: Any) -> None:
        self._log(Level.ERROR, args)

    def fatal(self, *args: Any) -> None:
        """Write a FATAL record, then call the exit function with status 1."""
        self._log(Level.FATAL, args)
        self.exit(1)

    def panic(self, *args: Any) -> None:
        """Write a PANIC record, then raise PanicError."""
        message = self._log(Level.PANIC, args)
        raise PanicError(message)

    def _log(
        self,
        level: Level,
        args: tuple[Any, ...],
        fields: Mapping[str, Any] | None = None,
        depth: int = _CALLER_DEPTH,
    ) -> str:
        """Emit one record and return its message."""
        fields = dict(fields or {})
        message = sprint(*args)

        with self._lock:
            if level < self._level:
                return message

            caller = None
            if self._report_caller:
                frame = sys._getframe(depth)
                caller = Caller(
                    file=frame.f_code.co_filename,
                    line=frame.f_lineno,
                    function=frame.f_code.co_name,
                )

            record = LogRecord(
                time=datetime.now().astimezone(),
                level=level,
                message=message,
                fields=fields,
                caller=caller,
            )

            for hook, levels in self._hooks:
                if level in levels:
                    self._fire(hook, record)

            write_line(self._out, self._formatter.format(record))
            propagate = self._propagate

        if propagate:
            logger.bind(**fields).opt(depth=depth).log(level.name, message)
        return message

    @staticmethod
    def _fire(hook: Hook, record: LogRecord) -> None:
        try:
            hook.fire(record)
        except Exception as exc:
            sys.stderr.write(f"Failed to fire hook: {exc}\n")


class Entry:
    """
    🧩 Fields bound to a logger, waiting for an emit call.

    Entries are immutable: `fields` is a read-only view and `with_fields()`
    returns a new entry with the merged fields.
    """

    def __init__(self, logger: Logger, fields: Mapping[str, Any] | None = None) -> None:
        self.logger = logger
        self._fields = dict(fields or {})

    @property
    def fields(self) -> Mapping[str, Any]:
        return MappingProxyType(self._fields)

    def with_fields(self, fields: Mapping[str, Any]) -> "Entry":
        return Entry(self.logger, {**self._fields, **fields})

    def with_field(self, key: str, value: Any) -> "Entry":
        return self.with_fields({key: value})

    def with_error(self, err: BaseException) -> "Entry":
        return self.with_fields({ERROR_KEY: err})

    def log(self, level: Level, *args: Any) -> None:
        self.logger._log(level, args, self._fields)

    def trace(self, *args: Any) -> None:
        self.logger._log(Level.TRACE, args, self._fields)

    def debug(self, *args: Any) -> None:
        self.logger._log(Level.DEBUG, args, self._fields)

    def info(self, *args: Any) -> None:
        self.logger._log(Level.INFO, args, self._fields)

    def warning(self, *args: Any) -> None:
        self.logger._log(Level.WARNING, args, self._fields)

    def warn(self, *args: Any) -> None:
        self.logger._log(Level.WARNING, args, self._fields)

    def error(self, *args: Any) -> None:
        self.logger._log(Level.ERROR, args, self._fields)

    def fatal(self, *args: Any) -> None:
        self.logger._log(Level.FATAL, args, self._fields)
        self.logger.exit(1)

    def panic(self, *args: Any) -> None:
        message = self.logger._log(Level.PANIC, args, self._fields)
        raise PanicError(message, self._fields)
