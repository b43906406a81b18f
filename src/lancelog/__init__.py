"""Nested-style colored logging on top of loguru."""

from lancelog.formatter import Formatter, NestedFormatter, color_for_level
from lancelog.levels import Level, parse_level
from lancelog.logger import Entry, Hook, Logger, PanicError
from lancelog.models import Caller, LogRecord
from lancelog.std import (
    add_hook,
    debug,
    error,
    fatal,
    get_level,
    get_logger,
    info,
    is_level_enabled,
    new_logger,
    panic,
    set_formatter,
    set_level,
    set_logger,
    set_output,
    set_propagate,
    set_report_caller,
    trace,
    warn,
    warning,
    with_error,
    with_field,
    with_fields,
)

TRACE = Level.TRACE
DEBUG = Level.DEBUG
INFO = Level.INFO
WARNING = Level.WARNING
ERROR = Level.ERROR
FATAL = Level.FATAL
PANIC = Level.PANIC

__all__ = [
    "DEBUG",
    "ERROR",
    "FATAL",
    "INFO",
    "PANIC",
    "TRACE",
    "WARNING",
    "Caller",
    "Entry",
    "Formatter",
    "Hook",
    "Level",
    "LogRecord",
    "Logger",
    "NestedFormatter",
    "PanicError",
    "add_hook",
    "color_for_level",
    "debug",
    "error",
    "fatal",
    "get_level",
    "get_logger",
    "info",
    "is_level_enabled",
    "new_logger",
    "panic",
    "parse_level",
    "set_formatter",
    "set_level",
    "set_logger",
    "set_output",
    "set_propagate",
    "set_report_caller",
    "trace",
    "warn",
    "warning",
    "with_error",
    "with_field",
    "with_fields",
]
