"""
Process-wide standard logger.

The standard logger is built lazily from `lancelog.config.settings` the first
time it is needed. Applications that want to own their logger construct one
and hand it over with `set_logger()`; the module-level functions below always
delegate to whichever logger is current.
"""

import os
import threading
from collections.abc import Mapping
from typing import Any

from lancelog.config import Settings, settings
from lancelog.formatter import Formatter, NestedFormatter
from lancelog.levels import Level
from lancelog.logger import Entry, Hook, Logger, PanicError
from lancelog.models import Caller

_std: Logger | None = None
_std_lock = threading.Lock()


def short_caller(caller: Caller) -> str:
    """Render caller info as `` [file.py:12][function()]``."""
    function = caller.function.split(".")[-1]
    return f" [{os.path.basename(caller.file)}:{caller.line}][{function}()]"


def default_formatter(config: Settings | None = None) -> NestedFormatter:
    config = config or settings
    return NestedFormatter(
        fields_order=config.fields_order,
        timestamp_format=config.timestamp_format,
        hide_keys=config.hide_keys,
        trim_messages=config.trim_messages,
        caller_first=config.caller_first,
        no_colors=config.no_colors,
        no_fields_colors=config.no_fields_colors,
        no_fields_space=config.no_fields_space,
        show_full_level=config.show_full_level,
        no_uppercase_level=config.no_uppercase_level,
        custom_caller_formatter=short_caller,
    )


def new_logger(config: Settings | None = None, out: Any = None) -> Logger:
    """Build a logger configured the way the standard logger is."""
    config = config or settings
    return Logger(
        out=out,
        formatter=default_formatter(config),
        level=config.level,
        report_caller=config.report_caller,
        propagate=config.propagate,
    )


def get_logger() -> Logger:
    """Return the standard logger, creating it on first use."""
    global _std
    with _std_lock:
        created = _std is None
        if created:
            _std = new_logger()
        std = _std

    if created:
        std.info("=== lancelog init success ===")
    return std


def set_logger(logger: Logger) -> Logger | None:
    """Install `logger` as the standard logger and return the previous one."""
    global _std
    with _std_lock:
        previous, _std = _std, logger
    return previous


def set_output(out: Any) -> None:
    get_logger().set_output(out)


def set_formatter(formatter: Formatter) -> None:
    get_logger().set_formatter(formatter)


def set_report_caller(include: bool) -> None:
    get_logger().set_report_caller(include)


def set_propagate(propagate: bool) -> None:
    get_logger().set_propagate(propagate)


def set_level(level: Level) -> None:
    get_logger().set_level(level)


def get_level() -> Level:
    return get_logger().get_level()


def is_level_enabled(level: Level) -> bool:
    return get_logger().is_level_enabled(level)


def add_hook(hook: Hook) -> None:
    get_logger().add_hook(hook)


def with_fields(fields: Mapping[str, Any]) -> Entry:
    return get_logger().with_fields(fields)


def with_field(key: str, value: Any) -> Entry:
    return get_logger().with_field(key, value)


def with_error(err: BaseException) -> Entry:
    return get_logger().with_error(err)


def trace(*args: Any) -> None:
    get_logger()._log(Level.TRACE, args)


def debug(*args: Any) -> None:
    get_logger()._log(Level.DEBUG, args)


def info(*args: Any) -> None:
    get_logger()._log(Level.INFO, args)


def warning(*args: Any) -> None:
    get_logger()._log(Level.WARNING, args)


def warn(*args: Any) -> None:
    get_logger()._log(Level.WARNING, args)


def error(*args: Any) -> None:
    get_logger()._log(Level.ERROR, args)


def fatal(*args: Any) -> None:
    std = get_logger()
    std._log(Level.FATAL, args)
    std.exit(1)


def panic(*args: Any) -> None:
    message = get_logger()._log(Level.PANIC, args)
    raise PanicError(message)
