"""Centralized loguru configuration for lancelog."""

from loguru import logger

_CUSTOM_LEVELS = (
    ("FATAL", 50, "<red><bold>"),
    ("PANIC", 60, "<red><bold><underline>"),
)


def register_levels() -> None:
    """Register the FATAL and PANIC severities loguru does not ship with."""
    for name, no, color in _CUSTOM_LEVELS:
        try:
            logger.level(name)
        except ValueError:
            logger.level(name, no=no, color=color)


register_levels()

# lancelog's own diagnostics stay quiet until the application opts in with
# logger.enable("lancelog"). Handlers belong to the application.
logger.disable("lancelog")

__all__ = ["logger", "register_levels"]
