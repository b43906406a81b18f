"""Severity levels shared by the facade, the formatter and loguru."""

from enum import IntEnum


class Level(IntEnum):
    """
    📶 Ordered log severity.

    Values line up with loguru's severity numbers so a level can be handed to
    loguru by name and compared against loguru records directly. FATAL and
    PANIC are not built into loguru and get registered in `lancelog.logging`.
    """

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    FATAL = 50
    PANIC = 60

    @property
    def text(self) -> str:
        """Lowercase display name, e.g. ``"warning"``."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.text


_ALIASES = {"warn": Level.WARNING}


def parse_level(name: str) -> Level:
    """
    Parse a level name such as ``"info"`` or ``"WARN"``.

    Raises:
        ValueError: if the name is not a known level
    """
    key = name.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Level[key.upper()]
    except KeyError:
        raise ValueError(f"not a valid lancelog level: {name!r}") from None

