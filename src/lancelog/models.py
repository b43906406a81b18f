"""Data models for lancelog."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lancelog.levels import Level


class Caller(BaseModel):
    """📍 Source location of the code that emitted a record."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(..., description="Path of the source file")
    line: int = Field(..., description="Line number inside the file")
    function: str = Field(..., description="Name of the calling function")


class LogRecord(BaseModel):
    """
    🧾 One discrete log event.

    A record is built once per log call from the loguru record, handed to the
    active formatter and to every matching hook, and then discarded. It is
    frozen so a hook cannot change what the formatter sees.
    """

    model_config = ConfigDict(frozen=True)

    time: datetime = Field(..., description="When the record was created")
    level: Level = Field(..., description="Severity of the record")
    message: str = Field(..., description="Message text, untrimmed")
    fields: dict[str, Any] = Field(
        default_factory=dict, description="Structured key/value data"
    )
    caller: Caller | None = Field(
        None, description="Caller location (None when caller reporting is off)"
    )

    @property
    def has_caller(self) -> bool:
        return self.caller is not None
