"""Configuration values for the lancelog package."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lancelog.levels import Level, parse_level


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LANCELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    level: Level = Field(Level.INFO, description="Minimum level of the standard logger")
    report_caller: bool = Field(True, description="Attach caller info to records")

    timestamp_format: str = Field(
        "%Y-%m-%d %H:%M:%S", description="strftime pattern for timestamps"
    )
    fields_order: list[str] = Field(
        ["component", "category"], description="Fields rendered before the rest"
    )
    hide_keys: bool = Field(True, description="Render [value] instead of [key:value]")
    trim_messages: bool = Field(True, description="Strip whitespace around messages")
    caller_first: bool = Field(True, description="Render caller info before the level")
    no_colors: bool = Field(False, description="Disable ANSI colors")
    no_fields_colors: bool = Field(True, description="Color only the level tag")
    no_fields_space: bool = Field(False, description="No space between fields")
    show_full_level: bool = Field(False, description="Show [WARNING] instead of [WARN]")
    no_uppercase_level: bool = Field(False, description="Keep level names lowercase")

    propagate: bool = Field(False, description="Also forward records to loguru")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_level(value)
        return value


settings = Settings()
