"""Configuration values for building a Logger from the environment."""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from taglog.errors import InvalidConfiguration
from taglog.models import PreserveMode


class LoggerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TAGLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    path: str | None = Field(None, description="Log file path (None: no file)")
    console: bool = Field(True, description="Write messages to standard output")
    preserve_mode: PreserveMode | None = Field(
        None, description="Policy for an existing log file (None: append)"
    )

    dates_in_console: bool = Field(False, description="Prefix console lines with a timestamp")
    dates_in_file: bool = Field(True, description="Prefix file lines with a timestamp")
    timestamp_format: str | None = Field(
        None, description="strftime pattern for timestamps (e.g. '%H:%M:%S')"
    )

    colorize: bool | None = Field(
        None, description="Force console colors on or off (None: only on a TTY)"
    )
    encoding: str = Field("utf-8", description="Log file encoding")


def load_settings(**overrides) -> LoggerSettings:
    """Read settings from TAGLOG_* variables, raising InvalidConfiguration on bad values."""
    try:
        return LoggerSettings(**overrides)
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e
