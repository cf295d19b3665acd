"""Pydantic models for sbtclient configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sbtclient.core.constants import DEFAULT_MAX_CONTENT_LENGTH, DEFAULT_MAX_HEADER_SIZE


class ConnectionConfig(BaseModel):
    """Settings for the socket connection to the sbt server.

    Example in config.json:
        "connection": {
            "timeout": 600
        }
    """

    model_config = ConfigDict(extra="forbid")

    timeout: float | None = Field(default=None, gt=0)
    """Seconds to wait on any single socket read or write. None blocks forever."""


class ProtocolConfig(BaseModel):
    """Limits applied while reading frames from the server."""

    model_config = ConfigDict(extra="forbid")

    max_content_length: int = Field(default=DEFAULT_MAX_CONTENT_LENGTH, ge=0)
    """Largest message body accepted, in bytes."""

    max_header_size: int = Field(default=DEFAULT_MAX_HEADER_SIZE, ge=4)
    """Largest header block accepted, in bytes."""


class DisplayConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    color: bool = True
    """Use colors and styles in terminal output."""

    show_debug: bool = True
    """Print server log messages of the lowest (log/debug) level."""


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    """Level for sbtclient's own diagnostic logging on stderr."""

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class Config(BaseModel):
    """Root configuration model.

    Example config.json:
        {
            "connection": {"timeout": 600},
            "display": {"color": false},
            "logging": {"level": "DEBUG"}
        }
    """

    model_config = ConfigDict(extra="forbid")

    connection: ConnectionConfig = ConnectionConfig()
    protocol: ProtocolConfig = ProtocolConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
