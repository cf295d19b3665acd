"""Configuration loading and validation."""

from sbtclient.config.loader import load_config
from sbtclient.config.schema import (
    Config,
    ConnectionConfig,
    DisplayConfig,
    LoggingConfig,
    ProtocolConfig,
)

__all__ = [
    "Config",
    "ConnectionConfig",
    "DisplayConfig",
    "LoggingConfig",
    "ProtocolConfig",
    "load_config",
]
