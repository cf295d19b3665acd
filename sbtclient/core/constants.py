"""Core constants and paths for sbtclient.

Single source of truth for protocol constants and config locations.
"""

from pathlib import Path

SBTCLIENT_DIR_NAME = ".sbtclient"

# Correlation id of the single command sent per session
COMMAND_ID = 1

JSONRPC_VERSION = "2.0"
EXEC_METHOD = "sbt/exec"

# Upper bounds on what a server may send in a single frame
DEFAULT_MAX_CONTENT_LENGTH: int = 10 * 1024 * 1024  # 10 MB
DEFAULT_MAX_HEADER_SIZE: int = 64 * 1024  # 64 KiB


def get_sbtclient_dir() -> Path:
    """Get ~/.sbtclient (global config directory)."""
    return Path.home() / SBTCLIENT_DIR_NAME


def get_default_config_path() -> Path:
    """Get global config file path."""
    return get_sbtclient_dir() / "config.json"


def get_active_json_path(base_dir: Path) -> Path:
    """Get the file where a running sbt server publishes its socket URI."""
    return base_dir / "project" / "target" / "active.json"
