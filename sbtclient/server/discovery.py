"""Locating a running sbt server.

A running sbt server publishes the URI of its socket in
``<project>/project/target/active.json``:

    {"uri": "local:///home/me/.sbt/1.0/server/0845deda85cb41abcdef/sock"}
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

from sbtclient.config.load_utils import read_json_object
from sbtclient.core.constants import get_active_json_path
from sbtclient.core.errors import DiscoveryError, LoadError

logger = logging.getLogger(__name__)

LOCAL_SCHEME = "local"


def parse_server_uri(uri: str) -> Path:
    """Convert a ``local://`` server URI into a socket path.

    Raises:
        DiscoveryError: If the URI is not a local socket URI.
    """
    parsed = urlparse(uri)
    if parsed.scheme != LOCAL_SCHEME:
        raise DiscoveryError(
            f"Unsupported sbt server URI {uri!r}: expected a {LOCAL_SCHEME}:// socket"
        )
    if not parsed.path:
        raise DiscoveryError(f"sbt server URI {uri!r} has no socket path")
    return Path(unquote(parsed.path))


def find_socket_path(base_dir: Path) -> Path:
    """Find the socket of the sbt server running for a project.

    Args:
        base_dir: Root directory of the sbt project.

    Returns:
        Path to the server's Unix domain socket.

    Raises:
        DiscoveryError: If no server is advertised or active.json is unusable.
    """
    active_json = get_active_json_path(base_dir)
    if not active_json.is_file():
        raise DiscoveryError(
            f"No sbt server found: {active_json} does not exist. "
            "Start sbt in this directory first."
        )

    try:
        data = read_json_object(active_json, "active.json")
    except LoadError as e:
        raise DiscoveryError(e.message, cause=e) from e

    uri = data.get("uri")
    if not isinstance(uri, str):
        raise DiscoveryError(f"{active_json} does not contain a server uri")

    socket_path = parse_server_uri(uri)
    logger.debug("Discovered sbt server socket: %s (from %s)", socket_path, active_json)
    return socket_path
