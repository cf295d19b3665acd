"""Blocking Unix domain socket connection to the sbt server."""

from __future__ import annotations

import logging
import socket
from pathlib import Path
from typing import Any, BinaryIO

from sbtclient.core.errors import SbtConnectionError

logger = logging.getLogger(__name__)


class ServerConnection:
    """Connection to an sbt server socket, exposed as binary streams.

    Usage:
        with ServerConnection(socket_path, timeout=30.0) as conn:
            send_command(conn.writer, command)
            receive_next_message(conn.reader, parser, handler)

    Attributes:
        socket_path: Filesystem path of the server socket.
        timeout: Per-operation socket timeout in seconds, None to block forever.
    """

    def __init__(self, socket_path: Path, timeout: float | None = None) -> None:
        self.socket_path = socket_path
        self.timeout = timeout
        self._sock: socket.socket | None = None
        self._reader: BinaryIO | None = None
        self._writer: BinaryIO | None = None

    def connect(self) -> None:
        """Open the socket.

        Raises:
            SbtConnectionError: If the server can't be reached.
        """
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(self.timeout)
        try:
            sock.connect(str(self.socket_path))
        except OSError as e:
            sock.close()
            raise SbtConnectionError(
                f"Failed to connect to sbt server at {self.socket_path}: {e}", cause=e
            ) from e

        self._sock = sock
        self._reader = sock.makefile("rb")
        self._writer = sock.makefile("wb")
        logger.debug("Connected to sbt server: %s", self.socket_path)

    @property
    def reader(self) -> BinaryIO:
        if self._reader is None:
            raise SbtConnectionError("Connection not open")
        return self._reader

    @property
    def writer(self) -> BinaryIO:
        if self._writer is None:
            raise SbtConnectionError("Connection not open")
        return self._writer

    @property
    def is_connected(self) -> bool:
        return self._sock is not None

    def close(self) -> None:
        """Close the streams and the socket. Safe to call more than once."""
        for stream in (self._reader, self._writer):
            if stream is not None:
                try:
                    stream.close()
                except OSError as e:
                    logger.debug("Error closing stream: %s", e)
        self._reader = None
        self._writer = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.debug("Closed connection to %s", self.socket_path)

    def __enter__(self) -> ServerConnection:
        self.connect()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
