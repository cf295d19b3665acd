"""Outbound command requests."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from sbtclient.core.constants import COMMAND_ID, EXEC_METHOD, JSONRPC_VERSION
from sbtclient.core.errors import StreamError

logger = logging.getLogger(__name__)


class ByteWriter(Protocol):
    def write(self, data: bytes, /) -> object: ...

    def flush(self) -> object: ...


@dataclass
class CommandParams:
    command_line: str


@dataclass
class Command:
    """JSON-RPC 2.0 request asking the server to run a command line.

    Attributes:
        jsonrpc: Protocol version, always "2.0".
        id: Correlation id the response will carry.
        method: Server method to invoke.
        params: The command line to execute.
    """

    jsonrpc: str
    id: int
    method: str
    params: CommandParams

    @classmethod
    def exec(cls, command_line: str, command_id: int = COMMAND_ID) -> Command:
        """Build an ``sbt/exec`` request for a command line."""
        return cls(
            jsonrpc=JSONRPC_VERSION,
            id=command_id,
            method=EXEC_METHOD,
            params=CommandParams(command_line=command_line),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "id": self.id,
            "method": self.method,
            "params": {"commandLine": self.params.command_line},
        }


def serialize_command(command: Command) -> bytes:
    """Serialize a command into a complete Content-Length frame."""
    body = json.dumps(command.to_dict(), separators=(",", ":")).encode("utf-8")
    header = f"Content-Length: {len(body)}\r\n\r\n".encode("ascii")
    return header + body


def send_command(stream: ByteWriter, command: Command) -> None:
    """Write a framed command to the server and flush it.

    Raises:
        StreamError: If writing to the stream fails.
    """
    data = serialize_command(command)
    try:
        stream.write(data)
        stream.flush()
    except OSError as e:
        raise StreamError(f"Failed to send command to server: {e}", cause=e) from e
    logger.debug("Sent %s (id=%d): %r", command.method, command.id, command.params.command_line)
