"""Message types received from the sbt server.

The server does not tag its payloads with a variant name. Each message is
recognised by the fields it carries:

    {"id": 1, "result": {"status": "Done", "exitCode": 0}}          SuccessResponse
    {"id": 1, "error": {"code": -32603, "message": "..."}}          ErrorResponse
    {"method": "window/logMessage", "params": {"type": 4, ...}}     LogMessage
    {"method": "textDocument/publishDiagnostics", "params": {...}}  PublishDiagnostics

Any other fields (``jsonrpc``, ``channelName``, ``execId``...) are ignored.
Integer fields only accept JSON integers; bounded fields reject values
outside their range, so a payload carrying them does not match the variant.
"""

from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# 0-255 severity / type / exit code
Byte = Annotated[int, Field(strict=True, ge=0, le=255)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]


class WireModel(BaseModel):
    """Immutable model decoded from a server payload."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# === Value objects ===


class Position(WireModel):
    """Zero-based line/character offset in a source file."""

    line: NonNegativeInt
    character: NonNegativeInt


class Range(WireModel):
    start: Position
    end: Position


class Diagnostic(WireModel):
    """A compiler finding reported against a range of a source file.

    Attributes:
        range: Source range the finding applies to.
        severity: LSP severity (1 error, 2 warning, 3 information, 4 hint).
        message: Human-readable description.
    """

    range: Range
    severity: Byte
    message: StrictStr


# === Payloads ===


class CommandResult(WireModel):
    status: StrictStr
    exit_code: Byte = Field(alias="exitCode")


class ErrorDetails(WireModel):
    code: StrictInt
    message: StrictStr


class LogMessageParams(WireModel):
    """Parameters of a ``window/logMessage`` notification.

    Attributes:
        type: LSP message type (1 error, 2 warning, 3 info, 4 log).
        message: The log line.
    """

    type: Byte
    message: StrictStr


class PublishDiagnosticsParams(WireModel):
    """Parameters of a ``textDocument/publishDiagnostics`` notification.

    Diagnostics keep the order the server sent them in; duplicates are kept.
    """

    uri: StrictStr
    diagnostics: tuple[Diagnostic, ...]


# === Messages ===


class SuccessResponse(WireModel):
    """Reply to the outstanding command."""

    id: StrictInt
    result: CommandResult


class ErrorResponse(WireModel):
    """Reply signalling the command failed at the protocol level."""

    id: StrictInt
    error: ErrorDetails


class LogMessage(WireModel):
    """Server-pushed log line, not tied to any request."""

    method: StrictStr
    params: LogMessageParams


class PublishDiagnostics(WireModel):
    """Server-pushed diagnostics for one source file."""

    method: StrictStr
    params: PublishDiagnosticsParams


Message = Union[SuccessResponse, ErrorResponse, LogMessage, PublishDiagnostics]

# Decoding order. A payload matching several shapes becomes the first one
# listed, so responses always win over notifications.
MESSAGE_VARIANTS: tuple[type[WireModel], ...] = (
    SuccessResponse,
    ErrorResponse,
    LogMessage,
    PublishDiagnostics,
)


def is_response(message: Message) -> bool:
    """Check whether a message answers a request (as opposed to a notification)."""
    return isinstance(message, (SuccessResponse, ErrorResponse))
