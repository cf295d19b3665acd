"""sbt server wire protocol: framing, message decoding and the receive loop.

Usage:
    from sbtclient.protocol import HeaderParser, receive_next_message

    parser = HeaderParser()
    while not receive_next_message(reader, parser, print):
        pass
"""

from sbtclient.protocol.command import Command, CommandParams, send_command, serialize_command
from sbtclient.protocol.decoder import decode_message
from sbtclient.protocol.framing import Frame, HeaderParser, read_frame, read_headers
from sbtclient.protocol.messages import (
    MESSAGE_VARIANTS,
    CommandResult,
    Diagnostic,
    ErrorDetails,
    ErrorResponse,
    LogMessage,
    LogMessageParams,
    Message,
    Position,
    PublishDiagnostics,
    PublishDiagnosticsParams,
    Range,
    SuccessResponse,
)
from sbtclient.protocol.receive import MessageHandler, receive_next_message

__all__ = [
    "MESSAGE_VARIANTS",
    "Command",
    "CommandParams",
    "CommandResult",
    "Diagnostic",
    "ErrorDetails",
    "ErrorResponse",
    "Frame",
    "HeaderParser",
    "LogMessage",
    "LogMessageParams",
    "Message",
    "MessageHandler",
    "Position",
    "PublishDiagnostics",
    "PublishDiagnosticsParams",
    "Range",
    "SuccessResponse",
    "decode_message",
    "read_frame",
    "read_headers",
    "receive_next_message",
    "send_command",
    "serialize_command",
]
