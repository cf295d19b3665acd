"""Receiving loop for the single outstanding command."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sbtclient.core.constants import COMMAND_ID
from sbtclient.protocol.decoder import decode_message
from sbtclient.protocol.framing import ByteReader, HeaderParser, read_frame
from sbtclient.protocol.messages import Message, is_response

logger = logging.getLogger(__name__)

MessageHandler = Callable[[Message], object]


def receive_next_message(
    stream: ByteReader,
    header_parser: HeaderParser,
    handler: MessageHandler,
    command_id: int = COMMAND_ID,
) -> bool:
    """Receive, decode and hand off the next message from the server.

    The handler is called exactly once per decoded message, including the
    final response. Callers loop until this returns True or raises.

    Args:
        stream: Blocking byte stream connected to the server.
        header_parser: Parser for the frame's header block.
        handler: Called with the decoded message; its return value is ignored.
        command_id: Correlation id of the outstanding command.

    Returns:
        True if the message was the response to our command, meaning the
        caller can stop looping.

    Raises:
        SbtClientError: On any framing, I/O or decoding failure. The handler
            is not called in that case.
    """
    frame = read_frame(stream, header_parser)
    message = decode_message(frame.body)
    received_result = is_response(message) and message.id == command_id  # type: ignore[union-attr]
    logger.debug("Received %s (final=%s)", type(message).__name__, received_result)
    handler(message)
    return received_result
