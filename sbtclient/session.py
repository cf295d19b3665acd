"""One command's round trip with the sbt server.

A session sends a single command and then receives messages until the
response carrying the command's id arrives:

    IDLE -> AWAITING_REPLY -> DONE
                           -> FAILED   (any framing, I/O or decoding error)

DONE and FAILED are final; a new command needs a new session.
"""

from __future__ import annotations

import logging
from enum import Enum

from sbtclient.core.constants import COMMAND_ID
from sbtclient.core.errors import SbtClientError
from sbtclient.protocol.command import ByteWriter, Command, send_command
from sbtclient.protocol.framing import ByteReader, HeaderParser
from sbtclient.protocol.messages import ErrorResponse, Message, SuccessResponse
from sbtclient.protocol.receive import MessageHandler, receive_next_message

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"
    DONE = "done"
    FAILED = "failed"


class CommandSession:
    """Drives a single command from send to final response.

    Attributes:
        state: Current session state.
        messages_received: Number of messages handed to the handler so far.
    """

    def __init__(
        self,
        reader: ByteReader,
        writer: ByteWriter,
        handler: MessageHandler,
        header_parser: HeaderParser | None = None,
        command_id: int = COMMAND_ID,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._handler = handler
        self._header_parser = header_parser or HeaderParser()
        self._command_id = command_id
        self._response: Message | None = None
        self.state = SessionState.IDLE
        self.messages_received = 0

    @property
    def response(self) -> Message | None:
        """The final response, once the session is DONE."""
        return self._response

    def _handle(self, message: Message) -> None:
        self.messages_received += 1
        self._response = message
        self._handler(message)

    def run(self, command_line: str) -> Message:
        """Send a command and receive messages until its response arrives.

        Args:
            command_line: The sbt command line to execute, e.g. "compile".

        Returns:
            The SuccessResponse or ErrorResponse for the command.

        Raises:
            SbtClientError: If the session was already used, or on any
                failure while sending or receiving (state becomes FAILED).
        """
        if self.state is not SessionState.IDLE:
            raise SbtClientError(f"Session already used (state: {self.state.value})")

        self.state = SessionState.AWAITING_REPLY
        try:
            send_command(self._writer, Command.exec(command_line, self._command_id))
            while not receive_next_message(
                self._reader, self._header_parser, self._handle, self._command_id
            ):
                pass
            if self._response is None:
                raise SbtClientError("Receive loop ended without a response")
        except SbtClientError:
            self.state = SessionState.FAILED
            self._response = None
            raise

        self.state = SessionState.DONE
        logger.debug(
            "Command %r finished after %d messages", command_line, self.messages_received
        )
        return self._response


def exit_code_for(message: Message) -> int:
    """Process exit status for a command's final response."""
    if isinstance(message, SuccessResponse):
        return message.result.exit_code
    if isinstance(message, ErrorResponse):
        return 1
    raise SbtClientError(f"Not a command response: {type(message).__name__}")
