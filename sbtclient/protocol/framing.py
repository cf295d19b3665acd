"""Content-Length framing for the sbt server protocol.

Each frame is a block of CRLF-terminated header lines, a blank line, then a
body of exactly Content-Length bytes:

    Content-Type: application/vscode-jsonrpc; charset=utf-8\\r\\n
    Content-Length: 126\\r\\n
    \\r\\n
    {"jsonrpc":"2.0","id":1,"result":{...}}

Only the Content-Length header is interpreted. The header block is read one
byte at a time so the body of the next frame is never consumed early.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from sbtclient.core.constants import DEFAULT_MAX_CONTENT_LENGTH, DEFAULT_MAX_HEADER_SIZE
from sbtclient.core.errors import (
    FramingError,
    InvalidContentLengthError,
    InvalidHeaderEncodingError,
    MissingContentLengthError,
    ShortReadError,
    StreamError,
)

logger = logging.getLogger(__name__)

HEADER_TERMINATOR = b"\r\n\r\n"
CONTENT_LENGTH_PATTERN: re.Pattern[str] = re.compile(r"Content-Length: (\d+)")


class ByteReader(Protocol):
    """Blocking binary stream; ``read`` returns fewer bytes only at end of stream."""

    def read(self, size: int = -1, /) -> bytes: ...


@dataclass(frozen=True)
class Frame:
    """One raw frame: the header text and the undecoded body."""

    headers: str
    body: bytes


class HeaderParser:
    """Extracts the declared body length from a header block.

    Attributes:
        max_content_length: Largest body size accepted from the server.
        max_header_size: Largest header block read before giving up.
    """

    def __init__(
        self,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
        max_header_size: int = DEFAULT_MAX_HEADER_SIZE,
    ) -> None:
        self.max_content_length = max_content_length
        self.max_header_size = max_header_size

    def extract_content_length(self, raw_headers: str) -> int:
        """Return the Content-Length declared in a header block.

        Args:
            raw_headers: Header text, including the terminating blank line or not.

        Returns:
            The declared body length in bytes.

        Raises:
            MissingContentLengthError: If no Content-Length line is present.
            InvalidContentLengthError: If the value can't be parsed or exceeds
                max_content_length.
        """
        match = CONTENT_LENGTH_PATTERN.search(raw_headers)
        if match is None:
            raise MissingContentLengthError("Failed to extract content length from headers")

        # \d also matches non-ASCII digits, which int() would accept
        digits = match.group(1)
        if not digits.isascii():
            raise InvalidContentLengthError(
                f"Failed to extract content length from headers: invalid digits {digits!r}"
            )
        content_length = int(digits)

        if content_length > self.max_content_length:
            raise InvalidContentLengthError(
                f"Content-Length {content_length} exceeds limit of "
                f"{self.max_content_length} bytes"
            )
        return content_length


def _read_chunk(stream: ByteReader, size: int, what: str) -> bytes:
    try:
        return stream.read(size)
    except OSError as e:
        raise StreamError(f"Failed to read {what} from server: {e}", cause=e) from e


def read_exact(stream: ByteReader, size: int, what: str = "message body") -> bytes:
    """Read exactly ``size`` bytes, looping over partial reads.

    Raises:
        ShortReadError: If the stream ends first.
        StreamError: If the stream raises an OSError.
    """
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = _read_chunk(stream, remaining, what)
        if not chunk:
            raise ShortReadError(
                f"Stream ended while reading {what}", expected=size, received=size - remaining
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_headers(stream: ByteReader, max_header_size: int = DEFAULT_MAX_HEADER_SIZE) -> str:
    """Read a header block up to and including the blank line.

    Args:
        stream: Stream positioned at the start of a frame.
        max_header_size: Largest header block accepted before giving up.

    Returns:
        The header block as text.

    Raises:
        ShortReadError: If the stream ends inside the header block.
        FramingError: If the header block grows past max_header_size.
        InvalidHeaderEncodingError: If the header block is not UTF-8.
    """
    headers = bytearray()
    while not headers.endswith(HEADER_TERMINATOR):
        if len(headers) >= max_header_size:
            raise FramingError(f"Header block exceeds {max_header_size} bytes")
        headers += read_exact(stream, 1, "next byte of headers")

    try:
        return headers.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidHeaderEncodingError(
            f"Failed to read headers as a UTF-8 string: {e}", cause=e
        ) from e


def read_frame(stream: ByteReader, header_parser: HeaderParser) -> Frame:
    """Read one complete frame from the stream.

    A failure leaves the stream at an undefined position; callers should not
    try to read further frames from it.
    """
    headers = read_headers(stream, header_parser.max_header_size)
    content_length = header_parser.extract_content_length(headers)
    body = read_exact(stream, content_length)
    logger.debug("Read frame with %d body bytes", content_length)
    return Frame(headers=headers, body=body)
