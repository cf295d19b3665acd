"""Typed exception hierarchy for sbtclient."""

from __future__ import annotations


class SbtClientError(Exception):
    """Base class for all sbtclient errors.

    Attributes:
        message: Human-readable description of the failure.
        cause: The underlying exception, when one triggered this error.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ConfigError(SbtClientError):
    """Raised for configuration issues (unreadable file, invalid JSON, validation failure)."""


class LoadError(SbtClientError):
    """Raised when a JSON file cannot be loaded."""


class DiscoveryError(SbtClientError):
    """Raised when the sbt server socket cannot be located."""


class SbtConnectionError(SbtClientError):
    """Raised when the connection to the sbt server cannot be opened."""


# === Framing ===


class FramingError(SbtClientError):
    """Raised when a frame's header block cannot be interpreted."""


class MissingContentLengthError(FramingError):
    """Header block has no Content-Length line."""


class InvalidContentLengthError(FramingError):
    """Content-Length value is unparseable or out of bounds."""


# === Stream I/O ===


class StreamError(SbtClientError):
    """Raised when reading from or writing to the server stream fails."""


class ShortReadError(StreamError):
    """The stream ended before a complete frame was read."""

    def __init__(self, message: str, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"{message} (expected {expected} bytes, got {received})")


# === Decoding ===


class DecodeError(SbtClientError):
    """Raised when frame contents cannot be turned into a message."""


class InvalidHeaderEncodingError(DecodeError):
    """Header block is not valid UTF-8."""


class InvalidBodyEncodingError(DecodeError):
    """Message body is not valid UTF-8."""


class MalformedJsonError(DecodeError):
    """Message body is not valid JSON."""

    def __init__(self, raw_json: str, cause: BaseException | None = None) -> None:
        self.raw_json = raw_json
        super().__init__(f"Failed to deserialize message from JSON '{raw_json}'", cause)


class UnrecognizedShapeError(DecodeError):
    """Message body is valid JSON but matches no known message shape."""

    def __init__(self, raw_json: str) -> None:
        self.raw_json = raw_json
        super().__init__(f"Unrecognized message shape: '{raw_json}'")
