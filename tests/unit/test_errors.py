"""Unit tests for sbtclient.core.errors module."""

from sbtclient.core.errors import (
    DecodeError,
    FramingError,
    InvalidContentLengthError,
    MalformedJsonError,
    MissingContentLengthError,
    SbtClientError,
    ShortReadError,
    StreamError,
    UnrecognizedShapeError,
)


class TestSbtClientError:
    def test_message_and_str(self) -> None:
        err = SbtClientError("Something went wrong")
        assert err.message == "Something went wrong"
        assert str(err) == "Something went wrong"
        assert err.cause is None

    def test_cause_kept(self) -> None:
        cause = ValueError("bad digits")
        err = InvalidContentLengthError("Failed to extract content length", cause=cause)
        assert err.cause is cause


class TestHierarchy:
    def test_framing_errors(self) -> None:
        assert issubclass(MissingContentLengthError, FramingError)
        assert issubclass(InvalidContentLengthError, FramingError)
        assert issubclass(FramingError, SbtClientError)

    def test_short_read_is_stream_error(self) -> None:
        assert issubclass(ShortReadError, StreamError)

    def test_decode_errors(self) -> None:
        assert issubclass(MalformedJsonError, DecodeError)
        assert issubclass(UnrecognizedShapeError, DecodeError)


class TestDetails:
    def test_short_read_counts(self) -> None:
        err = ShortReadError("Stream ended while reading message body", expected=10, received=4)
        assert err.expected == 10
        assert err.received == 4
        assert err.message == "Stream ended while reading message body (expected 10 bytes, got 4)"

    def test_malformed_json_keeps_text(self) -> None:
        err = MalformedJsonError('{"a":')
        assert err.raw_json == '{"a":'
        assert err.message == "Failed to deserialize message from JSON '{\"a\":'"

    def test_unrecognized_shape_keeps_text(self) -> None:
        err = UnrecognizedShapeError("[]")
        assert err.raw_json == "[]"
        assert "Unrecognized message shape" in err.message
