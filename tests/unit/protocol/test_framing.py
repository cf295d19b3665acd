"""Unit tests for Content-Length framing."""

import io

import pytest

from sbtclient.core.errors import (
    FramingError,
    InvalidContentLengthError,
    InvalidHeaderEncodingError,
    MissingContentLengthError,
    ShortReadError,
    StreamError,
)
from sbtclient.protocol.framing import (
    CONTENT_LENGTH_PATTERN,
    HeaderParser,
    read_exact,
    read_frame,
    read_headers,
)


class TrickleStream:
    """Stream that returns at most one byte per read, like a slow socket."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        return self._buffer.read(min(size, 1))


class FailingStream:
    """Stream whose reads raise an OSError."""

    def read(self, size: int = -1) -> bytes:
        raise ConnectionResetError("Connection reset by peer")


class TestHeaderParser:
    """Tests for HeaderParser.extract_content_length."""

    def test_extracts_length(self) -> None:
        parser = HeaderParser()
        assert parser.extract_content_length("Content-Length: 126\r\n\r\n") == 126

    def test_ignores_other_headers_in_any_order(self) -> None:
        """Extra headers before or after Content-Length don't matter."""
        parser = HeaderParser()
        before = (
            "Content-Type: application/vscode-jsonrpc; charset=utf-8\r\n"
            "Content-Length: 89\r\n\r\n"
        )
        after = (
            "Content-Length: 89\r\n"
            "Content-Type: application/vscode-jsonrpc; charset=utf-8\r\n"
            "X-Other: 12\r\n\r\n"
        )
        assert parser.extract_content_length(before) == 89
        assert parser.extract_content_length(after) == 89

    @pytest.mark.parametrize("length", [0, 1, 4096, 10 * 1024 * 1024])
    def test_any_non_negative_length(self, length: int) -> None:
        parser = HeaderParser()
        assert parser.extract_content_length(f"Content-Length: {length}\r\n\r\n") == length

    def test_missing_header_raises(self) -> None:
        """No Content-Length never defaults to zero."""
        parser = HeaderParser()
        with pytest.raises(MissingContentLengthError) as exc_info:
            parser.extract_content_length("Content-Type: text/plain\r\n\r\n")

        assert isinstance(exc_info.value, FramingError)
        assert "content length" in exc_info.value.message

    def test_non_numeric_value_is_missing(self) -> None:
        parser = HeaderParser()
        with pytest.raises(MissingContentLengthError):
            parser.extract_content_length("Content-Length: abc\r\n\r\n")

    def test_header_name_is_case_sensitive(self) -> None:
        parser = HeaderParser()
        with pytest.raises(MissingContentLengthError):
            parser.extract_content_length("content-length: 10\r\n\r\n")

    def test_length_over_limit_raises(self) -> None:
        parser = HeaderParser(max_content_length=100)
        with pytest.raises(InvalidContentLengthError) as exc_info:
            parser.extract_content_length("Content-Length: 101\r\n\r\n")

        assert "exceeds limit" in exc_info.value.message

    @pytest.mark.parametrize("digits", ["٣", "1٠", "１２"])
    def test_non_ascii_digits_raise(self, digits: str) -> None:
        parser = HeaderParser()
        with pytest.raises(InvalidContentLengthError):
            parser.extract_content_length(f"Content-Length: {digits}\r\n\r\n")

    def test_length_at_limit_accepted(self) -> None:
        parser = HeaderParser(max_content_length=100)
        assert parser.extract_content_length("Content-Length: 100\r\n\r\n") == 100

    def test_pattern_is_precompiled(self) -> None:
        assert CONTENT_LENGTH_PATTERN.pattern == r"Content-Length: (\d+)"


class TestReadExact:
    """Tests for read_exact."""

    def test_reads_across_partial_reads(self) -> None:
        stream = TrickleStream(b"abcdef")
        assert read_exact(stream, 4) == b"abcd"
        assert stream.reads == 4

    def test_zero_bytes_reads_nothing(self) -> None:
        stream = TrickleStream(b"abc")
        assert read_exact(stream, 0) == b""
        assert stream.reads == 0

    def test_short_read_raises(self) -> None:
        with pytest.raises(ShortReadError) as exc_info:
            read_exact(io.BytesIO(b"abc"), 5)

        assert exc_info.value.expected == 5
        assert exc_info.value.received == 3
        assert isinstance(exc_info.value, StreamError)

    def test_os_error_is_wrapped(self) -> None:
        with pytest.raises(StreamError) as exc_info:
            read_exact(FailingStream(), 1)

        assert isinstance(exc_info.value.cause, ConnectionResetError)
        assert isinstance(exc_info.value.__cause__, ConnectionResetError)


class TestReadHeaders:
    """Tests for read_headers."""

    def test_stops_at_blank_line(self) -> None:
        stream = io.BytesIO(b"Content-Length: 2\r\n\r\n{}")
        assert read_headers(stream) == "Content-Length: 2\r\n\r\n"
        # Body left unread
        assert stream.read() == b"{}"

    def test_eof_inside_headers_raises(self) -> None:
        with pytest.raises(ShortReadError):
            read_headers(io.BytesIO(b"Content-Length: 2\r\n"))

    def test_empty_stream_raises(self) -> None:
        with pytest.raises(ShortReadError):
            read_headers(io.BytesIO(b""))

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(InvalidHeaderEncodingError) as exc_info:
            read_headers(io.BytesIO(b"X-Bad: \xff\xfe\r\nContent-Length: 2\r\n\r\n{}"))

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_oversized_header_block_raises(self) -> None:
        stream = io.BytesIO(b"X-Padding: " + b"a" * 200 + b"\r\n\r\n")
        with pytest.raises(FramingError) as exc_info:
            read_headers(stream, max_header_size=64)

        assert "exceeds 64 bytes" in exc_info.value.message


class TestReadFrame:
    """Tests for read_frame."""

    def test_reads_header_and_body(self, build_frame) -> None:
        data = build_frame('{"id":1}')
        result = read_frame(io.BytesIO(data), HeaderParser())

        assert result.body == b'{"id":1}'
        assert "Content-Length: 8" in result.headers

    def test_does_not_over_read(self, build_frame) -> None:
        """A second frame on the stream is left intact."""
        stream = io.BytesIO(build_frame("{}") + build_frame("[1]"))
        parser = HeaderParser()

        assert read_frame(stream, parser).body == b"{}"
        assert read_frame(stream, parser).body == b"[1]"

    def test_body_length_counts_bytes_not_characters(self, build_frame) -> None:
        body = '{"message":"café ✓"}'
        result = read_frame(io.BytesIO(build_frame(body)), HeaderParser())
        assert result.body.decode("utf-8") == body

    def test_short_body_raises(self) -> None:
        data = b"Content-Length: 50\r\n\r\n" + b'{"id":1}'
        with pytest.raises(ShortReadError) as exc_info:
            read_frame(io.BytesIO(data), HeaderParser())

        assert exc_info.value.expected == 50
        assert exc_info.value.received == 8

    def test_missing_content_length_raises(self) -> None:
        data = b"Content-Type: application/json\r\n\r\n{}"
        with pytest.raises(MissingContentLengthError):
            read_frame(io.BytesIO(data), HeaderParser())

    def test_uses_parser_header_limit(self) -> None:
        data = b"X-Padding: " + b"a" * 100 + b"\r\nContent-Length: 2\r\n\r\n{}"
        with pytest.raises(FramingError):
            read_frame(io.BytesIO(data), HeaderParser(max_header_size=32))

    def test_trickled_frame(self, build_frame) -> None:
        """One byte per read still yields a complete frame."""
        stream = TrickleStream(build_frame('{"a":1}'))
        assert read_frame(stream, HeaderParser()).body == b'{"a":1}'
