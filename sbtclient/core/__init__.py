"""Core types shared across sbtclient: errors and constants."""

from sbtclient.core.errors import (
    ConfigError,
    DecodeError,
    DiscoveryError,
    FramingError,
    InvalidBodyEncodingError,
    InvalidContentLengthError,
    InvalidHeaderEncodingError,
    LoadError,
    MalformedJsonError,
    MissingContentLengthError,
    SbtClientError,
    SbtConnectionError,
    ShortReadError,
    StreamError,
    UnrecognizedShapeError,
)

__all__ = [
    "ConfigError",
    "DecodeError",
    "DiscoveryError",
    "FramingError",
    "InvalidBodyEncodingError",
    "InvalidContentLengthError",
    "InvalidHeaderEncodingError",
    "LoadError",
    "MalformedJsonError",
    "MissingContentLengthError",
    "SbtClientError",
    "SbtConnectionError",
    "ShortReadError",
    "StreamError",
    "UnrecognizedShapeError",
]
