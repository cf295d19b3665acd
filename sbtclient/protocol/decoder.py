"""Decoding of frame bodies into messages."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from sbtclient.core.errors import (
    InvalidBodyEncodingError,
    MalformedJsonError,
    UnrecognizedShapeError,
)
from sbtclient.protocol.messages import MESSAGE_VARIANTS, Message

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON constant: {name}")


def decode_message(body: bytes) -> Message:
    """Decode a frame body into a message.

    Shapes are tried in MESSAGE_VARIANTS order and the first match wins.

    Args:
        body: Raw body bytes of one frame.

    Returns:
        The decoded message.

    Raises:
        InvalidBodyEncodingError: If the body is not UTF-8.
        MalformedJsonError: If the body is not valid JSON.
        UnrecognizedShapeError: If the JSON matches none of the message shapes.
    """
    try:
        raw_json = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidBodyEncodingError(
            f"Failed to decode message as UTF-8 string: {e}", cause=e
        ) from e

    try:
        data = json.loads(raw_json, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedJsonError(raw_json, cause=e) from e

    if isinstance(data, dict):
        for variant in MESSAGE_VARIANTS:
            try:
                # Wire field names only, never the Python attribute names
                return variant.model_validate(data, by_name=False)  # type: ignore[return-value]
            except ValidationError as e:
                logger.debug("Not a %s: %d validation errors", variant.__name__, e.error_count())

    raise UnrecognizedShapeError(raw_json)
