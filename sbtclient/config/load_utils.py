"""Reading the small JSON object files sbtclient depends on.

Both config layers and the server's ``active.json`` are single JSON objects.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from sbtclient.core.errors import LoadError

logger = logging.getLogger(__name__)


def read_json_object(path: Path, label: str = "JSON file") -> dict[str, Any]:
    """Read ``path`` as a JSON object; a blank file counts as ``{}``.

    ``label`` names the file in error messages, e.g. "config" or "active.json".

    Raises:
        LoadError: If the file is missing or unreadable, or does not hold a
            JSON object.
    """
    if not path.exists():
        raise LoadError(f"{label} not found: {path}")

    try:
        # sbt on Windows may write a BOM
        text = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise LoadError(f"Could not read {label} {path}: {e}", cause=e) from e
    if not text:
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {label} {path}: {e}", cause=e) from e

    if not isinstance(data, dict):
        raise LoadError(
            f"{label} {path} must hold a JSON object, not {type(data).__name__}"
        )
    return data


def read_optional_json_object(path: Path, label: str = "JSON file") -> dict[str, Any] | None:
    """Like read_json_object, but None when there is no such file."""
    if not path.is_file():
        logger.debug("No %s at %s", label, path)
        return None

    logger.debug("Reading %s: %s", label, path)
    return read_json_object(path, label)
