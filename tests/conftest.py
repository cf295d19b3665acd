"""Shared pytest fixtures and configuration for pytest."""

import io
import json
import sys
from collections.abc import Callable
from typing import Any

import pytest

from sbtclient.display import get_console, set_console

CONTENT_TYPE_HEADER = "Content-Type: application/vscode-jsonrpc; charset=utf-8\r\n"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "unix_only: mark test to run only on Unix")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_unix = pytest.mark.skip(reason="Unix-only test")

    for item in items:
        if "unix_only" in item.keywords and sys.platform == "win32":
            item.add_marker(skip_unix)


def _frame(body: str | bytes | dict[str, Any], extra_headers: str = CONTENT_TYPE_HEADER) -> bytes:
    """Build a wire frame with a correct Content-Length for ``body``."""
    if isinstance(body, dict):
        body = json.dumps(body, separators=(",", ":"))
    if isinstance(body, str):
        body = body.encode("utf-8")
    header = f"{extra_headers}Content-Length: {len(body)}\r\n\r\n"
    return header.encode("utf-8") + body


@pytest.fixture
def build_frame() -> Callable[..., bytes]:
    """Build a wire frame with a correct Content-Length for a body."""
    return _frame


@pytest.fixture
def make_stream() -> Callable[..., io.BytesIO]:
    """Build a byte stream holding the given frames back to back."""

    def _make(*frames: bytes) -> io.BytesIO:
        return io.BytesIO(b"".join(frames))

    return _make


@pytest.fixture
def restore_console():
    """Restore the shared console after a test replaces it."""
    original = get_console()
    yield
    set_console(original)
