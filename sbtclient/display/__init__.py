"""Terminal rendering of sbt server messages."""

from sbtclient.display.console import get_console, set_console
from sbtclient.display.printer import MessagePrinter, format_uri
from sbtclient.display.theme import DEFAULT_THEME, Level, Theme

__all__ = [
    "DEFAULT_THEME",
    "Level",
    "MessagePrinter",
    "Theme",
    "format_uri",
    "get_console",
    "set_console",
]
