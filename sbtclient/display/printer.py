"""Rendering of server messages to the terminal."""

from __future__ import annotations

from urllib.parse import unquote, urlparse

from rich.console import Console
from rich.markup import escape

from sbtclient.display.theme import DEBUG_LOG_TYPE, DEFAULT_THEME, Level, Theme
from sbtclient.protocol.messages import (
    Diagnostic,
    ErrorResponse,
    LogMessage,
    Message,
    PublishDiagnostics,
    SuccessResponse,
)


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/]" if style else text


def _tag(level: Level) -> str:
    return _styled(escape(f"[{level.label}]"), level.style)


def format_uri(uri: str) -> str:
    """Turn a ``file://`` URI into a plain path; other URIs are kept as-is."""
    parsed = urlparse(uri)
    if parsed.scheme == "file":
        return unquote(parsed.path)
    return uri


class MessagePrinter:
    """Prints each received message as it arrives.

    Instances are callable so they can be passed straight to
    receive_next_message as the message handler.

    Attributes:
        console: Rich console to print to.
        theme: Styles per message level.
        show_debug: Whether the lowest-level server log lines are printed.
    """

    def __init__(
        self,
        console: Console,
        theme: Theme = DEFAULT_THEME,
        show_debug: bool = True,
    ) -> None:
        self.console = console
        self.theme = theme
        self.show_debug = show_debug

    def __call__(self, message: Message) -> None:
        self.print_message(message)

    def print_message(self, message: Message) -> None:
        match message:
            case SuccessResponse():
                self.print_success(message)
            case ErrorResponse():
                self.print_error(message)
            case LogMessage():
                self.print_log(message)
            case PublishDiagnostics():
                self.print_diagnostics(message)

    def print_success(self, message: SuccessResponse) -> None:
        result = message.result
        status = escape(result.status)
        if result.exit_code == 0:
            self.console.print(_styled(f"\\[success] {status}", self.theme.success))
        else:
            self.console.print(
                _styled(f"\\[failure] {status} (exit code {result.exit_code})", self.theme.failure)
            )

    def print_error(self, message: ErrorResponse) -> None:
        error = message.error
        self.console.print(
            _styled(f"\\[error] {escape(error.message)} (code {error.code})", self.theme.error)
        )

    def print_log(self, message: LogMessage) -> None:
        params = message.params
        if params.type == DEBUG_LOG_TYPE and not self.show_debug:
            return
        level = self.theme.log_level(params.type)
        self.console.print(f"{_tag(level)} {escape(params.message)}")

    def print_diagnostics(self, message: PublishDiagnostics) -> None:
        path = format_uri(message.params.uri)
        for diagnostic in message.params.diagnostics:
            self.print_diagnostic(path, diagnostic)

    def print_diagnostic(self, path: str, diagnostic: Diagnostic) -> None:
        # LSP positions are zero-based; editors and compilers count from 1
        start = diagnostic.range.start
        location = f"{path}:{start.line + 1}:{start.character + 1}"
        level = self.theme.diagnostic_level(diagnostic.severity)
        self.console.print(
            f"{_tag(level)} {_styled(escape(location), self.theme.location)}: "
            f"{escape(diagnostic.message)}"
        )
