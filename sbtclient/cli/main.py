"""Entry point for the sbtc command."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from sbtclient.cli.arg_parser import parse_args
from sbtclient.cli.logging_setup import configure_logging
from sbtclient.config import load_config
from sbtclient.core.errors import SbtClientError
from sbtclient.display import MessagePrinter, get_console, set_console
from sbtclient.protocol import HeaderParser
from sbtclient.server import ServerConnection, find_socket_path
from sbtclient.session import CommandSession, exit_code_for

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    """Run the requested command and return the process exit status.

    Raises:
        SbtClientError: On configuration, discovery, connection or protocol failure.
    """
    base_dir: Path = (args.dir or Path.cwd()).resolve()

    if args.verbose:
        configure_logging(logging.DEBUG)
    config = load_config(args.config, cwd=base_dir)
    if not args.verbose:
        configure_logging(config.logging.level)

    color = config.display.color if args.color is None else args.color
    if not color:
        set_console(Console(highlight=False, markup=True, no_color=True))
    timeout = args.timeout if args.timeout is not None else config.connection.timeout

    socket_path = find_socket_path(base_dir)
    header_parser = HeaderParser(
        max_content_length=config.protocol.max_content_length,
        max_header_size=config.protocol.max_header_size,
    )
    printer = MessagePrinter(get_console(), show_debug=config.display.show_debug)
    command_line = " ".join(args.command)

    with ServerConnection(socket_path, timeout=timeout) as conn:
        session = CommandSession(conn.reader, conn.writer, printer, header_parser)
        response = session.run(command_line)

    return exit_code_for(response)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the sbtc CLI."""
    args = parse_args(argv)
    error_console = Console(stderr=True, highlight=False)
    try:
        exit_code = run(args)
    except SbtClientError as e:
        logger.debug("Command failed", exc_info=True)
        error_console.print(f"[bold red]Error:[/] {escape(e.message)}")
        exit_code = 1
    except KeyboardInterrupt:
        error_console.print("[yellow]Interrupted[/]")
        exit_code = 130
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
