"""Argument parsing for the sbtc command."""

import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sbtc",
        description="Run a command on the sbt server already running for this project",
    )
    parser.add_argument(
        "command",
        nargs="+",
        help="sbt command line to execute, e.g. 'testOnly com.example.FooSpec'",
    )
    parser.add_argument(
        "--dir", "-d",
        type=Path,
        default=None,
        help="sbt project directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file to use instead of ~/.sbtclient and .sbtclient layers",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Socket timeout in seconds (default: from config, else wait forever)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log client diagnostics to stderr",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Disable colored output",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
