"""Allow running as ``python -m sbtclient``."""

from sbtclient.cli.main import main

main()
