"""Command-line interface for sbtclient."""
