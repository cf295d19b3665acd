"""sbtclient: run commands on a running sbt server from the shell."""

__version__ = "0.1.0"
