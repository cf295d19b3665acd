from sbtclient.server.connection import ServerConnection
from sbtclient.server.discovery import find_socket_path, parse_server_uri

__all__ = [
    "ServerConnection",
    "find_socket_path",
    "parse_server_uri",
]
