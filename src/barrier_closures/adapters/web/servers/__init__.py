"""Servers used by the web adapter."""

from barrier_closures.adapters.web.servers.static_file_server import StaticFileServer

__all__ = ["StaticFileServer"]
