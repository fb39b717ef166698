"""Web server package."""

from taskmaster.web_server.web_server import TaskmasterWebServer

__all__ = ["TaskmasterWebServer"]
