"""MCP server for editor and agent integrations."""

from .server import mcp

__all__ = ["mcp"]
