"""MCP server for browsing stored reviews."""

from reviewpack.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
