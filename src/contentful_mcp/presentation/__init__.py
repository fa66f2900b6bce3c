"""Presentation layer: the MCP server."""
