"""
Contentful MCP Server

Usage as standalone server:
    python -m contentful_mcp.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "contentful": {
                "type": "stdio",
                "command": "contentful-mcp",
                "env": {
                    "CONTENTFUL_SPACE_ID": "...",
                    "CONTENTFUL_ACCESS_TOKEN": "..."
                }
            }
        }
    }

Usage for integration:
    from contentful_mcp.presentation.mcp_server import create_server

    server = create_server(space_id="abc123", access_token="...")
    server.run()
"""

from __future__ import annotations

from .server import create_server, main, shutdown_content_store

__all__ = ["create_server", "main", "shutdown_content_store"]
