#!/usr/bin/env python3
"""
Contentful MCP Server - HTTP Mode

This script runs the Contentful MCP server in HTTP mode (SSE or streamable-http),
allowing remote clients from other machines to connect.

Usage:
    # Run with SSE transport (default, more compatible)
    python run_server.py --transport sse --port 8765

    # Run with streamable-http transport
    python run_server.py --transport streamable-http --port 8765

    # Run against a specific space
    python run_server.py --space-id abc123 --access-token TOKEN

    # Keep DNS rebinding protection on (local clients only)
    python run_server.py --security

Environment Variables:
    CONTENTFUL_SPACE_ID: Contentful space identifier
    CONTENTFUL_ACCESS_TOKEN: Content Delivery API token
    CONTENTFUL_ENVIRONMENT: Environment (default: master)
    CONTENTFUL_HOST: API host (default: cdn.contentful.com)
    CONTENTFUL_TIMEOUT: Request timeout in seconds (default: 30)
    MCP_PORT: Server port (default: 8765)
    MCP_HOST: Server host (default: 0.0.0.0)
"""

import argparse
import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from contentful_mcp import __version__
from contentful_mcp.presentation.mcp_server.server import (
    create_server,
    settings_from_env,
    shutdown_content_store,
)

logger = logging.getLogger(__name__)


def build_parser(settings):
    parser = argparse.ArgumentParser(description="Run Contentful MCP Server in HTTP mode")
    parser.add_argument(
        "--space-id",
        default=settings["space_id"],
        help="Contentful space identifier",
    )
    parser.add_argument(
        "--access-token",
        default=settings["access_token"],
        help="Content Delivery API token",
    )
    parser.add_argument(
        "--environment",
        default=settings["environment"],
        help="Contentful environment (default: master)",
    )
    parser.add_argument(
        "--transport",
        choices=["sse", "streamable-http"],
        default="sse",
        help="Transport protocol (default: sse)",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", "0.0.0.0"),
        help="Server host (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", "8765")),
        help="Server port (default: 8765)",
    )
    parser.add_argument(
        "--security",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="DNS rebinding protection (default: off, for remote access)",
    )
    return parser


def build_app(server, transport, port):
    """Wrap the MCP transport app with utility routes and a process lifespan."""
    if transport == "sse":
        logger.info("SSE endpoint: /sse")
        logger.info("Message endpoint: /messages")
        mcp_app = server.sse_app()
    else:
        logger.info("Streamable HTTP endpoint: /mcp")
        mcp_app = server.streamable_http_app()

    # Mounted apps do not get lifespan events; the session manager and the
    # content store are both owned by the outer app
    @asynccontextmanager
    async def lifespan(app):
        try:
            if transport == "sse":
                yield
            else:
                async with server.session_manager.run():
                    yield
        finally:
            await shutdown_content_store()

    async def health(request):
        return JSONResponse({"status": "ok", "service": "contentful-mcp"})

    async def info(request):
        mcp_endpoints = {"sse": "/sse", "messages": "/messages"} if transport == "sse" else {"mcp": "/mcp"}
        return JSONResponse(
            {
                "service": "Contentful MCP Server",
                "version": __version__,
                "transport": transport,
                "endpoints": {
                    "mcp": mcp_endpoints,
                    "utility": {"health": "/health"},
                },
                "usage": {
                    "vscode_mcp_json": {
                        "type": "sse" if transport == "sse" else "http",
                        "url": f"http://YOUR_SERVER_IP:{port}" + ("/sse" if transport == "sse" else "/mcp"),
                    }
                },
            }
        )

    routes = [
        Route("/", info),
        Route("/health", health),
        Mount("/", app=mcp_app),
    ]
    return Starlette(routes=routes, lifespan=lifespan)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    settings = settings_from_env()
    args = build_parser(settings).parse_args()

    logger.info("Creating Contentful MCP Server...")
    logger.info(f"  Space: {args.space_id or 'Not set'}")
    logger.info(f"  Access token: {'Set' if args.access_token else 'Not set'}")
    logger.info(f"  Environment: {args.environment}")
    logger.info(f"  Transport: {args.transport}")
    logger.info(f"  Host: {args.host}")
    logger.info(f"  Port: {args.port}")
    logger.info(f"  DNS Rebinding Protection: {'Enabled' if args.security else 'Disabled'}")

    settings.update(
        space_id=args.space_id,
        access_token=args.access_token,
        environment=args.environment,
    )
    server = create_server(disable_security=not args.security, **settings)

    logger.info(f"Starting server at http://{args.host}:{args.port}")
    uvicorn.run(
        build_app(server, args.transport, args.port),
        host=args.host,
        port=args.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
        server_header=False,
    )


if __name__ == "__main__":
    main()
