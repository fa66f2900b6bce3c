"""
Contentful MCP Server

A Model Context Protocol server exposing read-only queries and search over
a Contentful space.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tool_registry.py: Centralized tool registration
- tools/: Tool implementations by category
- resources.py: Schema and statistics resources
- container: DI container (dependency-injector) for service lifecycle
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from contentful_mcp.container import ApplicationContainer
from contentful_mcp.infrastructure.contentful import DEFAULT_ENVIRONMENT, DEFAULT_HOST, DEFAULT_TIMEOUT

from .instructions import SERVER_INSTRUCTIONS
from .tool_registry import check_tool_registration, register_all_mcp_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "contentful-mcp"

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """
    Create a FastMCP lifespan handler bound to *container*.

    FastMCP enters the lifespan once per client session. The content store
    is process-wide, so it stays open here; see ``shutdown_content_store``.
    """

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        logger.debug("Lifecycle: session started")
        yield container
        logger.debug("Lifecycle: session ended")

    return _lifespan


async def shutdown_content_store() -> None:
    """Close the process-wide content store. Call once, at process exit."""
    await get_container().content_store().close()
    logger.info("Lifecycle: shutdown, content store closed")


def create_server(
    space_id: str | None = None,
    access_token: str | None = None,
    environment: str = DEFAULT_ENVIRONMENT,
    host: str = DEFAULT_HOST,
    timeout: float = DEFAULT_TIMEOUT,
    locale: str | None = None,
    name: str = DEFAULT_SERVER_NAME,
    disable_security: bool = False,
    json_response: bool = False,
    stateless_http: bool = False,
) -> FastMCP:
    """
    Create and configure the Contentful MCP server.

    Missing credentials do not fail: the server starts and every query
    returns empty results.

    Args:
        space_id: Contentful space identifier.
        access_token: Content Delivery API token.
        environment: Contentful environment.
        host: API host (``preview.contentful.com`` for the Preview API).
        timeout: Per-request timeout in seconds.
        locale: Optional locale code.
        name: Server name.
        disable_security: Disable DNS rebinding protection (needed for remote access).
        json_response: Use JSON responses instead of SSE.
        stateless_http: Use stateless HTTP mode.

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    logger.info("Initializing Contentful MCP Server...")

    # ── DI container ────────────────────────────────────────────────────
    _container = ApplicationContainer()
    _container.config.from_dict(
        {
            "space_id": space_id,
            "access_token": access_token,
            "environment": environment,
            "host": host,
            "timeout": timeout,
            "locale": locale,
        }
    )

    # ── Transport security ──────────────────────────────────────────────
    if disable_security:
        transport_security = TransportSecuritySettings(enable_dns_rebinding_protection=False)
        logger.info("DNS rebinding protection disabled for remote access")
    else:
        transport_security = None

    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        transport_security=transport_security,
        json_response=json_response,
        stateless_http=stateless_http,
        lifespan=_make_lifespan(_container),
    )

    stats = register_all_mcp_tools(
        mcp=mcp,
        resolvers=_container.resolvers(),
        search=_container.search(),
        statistics=_container.statistics(),
    )
    logger.info("Tool registration complete: %s", stats)
    check_tool_registration(mcp)

    logger.info("Contentful MCP Server initialized successfully")
    return mcp


def settings_from_env() -> dict[str, Any]:
    """Read Contentful settings from the environment."""
    raw_timeout = os.environ.get("CONTENTFUL_TIMEOUT", "").strip()
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError:
        logger.warning(f"Ignoring invalid CONTENTFUL_TIMEOUT={raw_timeout!r}")
        timeout = DEFAULT_TIMEOUT

    return {
        "space_id": os.environ.get("CONTENTFUL_SPACE_ID", "").strip() or None,
        "access_token": os.environ.get("CONTENTFUL_ACCESS_TOKEN", "").strip() or None,
        "environment": os.environ.get("CONTENTFUL_ENVIRONMENT", "").strip() or DEFAULT_ENVIRONMENT,
        "host": os.environ.get("CONTENTFUL_HOST", "").strip() or DEFAULT_HOST,
        "timeout": timeout,
        "locale": os.environ.get("CONTENTFUL_LOCALE", "").strip() or None,
    }


async def _run_stdio(server: FastMCP) -> None:
    try:
        await server.run_stdio_async()
    finally:
        await shutdown_content_store()


def main():
    """Run the MCP server over stdio."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = settings_from_env()
    if not settings["space_id"] or not settings["access_token"]:
        logger.warning("CONTENTFUL_SPACE_ID / CONTENTFUL_ACCESS_TOKEN not set; queries will return no content")

    server = create_server(**settings)
    asyncio.run(_run_stdio(server))


if __name__ == "__main__":
    main()
