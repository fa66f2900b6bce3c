"""
Tool Registry - central place for MCP tool registration

Usage:
    from .tool_registry import register_all_mcp_tools, list_registered_tools

    # Register every tool and resource
    register_all_mcp_tools(mcp, resolvers, search, statistics)

    # Inspect the defined tool set
    tools = list_registered_tools()

    # Startup check against the FastMCP instance
    check_tool_registration(mcp)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from contentful_mcp.application.query import ContentResolvers
    from contentful_mcp.application.search import SearchAggregator
    from contentful_mcp.application.stats import ContentStatistics

logger = logging.getLogger(__name__)


# ============================================================================
# Tool Categories
# ============================================================================

TOOL_CATEGORIES = {
    "content": {
        "name": "Content Queries",
        "description": "Per-type listings and lookups",
        "tools": [
            "query_blog_posts",
            "query_meetings",
            "query_eboard_members",
            "query_hackathons",
            "query_graphics",
            "query_banners",
        ],
    },
    "search": {
        "name": "Search",
        "description": "Substring search across content types",
        "tools": ["search_content"],
    },
}


# ============================================================================
# Registration Functions
# ============================================================================


def register_all_mcp_tools(
    mcp: FastMCP,
    resolvers: ContentResolvers,
    search: SearchAggregator,
    statistics: ContentStatistics,
) -> dict[str, int]:
    """
    Register every MCP tool and resource.

    Returns:
        Dict with category names and registration counts
    """
    from .resources import register_resources
    from .tools import register_content_query_tools, register_search_tools

    stats = {}

    logger.info("Registering content query tools...")
    register_content_query_tools(mcp, resolvers)
    stats["content"] = len(TOOL_CATEGORIES["content"]["tools"])

    logger.info("Registering search tools...")
    register_search_tools(mcp, search)
    stats["search"] = len(TOOL_CATEGORIES["search"]["tools"])

    logger.info("Registering resources...")
    register_resources(mcp, statistics)
    stats["resources"] = 2

    total = sum(stats.values())
    logger.info(f"Total registered: {total} tools/resources")

    return stats


def list_registered_tools() -> dict[str, list[str]]:
    """List every defined tool, grouped by category."""
    return {cat_id: list(cat_info["tools"]) for cat_id, cat_info in TOOL_CATEGORIES.items()}


# ============================================================================
# Validation Functions
# ============================================================================


def validate_tool_registry(mcp: FastMCP) -> dict[str, object]:
    """
    Check TOOL_CATEGORIES against the tools actually registered on ``mcp``.

    Returns:
        Dict with defined, registered, missing, extra and valid
    """
    defined_tools = set()
    for cat_info in TOOL_CATEGORIES.values():
        defined_tools.update(cat_info["tools"])

    try:
        registered_tools = set(mcp._tool_manager._tools.keys())
    except AttributeError:
        logger.warning("Cannot access registered tools from FastMCP instance")
        return {
            "defined": sorted(defined_tools),
            "registered": [],
            "missing": [],
            "extra": [],
            "valid": False,
            "error": "Cannot access FastMCP tools registry",
        }

    missing = defined_tools - registered_tools
    extra = registered_tools - defined_tools

    result = {
        "defined": sorted(defined_tools),
        "registered": sorted(registered_tools),
        "missing": sorted(missing),
        "extra": sorted(extra),
        "valid": not missing and not extra,
    }

    if missing:
        logger.warning(f"Tools defined but not registered: {missing}")
    if extra:
        logger.info(f"Tools registered but not in TOOL_CATEGORIES: {extra}")

    return result


def check_tool_registration(mcp: FastMCP, raise_on_error: bool = False) -> bool:
    """
    Startup check that every defined tool is registered.

    Raises:
        RuntimeError: On mismatch, when ``raise_on_error`` is set.
    """
    result = validate_tool_registry(mcp)

    if not result["valid"]:
        msg = f"Tool registry validation failed. Missing: {result['missing']}, Extra: {result['extra']}"
        if raise_on_error:
            raise RuntimeError(msg)
        logger.error(msg)
        return False

    logger.info(f"Tool registry validated: {len(result['registered'])} tools registered")
    return True


__all__ = [
    "TOOL_CATEGORIES",
    "check_tool_registration",
    "list_registered_tools",
    "register_all_mcp_tools",
    "validate_tool_registry",
]
