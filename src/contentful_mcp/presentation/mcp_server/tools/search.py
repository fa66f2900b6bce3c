"""
Search MCP Tools - cross-type content search

Provides:
- search_content: substring search over blog posts, meetings, eboard
  members and hackathons (graphics and banners on request)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from contentful_mcp.application.search import DEFAULT_PER_TYPE_LIMIT

from ._common import normalize_limit, tool_error

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from contentful_mcp.application.search import SearchAggregator

logger = logging.getLogger(__name__)


def _parse_content_types(content_types: list[str] | str | None) -> list[str] | None:
    # Agents sometimes send "blogPost,meeting" instead of a list
    if content_types is None:
        return None
    if isinstance(content_types, str):
        content_types = content_types.split(",")
    parsed = [name.strip() for name in content_types if name and name.strip()]
    return parsed or None


def register_search_tools(mcp: FastMCP, search: SearchAggregator):
    """Register cross-type search tools (1 tool)."""

    @mcp.tool()
    async def search_content(
        query: str,
        content_types: list[str] | str | None = None,
        limit: int | None = DEFAULT_PER_TYPE_LIMIT,
    ) -> str:
        """
        Search across Contentful content types.

        Matching is a case-insensitive substring test over each type's text
        fields (titles, excerpts, authors, descriptions, names, positions).
        Results keep listing order; there is no relevance ranking.

        Args:
            query: Text to look for
            content_types: Types to search. Any of blogPost, meeting,
                           eboardMember, hackathon, landingPageGraphics,
                           parallaxBanner. Default: blogPost, meeting,
                           eboardMember, hackathon
            limit: Maximum results per content type (default 5)

        Returns:
            JSON: {"searchQuery", "contentTypes", "totalResults", "results"}
        """
        try:
            found = await search.search(
                query or "",
                content_types=_parse_content_types(content_types),
                per_type_limit=normalize_limit(limit),
            )
            return json.dumps(found.to_dict(), indent=2, ensure_ascii=False)
        except Exception as e:
            raise tool_error("searching content", e, "search_content") from e

    logger.info("Registered search tools")
