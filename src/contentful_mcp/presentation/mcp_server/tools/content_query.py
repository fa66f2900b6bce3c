"""
Content Query MCP Tools - one tool per content type

Provides:
- query_blog_posts: all posts, or one by slug
- query_meetings: all or upcoming meetings
- query_eboard_members: current, past or all members
- query_hackathons: by status, or one by id/slug
- query_graphics: all landing page graphics, or one by title
- query_banners: parallax banners

Every tool returns JSON text: {"query", "parameters", "count", "data"}.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from ._common import ensure_choice, format_query_payload, normalize_limit, tool_error

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from contentful_mcp.application.query import ContentResolvers

logger = logging.getLogger(__name__)

MEETING_TYPES = ("all", "upcoming")
MEMBER_TYPES = ("current", "past", "all")
HACKATHON_STATUSES = ("ongoing", "upcoming", "past", "all")


def register_content_query_tools(mcp: FastMCP, resolvers: ContentResolvers):
    """Register per-content-type query tools (6 tools)."""

    @mcp.tool()
    async def query_blog_posts(slug: str | None = None, limit: int | None = None) -> str:
        """
        Query blog posts.

        Args:
            slug: Optional slug (or part of one) to get a specific post
            limit: Limit number of results

        Returns:
            JSON with the matching posts, newest first.
        """
        try:
            limit = normalize_limit(limit)
            if slug:
                post = await resolvers.posts.get_post_by_slug(slug)
                results = [post] if post else []
            else:
                results = await resolvers.posts.get_all_posts(limit=limit)
            return format_query_payload(
                "blog-posts",
                {"slug": slug, "limit": limit},
                results[:limit] if limit else results,
            )
        except Exception as e:
            raise tool_error("querying blog posts", e, "query_blog_posts") from e

    @mcp.tool()
    async def query_meetings(type: Literal["all", "upcoming"] = "all", limit: int | None = None) -> str:
        """
        Query meetings.

        Args:
            type: "all" for every meeting (newest date first) or "upcoming"
            limit: Limit number of results
        """
        try:
            meeting_type = ensure_choice("type", type, MEETING_TYPES, "query_meetings")
            limit = normalize_limit(limit)
            if meeting_type == "upcoming":
                results = await resolvers.meetings.get_upcoming_meetings(limit=limit)
            else:
                results = await resolvers.meetings.get_all_meetings(limit=limit)
            return format_query_payload("meetings", {"type": meeting_type, "limit": limit}, results)
        except Exception as e:
            raise tool_error("querying meetings", e, "query_meetings") from e

    @mcp.tool()
    async def query_eboard_members(
        member_type: Literal["current", "past", "all"] = "all",
        limit: int | None = None,
    ) -> str:
        """
        Query executive board members.

        Args:
            member_type: "current", "past", or "all" (current members first)
            limit: Limit number of results
        """
        try:
            member_type = ensure_choice("member_type", member_type, MEMBER_TYPES, "query_eboard_members")
            limit = normalize_limit(limit)
            if member_type == "current":
                results = await resolvers.eboard.get_current_eboard_members(limit=limit)
            elif member_type == "past":
                results = await resolvers.eboard.get_past_eboard_members(limit=limit)
            else:
                results = await resolvers.eboard.get_all_eboard_members(limit=limit)
            return format_query_payload(
                "eboard-members",
                {"memberType": member_type, "limit": limit},
                results,
            )
        except Exception as e:
            raise tool_error("querying eboard members", e, "query_eboard_members") from e

    @mcp.tool()
    async def query_hackathons(
        status: Literal["ongoing", "upcoming", "past", "all"] = "all",
        slug: str | None = None,
        limit: int | None = None,
    ) -> str:
        """
        Query hackathons.

        Hackathons without a stored status are listed as "upcoming".

        Args:
            status: "ongoing", "upcoming", "past", or "all"
            slug: Optional entry id (or slug) to get a specific hackathon
            limit: Limit number of results
        """
        try:
            status = ensure_choice("status", status, HACKATHON_STATUSES, "query_hackathons")
            limit = normalize_limit(limit)
            if slug:
                hackathon = await resolvers.hackathons.get_hackathon_by_slug(slug)
                results = [hackathon] if hackathon else []
            elif status == "all":
                results = await resolvers.hackathons.get_all_hackathons(limit=limit)
            else:
                results = await resolvers.hackathons.get_hackathons_by_status(status, limit=limit)
            return format_query_payload(
                "hackathons",
                {"status": status, "slug": slug, "limit": limit},
                results,
            )
        except Exception as e:
            raise tool_error("querying hackathons", e, "query_hackathons") from e

    @mcp.tool()
    async def query_graphics(title: str | None = None, limit: int | None = None) -> str:
        """
        Query landing page graphics.

        Args:
            title: Optional exact title to get a specific graphic
            limit: Limit number of results
        """
        try:
            limit = normalize_limit(limit)
            if title:
                graphic = await resolvers.graphics.get_landing_page_graphic_by_title(title)
                results = [graphic] if graphic else []
            else:
                results = await resolvers.graphics.get_all_landing_page_graphics(limit=limit)
            return format_query_payload("landing-page-graphics", {"title": title, "limit": limit}, results)
        except Exception as e:
            raise tool_error("querying graphics", e, "query_graphics") from e

    @mcp.tool()
    async def query_banners(limit: int | None = None) -> str:
        """
        Query parallax banners.

        Args:
            limit: Limit number of results
        """
        try:
            limit = normalize_limit(limit)
            results = await resolvers.banners.get_parallax_banners(limit=limit)
            return format_query_payload("parallax-banners", {"limit": limit}, results)
        except Exception as e:
            raise tool_error("querying banners", e, "query_banners") from e

    logger.info("Registered content query tools")
