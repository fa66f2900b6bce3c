"""
MCP Resources - content type schema and count overview

Resources:
- contentful://schema/content-types
- contentful://stats/overview
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from contentful_mcp.application.stats import ContentStatistics

logger = logging.getLogger(__name__)

SCHEMA_URI = "contentful://schema/content-types"
STATS_URI = "contentful://stats/overview"


# ============================================================================
# Content Type Reference Data
# ============================================================================

CONTENT_TYPE_SCHEMA = {
    "contentTypes": [
        {
            "id": "blogPost",
            "name": "Blog Post",
            "description": "Blog posts with title, content, author, and publish date",
            "fields": ["title", "slug", "content", "excerpt", "author", "publishDate", "coverImage"],
        },
        {
            "id": "meeting",
            "name": "Meeting",
            "description": "Meeting records with date, description, location, and resources",
            "fields": [
                "title",
                "date",
                "description",
                "image",
                "meetingLocation",
                "slides",
                "slidesUrl",
                "recording",
                "resourcesUrl",
            ],
        },
        {
            "id": "eboardMember",
            "name": "Eboard Member",
            "description": "Executive board members with position and contact info",
            "fields": ["name", "position", "description", "linkedin", "github", "year", "image", "memberType"],
        },
        {
            "id": "hackathon",
            "name": "Hackathon",
            "description": "Hackathon events with dates, status, and registration info",
            "fields": [
                "title",
                "slug",
                "description",
                "startDate",
                "endDate",
                "status",
                "registrationLink",
                "details",
                "image",
            ],
        },
        {
            "id": "landingPageGraphics",
            "name": "Landing Page Graphics",
            "description": "Graphics and images for landing page displays",
            "fields": ["title", "description", "image", "graphic"],
        },
        {
            "id": "parallaxBanner",
            "name": "Parallax Banner",
            "description": "Banner images with parallax effects",
            "fields": ["title", "image", "link"],
        },
    ],
}


def register_resources(mcp: FastMCP, statistics: ContentStatistics):
    """Register the schema and statistics resources."""

    @mcp.resource(SCHEMA_URI, mime_type="application/json")
    def get_content_type_schema() -> str:
        """Content types exposed by this server and their fields."""
        return json.dumps(CONTENT_TYPE_SCHEMA, indent=2, ensure_ascii=False)

    @mcp.resource(STATS_URI, mime_type="application/json")
    async def get_stats_overview() -> str:
        """Record counts per content type."""
        overview = await statistics.overview()
        if not overview.ok:
            # Plain text, not JSON
            return overview.error or ""
        return json.dumps(overview.to_dict(), indent=2, ensure_ascii=False)

    logger.info("Registered resources: %s, %s", SCHEMA_URI, STATS_URI)


__all__ = ["CONTENT_TYPE_SCHEMA", "SCHEMA_URI", "STATS_URI", "register_resources"]
