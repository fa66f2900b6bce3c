"""
MCP Server Instructions - usage guide for AI agents.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
Contentful MCP Server - read-only access to the club's CMS content

Content types: blog posts, meetings (general and upcoming), executive board
members (current and past), hackathons, landing page graphics and parallax
banners.

## Which tool?
- A list of one content type -> query_<type> (query_blog_posts,
  query_meetings, query_eboard_members, query_hackathons, query_graphics,
  query_banners)
- One specific record -> the same tool with its lookup argument:
  query_blog_posts(slug=...), query_hackathons(slug=<entry id or slug>),
  query_graphics(title=...)
- "Is there anything about X?" -> search_content(query="X")

## Filters
- query_meetings(type="upcoming") lists only upcoming meetings
- query_eboard_members(member_type="current" | "past" | "all")
- query_hackathons(status="ongoing" | "upcoming" | "past" | "all");
  hackathons without a status count as upcoming
- limit caps the number of records; omit it for everything

## Search
search_content matches a case-insensitive substring against titles,
excerpts, authors, descriptions, names and positions. Default types are
blogPost, meeting, eboardMember and hackathon; pass
content_types=["landingPageGraphics", "parallaxBanner"] to include the
others. limit is per content type (default 5). There is no ranking.

## Empty results
An empty list can mean "nothing matches" or "the CMS is unreachable".
Failures are logged server-side and never surface as tool errors; only
invalid arguments do.

## Resources
- contentful://schema/content-types: fields of every content type
- contentful://stats/overview: record counts per content type
"""
