"""
Contentful MCP Tools

Content queries (6):
- query_blog_posts, query_meetings, query_eboard_members
- query_hackathons, query_graphics, query_banners

Search (1):
- search_content: substring search across content types

Registration goes through ``tool_registry.register_all_mcp_tools``.
"""

from .content_query import register_content_query_tools
from .search import register_search_tools

__all__ = [
    "register_content_query_tools",
    "register_search_tools",
]
