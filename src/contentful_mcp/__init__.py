"""
Contentful MCP - query and search a Contentful space from MCP clients.

Usage:
    from contentful_mcp import acquire_content_store, ContentResolvers

    store = acquire_content_store(space_id="abc123", access_token="...")
    resolvers = ContentResolvers.from_store(store)
    posts = await resolvers.posts.get_all_posts(limit=5)
"""

from .application.query import ContentResolvers
from .application.search import SearchAggregator
from .application.stats import ContentStatistics
from .infrastructure.contentful import ContentfulClient, NullContentStore, acquire_content_store

__version__ = "0.1.0"

__all__ = [
    "ContentResolvers",
    "ContentStatistics",
    "ContentfulClient",
    "NullContentStore",
    "SearchAggregator",
    "__version__",
    "acquire_content_store",
]
