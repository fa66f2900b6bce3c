"""
Contentful infrastructure.

- ``EntryQuery``: criteria for one listing call
- ``ContentfulClient``: Delivery API client (httpx + tenacity)
- ``NullContentStore``: empty stand-in when no connection is available
- ``acquire_content_store``: fault-tolerant handle factory
"""

from .client import DEFAULT_ENVIRONMENT, DEFAULT_HOST, ContentfulClient, RawRecord, resolve_links
from .query import EntryQuery
from .store import DEFAULT_TIMEOUT, ContentStore, NullContentStore, acquire_content_store

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "ContentStore",
    "ContentfulClient",
    "EntryQuery",
    "NullContentStore",
    "RawRecord",
    "acquire_content_store",
    "resolve_links",
]
