"""
Content store handle.

``acquire_content_store`` is the only way the application obtains a
connection to Contentful. It never raises: missing credentials or a
failing client construction produce a ``NullContentStore`` whose every
listing succeeds immediately with no entries. Downstream resolvers can
therefore assume a handle always exists.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from contentful_mcp.core.exceptions import ConfigurationError
from contentful_mcp.infrastructure.contentful.client import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_HOST,
    ContentfulClient,
)
from contentful_mcp.infrastructure.contentful.query import EntryQuery

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@runtime_checkable
class ContentStore(Protocol):
    """What the resolvers need from the remote store."""

    @property
    def is_configured(self) -> bool: ...

    async def list_entries(self, query: EntryQuery) -> list[dict[str, Any]]: ...

    async def close(self) -> None: ...


class NullContentStore:
    """Stand-in used when no working connection can be built."""

    def __init__(self, reason: str = "Contentful credentials are missing") -> None:
        self.reason = reason

    @property
    def is_configured(self) -> bool:
        return False

    async def list_entries(self, query: EntryQuery) -> list[dict[str, Any]]:
        logger.debug(f"Null content store: no entries for '{query.content_type}' ({self.reason})")
        return []

    async def close(self) -> None:
        return None


def acquire_content_store(
    space_id: str | None,
    access_token: str | None,
    environment: str | None = DEFAULT_ENVIRONMENT,
    host: str | None = DEFAULT_HOST,
    timeout: float | None = DEFAULT_TIMEOUT,
    locale: str | None = None,
) -> ContentStore:
    """
    Build the process-wide content store handle.

    Args:
        space_id: Contentful space identifier
        access_token: Delivery API token
        environment: Space environment
        host: API host
        timeout: Request timeout in seconds
        locale: Optional locale code

    Returns:
        A ``ContentfulClient``, or a ``NullContentStore`` when credentials are
        absent or the client cannot be constructed.
    """
    try:
        space_id = (space_id or "").strip()
        access_token = (access_token or "").strip()
        if not space_id or not access_token:
            raise ConfigurationError("Contentful credentials are missing")

        client = ContentfulClient(
            space_id=space_id,
            access_token=access_token,
            environment=environment or DEFAULT_ENVIRONMENT,
            host=host or DEFAULT_HOST,
            timeout=float(timeout or DEFAULT_TIMEOUT),
            locale=locale or None,
        )
    except Exception as e:
        logger.warning(f"Contentful client unavailable, serving empty results: {e}")
        return NullContentStore(reason=str(e))

    logger.info(f"Contentful client initialized (space={space_id}, environment={environment or DEFAULT_ENVIRONMENT})")
    return client
