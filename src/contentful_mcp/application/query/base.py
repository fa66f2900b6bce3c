"""
Resolver base - shared fetch, normalization and fail-open policy.

Every public resolver method is a total function: a transport, HTTP or
decoding failure is logged with its traceback and turned into an empty
list (or ``None`` for single-record lookups). Callers cannot tell "no
content" from "store unreachable"; the log is the diagnostic channel.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from functools import wraps
from typing import Any, TypeVar

from contentful_mcp.application.normalize import normalize
from contentful_mcp.domain.entities import ContentEntity, ContentType
from contentful_mcp.infrastructure.contentful import ContentStore, EntryQuery

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Page size used when a resolver must classify or match client-side
CLIENT_SIDE_PAGE_SIZE = 100


def no_record() -> None:
    """Fail-open default for single-record lookups."""
    return None


def fail_open(
    default: Callable[[], Any] = list,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator for resolver methods: errors degrade to ``default()``.

    Example:
        @fail_open()
        async def get_all_posts(self, limit=None) -> list[BlogPost]: ...

        @fail_open(default=no_record)
        async def get_post_by_slug(self, slug) -> BlogPost | None: ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(self: BaseResolver, *args: Any, **kwargs: Any) -> T:
            try:
                return await func(self, *args, **kwargs)
            except Exception as e:
                logger.exception(
                    f"{type(self).__name__}.{func.__name__} failed "
                    f"(content type '{self.content_type.value}'), returning empty result: {e}"
                )
                return default()

        return wrapper

    return decorator


def truncate(items: Sequence[T], limit: int | None) -> list[T]:
    """Keep the first ``limit`` items; a missing or non-positive limit keeps all."""
    if limit is not None and limit > 0:
        return list(items[:limit])
    return list(items)


class BaseResolver:
    """
    Base class for per-content-type resolvers.

    Subclasses set ``content_type``. The store is injected; it is shared,
    read-only and safe to use from concurrent calls.
    """

    content_type: ContentType

    def __init__(self, store: ContentStore) -> None:
        self._store = store

    @property
    def store(self) -> ContentStore:
        return self._store

    async def _fetch(
        self,
        *,
        filters: dict[str, str] | None = None,
        order: str | None = None,
        limit: int | None = None,
        content_type: ContentType | None = None,
    ) -> list[Any]:
        """List and normalize entries; the record type is stamped from the query."""
        content_type = content_type or self.content_type
        query = EntryQuery(
            content_type=content_type.value,
            filters=filters or {},
            order=order,
            limit=limit,
        )
        raw_entries = await self._store.list_entries(query)
        records: list[ContentEntity] = [normalize(raw, content_type) for raw in raw_entries]
        return records
