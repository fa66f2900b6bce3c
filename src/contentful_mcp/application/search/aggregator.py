"""
Search Aggregator - substring search across content types.

Execution model:
    1. Resolve the requested type subset (default: posts, meetings,
       eboard members, hackathons)
    2. Fan out: every type's full listing is fetched concurrently
    3. Isolate failures: a type whose fetch raises contributes ``[]``
    4. Filter each listing with a case-insensitive substring match over
       that type's text fields
    5. Keep the first ``per_type_limit`` matches in listing order

There is no relevance ranking: listing order decides which matches win.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from contentful_mcp.application.query import ContentResolvers, truncate
from contentful_mcp.core.async_utils import gather_named
from contentful_mcp.core.exceptions import ErrorContext, InvalidParameterError
from contentful_mcp.domain.entities import ContentEntity

logger = logging.getLogger(__name__)

DEFAULT_PER_TYPE_LIMIT = 5


@dataclass(frozen=True)
class SearchTarget:
    """How one content type takes part in search."""

    type_name: str
    result_key: str
    fields: tuple[str, ...]
    summary_fields: tuple[str, ...]
    fetch: Callable[[ContentResolvers], Awaitable[list[Any]]]

    def summarize(self, record: ContentEntity) -> dict[str, Any]:
        data = record.to_dict()
        summary: dict[str, Any] = {"id": data.get("id"), "type": record.content_type_id}
        summary.update({name: data.get(name) for name in self.summary_fields})
        return summary


SEARCH_TARGETS: dict[str, SearchTarget] = {
    target.type_name: target
    for target in (
        SearchTarget(
            type_name="blogPost",
            result_key="blogPosts",
            fields=("title", "excerpt", "author"),
            summary_fields=("title", "slug", "excerpt", "author"),
            fetch=lambda r: r.posts.get_all_posts(),
        ),
        SearchTarget(
            type_name="meeting",
            result_key="meetings",
            fields=("title", "description"),
            summary_fields=("title", "date", "description"),
            fetch=lambda r: r.meetings.get_all_meetings(),
        ),
        SearchTarget(
            type_name="eboardMember",
            result_key="eboardMembers",
            fields=("name", "position", "description"),
            summary_fields=("name", "position", "memberType"),
            fetch=lambda r: r.eboard.get_all_eboard_members(),
        ),
        SearchTarget(
            type_name="hackathon",
            result_key="hackathons",
            fields=("title", "description"),
            summary_fields=("title", "description", "status"),
            fetch=lambda r: r.hackathons.get_all_hackathons(),
        ),
        SearchTarget(
            type_name="landingPageGraphics",
            result_key="landingPageGraphics",
            fields=("title", "description"),
            summary_fields=("title", "description", "imageUrl"),
            fetch=lambda r: r.graphics.get_all_landing_page_graphics(),
        ),
        SearchTarget(
            type_name="parallaxBanner",
            result_key="parallaxBanners",
            fields=("title",),
            summary_fields=("title", "link", "imageUrl"),
            fetch=lambda r: r.banners.get_parallax_banners(),
        ),
    )
}

ALL_SEARCH_TYPES: tuple[str, ...] = tuple(SEARCH_TARGETS)

# Graphics and banners carry little prose beyond a title; only searched on request.
DEFAULT_SEARCH_TYPES: tuple[str, ...] = ("blogPost", "meeting", "eboardMember", "hackathon")


def matches_query(record: Any, query: str, fields: Iterable[str]) -> bool:
    """True when any of ``fields`` contains ``query``, ignoring case."""
    needle = query.lower()
    for name in fields:
        value = getattr(record, name, None)
        if isinstance(value, str) and needle in value.lower():
            return True
    return False


@dataclass(frozen=True)
class SearchResults:
    """Unified search envelope."""

    query: str
    content_types: tuple[str, ...]
    results: dict[str, list[ContentEntity]] = field(default_factory=dict)

    @property
    def total_results(self) -> int:
        return sum(len(records) for records in self.results.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "searchQuery": self.query,
            "contentTypes": list(self.content_types),
            "totalResults": self.total_results,
            "results": {
                SEARCH_TARGETS[name].result_key: [
                    SEARCH_TARGETS[name].summarize(record) for record in self.results.get(name, [])
                ]
                for name in self.content_types
            },
        }


class SearchAggregator:
    """
    Case-insensitive substring search over several content types.

    Usage:
        aggregator = SearchAggregator(resolvers)
        found = await aggregator.search("hackathon")
        found.to_dict()["results"]["hackathons"]
    """

    def __init__(self, resolvers: ContentResolvers) -> None:
        self._resolvers = resolvers

    @staticmethod
    def resolve_types(content_types: Sequence[str] | None) -> tuple[str, ...]:
        """Validate and de-duplicate the requested types, keeping their order."""
        if not content_types:
            return DEFAULT_SEARCH_TYPES

        unknown = [name for name in content_types if name not in SEARCH_TARGETS]
        if unknown:
            raise InvalidParameterError(
                "content_types",
                unknown,
                f"any of {', '.join(ALL_SEARCH_TYPES)}",
                context=ErrorContext(tool_name="search_content", operation="resolve_types"),
            )
        return tuple(dict.fromkeys(content_types))

    async def search(
        self,
        query: str,
        content_types: Sequence[str] | None = None,
        per_type_limit: int | None = DEFAULT_PER_TYPE_LIMIT,
    ) -> SearchResults:
        """
        Search ``query`` across ``content_types``.

        Args:
            query: Text matched as a substring, ignoring case
            content_types: Type names (``blogPost``, ``meeting``, ...);
                           defaults to ``DEFAULT_SEARCH_TYPES``
            per_type_limit: Maximum matches kept per type

        Raises:
            InvalidParameterError: For an unknown content type name.
        """
        type_names = self.resolve_types(content_types)
        listings = await gather_named(
            {name: SEARCH_TARGETS[name].fetch(self._resolvers) for name in type_names}
        )

        results: dict[str, list[ContentEntity]] = {}
        for name in type_names:
            listing = listings[name]
            if isinstance(listing, BaseException):
                logger.warning(f"Search: fetching '{name}' failed, no results for this type: {listing}")
                listing = []
            target = SEARCH_TARGETS[name]
            matched = [record for record in listing if matches_query(record, query, target.fields)]
            results[name] = truncate(matched, per_type_limit)

        found = SearchResults(query=query, content_types=type_names, results=results)
        logger.info(f"Search '{query}' over {len(type_names)} types: {found.total_results} results")
        return found
