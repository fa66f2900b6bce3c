"""Cross-type content search."""

from .aggregator import (
    ALL_SEARCH_TYPES,
    DEFAULT_PER_TYPE_LIMIT,
    DEFAULT_SEARCH_TYPES,
    SEARCH_TARGETS,
    SearchAggregator,
    SearchResults,
    SearchTarget,
    matches_query,
)

__all__ = [
    "ALL_SEARCH_TYPES",
    "DEFAULT_PER_TYPE_LIMIT",
    "DEFAULT_SEARCH_TYPES",
    "SEARCH_TARGETS",
    "SearchAggregator",
    "SearchResults",
    "SearchTarget",
    "matches_query",
]
