"""
Entry query criteria.

One logical operation is issued against the store: list the entries of a
content type, optionally narrowed by field equality filters, ordered by a
sort key and capped at a result count.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Link resolution depth requested from the Delivery API
DEFAULT_INCLUDE_DEPTH = 2

# Delivery API hard ceiling for one page
MAX_PAGE_SIZE = 1000


@dataclass(frozen=True)
class EntryQuery:
    """
    Criteria for one ``list_entries`` call.

    Filter keys are relative to ``fields`` unless they already start with
    ``fields.`` or ``sys.``; operators stay in the key as Contentful expects::

        EntryQuery("eboardMember", filters={"memberType": "current"}, order="sys.createdAt")
        EntryQuery("blogPost", filters={"slug[match]": "intro"})
    """

    content_type: str
    filters: Mapping[str, str] = field(default_factory=dict)
    order: str | None = None
    limit: int | None = None
    include: int = DEFAULT_INCLUDE_DEPTH

    def to_params(self) -> dict[str, Any]:
        """Render as Content Delivery API query parameters."""
        params: dict[str, Any] = {
            "content_type": self.content_type,
            "include": self.include,
        }
        for key, value in self.filters.items():
            params[self._filter_key(key)] = value
        if self.order:
            params["order"] = self.order
        if self.limit is not None and self.limit > 0:
            params["limit"] = min(self.limit, MAX_PAGE_SIZE)
        return params

    @staticmethod
    def _filter_key(key: str) -> str:
        if key.startswith(("fields.", "sys.")):
            return key
        return f"fields.{key}"
