"""
Contentful Content Delivery API client.

API Documentation:
    https://www.contentful.com/developers/docs/references/content-delivery-api/

Features:
- ``list_entries``: one page of entries for a content type
- Link resolution from the response ``includes`` block, so raw records
  carry embedded assets and entries the way the official SDKs return them

Rate Limits:
- Delivery API: 55 req/sec per space (cached responses are not counted)
- 429 answers carry ``X-Contentful-RateLimit-Reset``; the base client honours it
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from contentful_mcp.core.exceptions import ParseError
from contentful_mcp.infrastructure.contentful.base_client import BaseAPIClient
from contentful_mcp.infrastructure.contentful.query import EntryQuery

logger = logging.getLogger(__name__)

DEFAULT_HOST = "cdn.contentful.com"
DEFAULT_ENVIRONMENT = "master"

RawRecord = dict[str, Any]


class ContentfulClient(BaseAPIClient):
    """
    Contentful Delivery API client.

    Usage:
        client = ContentfulClient(space_id="abc123", access_token="...")
        entries = await client.list_entries(
            EntryQuery("blogPost", order="-sys.createdAt")
        )
        for entry in entries:
            print(entry["sys"]["id"], entry["fields"].get("title"))
    """

    _service_name = "Contentful"

    def __init__(
        self,
        space_id: str,
        access_token: str,
        environment: str = DEFAULT_ENVIRONMENT,
        host: str = DEFAULT_HOST,
        timeout: float = 30.0,
        locale: str | None = None,
        max_attempts: int = 3,
        retry_wait: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Contentful client.

        Args:
            space_id: Contentful space identifier
            access_token: Content Delivery (or Preview) API token
            environment: Space environment, ``master`` by default
            host: API host; ``preview.contentful.com`` for unpublished content
            timeout: Request timeout in seconds
            locale: Optional locale code; the space default when omitted
        """
        self._space_id = space_id
        self._environment = environment or DEFAULT_ENVIRONMENT
        self._locale = locale
        super().__init__(
            base_url=f"https://{host or DEFAULT_HOST}/spaces/{space_id}/environments/{self._environment}",
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
                "User-Agent": "contentful-mcp/0.1",
            },
            max_attempts=max_attempts,
            retry_wait=retry_wait,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return True

    @property
    def space_id(self) -> str:
        return self._space_id

    async def list_entries(self, query: EntryQuery) -> list[RawRecord]:
        """
        List entries matching ``query``.

        Returns:
            Raw entries (``{"sys": ..., "fields": ...}``) with links resolved.

        Raises:
            ContentStoreError subclasses on transport, HTTP or decoding failure.
        """
        params = query.to_params()
        if self._locale:
            params["locale"] = self._locale

        data = await self._make_request("/entries", params=params)
        if not isinstance(data, dict) or not isinstance(data.get("items"), list):
            raise ParseError("response has no 'items' array", source=self._service_name)

        items = data["items"]
        logger.debug(
            f"Contentful: {len(items)} of {data.get('total', len(items))} "
            f"'{query.content_type}' entries"
        )
        return resolve_links(items, data.get("includes") or {}, max_depth=query.include)


# ============================================================================
# Link resolution
# ============================================================================


def resolve_links(
    items: list[RawRecord],
    includes: Mapping[str, Any],
    max_depth: int = 2,
) -> list[RawRecord]:
    """
    Replace ``Link`` references in entry fields with the linked objects.

    Links are looked up among the response items and its ``includes``
    block. Unresolvable links (unpublished or beyond the include depth)
    are left untouched. Input dictionaries are never mutated.
    """
    index: dict[tuple[str, str], RawRecord] = {}
    for link_type in ("Entry", "Asset"):
        for obj in includes.get(link_type) or []:
            obj_id = (obj.get("sys") or {}).get("id")
            if obj_id:
                index[(link_type, obj_id)] = obj
    for item in items:
        item_id = (item.get("sys") or {}).get("id")
        if item_id:
            index.setdefault(("Entry", item_id), item)

    return [_resolve_object(item, index, max_depth) for item in items]


def _resolve_object(obj: RawRecord, index: Mapping[tuple[str, str], RawRecord], depth: int) -> RawRecord:
    fields = obj.get("fields")
    if not isinstance(fields, dict):
        return obj
    return {
        **obj,
        "fields": {name: _resolve_value(value, index, depth) for name, value in fields.items()},
    }


def _resolve_value(value: Any, index: Mapping[tuple[str, str], RawRecord], depth: int) -> Any:
    if isinstance(value, list):
        return [_resolve_value(v, index, depth) for v in value]
    if not isinstance(value, dict):
        return value

    sys = value.get("sys")
    if not isinstance(sys, dict) or sys.get("type") != "Link":
        return value
    target = index.get((sys.get("linkType", ""), sys.get("id", "")))
    if target is None or depth <= 0:
        return value
    return _resolve_object(target, index, depth - 1)
