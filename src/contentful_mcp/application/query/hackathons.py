"""Hackathon queries."""

from __future__ import annotations

import logging

from contentful_mcp.application.normalize import classify_hackathon_status
from contentful_mcp.domain.entities import ContentType, Hackathon, HackathonStatus

from .base import CLIENT_SIDE_PAGE_SIZE, BaseResolver, fail_open, no_record, truncate

logger = logging.getLogger(__name__)


class HackathonResolver(BaseResolver):
    content_type = ContentType.HACKATHON

    @fail_open()
    async def get_all_hackathons(self, limit: int | None = None) -> list[Hackathon]:
        """All hackathons, latest ``startDate`` first (store order)."""
        hackathons = await self._fetch(order="-fields.startDate")
        logger.info(f"Found {len(hackathons)} hackathons")
        return truncate(hackathons, limit)

    @fail_open()
    async def get_hackathons_by_status(
        self,
        status: HackathonStatus | str,
        limit: int | None = None,
    ) -> list[Hackathon]:
        """
        Hackathons in one status partition.

        Older entries have no ``status`` field, so the partition is computed
        locally over one page of results: an absent or unknown status counts
        as ``upcoming``.
        """
        wanted = HackathonStatus(status)
        page = await self._fetch(limit=CLIENT_SIDE_PAGE_SIZE)
        matching = [h for h in page if classify_hackathon_status(h.status) is wanted]
        return truncate(matching, limit)

    @fail_open(default=no_record)
    async def get_hackathon_by_slug(self, slug: str) -> Hackathon | None:
        """
        Look up one hackathon by its entry id.

        Public links use the entry id as the "slug". An entry whose ``slug``
        field equals the value is accepted when no id matches.
        """
        if not slug:
            return None
        page = await self._fetch(limit=CLIENT_SIDE_PAGE_SIZE)
        logger.debug(f"Looking up hackathon '{slug}' among {len(page)} entries")

        for hackathon in page:
            if hackathon.id == slug:
                return hackathon
        for hackathon in page:
            if hackathon.slug == slug:
                return hackathon
        return None
