"""
Content statistics - count overview across every content type.

All listings are fetched concurrently and every fetch settles before the
overview is composed. Resolvers already degrade to empty lists. If one
raises anyway, the overview reports a single error string instead of
partial counts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from contentful_mcp.application.query import ContentResolvers
from contentful_mcp.core.async_utils import gather_with_errors

logger = logging.getLogger(__name__)

OVERVIEW_TITLE = "Contentful CMS Statistics"


@dataclass(frozen=True)
class StatsOverview:
    """Counts per listing, or the error that prevented computing them."""

    counts: dict[str, int] = field(default_factory=dict)
    last_updated: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error, "lastUpdated": self.last_updated}
        return {
            "overview": OVERVIEW_TITLE,
            "counts": dict(self.counts),
            "lastUpdated": self.last_updated,
        }


COUNTED_LISTINGS: dict[str, Callable[[ContentResolvers], Any]] = {
    "blogPosts": lambda r: r.posts.get_all_posts(),
    "meetings": lambda r: r.meetings.get_all_meetings(),
    "upcomingMeetings": lambda r: r.meetings.get_upcoming_meetings(),
    "currentEboardMembers": lambda r: r.eboard.get_current_eboard_members(),
    "pastEboardMembers": lambda r: r.eboard.get_past_eboard_members(),
    "hackathons": lambda r: r.hackathons.get_all_hackathons(),
    "landingPageGraphics": lambda r: r.graphics.get_all_landing_page_graphics(),
    "parallaxBanners": lambda r: r.banners.get_parallax_banners(),
}


class ContentStatistics:
    def __init__(
        self,
        resolvers: ContentResolvers,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._resolvers = resolvers
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def overview(self) -> StatsOverview:
        """Count every listing concurrently."""
        names = list(COUNTED_LISTINGS)
        timestamp = self._clock().isoformat()
        listings = await gather_with_errors(
            *(COUNTED_LISTINGS[name](self._resolvers) for name in names),
            return_exceptions=True,
        )
        failures = [(name, r) for name, r in zip(names, listings) if isinstance(r, BaseException)]
        if failures:
            name, e = failures[0]
            logger.error(f"Statistics overview failed on '{name}' ({len(failures)} listing(s) failed): {e}")
            return StatsOverview(
                last_updated=timestamp,
                error=f"Error fetching Contentful statistics: {e}",
            )

        counts = {name: len(listing) for name, listing in zip(names, listings)}
        logger.info(f"Statistics overview: {sum(counts.values())} records across {len(counts)} listings")
        return StatsOverview(counts=counts, last_updated=timestamp)
