"""Meeting queries (general and upcoming)."""

from __future__ import annotations

from datetime import datetime

from contentful_mcp.application.normalize import parse_timestamp
from contentful_mcp.domain.entities import ContentType, Meeting

from .base import BaseResolver, fail_open, truncate


def sort_meetings_by_date(meetings: list[Meeting]) -> list[Meeting]:
    """
    Newest ``date`` first; meetings without a parseable date go last.

    The sort is stable, so undated meetings keep the store's order.
    """

    def key(meeting: Meeting) -> tuple[bool, float]:
        when: datetime | None = parse_timestamp(meeting.date)
        return (when is None, -when.timestamp() if when else 0.0)

    return sorted(meetings, key=key)


class MeetingResolver(BaseResolver):
    """
    General meetings live under ``meeting``; upcoming ones are a separate
    content type (``upcomingMeeting``) rather than a date filter.
    """

    content_type = ContentType.MEETING

    @fail_open()
    async def get_all_meetings(self, limit: int | None = None) -> list[Meeting]:
        # The server-side date order is unreliable; re-sort locally.
        meetings = await self._fetch(order="-fields.date")
        return truncate(sort_meetings_by_date(meetings), limit)

    @fail_open()
    async def get_upcoming_meetings(self, limit: int | None = None) -> list[Meeting]:
        """Upcoming meetings in store order."""
        meetings = await self._fetch(
            order="-sys.createdAt",
            content_type=ContentType.UPCOMING_MEETING,
        )
        return truncate(meetings, limit)
