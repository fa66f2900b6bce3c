"""Tests for the statistics overview."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from contentful_mcp.application.query import ContentResolvers
from contentful_mcp.application.stats import COUNTED_LISTINGS, OVERVIEW_TITLE, ContentStatistics, StatsOverview
from contentful_mcp.core.exceptions import NetworkError

from conftest import FakeContentStore


def _fixed_clock() -> datetime:
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestOverview:
    async def test_counts_match_listings(self, resolvers):
        overview = await ContentStatistics(resolvers, clock=_fixed_clock).overview()

        assert overview.ok
        assert overview.counts == {
            "blogPosts": 2,
            "meetings": 3,
            "upcomingMeetings": 1,
            "currentEboardMembers": 2,
            "pastEboardMembers": 1,
            "hackathons": 4,
            "landingPageGraphics": 2,
            "parallaxBanners": 1,
        }
        assert set(overview.counts) == set(COUNTED_LISTINGS)

    async def test_to_dict(self, resolvers):
        data = (await ContentStatistics(resolvers, clock=_fixed_clock).overview()).to_dict()

        assert data["overview"] == OVERVIEW_TITLE
        assert data["lastUpdated"] == "2024-06-01T12:00:00+00:00"
        assert data["counts"]["hackathons"] == 4

    async def test_unreachable_store_counts_zero(self):
        errors = {name: NetworkError("down") for name in ("blogPost", "meeting", "hackathon")}
        store = FakeContentStore(errors=errors)

        overview = await ContentStatistics(ContentResolvers.from_store(store)).overview()

        assert overview.ok
        assert all(count == 0 for count in overview.counts.values())

    async def test_escaping_error_reported(self, resolvers, monkeypatch):
        async def explode(limit=None):
            raise RuntimeError("kaboom")

        monkeypatch.setattr(resolvers.banners, "get_parallax_banners", explode)
        overview = await ContentStatistics(resolvers, clock=_fixed_clock).overview()

        assert not overview.ok
        assert overview.error == "Error fetching Contentful statistics: kaboom"
        assert overview.to_dict() == {
            "error": "Error fetching Contentful statistics: kaboom",
            "lastUpdated": "2024-06-01T12:00:00+00:00",
        }


def test_default_overview_is_ok():
    assert StatsOverview().ok


class TestSettling:
    async def test_waits_for_every_listing_after_a_failure(self, resolvers, monkeypatch):
        settled = []

        async def explode(limit=None):
            raise RuntimeError("boom")

        async def slow(limit=None):
            await asyncio.sleep(0.05)
            settled.append("parallaxBanners")
            return []

        monkeypatch.setattr(resolvers.posts, "get_all_posts", explode)
        monkeypatch.setattr(resolvers.banners, "get_parallax_banners", slow)

        overview = await ContentStatistics(resolvers, clock=_fixed_clock).overview()

        assert overview.error == "Error fetching Contentful statistics: boom"
        assert settled == ["parallaxBanners"]
