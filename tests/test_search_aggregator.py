"""Tests for cross-type search."""

from __future__ import annotations

import pytest

from contentful_mcp.application.query import ContentResolvers
from contentful_mcp.application.search import (
    ALL_SEARCH_TYPES,
    DEFAULT_SEARCH_TYPES,
    SearchAggregator,
    matches_query,
)
from contentful_mcp.core.exceptions import InvalidParameterError, ServiceUnavailableError
from contentful_mcp.domain.entities import BlogPost

from conftest import FakeContentStore, make_entry


@pytest.fixture
def aggregator(resolvers) -> SearchAggregator:
    return SearchAggregator(resolvers)


class TestMatchesQuery:
    def test_case_insensitive_substring(self):
        post = BlogPost(id="p", content_type_id="blogPost", title="Spring HACKATHON recap")
        assert matches_query(post, "hackathon", ("title", "excerpt"))
        assert not matches_query(post, "winter", ("title", "excerpt"))

    def test_missing_fields_never_match(self):
        post = BlogPost(id="p", content_type_id="blogPost")
        assert not matches_query(post, "a", ("title", "excerpt", "author"))


class TestSearch:
    async def test_matches_across_types(self, aggregator):
        found = await aggregator.search("hackathon")
        data = found.to_dict()

        assert data["searchQuery"] == "hackathon"
        assert data["contentTypes"] == list(DEFAULT_SEARCH_TYPES)
        assert [r["id"] for r in data["results"]["blogPosts"]] == ["post2"]
        assert [r["id"] for r in data["results"]["hackathons"]] == ["h1"]
        assert data["results"]["meetings"] == []
        assert data["results"]["eboardMembers"] == []
        assert data["totalResults"] == 2

    async def test_summary_shape(self, aggregator):
        found = await aggregator.search("alice", content_types=["eboardMember"])
        assert found.to_dict()["results"]["eboardMembers"] == [
            {"id": "e1", "type": "eboardMember", "name": "Alice", "position": "President", "memberType": "current"}
        ]

    async def test_searches_past_and_current_members(self, aggregator):
        found = await aggregator.search("e", content_types=["eboardMember"], per_type_limit=None)
        assert [r.id for r in found.results["eboardMember"]] == ["e1", "e3", "e2"]

    async def test_per_type_limit(self, aggregator):
        found = await aggregator.search("e", content_types=["hackathon"], per_type_limit=2)
        assert len(found.results["hackathon"]) == 2

    async def test_total_equals_sum_of_lists(self, aggregator):
        found = await aggregator.search("o", content_types=list(ALL_SEARCH_TYPES), per_type_limit=None)
        assert found.total_results == sum(len(v) for v in found.to_dict()["results"].values())

    async def test_graphics_and_banners_on_request(self, aggregator):
        found = await aggregator.search("footer", content_types=["landingPageGraphics", "parallaxBanner"])
        data = found.to_dict()

        assert [r["imageUrl"] for r in data["results"]["landingPageGraphics"]] == ["//images/footer.png"]
        assert data["results"]["parallaxBanners"] == []

    async def test_no_match_is_empty_not_error(self, aggregator):
        found = await aggregator.search("zzz-nothing")
        assert found.total_results == 0
        assert set(found.to_dict()["results"]) == {"blogPosts", "meetings", "eboardMembers", "hackathons"}

    async def test_failing_type_is_isolated(self, sample_entries):
        store = FakeContentStore(entries=sample_entries, errors={"blogPost": ServiceUnavailableError("down")})
        aggregator = SearchAggregator(ContentResolvers.from_store(store))

        found = await aggregator.search("hackathon")

        assert found.results["blogPost"] == []
        assert [h.id for h in found.results["hackathon"]] == ["h1"]

    async def test_raising_fetch_is_isolated(self, resolvers, monkeypatch):
        async def explode(limit=None):
            raise RuntimeError("resolver bug")

        monkeypatch.setattr(resolvers.meetings, "get_all_meetings", explode)
        found = await SearchAggregator(resolvers).search("spring")

        assert found.results["meeting"] == []
        assert [h.id for h in found.results["hackathon"]] == ["h1"]

    async def test_fetches_run_for_each_type(self, aggregator, fake_store):
        await aggregator.search("x")
        queried = {q.content_type for q in fake_store.queries}
        assert queried == {"blogPost", "meeting", "eboardMember", "hackathon"}


class TestResolveTypes:
    def test_default(self):
        assert SearchAggregator.resolve_types(None) == DEFAULT_SEARCH_TYPES
        assert SearchAggregator.resolve_types([]) == DEFAULT_SEARCH_TYPES

    def test_deduplicates_in_order(self):
        assert SearchAggregator.resolve_types(["hackathon", "blogPost", "hackathon"]) == ("hackathon", "blogPost")

    def test_unknown_type(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            SearchAggregator.resolve_types(["blogPost", "podcast"])
        assert exc_info.value.param_name == "content_types"


async def test_entries_missing_text_fields_do_not_match():
    store = FakeContentStore(entries={"blogPost": [make_entry("p1"), make_entry("p2", title="Match me")]})
    found = await SearchAggregator(ContentResolvers.from_store(store)).search("match", content_types=["blogPost"])
    assert [p.id for p in found.results["blogPost"]] == ["p2"]
