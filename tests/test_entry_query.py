"""Tests for EntryQuery parameter rendering."""

from __future__ import annotations

import pytest

from contentful_mcp.infrastructure.contentful import EntryQuery
from contentful_mcp.infrastructure.contentful.query import DEFAULT_INCLUDE_DEPTH, MAX_PAGE_SIZE


class TestToParams:
    def test_minimal(self):
        assert EntryQuery("blogPost").to_params() == {
            "content_type": "blogPost",
            "include": DEFAULT_INCLUDE_DEPTH,
        }

    def test_filters_are_field_relative(self):
        params = EntryQuery(
            "eboardMember",
            filters={"memberType": "current", "slug[match]": "intro", "sys.id": "abc", "fields.year": "2024"},
        ).to_params()
        assert params["fields.memberType"] == "current"
        assert params["fields.slug[match]"] == "intro"
        assert params["sys.id"] == "abc"
        assert params["fields.year"] == "2024"

    def test_order_and_limit(self):
        params = EntryQuery("meeting", order="-fields.date", limit=10).to_params()
        assert params["order"] == "-fields.date"
        assert params["limit"] == 10

    @pytest.mark.parametrize("limit", [None, 0, -3])
    def test_non_positive_limit_omitted(self, limit):
        assert "limit" not in EntryQuery("meeting", limit=limit).to_params()

    def test_limit_capped_at_page_ceiling(self):
        assert EntryQuery("meeting", limit=5000).to_params()["limit"] == MAX_PAGE_SIZE

    def test_frozen(self):
        query = EntryQuery("blogPost")
        with pytest.raises(AttributeError):
            query.limit = 3  # type: ignore[misc]
