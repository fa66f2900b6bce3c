"""Tests for content store handle acquisition."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from contentful_mcp.infrastructure.contentful import (
    ContentfulClient,
    ContentStore,
    EntryQuery,
    NullContentStore,
    acquire_content_store,
)


class TestAcquireContentStore:
    async def test_with_credentials_returns_client(self):
        store = acquire_content_store(space_id="space1", access_token="token1")
        try:
            assert isinstance(store, ContentfulClient)
            assert store.is_configured
            assert isinstance(store, ContentStore)
        finally:
            await store.close()

    @pytest.mark.parametrize(
        ("space_id", "access_token"),
        [(None, None), ("space1", None), (None, "token1"), ("  ", "token1"), ("space1", "")],
    )
    async def test_missing_credentials_return_null_store(self, space_id, access_token):
        store = acquire_content_store(space_id=space_id, access_token=access_token)

        assert isinstance(store, NullContentStore)
        assert not store.is_configured
        assert await store.list_entries(EntryQuery("blogPost")) == []

    def test_missing_credentials_logged_as_warning(self, caplog):
        with caplog.at_level("WARNING"):
            acquire_content_store(space_id=None, access_token=None)
        assert "credentials are missing" in caplog.text

    def test_construction_failure_returns_null_store(self):
        with patch(
            "contentful_mcp.infrastructure.contentful.store.ContentfulClient",
            side_effect=RuntimeError("boom"),
        ):
            store = acquire_content_store(space_id="space1", access_token="token1")

        assert isinstance(store, NullContentStore)
        assert store.reason == "boom"

    async def test_none_options_fall_back_to_defaults(self):
        store = acquire_content_store(
            space_id="space1",
            access_token="token1",
            environment=None,
            host=None,
            timeout=None,
        )
        try:
            assert isinstance(store, ContentfulClient)
        finally:
            await store.close()


class TestNullContentStore:
    async def test_close_is_noop(self):
        store = NullContentStore()
        await store.close()
        assert await store.list_entries(EntryQuery("meeting")) == []

    def test_satisfies_protocol(self):
        assert isinstance(NullContentStore(), ContentStore)
