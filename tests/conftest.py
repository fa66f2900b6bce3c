"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from typing import Any

import pytest

from contentful_mcp.application.query import ContentResolvers
from contentful_mcp.infrastructure.contentful import EntryQuery

# ============================================================
# Raw Entry Builders
# ============================================================


def make_asset(asset_id: str = "asset1", url: str | None = "//images.ctfassets.net/a.png", title: str = "Asset") -> dict:
    """An embedded (already resolved) asset object."""
    file: dict[str, Any] = {"fileName": f"{asset_id}.png", "contentType": "image/png"}
    if url is not None:
        file["url"] = url
        file["details"] = {"image": {"width": 800, "height": 600}}
    return {"sys": {"id": asset_id, "type": "Asset"}, "fields": {"title": title, "file": file}}


def make_link(target_id: str, link_type: str = "Asset") -> dict:
    return {"sys": {"type": "Link", "linkType": link_type, "id": target_id}}


def make_entry(entry_id: str, created_at: str = "2024-01-01T00:00:00Z", **fields: Any) -> dict:
    return {
        "sys": {"id": entry_id, "type": "Entry", "createdAt": created_at, "updatedAt": created_at},
        "fields": fields,
    }


# ============================================================
# Fake Content Store
# ============================================================


class FakeContentStore:
    """
    In-memory stand-in for the Contentful client.

    Returns canned raw entries per content type, in the order given. Plain
    equality filters and ``[match]`` filters are honoured, ``order`` is not.
    """

    def __init__(
        self,
        entries: dict[str, list[dict]] | None = None,
        errors: dict[str, Exception] | None = None,
        configured: bool = True,
    ) -> None:
        self.entries = entries or {}
        self.errors = errors or {}
        self.configured = configured
        self.queries: list[EntryQuery] = []
        self.closed = False

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def list_entries(self, query: EntryQuery) -> list[dict]:
        self.queries.append(query)
        if query.content_type in self.errors:
            raise self.errors[query.content_type]

        results = [e for e in self.entries.get(query.content_type, []) if self._matches(e, query.filters)]
        if query.limit:
            results = results[: query.limit]
        return results

    async def close(self) -> None:
        self.closed = True

    def queries_for(self, content_type: str) -> list[EntryQuery]:
        return [q for q in self.queries if q.content_type == content_type]

    @staticmethod
    def _matches(entry: dict, filters: dict[str, str]) -> bool:
        fields = entry.get("fields") or {}
        for key, expected in filters.items():
            if key.endswith("[match]"):
                value = fields.get(key[: -len("[match]")])
                if not isinstance(value, str) or expected.lower() not in value.lower():
                    return False
            elif fields.get(key) != expected:
                return False
        return True


# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def sample_entries() -> dict[str, list[dict]]:
    """A small space with every content type populated."""
    return {
        "blogPost": [
            make_entry(
                "post2",
                "2024-03-01T00:00:00Z",
                title="Spring Hackathon Recap",
                slug="spring-hackathon-recap",
                excerpt="What we built",
                author="Ada",
                coverImage=make_asset("cover2", "//images/cover2.png"),
            ),
            make_entry("post1", "2024-01-01T00:00:00Z", title="Welcome", slug="welcome", excerpt="Hello", author="Grace"),
        ],
        "meeting": [
            make_entry("m1", title="Kickoff", date="2024-01-10", description="First meeting"),
            make_entry("m2", title="Workshop", date="2024-02-10", description="Git workshop"),
            make_entry("m3", title="Social", description="No date yet"),
        ],
        "upcomingMeeting": [
            make_entry("u1", title="Next week", date="2030-01-01", description="Planning"),
        ],
        "eboardMember": [
            make_entry("e1", name="Alice", position="President", memberType="current"),
            make_entry("e2", name="Bob", position="Treasurer", memberType="past"),
            make_entry("e3", name="Carol", position="Secretary", memberType="current"),
        ],
        "hackathon": [
            make_entry("h1", title="Spring Hackathon", description="Build things", status="upcoming"),
            make_entry("h2", title="Winter Hack", description="Cold code", status="past"),
            make_entry("h3", title="Legacy Jam", description="Before status existed", slug="legacy-jam"),
            make_entry("h4", title="Live Now", description="In progress", status="Ongoing"),
        ],
        "landingPageGraphics": [
            make_entry("g1", title="Hero", description="Main hero", image=make_asset("img1", "//images/hero.png")),
            make_entry("g2", title="Footer", description="Footer art", graphic=make_asset("gr2", "//images/footer.png")),
        ],
        "parallaxBanner": [
            make_entry("b1", title="Banner One", link="https://example.com", image=make_asset("bimg", "//images/b1.png")),
        ],
    }


@pytest.fixture
def fake_store(sample_entries) -> FakeContentStore:
    return FakeContentStore(entries=sample_entries)


@pytest.fixture
def resolvers(fake_store) -> ContentResolvers:
    return ContentResolvers.from_store(fake_store)
