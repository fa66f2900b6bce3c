"""
Query resolvers, one per content type.

Usage:
    from contentful_mcp.application.query import ContentResolvers

    resolvers = ContentResolvers.from_store(store)
    posts = await resolvers.posts.get_all_posts(limit=5)
"""

from __future__ import annotations

from dataclasses import dataclass

from contentful_mcp.infrastructure.contentful import ContentStore

from .banners import BannerResolver
from .base import CLIENT_SIDE_PAGE_SIZE, BaseResolver, fail_open, no_record, truncate
from .eboard import EboardResolver
from .graphics import GraphicResolver
from .hackathons import HackathonResolver
from .meetings import MeetingResolver, sort_meetings_by_date
from .posts import BlogPostResolver


@dataclass(frozen=True)
class ContentResolvers:
    """All resolvers bound to one shared store handle."""

    posts: BlogPostResolver
    meetings: MeetingResolver
    eboard: EboardResolver
    hackathons: HackathonResolver
    graphics: GraphicResolver
    banners: BannerResolver

    @classmethod
    def from_store(cls, store: ContentStore) -> ContentResolvers:
        return cls(
            posts=BlogPostResolver(store),
            meetings=MeetingResolver(store),
            eboard=EboardResolver(store),
            hackathons=HackathonResolver(store),
            graphics=GraphicResolver(store),
            banners=BannerResolver(store),
        )


__all__ = [
    "CLIENT_SIDE_PAGE_SIZE",
    "BannerResolver",
    "BaseResolver",
    "BlogPostResolver",
    "ContentResolvers",
    "EboardResolver",
    "GraphicResolver",
    "HackathonResolver",
    "MeetingResolver",
    "fail_open",
    "no_record",
    "sort_meetings_by_date",
    "truncate",
]
