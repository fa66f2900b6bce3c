"""Parallax banner queries."""

from __future__ import annotations

from contentful_mcp.domain.entities import ContentType, ParallaxBanner

from .base import BaseResolver, fail_open, truncate


class BannerResolver(BaseResolver):
    content_type = ContentType.PARALLAX_BANNER

    @fail_open()
    async def get_parallax_banners(self, limit: int | None = None) -> list[ParallaxBanner]:
        banners = await self._fetch(order="sys.createdAt")
        return truncate(banners, limit)
