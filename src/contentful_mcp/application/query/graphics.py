"""Landing page graphic queries."""

from __future__ import annotations

import logging

from contentful_mcp.domain.entities import ContentType, LandingPageGraphic

from .base import BaseResolver, fail_open, no_record, truncate

logger = logging.getLogger(__name__)


class GraphicResolver(BaseResolver):
    content_type = ContentType.LANDING_PAGE_GRAPHICS

    @fail_open()
    async def get_all_landing_page_graphics(self, limit: int | None = None) -> list[LandingPageGraphic]:
        graphics = await self._fetch(order="sys.createdAt")
        return truncate(graphics, limit)

    @fail_open(default=no_record)
    async def get_landing_page_graphic_by_title(self, title: str) -> LandingPageGraphic | None:
        """Exact title match; ``None`` without a call when credentials are absent."""
        if not self._store.is_configured:
            logger.error(f"Contentful credentials missing when fetching graphic: {title!r}")
            return None

        graphics = await self._fetch(filters={"title": title}, limit=1)
        if not graphics:
            logger.info(f"No graphic found with title {title!r}")
            return None

        graphic = graphics[0]
        if graphic.image_url is None:
            logger.warning(f"Graphic {title!r} has no resolvable image or graphic file")
        return graphic
