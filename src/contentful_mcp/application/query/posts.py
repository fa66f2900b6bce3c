"""Blog post queries."""

from __future__ import annotations

import logging

from contentful_mcp.domain.entities import BlogPost, ContentType

from .base import BaseResolver, fail_open, no_record, truncate

logger = logging.getLogger(__name__)


class BlogPostResolver(BaseResolver):
    content_type = ContentType.BLOG_POST

    @fail_open()
    async def get_all_posts(self, limit: int | None = None) -> list[BlogPost]:
        """All posts, newest created first."""
        posts = await self._fetch(order="-sys.createdAt")
        return truncate(posts, limit)

    @fail_open(default=no_record)
    async def get_post_by_slug(self, slug: str) -> BlogPost | None:
        """
        First post whose slug contains ``slug`` (case-sensitive).

        Candidates come from the store's ``[match]`` full-text operator, so a
        slug its tokenizer does not return is never seen. The local check
        only narrows further: it enforces case-sensitive containment.
        """
        if not slug:
            return None
        candidates = await self._fetch(filters={"slug[match]": slug}, order="-sys.createdAt")
        for post in candidates:
            if isinstance(post.slug, str) and slug in post.slug:
                return post
        logger.debug(f"No blog post with slug containing '{slug}'")
        return None
