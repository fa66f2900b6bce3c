"""Executive board member queries."""

from __future__ import annotations

from contentful_mcp.core.async_utils import gather_with_errors
from contentful_mcp.domain.entities import ContentType, EboardMember, MemberType

from .base import BaseResolver, fail_open, truncate


class EboardResolver(BaseResolver):
    """
    Members are partitioned strictly by ``memberType`` and listed oldest
    tenure first (ascending creation time).
    """

    content_type = ContentType.EBOARD_MEMBER

    async def _members_of(self, member_type: MemberType) -> list[EboardMember]:
        members = await self._fetch(
            filters={"memberType": member_type.value},
            order="sys.createdAt",
        )
        # Guard the partition even if the store ignored the filter.
        return [m for m in members if m.member_type == member_type.value]

    @fail_open()
    async def get_current_eboard_members(self, limit: int | None = None) -> list[EboardMember]:
        return truncate(await self._members_of(MemberType.CURRENT), limit)

    @fail_open()
    async def get_past_eboard_members(self, limit: int | None = None) -> list[EboardMember]:
        return truncate(await self._members_of(MemberType.PAST), limit)

    @fail_open()
    async def get_all_eboard_members(self, limit: int | None = None) -> list[EboardMember]:
        """Current members followed by past members."""
        current, past = await gather_with_errors(
            self.get_current_eboard_members(),
            self.get_past_eboard_members(),
        )
        return truncate([*current, *past], limit)
