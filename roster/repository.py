"""Member repository bound to a caller-owned AsyncSession."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from roster.dto import MemberSearchCondition, MemberTeamDto
from roster.models import Member
from roster.paging import Page, Sort
from roster.queries import member_search

logger = logging.getLogger(__name__)


class MemberRepository:
    """Entity lookups plus the dynamic member/team search.

    Entity reads fetch-join ``Member.team`` so callers can use it without
    lazy loading. Writes only flush; committing is up to the caller.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, member: Member) -> Member:
        # Flushing makes the row visible to later queries in this session.
        self.session.add(member)
        await self.session.flush()
        logger.debug(f"Saved member {member.id}")
        return member

    async def find_by_id(self, member_id: int) -> Member | None:
        result = await self.session.execute(
            select(Member).options(joinedload(Member.team)).where(Member.id == member_id)
        )
        return result.scalar_one_or_none()

    async def find_all(self) -> list[Member]:
        result = await self.session.execute(select(Member).options(joinedload(Member.team)))
        return list(result.scalars().all())

    async def find_by_username(self, username: str) -> list[Member]:
        result = await self.session.execute(
            select(Member).options(joinedload(Member.team)).where(Member.username == username)
        )
        return list(result.scalars().all())

    async def search(
        self,
        condition: MemberSearchCondition,
        order_by: Sequence[Sort] | None = None,
    ) -> list[MemberTeamDto]:
        return await member_search.search(self.session, condition, order_by)

    async def search_page(
        self,
        condition: MemberSearchCondition,
        offset: int,
        page_size: int,
        order_by: Sequence[Sort] | None = None,
    ) -> Page[MemberTeamDto]:
        return await member_search.search_page(
            self.session, condition, offset, page_size, order_by
        )
