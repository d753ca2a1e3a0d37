"""Member search: flat and paginated projections over Member LEFT JOIN Team.

Both searches share the filter built by ``member_search_predicate`` and
project rows straight into ``MemberTeamDto`` without loading entities.
The session is owned by the caller; nothing here commits, caches or
retries.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.dto import MemberSearchCondition, MemberTeamDto
from roster.errors import InvalidPageRequestError, ProjectionError, StoreAccessError
from roster.models import Member, Team
from roster.paging import Direction, Page, Sort
from roster.queries.predicates import member_search_predicate

logger = logging.getLogger(__name__)

# Label names match the MemberTeamDto fields.
SORTABLE_COLUMNS: dict[str, ColumnElement[Any]] = {
    "member_id": Member.id,
    "username": Member.username,
    "age": Member.age,
    "team_id": Team.id,
    "team_name": Team.name,
}


def to_member_team_dto(row: Mapping[str, Any]) -> MemberTeamDto:
    """Build a DTO from one projected row."""
    try:
        return MemberTeamDto(**row)
    except TypeError as e:
        raise ProjectionError(f"Row does not match MemberTeamDto: {dict(row)!r}") from e


def order_by_clauses(order_by: Sequence[Sort] | None) -> list[ColumnElement[Any]]:
    """Translate Sort entries into ORDER BY clauses."""
    clauses = []
    for sort in order_by or ():
        column = SORTABLE_COLUMNS.get(sort.property)
        if column is None:
            raise InvalidPageRequestError(
                f"Unknown sort property {sort.property!r}; "
                f"expected one of {sorted(SORTABLE_COLUMNS)}"
            )
        clause = column.desc() if sort.direction == Direction.DESC else column.asc()
        if sort.nulls_last:
            clause = clause.nulls_last()
        clauses.append(clause)
    return clauses


def member_team_query(
    predicate: ColumnElement[bool],
    order_by: Sequence[Sort] | None = None,
) -> Select:
    """SELECT the MemberTeamDto columns for every member matching ``predicate``."""
    stmt = (
        select(
            Member.id.label("member_id"),
            Member.username.label("username"),
            Member.age.label("age"),
            Team.id.label("team_id"),
            Team.name.label("team_name"),
        )
        .select_from(Member)
        .outerjoin(Member.team)
        .where(predicate)
    )
    clauses = order_by_clauses(order_by)
    if clauses:
        stmt = stmt.order_by(*clauses)
    return stmt


def member_count_query(predicate: ColumnElement[bool]) -> Select:
    """SELECT count(*) over the same join and filter, without projection or paging."""
    return (
        select(func.count(Member.id))
        .select_from(Member)
        .outerjoin(Member.team)
        .where(predicate)
    )


async def _fetch_dtos(session: AsyncSession, stmt: Select) -> list[MemberTeamDto]:
    try:
        result = await session.execute(stmt)
        rows = result.mappings().all()
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Member search query failed: {e}")
        raise StoreAccessError(f"Member search query failed: {e}") from e

    return [to_member_team_dto(row) for row in rows]


async def _fetch_count(session: AsyncSession, predicate: ColumnElement[bool]) -> int:
    try:
        result = await session.execute(member_count_query(predicate))
        return int(result.scalar_one())
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Member count query failed: {e}")
        raise StoreAccessError(f"Member count query failed: {e}") from e


async def search(
    session: AsyncSession,
    condition: MemberSearchCondition,
    order_by: Sequence[Sort] | None = None,
) -> list[MemberTeamDto]:
    """Return every member matching ``condition``, joined with its team.

    Members without a team are included unless ``team_name`` is set.
    Order is the store's default unless ``order_by`` is given.
    """
    stmt = member_team_query(member_search_predicate(condition), order_by)
    content = await _fetch_dtos(session, stmt)
    logger.debug(f"search({condition}) returned {len(content)} rows")
    return content


async def search_page(
    session: AsyncSession,
    condition: MemberSearchCondition,
    offset: int,
    page_size: int,
    order_by: Sequence[Sort] | None = None,
) -> Page[MemberTeamDto]:
    """Return one page of members matching ``condition`` plus the total count.

    The count query is skipped when the first page comes back short,
    because its size already is the total. Any other page issues a
    second query for the count.

    Raises:
        InvalidPageRequestError: offset < 0, page_size < 1 or unknown sort property
        StoreAccessError: either query failed
        ProjectionError: a row could not be mapped to MemberTeamDto
    """
    if offset < 0:
        raise InvalidPageRequestError(f"offset must be >= 0, got {offset}")
    if page_size < 1:
        raise InvalidPageRequestError(f"page_size must be >= 1, got {page_size}")

    predicate = member_search_predicate(condition)
    stmt = member_team_query(predicate, order_by).offset(offset).limit(page_size)
    content = await _fetch_dtos(session, stmt)

    if offset == 0 and len(content) < page_size:
        total_count = len(content)
        logger.debug(f"Count query skipped: first page holds all {total_count} rows")
    else:
        total_count = await _fetch_count(session, predicate)

    logger.debug(
        f"search_page({condition}, offset={offset}, page_size={page_size}) "
        f"returned {len(content)} of {total_count} rows"
    )
    return Page(content=content, total_count=total_count, offset=offset, limit=page_size)
