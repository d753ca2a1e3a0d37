"""Compose a MemberSearchCondition into one SQLAlchemy filter expression.

Each field yields a clause only when it is present. Present clauses are
joined with AND; an empty condition matches every row.
"""
from __future__ import annotations

from sqlalchemy import ColumnElement, and_, true

from roster.dto import MemberSearchCondition
from roster.models import Member, Team


def username_eq(username: str | None) -> ColumnElement[bool] | None:
    return None if username is None else Member.username == username


def age_goe(age: int | None) -> ColumnElement[bool] | None:
    return None if age is None else Member.age >= age


def age_loe(age: int | None) -> ColumnElement[bool] | None:
    return None if age is None else Member.age <= age


def team_name_eq(team_name: str | None) -> ColumnElement[bool] | None:
    return None if team_name is None else Team.name == team_name


def all_of(*clauses: ColumnElement[bool] | None) -> ColumnElement[bool]:
    """AND together the clauses that are not None.

    Returns ``true()`` when nothing is left, so the result can always be
    passed to ``Select.where``.
    """
    present = [c for c in clauses if c is not None]
    if not present:
        return true()
    if len(present) == 1:
        return present[0]
    return and_(*present)


def member_search_predicate(condition: MemberSearchCondition) -> ColumnElement[bool]:
    """Build the filter shared by the flat and paginated member searches.

    The team clause refers to ``Team``, so the query it is applied to must
    join ``Member.team``.
    """
    return all_of(
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_goe(condition.age_goe),
        age_loe(condition.age_loe),
    )
