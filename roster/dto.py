"""Transient search inputs and read-only projections."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MemberSearchCondition:
    """Optional filters for member search.

    ``None`` means "do not filter on this field"; it never means
    "field IS NULL".
    """
    username: str | None = None
    age_goe: int | None = None
    age_loe: int | None = None
    team_name: str | None = None


@dataclass(frozen=True)
class MemberTeamDto:
    """Flat view of a member joined with its team."""
    member_id: int
    username: str | None
    age: int
    team_id: int | None
    team_name: str | None
