"""Sample team/member data for local development."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from . import models

logger = logging.getLogger(__name__)


async def seed_sample_data(
    session: AsyncSession,
    *,
    member_count: int = 100,
    team_names: Sequence[str] = ("teamA", "teamB"),
) -> list[models.Team]:
    """Create ``team_names`` and members ``member0..member{n-1}``.

    Member ``i`` is ``i`` years old and joins ``team_names[i % len(team_names)]``.
    The session is flushed, not committed.
    """
    if not team_names:
        raise ValueError("team_names must not be empty")

    teams = [models.Team(name=name) for name in team_names]
    session.add_all(teams)

    for i in range(member_count):
        session.add(models.Member(username=f"member{i}", age=i, team=teams[i % len(teams)]))

    await session.flush()
    logger.info(f"Seeded {len(teams)} teams and {member_count} members")
    return teams
