"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from roster.models import Base, Member, Team


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine with the schema created."""
    # StaticPool keeps every session on the same in-memory database
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
    async with SessionLocal() as session:
        yield session


@pytest_asyncio.fixture
async def teams(session):
    """teamA: member1 (10), member2 (20); teamB: member3 (30), member4 (40)."""
    team_a = Team(name="teamA")
    team_b = Team(name="teamB")
    session.add_all([
        team_a,
        team_b,
        Member(username="member1", age=10, team=team_a),
        Member(username="member2", age=20, team=team_a),
        Member(username="member3", age=30, team=team_b),
        Member(username="member4", age=40, team=team_b),
    ])
    await session.flush()
    return team_a, team_b


@pytest.fixture
def statements(engine):
    """SQL statements sent to the database, in order."""
    captured = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", _record)
    yield captured
    event.remove(engine.sync_engine, "before_cursor_execute", _record)
