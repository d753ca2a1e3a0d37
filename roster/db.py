"""SQLAlchemy 2.x async database setup.

This module defines the async engine and session factory but does not
hard-code any connection credentials. Transactions belong to whoever
opens the session.
"""

from __future__ import annotations

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import settings


engine: AsyncEngine = create_async_engine(settings.db.url, echo=settings.db.echo, future=True)

AsyncSessionMaker = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield one session from AsyncSessionMaker; the caller commits.

    Usage:
        async for session in get_session():
            await seed_sample_data(session)
            await session.commit()
    """

    async with AsyncSessionMaker() as session:
        yield session
