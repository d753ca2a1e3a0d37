"""Initialize the member/team schema.

Creates all tables and, in development with SEED_ENABLED=true, loads the
sample teams and members.
"""

import asyncio
import sys

from roster.config import Environment, settings
from roster.db import engine, get_session
from roster.logging_config import setup_logging
from roster.models import Base
from roster.seed import seed_sample_data


async def init_database():
    """Create all database tables and optionally seed them."""
    print(f"Initializing database: {settings.db.url.split('@')[-1]}")

    async with engine.begin() as conn:
        # Drop all tables (for clean start)
        await conn.run_sync(Base.metadata.drop_all)
        print("✓ Dropped existing tables")

        await conn.run_sync(Base.metadata.create_all)
        print("✓ Created all tables")

    if settings.seed.enabled and settings.environment == Environment.DEVELOPMENT:
        async for session in get_session():
            await seed_sample_data(
                session,
                member_count=settings.seed.member_count,
                team_names=settings.seed.team_names,
            )
            await session.commit()
        print(f"✓ Seeded {len(settings.seed.team_names)} teams, {settings.seed.member_count} members")

    print("\n✅ Database initialization complete!")
    print(f"Tables created: {', '.join(Base.metadata.tables.keys())}")


async def main():
    """Main entry point."""
    setup_logging()
    try:
        await init_database()
    except Exception as e:
        print(f"\n❌ Error initializing database: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
