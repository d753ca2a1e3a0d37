"""Tests for settings and logging setup."""

import json
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roster.config import DatabaseSettings, Environment, LoggingSettings, SeedSettings, Settings
from roster.logging_config import JSONFormatter, setup_logging


def test_settings_defaults():
    s = Settings()

    assert s.environment == Environment.DEVELOPMENT
    assert s.db.url.startswith("postgresql+asyncpg://")
    assert s.seed.member_count == 100
    assert s.seed.team_names == ["teamA", "teamB"]


def test_sub_settings_read_env(monkeypatch):
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///./roster.db")
    monkeypatch.setenv("LOG_FORMAT", "text")
    monkeypatch.setenv("SEED_TEAM_NAMES", '["red", "blue"]')

    assert DatabaseSettings().url == "sqlite+aiosqlite:///./roster.db"
    assert LoggingSettings().format == "text"
    assert SeedSettings().team_names == ["red", "blue"]


def test_setup_logging_replaces_handler():
    config = LoggingSettings(level="debug", format="text")

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert not isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "roster.log"
    logger = setup_logging(LoggingSettings(level="INFO", format="json", file=str(log_file)))

    logging.getLogger("roster.queries.member_search").info("page fetched")
    logger.handlers[0].flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["msg"] == "page fetched"
    assert record["logger"] == "roster.queries.member_search"
    assert record["level"] == "INFO"


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("store down")
    except RuntimeError:
        record = logging.LogRecord(
            "roster", logging.ERROR, __file__, 1, "search failed", None, sys.exc_info()
        )

    payload = json.loads(JSONFormatter().format(record))

    assert payload["exception"] == "store down"


def test_explicit_db_settings_are_kept():
    s = Settings(db={"url": "sqlite+aiosqlite:///./x.db", "echo": True})

    assert s.db.url == "sqlite+aiosqlite:///./x.db"
    assert s.db.echo is True


async def test_get_session_yields_bound_session(monkeypatch, engine):
    import roster.db

    monkeypatch.setattr(
        roster.db, "AsyncSessionMaker", async_sessionmaker(bind=engine, expire_on_commit=False)
    )

    sessions = [session async for session in roster.db.get_session()]

    assert len(sessions) == 1
    assert isinstance(sessions[0], AsyncSession)
    assert sessions[0].bind is engine
