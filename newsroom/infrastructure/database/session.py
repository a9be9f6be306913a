"""SQLAlchemy database session and engine configuration."""

import asyncio
import logging
from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from newsroom.config import get_settings

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


settings = get_settings()
_async_url = _get_async_url(settings.database_url)

engine = create_async_engine(
    _async_url,
    echo=(settings.app_env == "development"),
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request.

    Use cases commit explicitly; anything left pending is rolled back.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def _select_one() -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def ping_database(timeout: float | None = None) -> bool:
    """Return True when a trivial query round-trips within the store timeout."""
    limit = settings.store_timeout_seconds if timeout is None else timeout
    try:
        await asyncio.wait_for(_select_one(), timeout=limit)
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
        logger.warning("Database ping failed: %r", exc)
        return False
    return True
