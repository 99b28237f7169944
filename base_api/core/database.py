"""
Database configuration and connection management.
Async SQLAlchemy engine and session factory for the user store.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
import structlog

from .config import Settings
from ..models.base import Base

logger = structlog.get_logger()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the async engine; pool options only apply to server databases."""
    engine_kwargs = {"echo": settings.DATABASE_ECHO}
    if not settings.DATABASE_URL.startswith("sqlite"):
        engine_kwargs.update(
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=1800,
        )
    return create_async_engine(settings.DATABASE_URL, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables (development and tests only)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def close_db_connections(engine: Optional[AsyncEngine]) -> None:
    """Close all database connections on shutdown."""
    if engine is None:
        return
    await engine.dispose()
    logger.info("Database connections closed")
