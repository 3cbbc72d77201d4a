"""
Database engine and sessions.

The engine is owned by the app lifespan (see main.py) and reached through
app.state; nothing here opens a connection at import time.
"""
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from city_explorer.config import Settings
from city_explorer.db.base import Base


def create_engine(settings: Settings) -> AsyncEngine:
    """Pooled engine; pre-ping and recycle replace connections the server dropped."""
    if settings.database_url.startswith("sqlite"):
        return create_async_engine(settings.database_url)
    return create_async_engine(
        settings.database_url,
        pool_size=8,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_timeout=30,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, autoflush=False, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables from model metadata. Dev/test shortcut for alembic upgrade head."""
    import city_explorer.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        await db.close()
