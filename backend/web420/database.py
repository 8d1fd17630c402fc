"""
WEB 420 API: Database Session Management
========================================

What:  Async SQLAlchemy engine, session factory, declarative base, and the
       FastAPI session dependency.
How:   One async engine per process; one session per request that commits
       on success and rolls back on error.
Who:   Route handlers receive sessions via Depends(get_db_session).
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling (PostgreSQL):
    pool_size=20, max_overflow=10 → at most 30 connections
    pool_pre_ping:    validates connections before use
    pool_recycle=3600: recycles connections every hour
"""

from typing import AsyncGenerator

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from web420.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **settings.engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: attributes stay loaded after commit, so response
# models can be built from ORM objects once the transaction has ended.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# ── Document Column Type ──────────────────────────────────────────────────
# Nested arrays (roles, players, invoices, ...) are stored as JSON documents
# inside their parent row. PostgreSQL gets the binary JSONB representation.
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object, which Alembic reads for migrations
    and tests use for create_all().
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/composers")
        async def find_all_composers(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the lifespan shutdown."""
    await engine.dispose()
