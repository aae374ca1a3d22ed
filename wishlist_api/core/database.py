"""
Database configuration and session management
Uses SQLAlchemy with async support
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from typing import AsyncGenerator
import logging

from .config import settings

logger = logging.getLogger(__name__)

def build_engine(database_url: str) -> AsyncEngine:
    """Create an async engine with pooling suited to the backend"""
    if database_url.startswith("sqlite"):
        # SQLite doesn't support connection pooling parameters
        return create_async_engine(
            database_url,
            echo=settings.DATABASE_ECHO,
            poolclass=NullPool,
        )

    # PostgreSQL and other databases support pooling
    return create_async_engine(
        database_url,
        echo=settings.DATABASE_ECHO,
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
        pool_timeout=settings.DATABASE_POOL_TIMEOUT,
        pool_pre_ping=True,  # Verify connections before use
    )

def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to ``bind``"""
    # Loaded aggregates are returned after commit, so attributes must not expire
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

engine = build_engine(settings.database_url_async)

AsyncSessionLocal = build_session_factory(engine)

# Database dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Create and yield database session
    Ensures proper cleanup after use
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

async def create_tables(bind: AsyncEngine) -> None:
    """Create all tables on ``bind``"""
    # Import models so every table is registered on the metadata
    from wishlist_api.models import Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def init_db() -> None:
    """Initialize database tables"""
    await create_tables(engine)
    logger.info("Database tables created successfully")

async def close_db() -> None:
    """Close database connections"""
    await engine.dispose()
    logger.info("Database connections closed")
