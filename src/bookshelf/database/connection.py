"""
Database connection management
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..config import get_database_url, settings
from ..dbmodels import Base
from ..logging import get_logger

logger = get_logger(__name__)


def get_async_url(database_url: str | None = None) -> str:
    """Return an async driver URL, switching plain PostgreSQL URLs to asyncpg."""
    db_url = database_url or get_database_url()
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return db_url


def create_engine(database_url: str | None = None) -> AsyncEngine:
    """Create an async engine for the given (or configured) database URL."""
    async_url = get_async_url(database_url)
    kwargs: dict = {"echo": settings.sql_echo}
    if async_url.startswith("postgresql"):
        kwargs["pool_size"] = settings.database_pool_size
        kwargs["max_overflow"] = settings.database_max_overflow

    engine = create_async_engine(async_url, **kwargs)
    logger.info("Database engine created", database_url=engine.url.render_as_string())
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory shared by all requests of one process."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session, commit on success and roll back on error."""
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables directly from the ORM metadata (development and tests)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_database_connection(engine: AsyncEngine) -> tuple[bool, str | None]:
    """
    Check the database connection and return helpful error messages.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "password authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        elif "does not exist" in error_str:
            return False, (
                f"Cannot connect to database: {error_str}\n"
                f"Check that the database and role exist and run migrations if needed."
            )
        else:
            return False, f"Database connection error ({error_type}): {error_str}"
