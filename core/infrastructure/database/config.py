"""
Database configuration.

Manages database connection settings and engine creation.
"""
from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
import logging


logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Database configuration settings.
    
    Loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DB_",
        extra="ignore",  # Ignore extra fields from .env
    )

    # Database URL
    database_url: str = "sqlite+aiosqlite:///./orders.db"

    # Echo SQL (for debugging)
    echo_sql: bool = False


@lru_cache()
def get_database_settings() -> DatabaseSettings:
    """Return cached database settings."""
    return DatabaseSettings()


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.
    
    Args:
        database_url: Override for the configured URL
        echo: Override for the configured SQL echo flag
    
    Returns:
        Configured async engine
    """
    settings = get_database_settings()
    url = make_url(database_url or settings.database_url)
    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")

    kwargs = {"echo": settings.echo_sql if echo is None else echo}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees an empty DB
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_async_engine(url, **kwargs)


# Global engine instance
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    Get or create global engine instance.
    
    Returns:
        Global async engine
    """
    global _engine
    
    if _engine is None:
        _engine = create_engine()
    
    return _engine


# =============================================================================
# SESSION FACTORY
# =============================================================================

def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a session factory bound to ``engine``."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get session factory.
    
    Returns:
        Session factory for creating sessions
    """
    global _session_factory

    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())

    return _session_factory


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(engine: Optional[AsyncEngine] = None) -> None:
    """
    Initialize database.
    
    Creates all tables if they don't exist.
    """
    from core.data.models import Base
    
    logger.info("Initializing database...")
    
    engine = engine or get_engine()
    
    async with engine.begin() as conn:
        # Create all tables
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("Database initialized")


async def close_database() -> None:
    """Close database connections."""
    global _engine, _session_factory
    
    if _engine:
        logger.info("Closing database connections...")
        await _engine.dispose()
        logger.info("Database connections closed")

    _engine = None
    _session_factory = None
