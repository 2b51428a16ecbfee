"""Database engine and session lifecycle."""

from .config import (
    DatabaseSettings,
    close_database,
    create_engine,
    create_session_factory,
    get_database_settings,
    get_engine,
    get_session_factory,
    init_database,
)

__all__ = [
    "DatabaseSettings",
    "close_database",
    "create_engine",
    "create_session_factory",
    "get_database_settings",
    "get_engine",
    "get_session_factory",
    "init_database",
]
