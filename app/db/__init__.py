"""Database engine, sessions and lifecycle."""

from app.db.database import (
    build_engine,
    build_session_maker,
    check_db_connection,
    close_db,
    drop_db,
    get_session,
    init_db,
)

__all__ = [
    "build_engine",
    "build_session_maker",
    "check_db_connection",
    "close_db",
    "drop_db",
    "get_session",
    "init_db",
]
