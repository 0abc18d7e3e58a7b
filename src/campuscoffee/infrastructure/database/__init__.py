"""SQLite database engine and schema via SQLAlchemy Core."""

from campuscoffee.infrastructure.database.engine import create_db_engine, init_database
from campuscoffee.infrastructure.database.schema import metadata, pos

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "pos",
]
