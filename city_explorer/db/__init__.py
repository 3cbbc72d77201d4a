from city_explorer.db.base import Base
from city_explorer.db.session import create_engine, create_session_factory, create_tables, get_db
from city_explorer.db.tables import ALL_TABLE_NAMES

__all__ = [
    "Base",
    "create_engine",
    "create_session_factory",
    "create_tables",
    "get_db",
    "ALL_TABLE_NAMES",
]
