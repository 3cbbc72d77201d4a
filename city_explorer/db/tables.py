"""
Single source of truth for database tables that exist after migrations.

Use these names when writing raw SQL (e.g. TRUNCATE). Must match models and
alembic/versions.
"""
ALL_TABLE_NAMES = (
    "locations",
    "weathers",
    "events",
    "movies",
)
