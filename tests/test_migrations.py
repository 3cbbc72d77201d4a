"""Alembic migrations produce the same tables as the models."""

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic import command
from alembic.config import Config
from sqlalchemy.exc import IntegrityError

from city_explorer.db.base import Base
from city_explorer.db.tables import ALL_TABLE_NAMES

ROOT = Path(__file__).resolve().parent.parent


def test_models_match_table_list():
    import city_explorer.models  # noqa: F401

    assert set(Base.metadata.tables) == set(ALL_TABLE_NAMES)


def test_upgrade_head_creates_tables(tmp_path):
    db_path = tmp_path / "migrated.db"
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    command.upgrade(cfg, "head")

    engine = sa.create_engine(f"sqlite:///{db_path}")
    tables = set(sa.inspect(engine).get_table_names()) - {"alembic_version"}
    assert tables == set(ALL_TABLE_NAMES)

    insert = sa.text("INSERT INTO locations (search_query) VALUES (:q)")
    with engine.begin() as conn:
        conn.execute(insert, {"q": "Seattle"})
    with pytest.raises(IntegrityError):
        with engine.begin() as conn:
            conn.execute(insert, {"q": "Seattle"})
    engine.dispose()


def test_free_text_columns_are_unbounded():
    from city_explorer.models import Location, Movie

    assert isinstance(Location.__table__.c.search_query.type, sa.Text)
    assert isinstance(Location.__table__.c.formatted_query.type, sa.Text)
    assert isinstance(Movie.__table__.c.title.type, sa.Text)
