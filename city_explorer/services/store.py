"""
Store gateway: the only code that talks SQL.

find / insert_ignore_conflict / insert_many over one AsyncSession. Any SQLAlchemy
failure is rolled back and raised as StoreError; a unique conflict on locations
is an expected outcome, not an error.
"""
import logging
from typing import Any

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer.core.errors import StoreError
from city_explorer.models import Event, Location, Movie, Weather
from city_explorer.services.records import Film, Forecast, Happening, Place

logger = logging.getLogger(__name__)


class ResourceKind:
    """One cached resource: its table, the column it is looked up by, and its record type."""

    __slots__ = ("name", "model", "key_column", "record")

    def __init__(self, *, name: str, model: type, key_column: str, record: type) -> None:
        self.name = name
        self.model = model
        self.key_column = key_column
        self.record = record

    def __repr__(self) -> str:
        return f"ResourceKind({self.name!r})"


PLACE = ResourceKind(name="location", model=Location, key_column="search_query", record=Place)
FORECAST = ResourceKind(name="weather", model=Weather, key_column="location_id", record=Forecast)
HAPPENING = ResourceKind(name="events", model=Event, key_column="location_id", record=Happening)
FILM = ResourceKind(name="movies", model=Movie, key_column="location_id", record=Film)


class StoreGateway:
    """Narrow read/write interface over the database for cached resources."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    def _insert_stmt(self, model: type):
        """Dialect insert construct; both support on_conflict_do_nothing."""
        dialect = self._db.get_bind().dialect.name
        if dialect == "postgresql":
            return pg_insert(model)
        if dialect == "sqlite":
            return sqlite_insert(model)
        raise StoreError(f"insert-or-ignore not supported for dialect {dialect!r}")

    async def find(self, kind: ResourceKind, column: str, value: Any) -> list[Any]:
        """Rows where column == value, oldest first. Empty list on a miss."""
        col = getattr(kind.model, column)
        stmt = select(kind.model).where(col == value).order_by(kind.model.id)
        try:
            result = await self._db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise StoreError(f"find {kind.name} by {column} failed: {e}") from e

    async def insert_ignore_conflict(self, kind: ResourceKind, fields: dict[str, Any]) -> int | None:
        """
        INSERT ... ON CONFLICT (key) DO NOTHING RETURNING id.
        Returns the new id, or None when a row with the same key already exists.
        """
        stmt = (
            self._insert_stmt(kind.model)
            .values(**fields)
            .on_conflict_do_nothing(index_elements=[kind.key_column])
            .returning(kind.model.id)
        )
        try:
            result = await self._db.execute(stmt)
            new_id = result.scalar_one_or_none()
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise StoreError(f"insert {kind.name} failed: {e}") from e
        if new_id is None:
            logger.debug("Insert %s skipped: %s=%r already stored", kind.name, kind.key_column, fields.get(kind.key_column))
        return new_id

    async def insert_many(self, kind: ResourceKind, rows: list[dict[str, Any]]) -> None:
        """Plain bulk insert for child kinds. No id returned, no conflict handling."""
        if not rows:
            return
        try:
            await self._db.execute(insert(kind.model), rows)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise StoreError(f"insert {len(rows)} {kind.name} rows failed: {e}") from e
