"""Tests for the store gateway."""

import pytest

from city_explorer.core.errors import StoreError
from city_explorer.models import Location, Weather
from city_explorer.services.store import FORECAST, PLACE, StoreGateway
from tests.conftest import count_rows

SEATTLE_ROW = {"search_query": "Seattle", "formatted_query": "Seattle, WA, USA", "latitude": 47.6, "longitude": -122.3}


class TestFind:
    """Tests for StoreGateway.find."""

    async def test_empty_is_miss_not_error(self, gateway):
        assert await gateway.find(PLACE, "search_query", "Seattle") == []

    async def test_rows_in_insert_order(self, gateway):
        await gateway.insert_many(FORECAST, [
            {"forecast": "first", "time": "Mon Oct 19 2026", "location_id": 1},
            {"forecast": "second", "time": "Tue Oct 20 2026", "location_id": 1},
            {"forecast": "other", "time": "Tue Oct 20 2026", "location_id": 2},
        ])
        rows = await gateway.find(FORECAST, "location_id", 1)
        assert [r.forecast for r in rows] == ["first", "second"]


class TestInsertIgnoreConflict:
    """Tests for the insert-or-ignore used for locations."""

    async def test_returns_new_id(self, gateway):
        new_id = await gateway.insert_ignore_conflict(PLACE, SEATTLE_ROW)
        assert isinstance(new_id, int)
        rows = await gateway.find(PLACE, "search_query", "Seattle")
        assert rows[0].id == new_id

    async def test_conflict_returns_none_and_keeps_one_row(self, gateway, session_factory):
        first = await gateway.insert_ignore_conflict(PLACE, SEATTLE_ROW)
        second = await gateway.insert_ignore_conflict(PLACE, {**SEATTLE_ROW, "formatted_query": "changed"})
        assert first is not None
        assert second is None
        assert await count_rows(session_factory, Location) == 1
        rows = await gateway.find(PLACE, "search_query", "Seattle")
        assert rows[0].formatted_query == "Seattle, WA, USA"


class TestInsertMany:
    """Tests for child-row bulk inserts."""

    async def test_empty_is_noop(self, gateway, session_factory):
        await gateway.insert_many(FORECAST, [])
        assert await count_rows(session_factory, Weather) == 0

    async def test_append_only(self, gateway, session_factory):
        row = {"forecast": "Dry.", "time": "Mon Oct 19 2026", "location_id": 1}
        await gateway.insert_many(FORECAST, [row])
        await gateway.insert_many(FORECAST, [row])
        assert await count_rows(session_factory, Weather) == 2

    async def test_constraint_violation_is_store_error(self, gateway):
        with pytest.raises(StoreError):
            await gateway.insert_many(FORECAST, [{"forecast": "no location", "time": ""}])


class TestStoreFailures:
    """Tests for I/O failures surfacing as StoreError."""

    async def test_find_on_missing_table(self, settings):
        from city_explorer.db.session import create_engine, create_session_factory

        engine = create_engine(settings)  # no create_tables: every query fails
        try:
            async with create_session_factory(engine)() as db:
                with pytest.raises(StoreError):
                    await StoreGateway(db).find(PLACE, "search_query", "Seattle")
        finally:
            await engine.dispose()
