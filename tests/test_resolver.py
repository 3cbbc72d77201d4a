"""Tests for the cache-aside resolver."""

import pytest

from city_explorer.core.errors import ProviderError
from city_explorer.services.records import Forecast, Place
from city_explorer.services.resolver import resolve
from city_explorer.services.store import FORECAST, PLACE


class MissHandler:
    """Records calls; returns canned records or raises."""

    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls = []

    async def __call__(self, key):
        self.calls.append(key)
        if self.error:
            raise self.error
        return self.records


class TestResolve:
    """Tests for resolve()."""

    async def test_hit_decodes_rows_and_skips_handler(self, gateway):
        await gateway.insert_many(FORECAST, [
            {"forecast": "Dry.", "time": "Mon Oct 19 2026", "location_id": 3},
        ])
        handler = MissHandler()
        result = await resolve(gateway, FORECAST, 3, handler)
        assert result == [Forecast(forecast="Dry.", time="Mon Oct 19 2026", location_id=3)]
        assert handler.calls == []

    async def test_miss_calls_handler_once_with_key(self, gateway):
        place = Place(id=1, search_query="Seattle", formatted_query="Seattle, WA, USA", latitude=47.6, longitude=-122.3)
        handler = MissHandler(records=[place])
        result = await resolve(gateway, PLACE, "Seattle", handler)
        assert result == [place]
        assert handler.calls == ["Seattle"]

    async def test_key_is_scoped_to_kind_column(self, gateway):
        await gateway.insert_many(FORECAST, [{"forecast": "x", "time": "", "location_id": 1}])
        handler = MissHandler()
        assert await resolve(gateway, FORECAST, 2, handler) == []
        assert handler.calls == [2]

    async def test_handler_error_propagates(self, gateway):
        handler = MissHandler(error=ProviderError("weather", "HTTP 500"))
        with pytest.raises(ProviderError):
            await resolve(gateway, FORECAST, 1, handler)
