"""Dark Sky style forecast: coordinates -> one Forecast per day."""
import logging
from typing import Any

import httpx

from city_explorer.config import Settings
from city_explorer.services.providers.client import entries, as_text
from city_explorer.services.records import Forecast, LocationRef, date_string_from_unix

logger = logging.getLogger(__name__)


def parse_forecast(day: dict[str, Any], location_id: int | None) -> Forecast:
    t = day.get("time")
    return Forecast(
        forecast=as_text(day.get("summary")),
        time=date_string_from_unix(t) if isinstance(t, (int, float)) else "",
        location_id=location_id,
    )


class WeatherProvider:
    provider_id = "weather"

    def __init__(self, settings: Settings) -> None:
        self._api_key = settings.weather_api_key
        self._base_url = settings.weather_base_url.rstrip("/")

    def build_request(self, client: httpx.AsyncClient, query: LocationRef) -> httpx.Request:
        url = f"{self._base_url}/{self._api_key}/{query.latitude},{query.longitude}"
        return client.build_request("GET", url)

    def parse(self, payload: Any, query: LocationRef) -> list[Forecast]:
        results: list[Forecast] = []
        for day in entries(payload, self.provider_id, "daily", "data"):
            if not isinstance(day, dict):
                logger.debug("Weather skip malformed day: %r", day)
                continue
            results.append(parse_forecast(day, query.id))
        return results
