"""Google Geocoding: free-text address -> one Place."""
import logging
from typing import Any

import httpx

from city_explorer.config import Settings
from city_explorer.core.errors import NotFoundError, ProviderError
from city_explorer.services.providers.client import as_text
from city_explorer.services.records import Place

logger = logging.getLogger(__name__)

# Statuses that carry a (possibly empty) result list; anything else is a provider failure.
_OK_STATUSES = ("OK", "ZERO_RESULTS")


def parse_place(result: Any, search_query: str) -> Place:
    """Build a Place from one geocode result. NotFoundError when it has no coordinates."""
    if not isinstance(result, dict):
        raise NotFoundError(f"no usable geocode result for {search_query!r}")
    location = (result.get("geometry") or {}).get("location") or {}
    lat = location.get("lat")
    lng = location.get("lng")
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        raise NotFoundError(f"geocode result for {search_query!r} has no coordinates")
    return Place(
        search_query=search_query,
        formatted_query=as_text(result.get("formatted_address")),
        latitude=float(lat),
        longitude=float(lng),
    )


class GeocodeProvider:
    provider_id = "geocode"

    def __init__(self, settings: Settings) -> None:
        self._api_key = settings.geocode_api_key
        self._base_url = settings.geocode_base_url

    def build_request(self, client: httpx.AsyncClient, query: str) -> httpx.Request:
        return client.build_request("GET", self._base_url, params={"address": query, "key": self._api_key})

    def parse(self, payload: Any, query: str) -> list[Place]:
        """Only the first result is used."""
        if not isinstance(payload, dict):
            raise ProviderError(self.provider_id, "response is not an object")
        status = payload.get("status")
        if status is not None and status not in _OK_STATUSES:
            raise ProviderError(self.provider_id, f"status {status}: {payload.get('error_message') or ''}")
        results = payload.get("results") or []
        if not isinstance(results, list):
            raise ProviderError(self.provider_id, "results is not a list")
        if not results:
            raise NotFoundError(f"no geocode results for {query!r}")
        return [parse_place(results[0], query)]
