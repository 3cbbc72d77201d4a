"""Eventbrite search: address text -> Happenings."""
import logging
from typing import Any

import httpx

from city_explorer.config import Settings
from city_explorer.services.providers.client import entries, as_text
from city_explorer.services.records import Happening, LocationRef, date_string_from_iso

logger = logging.getLogger(__name__)


def parse_happening(event: dict[str, Any], location_id: int | None) -> Happening:
    name = event.get("name")
    start = event.get("start")
    summary = event.get("summary")
    if not summary and isinstance(event.get("description"), dict):
        summary = event["description"].get("text")
    return Happening(
        link=as_text(event.get("url")),
        name=as_text(name.get("text")) if isinstance(name, dict) else as_text(name),
        event_date=date_string_from_iso(start.get("local")) if isinstance(start, dict) else "",
        summary=as_text(summary),
        location_id=location_id,
    )


class EventsProvider:
    provider_id = "events"

    def __init__(self, settings: Settings) -> None:
        self._token = settings.eventbrite_api_key
        self._base_url = settings.events_base_url

    def build_request(self, client: httpx.AsyncClient, query: LocationRef) -> httpx.Request:
        params = {"token": self._token, "location.address": query.formatted_query}
        return client.build_request("GET", self._base_url, params=params)

    def parse(self, payload: Any, query: LocationRef) -> list[Happening]:
        results: list[Happening] = []
        for event in entries(payload, self.provider_id, "events"):
            if not isinstance(event, dict):
                logger.debug("Events skip malformed event: %r", event)
                continue
            results.append(parse_happening(event, query.id))
        return results
