"""
The four resource lookups the routes call.

Each one is resolve() with a kind and a miss handler; the miss handler fetches from
the kind's provider, persists what came back, and returns it. Nothing is written
when the provider call fails.
"""
import logging

import httpx

from city_explorer.core.errors import NotFoundError, StoreError
from city_explorer.services.providers import fetch, get_provider
from city_explorer.services.records import Film, Forecast, Happening, LocationRef, Place
from city_explorer.services.resolver import resolve
from city_explorer.services.store import FILM, FORECAST, HAPPENING, PLACE, ResourceKind, StoreGateway

logger = logging.getLogger(__name__)


async def lookup_location(gateway: StoreGateway, client: httpx.AsyncClient, search_query: str) -> Place:
    """Place for a free-text search. Geocodes and stores it the first time the text is seen."""

    async def on_miss(query: str) -> list[Place]:
        places = await fetch(client, get_provider(PLACE.name), query)
        if not places:
            raise NotFoundError(f"no geocode results for {query!r}")
        place = places[0]
        new_id = await gateway.insert_ignore_conflict(PLACE, place.to_row())
        if new_id is not None:
            return [place.model_copy(update={"id": new_id})]
        # Lost an insert race with a concurrent first lookup: return the stored row.
        rows = await gateway.find(PLACE, PLACE.key_column, query)
        if not rows:
            raise StoreError(f"location {query!r} neither inserted nor found")
        return [Place.from_row(rows[0])]

    places = await resolve(gateway, PLACE, search_query, on_miss)
    return places[0]


async def _lookup_children(
    gateway: StoreGateway,
    client: httpx.AsyncClient,
    kind: ResourceKind,
    location: LocationRef,
) -> list:
    async def on_miss(location_id: int) -> list:
        records = await fetch(client, get_provider(kind.name), location)
        await gateway.insert_many(kind, [r.to_row() for r in records])
        logger.info("Stored %d %s rows for location_id=%s", len(records), kind.name, location_id)
        return records

    return await resolve(gateway, kind, location.id, on_miss)


async def lookup_weather(gateway: StoreGateway, client: httpx.AsyncClient, location: LocationRef) -> list[Forecast]:
    return await _lookup_children(gateway, client, FORECAST, location)


async def lookup_events(gateway: StoreGateway, client: httpx.AsyncClient, location: LocationRef) -> list[Happening]:
    return await _lookup_children(gateway, client, HAPPENING, location)


async def lookup_movies(gateway: StoreGateway, client: httpx.AsyncClient, location: LocationRef) -> list[Film]:
    return await _lookup_children(gateway, client, FILM, location)
