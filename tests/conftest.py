"""Shared pytest fixtures: temporary SQLite store, stubbed provider HTTP, registered providers."""

import httpx
import pytest
from sqlalchemy import func, select

from city_explorer.config import Settings
from city_explorer.db.session import create_engine, create_session_factory, create_tables
from city_explorer.services.providers import init_registry
from city_explorer.services.store import StoreGateway

GEOCODE_HOST = "geocode.test"
WEATHER_HOST = "weather.test"
EVENTS_HOST = "events.test"
MOVIES_HOST = "movies.test"

SEATTLE_GEOCODE = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "Seattle, WA, USA",
            "geometry": {"location": {"lat": 47.6, "lng": -122.3}},
        }
    ],
}

# 2026-10-19 and 2026-10-20, 00:00 UTC
WEATHER_BODY = {
    "daily": {
        "data": [
            {"time": 1792368000, "summary": "Light rain in the morning."},
            {"time": 1792454400, "summary": "Partly cloudy throughout the day."},
        ]
    }
}

EVENTS_BODY = {
    "events": [
        {
            "url": "https://www.eventbrite.com/e/1",
            "name": {"text": "Harbor Lights"},
            "start": {"local": "2026-10-19T19:00:00"},
            "summary": "Boats and lanterns on the bay.",
        },
        {
            "url": "https://www.eventbrite.com/e/2",
            "name": {"text": "Night Market"},
            "start": {"local": "2026-10-21T18:30:00"},
        },
    ]
}

MOVIES_BODY = {
    "results": [
        {
            "title": "Sleepless in Seattle",
            "overview": "A widowed architect and a journalist.",
            "vote_average": 6.6,
            "vote_count": 1432,
            "poster_path": "/afkYP15OeUOD0tFEmj6VvejuOcz.jpg",
            "popularity": 12.5,
            "release_date": "1993-06-24",
        }
    ]
}


class ProviderStub:
    """httpx.MockTransport handler: one canned (status, body) per provider host, records every request."""

    def __init__(self) -> None:
        self.responses: dict[str, tuple[int, object]] = {}
        self.calls: list[httpx.Request] = []

    def set(self, host: str, body: object, status: int = 200) -> None:
        self.responses[host] = (status, body)

    def calls_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.calls if r.url.host == host]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if request.url.host not in self.responses:
            return httpx.Response(404, text="no stub")
        status, body = self.responses[request.url.host]
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'city_explorer.db'}",
        geocode_api_key="geo-key",
        weather_api_key="weather-key",
        eventbrite_api_key="events-key",
        movie_api_key="movies-key",
        geocode_base_url=f"https://{GEOCODE_HOST}/maps/api/geocode/json",
        weather_base_url=f"https://{WEATHER_HOST}/forecast",
        events_base_url=f"https://{EVENTS_HOST}/v3/events/search/",
        movies_base_url=f"https://{MOVIES_HOST}/3/search/movie",
        create_tables=True,
    )


@pytest.fixture(autouse=True)
def registry(settings):
    init_registry(settings)


@pytest.fixture
def providers() -> ProviderStub:
    stub = ProviderStub()
    stub.set(GEOCODE_HOST, SEATTLE_GEOCODE)
    stub.set(WEATHER_HOST, WEATHER_BODY)
    stub.set(EVENTS_HOST, EVENTS_BODY)
    stub.set(MOVIES_HOST, MOVIES_BODY)
    return stub


@pytest.fixture
async def engine(settings):
    engine = create_engine(settings)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
async def gateway(session_factory):
    async with session_factory() as db:
        yield StoreGateway(db)


@pytest.fixture
async def http_client(providers):
    async with httpx.AsyncClient(transport=httpx.MockTransport(providers)) as client:
        yield client


async def count_rows(session_factory, model) -> int:
    async with session_factory() as db:
        return (await db.execute(select(func.count()).select_from(model))).scalar_one()
