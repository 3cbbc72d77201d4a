"""
Canonical records: the shape we store and send, independent of any provider's payload.

Each record decodes from a stored row (from_row) and encodes to column values (to_row).
Construction from provider payloads lives with the adapter that knows the payload
(services/providers/*).
"""
from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel


def to_date_string(value: datetime | date) -> str:
    """Calendar date as sent to clients, e.g. 'Mon Oct 19 2026'."""
    return value.strftime("%a %b %d %Y")


def date_string_from_unix(seconds: int | float) -> str:
    """Empty string when the timestamp is outside the platform's datetime range."""
    try:
        return to_date_string(datetime.fromtimestamp(seconds, tz=timezone.utc))
    except (OverflowError, OSError, ValueError):
        return ""


def date_string_from_iso(value: str) -> str:
    """'2026-10-19T19:00:00' -> 'Mon Oct 19 2026'. Empty string when unparseable."""
    try:
        return to_date_string(datetime.fromisoformat(value))
    except (TypeError, ValueError):
        return ""


class Place(BaseModel):
    """A geocoded search. id is assigned by the store on first insert."""

    id: int | None = None
    search_query: str
    formatted_query: str = ""
    latitude: float
    longitude: float

    @classmethod
    def from_row(cls, row: Any) -> "Place":
        return cls(
            id=row.id,
            search_query=row.search_query,
            formatted_query=row.formatted_query or "",
            latitude=row.latitude,
            longitude=row.longitude,
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "search_query": self.search_query,
            "formatted_query": self.formatted_query,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


class Forecast(BaseModel):
    forecast: str = ""
    time: str = ""
    location_id: int | None = None

    @classmethod
    def from_row(cls, row: Any) -> "Forecast":
        return cls(forecast=row.forecast or "", time=row.time or "", location_id=row.location_id)

    def to_row(self) -> dict[str, Any]:
        return {"forecast": self.forecast, "time": self.time, "location_id": self.location_id}


class Happening(BaseModel):
    link: str = ""
    name: str = ""
    event_date: str = ""
    summary: str = ""
    location_id: int | None = None

    @classmethod
    def from_row(cls, row: Any) -> "Happening":
        return cls(
            link=row.link or "",
            name=row.name or "",
            event_date=row.event_date or "",
            summary=row.summary or "",
            location_id=row.location_id,
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "link": self.link,
            "name": self.name,
            "event_date": self.event_date,
            "summary": self.summary,
            "location_id": self.location_id,
        }


class Film(BaseModel):
    title: str = ""
    overview: str = ""
    average_votes: float = 0.0
    total_votes: int = 0
    image_url: str = ""
    popularity: float = 0.0
    released_on: date | None = None
    location_id: int | None = None

    @classmethod
    def from_row(cls, row: Any) -> "Film":
        return cls(
            title=row.title or "",
            overview=row.overview or "",
            average_votes=row.average_votes or 0.0,
            total_votes=row.total_votes or 0,
            image_url=row.image_url or "",
            popularity=row.popularity or 0.0,
            released_on=row.released_on,
            location_id=row.location_id,
        )

    def to_row(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "overview": self.overview,
            "average_votes": self.average_votes,
            "total_votes": self.total_votes,
            "image_url": self.image_url,
            "popularity": self.popularity,
            "released_on": self.released_on,
            "location_id": self.location_id,
        }


# ---------------------------------------------------------------------------
# Inbound references to an already-resolved Place (the `data` object clients send)
# ---------------------------------------------------------------------------


class LocationRef(BaseModel):
    id: int
    search_query: str = ""
    formatted_query: str = ""
    latitude: float | None = None
    longitude: float | None = None


class WeatherQuery(LocationRef):
    latitude: float
    longitude: float


class EventsQuery(LocationRef):
    formatted_query: str


class MoviesQuery(LocationRef):
    search_query: str
