"""TMDB movie search. The location's search text doubles as the movie query."""
import logging
from datetime import date
from typing import Any

import httpx

from city_explorer.config import Settings
from city_explorer.services.providers.client import as_float, as_int, as_text, entries
from city_explorer.services.records import Film, LocationRef

logger = logging.getLogger(__name__)

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"


def _release_date(movie: dict[str, Any]) -> date | None:
    raw = movie.get("release_date") or movie.get("released_date")
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def parse_film(movie: dict[str, Any], location_id: int | None) -> Film:
    poster = as_text(movie.get("poster_path"))
    return Film(
        title=as_text(movie.get("title")),
        overview=as_text(movie.get("overview")),
        average_votes=as_float(movie.get("vote_average")),
        total_votes=as_int(movie.get("vote_count")),
        image_url=TMDB_IMAGE_BASE_URL + poster if poster else "",
        popularity=as_float(movie.get("popularity")),
        released_on=_release_date(movie),
        location_id=location_id,
    )


class MoviesProvider:
    provider_id = "movies"

    def __init__(self, settings: Settings) -> None:
        self._api_key = settings.movie_api_key
        self._base_url = settings.movies_base_url

    def build_request(self, client: httpx.AsyncClient, query: LocationRef) -> httpx.Request:
        params = {
            "api_key": self._api_key,
            "language": "en-US",
            "query": query.search_query,
            "page": 1,
            "include_adult": "false",
        }
        return client.build_request("GET", self._base_url, params=params)

    def parse(self, payload: Any, query: LocationRef) -> list[Film]:
        results: list[Film] = []
        for movie in entries(payload, self.provider_id, "results"):
            if not isinstance(movie, dict):
                logger.debug("Movies skip malformed result: %r", movie)
                continue
            results.append(parse_film(movie, query.id))
        return results
