"""Registry of resource providers, keyed by resource kind name. Add new providers here."""
import logging
from typing import Any

from city_explorer.config import Settings

logger = logging.getLogger(__name__)

_providers: dict[str, Any] = {}


def register(name: str, provider: Any) -> None:
    """Register a provider under a kind name (e.g. 'location', 'weather')."""
    _providers[name] = provider
    logger.info("Registered resource provider: %s", name)


def get_provider(name: str) -> Any:
    """Get provider by kind name. Raises KeyError if unknown."""
    if name not in _providers:
        raise KeyError(f"Unknown provider: {name}. Available: {list(_providers.keys())}")
    return _providers[name]


def list_providers() -> list[str]:
    """List registered kind names."""
    return list(_providers.keys())


def init_registry(settings: Settings) -> None:
    """Register the built-in providers with credentials from settings. Called from the app lifespan."""
    from city_explorer.services.providers.events_provider import EventsProvider
    from city_explorer.services.providers.geocode_provider import GeocodeProvider
    from city_explorer.services.providers.movies_provider import MoviesProvider
    from city_explorer.services.providers.weather_provider import WeatherProvider

    register("location", GeocodeProvider(settings))
    register("weather", WeatherProvider(settings))
    register("events", EventsProvider(settings))
    register("movies", MoviesProvider(settings))
