"""
Resource providers: geocode, weather, events, movies.
Each provider builds its own request and reads its own payload but returns canonical
records, so the resolver and the store stay provider-agnostic.
"""
from city_explorer.services.providers.base import ResourceProvider
from city_explorer.services.providers.client import fetch
from city_explorer.services.providers.registry import get_provider, init_registry, list_providers

__all__ = [
    "ResourceProvider",
    "fetch",
    "get_provider",
    "init_registry",
    "list_providers",
]
