"""Protocol for resource providers. Every provider returns canonical records."""
from typing import Any, Protocol

import httpx


class ResourceProvider(Protocol):
    """Interface for geocode, weather, events and movies. Same contract; only the payload differs."""

    @property
    def provider_id(self) -> str:
        """Unique id (e.g. 'geocode', 'weather') used in logs and ProviderError."""
        ...

    def build_request(self, client: httpx.AsyncClient, query: Any) -> httpx.Request:
        """Provider request for one lookup key."""
        ...

    def parse(self, payload: Any, query: Any) -> list[Any]:
        """
        Decode a provider JSON body into zero or more canonical records.
        Raises ProviderError when the body does not have the expected shape.
        """
        ...
