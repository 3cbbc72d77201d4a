"""Shared provider call: send, check status, decode JSON, hand the body to the provider's parser."""
import logging
from typing import Any

import httpx

from city_explorer.core.errors import ProviderError
from city_explorer.services.providers.base import ResourceProvider

logger = logging.getLogger(__name__)


async def fetch(client: httpx.AsyncClient, provider: ResourceProvider, query: Any) -> list[Any]:
    """
    Call the provider for one key and return its canonical records.
    Transport errors, timeouts, non-2xx and non-JSON bodies raise ProviderError.
    """
    request = provider.build_request(client, query)
    try:
        resp = await client.send(request)
    except httpx.HTTPError as e:
        raise ProviderError(provider.provider_id, f"request failed: {e!r}") from e
    if not resp.is_success:
        raise ProviderError(
            provider.provider_id,
            f"HTTP {resp.status_code}: {resp.text[:500] if resp.text else ''}",
            status_code=resp.status_code,
        )
    try:
        payload = resp.json()
    except ValueError as e:
        raise ProviderError(provider.provider_id, "response body is not JSON") from e
    records = provider.parse(payload, query)
    logger.debug("%s returned %d records", provider.provider_id, len(records))
    return records


def entries(payload: Any, provider_id: str, *path: str) -> list[Any]:
    """
    Walk dict keys in path and return the list found there.
    Raises ProviderError when any step is missing or the leaf is not a list.
    """
    node = payload
    for key in path:
        if not isinstance(node, dict) or key not in node:
            raise ProviderError(provider_id, f"response missing {'.'.join(path)}")
        node = node[key]
    if not isinstance(node, list):
        raise ProviderError(provider_id, f"{'.'.join(path)} is not a list")
    return node


def as_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def as_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""
