"""
Cache-aside resolver shared by every resource.

Read the store by the kind's key column; on a hit decode the rows, on a miss hand
the key to the caller's miss handler (fetch + shape + persist) and return what it
produced. Store errors propagate; there is no retry.
"""
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from city_explorer.services.store import ResourceKind, StoreGateway

logger = logging.getLogger(__name__)

MissHandler = Callable[[Any], Awaitable[list[Any]]]


async def resolve(
    gateway: StoreGateway,
    kind: ResourceKind,
    key: Any,
    miss_handler: MissHandler,
) -> list[Any]:
    rows = await gateway.find(kind, kind.key_column, key)
    if rows:
        logger.debug("Cache hit: %s %s=%r (%d rows)", kind.name, kind.key_column, key, len(rows))
        return [kind.record.from_row(row) for row in rows]
    logger.info("Cache miss: %s %s=%r; calling provider", kind.name, kind.key_column, key)
    return await miss_handler(key)
