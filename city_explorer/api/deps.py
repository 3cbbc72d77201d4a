"""FastAPI dependencies: per-request gateway, shared provider client."""
import httpx
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from city_explorer.db.session import get_db
from city_explorer.services.store import StoreGateway


def get_gateway(db: AsyncSession = Depends(get_db)) -> StoreGateway:
    return StoreGateway(db)


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
