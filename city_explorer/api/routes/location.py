"""
Location: free-text search -> geocoded Place, cached by search text.
"""
import httpx
from fastapi import APIRouter, Depends, Request

from city_explorer.api.deps import get_gateway, get_http_client
from city_explorer.api.params import data_text
from city_explorer.services.lookup import lookup_location
from city_explorer.services.records import Place
from city_explorer.services.store import StoreGateway

router = APIRouter()


@router.get("/location", response_model=Place)
async def get_location(
    request: Request,
    gateway: StoreGateway = Depends(get_gateway),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Place for ?data=<search text>. Same id on every call for the same text."""
    return await lookup_location(gateway, client, data_text(request))
