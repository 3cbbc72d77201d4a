import httpx
from fastapi import APIRouter, Depends, Request

from city_explorer.api.deps import get_gateway, get_http_client
from city_explorer.api.params import data_object
from city_explorer.services.lookup import lookup_events
from city_explorer.services.records import EventsQuery, Happening
from city_explorer.services.store import StoreGateway

router = APIRouter()


@router.get("/events", response_model=list[Happening])
async def get_events(
    request: Request,
    gateway: StoreGateway = Depends(get_gateway),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Events near data = {id, formatted_query}."""
    return await lookup_events(gateway, client, data_object(request, EventsQuery))
