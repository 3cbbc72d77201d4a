import httpx
from fastapi import APIRouter, Depends, Request

from city_explorer.api.deps import get_gateway, get_http_client
from city_explorer.api.params import data_object
from city_explorer.services.lookup import lookup_movies
from city_explorer.services.records import Film, MoviesQuery
from city_explorer.services.store import StoreGateway

router = APIRouter()


@router.get("/movies", response_model=list[Film])
async def get_movies(
    request: Request,
    gateway: StoreGateway = Depends(get_gateway),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Movies matching the location's search text, data = {id, search_query}."""
    return await lookup_movies(gateway, client, data_object(request, MoviesQuery))
