import httpx
from fastapi import APIRouter, Depends, Request

from city_explorer.api.deps import get_gateway, get_http_client
from city_explorer.api.params import data_object
from city_explorer.services.lookup import lookup_weather
from city_explorer.services.records import Forecast, WeatherQuery
from city_explorer.services.store import StoreGateway

router = APIRouter()


@router.get("/weather", response_model=list[Forecast])
async def get_weather(
    request: Request,
    gateway: StoreGateway = Depends(get_gateway),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Daily forecasts for data = {id, latitude, longitude}."""
    return await lookup_weather(gateway, client, data_object(request, WeatherQuery))
