from city_explorer.models.event import Event
from city_explorer.models.location import Location
from city_explorer.models.movie import Movie
from city_explorer.models.weather import Weather

__all__ = [
    "Event",
    "Location",
    "Movie",
    "Weather",
]
