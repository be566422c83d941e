from src.models.weather.forecast import OneCallForecast
from src.models.weather.weather import (
    ErrorResponse,
    GeoLocation,
    WeatherRequest,
    WeatherResponse,
)

__all__ = [
    "ErrorResponse",
    "GeoLocation",
    "OneCallForecast",
    "WeatherRequest",
    "WeatherResponse",
]
