from src.exceptions.weather.api_request_error import APIRequestError
from src.exceptions.weather.invalid_city_error import InvalidCityError
from src.exceptions.weather.rate_limit_error import RateLimitError
from src.exceptions.weather.upstream_response_error import UpstreamResponseError
from src.exceptions.weather.upstream_unavailable_error import (
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from src.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "APIRequestError",
    "InvalidCityError",
    "RateLimitError",
    "UpstreamResponseError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
    "WeatherServiceError",
]
