from typing import Any, Dict

import httpx
import structlog
from pydantic import ValidationError

from src.config.config import config
from src.exceptions.weather import (
    APIRequestError,
    InvalidCityError,
    RateLimitError,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from src.models.weather.weather import GeoLocation, WeatherRequest, WeatherResponse
from src.utils.singleton import Singleton

logger = structlog.get_logger(__name__)

REDACTED = "***"


class WeatherService(Singleton):
    """
    Service for fetching weather data from the OpenWeatherMap API.

    This service is the only holder of the provider API key. It resolves a
    city to coordinates with the geocoding endpoint, then fetches the One Call
    forecast for those coordinates. Requests are made once; failures are
    surfaced to the caller as WeatherServiceError subclasses.
    """

    def __init__(self):
        """Initialize the weather service."""
        super().__init__()

        if hasattr(self, "_weather_initialized"):
            return

        self.geocoding_url = config.openweather_geocoding_url
        self.onecall_url = config.openweather_onecall_url
        self.units = config.openweather_units
        self.exclude = config.openweather_exclude
        self._api_key = config.openweathermap_api_key

        # HTTP client configuration
        self.timeout = httpx.Timeout(
            config.upstream_timeout_seconds, connect=config.upstream_connect_timeout_seconds
        )

        self._weather_initialized = True

    def _auth_params(self) -> Dict[str, str]:
        """Query parameters carrying the provider key. Never log or return these."""
        return {"appid": self._api_key.get_secret_value()}

    def redact(self, text: str) -> str:
        """Mask any occurrence of the provider key in text."""
        secret = self._api_key.get_secret_value()
        if not secret:
            return text
        return text.replace(secret, REDACTED)

    async def _make_request(self, url: str, params: Dict[str, Any]) -> Any:
        """
        Make a single HTTP GET request to an OpenWeatherMap endpoint.

        Args:
            url: Endpoint URL
            params: Query parameters, without the API key

        Returns:
            Decoded JSON response from the API

        Raises:
            InvalidCityError: If the provider answers 404
            RateLimitError: If the provider answers 429
            APIRequestError: For 401 and any other non-success status
            UpstreamTimeoutError: If the request times out
            UpstreamUnavailableError: If the provider cannot be reached
            UpstreamResponseError: If the body is not valid JSON
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                logger.info("Making API request", url=url, params=params)

                response = await client.get(url, params={**params, **self._auth_params()})

        except httpx.TimeoutException:
            logger.warning("Request timeout", url=url)
            raise UpstreamTimeoutError("Weather provider did not respond in time")

        except httpx.RequestError as e:
            # httpx error text can carry the request URL, and with it the key
            logger.warning("Request error", url=url, error_type=type(e).__name__)
            raise UpstreamUnavailableError(
                f"Weather provider could not be reached ({type(e).__name__})"
            )

        if response.status_code == 404:
            raise InvalidCityError(f"Invalid city or request: {self.redact(response.text)}")
        elif response.status_code == 401:
            logger.error("Provider rejected the configured API key")
            raise APIRequestError("Weather provider rejected the request")
        elif response.status_code == 429:
            raise RateLimitError("Weather provider rate limit exceeded")
        elif not response.is_success:
            logger.warning(
                "API request failed",
                status_code=response.status_code,
                response_text=self.redact(response.text),
            )
            raise APIRequestError(
                f"Weather provider returned status {response.status_code}"
            )

        try:
            return response.json()
        except ValueError:
            logger.error("Failed to decode provider response", url=url)
            raise UpstreamResponseError("Weather provider returned an unreadable response")

    async def geocode(self, request: WeatherRequest) -> GeoLocation:
        """
        Resolve a city and optional country code to coordinates.

        Args:
            request: Validated weather request

        Returns:
            GeoLocation of the best match

        Raises:
            InvalidCityError: If the provider returns no match
            UpstreamResponseError: If the geocoding payload has an unexpected shape
        """
        params = {"q": request.geocoding_query(), "limit": 1}
        data = await self._make_request(self.geocoding_url, params)

        if not isinstance(data, list):
            raise UpstreamResponseError("Unexpected geocoding response from weather provider")
        if not data:
            raise InvalidCityError("Unable to get location coordinates")

        try:
            return GeoLocation(**data[0])
        except (TypeError, ValidationError) as e:
            logger.error("Failed to parse geocoding data", error=str(e))
            raise UpstreamResponseError("Invalid location data received from weather provider")

    async def get_forecast(self, location: GeoLocation) -> Dict[str, Any]:
        """
        Fetch the One Call forecast for a location.

        The payload is returned as-is; only its top-level type is checked.
        """
        params = {
            "lat": location.lat,
            "lon": location.lon,
            "units": self.units,
            "exclude": self.exclude,
        }
        data = await self._make_request(self.onecall_url, params)

        if not isinstance(data, dict):
            raise UpstreamResponseError("Unexpected forecast response from weather provider")
        return data

    async def get_weather(self, request: WeatherRequest) -> WeatherResponse:
        """
        Get weather data for the requested city.

        Args:
            request: Validated weather request

        Returns:
            WeatherResponse with the raw forecast, today's description and the city

        Raises:
            WeatherServiceError: For any upstream failure
        """
        logger.info("Fetching weather", city=request.city, country_code=request.country_code)

        location = await self.geocode(request)
        weather_data = await self.get_forecast(location)
        weather_response = WeatherResponse.from_onecall_response(weather_data, request.city)

        logger.info(
            "Successfully fetched weather",
            city=request.city,
            description=weather_response.daily_weather_description,
        )
        return weather_response


weather_service = WeatherService()
