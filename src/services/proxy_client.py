import asyncio
import sys
from typing import Optional, Tuple

import httpx
import structlog
from pydantic import ValidationError

from src.config.client_config import ClientConfig
from src.exceptions.client import ProxyClientError
from src.models.weather.forecast import OneCallForecast
from src.models.weather.weather import WeatherRequest, WeatherResponse
from src.utils.formatting import determine_weather_type, format_weather_report

logger = structlog.get_logger(__name__)


class WeatherProxyClient:
    """
    Client for the weather proxy, as used by the desktop app.

    It looks up the user's city from their IP address, asks the proxy for the
    weather there and renders the result as a text report. The client never
    holds a provider key.
    """

    def __init__(self, client_config: Optional[ClientConfig] = None):
        self.config = client_config or ClientConfig()
        self.base_url = self.config.weather_proxy_url.rstrip("/")

    async def get_user_location(self) -> Tuple[str, str]:
        """
        Resolve the caller's city and country code from their public IP.

        Returns:
            Tuple of (city, country_code), with configured defaults for missing fields

        Raises:
            ProxyClientError: If the lookup service fails
        """
        try:
            async with httpx.AsyncClient(timeout=self.config.location_timeout_seconds) as client:
                response = await client.get(self.config.location_lookup_url)
        except httpx.HTTPError as e:
            raise ProxyClientError(f"Failed to get user location: {e}")

        if not response.is_success:
            raise ProxyClientError("Failed to get user location")

        try:
            data = response.json()
        except ValueError:
            raise ProxyClientError("Failed to get user location")
        if not isinstance(data, dict):
            raise ProxyClientError("Failed to get user location")

        city = data.get("city") or self.config.default_city
        country_code = data.get("countryCode") or self.config.default_country_code

        logger.info("Resolved user location", city=city, country_code=country_code)
        return city, country_code

    async def get_weather(self, city: str, country_code: Optional[str] = None) -> WeatherResponse:
        """
        Ask the proxy for the weather in a city.

        Raises:
            ProxyClientError: If the proxy cannot be reached, errors, or replies with an unexpected body
        """
        request = WeatherRequest(city=city, country_code=country_code)
        url = f"{self.base_url}/api/weather"

        try:
            async with httpx.AsyncClient(timeout=self.config.proxy_timeout_seconds) as client:
                response = await client.post(url, json=request.model_dump(exclude_none=True))
        except httpx.HTTPError as e:
            raise ProxyClientError(
                f"Failed to connect to weather server: {e}. Make sure the proxy server is running."
            )

        if not response.is_success:
            raise ProxyClientError(f"Weather server error: {response.text or 'Unknown error'}")

        try:
            return WeatherResponse(**response.json())
        except (ValueError, TypeError) as e:
            raise ProxyClientError(f"Failed to parse weather server response: {e}")

    async def fetch_weather_report(self) -> Tuple[str, str, str]:
        """
        Fetch and format the weather for the user's current location.

        Returns:
            Tuple of (report text, today's description, city)
        """
        city, country_code = await self.get_user_location()
        weather = await self.get_weather(city, country_code)

        try:
            forecast = OneCallForecast(**weather.weather_data)
        except ValidationError as e:
            raise ProxyClientError(f"Failed to parse weather data: {e}")

        report, _ = format_weather_report(forecast)
        return report, weather.daily_weather_description, weather.city


def main():
    """Print the weather report for the current location."""
    try:
        report, description, city = asyncio.run(WeatherProxyClient().fetch_weather_report())
    except ProxyClientError as e:
        logger.error("Weather report failed", error=str(e))
        sys.exit(1)

    print(f"Weather for {city}: {description} ({determine_weather_type(description).value})")
    print(report)


if __name__ == "__main__":
    main()
