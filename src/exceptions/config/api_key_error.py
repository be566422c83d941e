from src.exceptions.base import WeatherProxyError


class WeatherAPIKeyError(WeatherProxyError):
    """Exception for a missing or empty provider API key."""

    pass
