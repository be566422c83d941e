from src.exceptions.base import WeatherProxyError


class ProxyClientError(WeatherProxyError):
    """Exception for failures while talking to the weather proxy."""

    pass
