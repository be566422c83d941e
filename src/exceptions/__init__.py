from src.exceptions.base import WeatherProxyError

__all__ = ["WeatherProxyError"]
