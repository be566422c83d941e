from src.exceptions.config.api_key_error import WeatherAPIKeyError

__all__ = ["WeatherAPIKeyError"]
