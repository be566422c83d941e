from src.exceptions.weather.weather_service_error import WeatherServiceError


class RateLimitError(WeatherServiceError):
    """Exception for provider rate limit responses."""

    pass
