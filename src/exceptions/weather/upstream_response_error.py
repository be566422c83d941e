from src.exceptions.weather.weather_service_error import WeatherServiceError


class UpstreamResponseError(WeatherServiceError):
    """Exception for provider responses that cannot be parsed."""

    pass
