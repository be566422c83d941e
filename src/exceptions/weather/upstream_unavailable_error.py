from src.exceptions.weather.weather_service_error import WeatherServiceError


class UpstreamUnavailableError(WeatherServiceError):
    """Exception for network failures while reaching the provider."""

    pass


class UpstreamTimeoutError(UpstreamUnavailableError):
    """Exception for provider requests that exceed the configured timeout."""

    pass
