from src.exceptions.weather.weather_service_error import WeatherServiceError


class InvalidCityError(WeatherServiceError):
    """Exception for locations the provider cannot resolve."""

    pass
