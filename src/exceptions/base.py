class WeatherProxyError(Exception):
    """Base exception for all weather proxy errors."""

    pass
