from enum import Enum
from typing import Optional, Tuple

from src.models.weather.forecast import DailyForecast, OneCallForecast

class WeatherType(str, Enum):
    """Coarse condition category used to pick the desktop app's artwork."""

    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    FOG = "fog"


CARDINAL_DIRECTIONS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]


def degrees_to_cardinal(degrees: float) -> str:
    """Map a wind bearing in degrees to one of 16 compass points."""
    index = int((degrees + 11.25) / 22.5) % 16
    return CARDINAL_DIRECTIONS[index]


def capitalize_first_letter(text: str) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:]


def chance_of_precipitation(day: Optional[DailyForecast]) -> float:
    """Probability of precipitation as a rounded percentage, clamped to 100."""
    if day is None:
        return 0.0
    return float(round(min(day.pop, 1.0) * 100))


def precipitation_label(day: Optional[DailyForecast]) -> str:
    if day is not None and "snow" in day.weather[0].description.lower():
        return "Snow"
    return "Rain"


def format_weather_report(forecast: OneCallForecast) -> Tuple[str, str]:
    """
    Render a One Call forecast as a multi-line report.

    Temperatures and wind speed are labelled in imperial units, matching the
    proxy's default `openweather_units`.

    Args:
        forecast: Parsed One Call payload

    Returns:
        Tuple of (report text, today's description with a capitalised first letter)
    """
    current = forecast.current
    today = forecast.daily[0]
    tomorrow = forecast.daily[1] if len(forecast.daily) > 1 else None

    daily_description = capitalize_first_letter(today.weather[0].description)

    lines = [
        f"Summary: {today.summary}",
        f"Current weather: {current.weather[0].description}",
        f"Temperature: {current.temp:.1f}°F (Feels like {current.feels_like:.1f}°F)",
        f"High: {today.temp.max:.1f}°F",
        f"Low: {today.temp.min:.1f}°F",
        f"Humidity: {current.humidity}%",
        f"Wind: {current.wind_speed:.1f} mph {degrees_to_cardinal(current.wind_deg)}",
        f"Chance of {precipitation_label(today)} Today: {chance_of_precipitation(today):.0f}%",
        f"Chance of {precipitation_label(tomorrow)} Tomorrow: {chance_of_precipitation(tomorrow):.0f}%",
    ]
    return "\n".join(lines), daily_description


def determine_weather_type(description: str) -> WeatherType:
    """
    Classify a provider condition description.

    Keywords are checked in priority order, so "rain and snow" is SNOW and
    "partly cloudy" matches CLOUDY before PARTLY_CLOUDY.
    """
    text = description.lower()
    if "snow" in text:
        return WeatherType.SNOW
    if "rain" in text or "drizzle" in text:
        return WeatherType.RAIN
    if "thunder" in text or "storm" in text:
        return WeatherType.THUNDERSTORM
    if "fog" in text or "mist" in text:
        return WeatherType.FOG
    if "cloudy" in text or "overcast" in text:
        return WeatherType.CLOUDY
    if "partly" in text or "few clouds" in text or "scattered" in text:
        return WeatherType.PARTLY_CLOUDY
    return WeatherType.CLEAR
