from typing import List, Optional

from pydantic import BaseModel, Field


class WeatherCondition(BaseModel):
    """Weather condition details."""

    id: Optional[int] = Field(None, description="Weather condition ID")
    main: Optional[str] = Field(None, description="Main weather condition (e.g., Rain, Snow, Clear)")
    description: str = Field(..., description="Detailed weather description")
    icon: Optional[str] = Field(None, description="Weather icon code")


class CurrentConditions(BaseModel):
    """Current weather block of a One Call payload."""

    temp: float = Field(..., description="Current temperature")
    feels_like: float = Field(..., description="Human perception of temperature")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")
    wind_speed: float = Field(..., ge=0, description="Wind speed")
    wind_deg: int = Field(0, ge=0, le=360, description="Wind direction in degrees")
    weather: List[WeatherCondition] = Field(..., min_length=1, description="Weather conditions")


class DailyTemperature(BaseModel):
    """Daily temperature range."""

    min: float = Field(..., description="Minimum temperature")
    max: float = Field(..., description="Maximum temperature")


class DailyForecast(BaseModel):
    """One day of a One Call daily forecast."""

    pop: float = Field(0.0, ge=0, description="Probability of precipitation")
    summary: str = Field("", description="Human-readable summary of the day")
    temp: DailyTemperature = Field(..., description="Temperature range")
    weather: List[WeatherCondition] = Field(..., min_length=1, description="Weather conditions")


class OneCallForecast(BaseModel):
    """The parts of a One Call 3.0 payload needed to render a report."""

    current: CurrentConditions = Field(..., description="Current conditions")
    daily: List[DailyForecast] = Field(..., min_length=1, description="Daily forecast, today first")
