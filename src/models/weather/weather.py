from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

UNKNOWN_DESCRIPTION = "Unknown"


class WeatherRequest(BaseModel):
    """Inbound proxy request: a city and an optional country code."""

    city: str = Field(..., description="City name to look up", examples=["New York"])
    country_code: Optional[str] = Field(
        None, description="Optional ISO 3166 country code", examples=["US"]
    )

    @field_validator("city")
    def validate_city(cls, v):
        """Reject empty or whitespace-only city names; the value itself is kept as sent."""
        if not v.strip():
            raise ValueError("City is required")
        return v

    @field_validator("country_code")
    def normalize_country_code(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None

    def geocoding_query(self) -> str:
        """Build the `q` parameter for the provider's direct geocoding endpoint."""
        city = self.city.strip()
        if self.country_code:
            return f"{city},{self.country_code}"
        return city


class WeatherResponse(BaseModel):
    """Proxy response relayed back to the client."""

    weather_data: Dict[str, Any] = Field(..., description="Provider One Call payload, verbatim")
    daily_weather_description: str = Field(
        ..., description="Today's condition summary taken from the payload"
    )
    city: str = Field(..., description="City echoed from the request")

    @staticmethod
    def extract_daily_description(weather_data: Dict[str, Any]) -> str:
        """
        Pull today's condition description out of a One Call payload.

        Args:
            weather_data: Raw provider payload

        Returns:
            The value at daily[0].weather[0].description, or "Unknown" if the
            payload does not carry one.
        """
        try:
            description = weather_data["daily"][0]["weather"][0]["description"]
        except (KeyError, IndexError, TypeError):
            return UNKNOWN_DESCRIPTION
        return description if isinstance(description, str) else UNKNOWN_DESCRIPTION

    @classmethod
    def from_onecall_response(cls, weather_data: Dict[str, Any], city: str) -> "WeatherResponse":
        return cls(
            weather_data=weather_data,
            daily_weather_description=cls.extract_daily_description(weather_data),
            city=city,
        )


class GeoLocation(BaseModel):
    """A single result from the provider's direct geocoding endpoint."""

    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lon: float = Field(..., ge=-180, le=180, description="Longitude")
    name: Optional[str] = Field(None, description="Resolved location name")
    country: Optional[str] = Field(None, description="Country code")
    state: Optional[str] = Field(None, description="State or region, when provided")


class ErrorResponse(BaseModel):
    """Body returned for every error response."""

    error: Any = Field(..., description="Error detail")
    status_code: int = Field(..., description="HTTP status code")
    timestamp: float = Field(..., description="Unix time the error was produced")


