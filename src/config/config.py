from pathlib import Path
from typing import List

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.exceptions.config import WeatherAPIKeyError


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    This class handles all configuration for the weather proxy including the
    provider API key, upstream endpoints, timeouts and server parameters.
    """

    # API Keys
    openweathermap_api_key: SecretStr = Field(
        ..., description="OpenWeatherMap API key, held server-side only"
    )

    # OpenWeatherMap Configuration
    openweather_geocoding_url: str = Field(
        default="http://api.openweathermap.org/geo/1.0/direct",
        description="OpenWeatherMap direct geocoding endpoint",
    )
    openweather_onecall_url: str = Field(
        default="https://api.openweathermap.org/data/3.0/onecall",
        description="OpenWeatherMap One Call endpoint",
    )
    openweather_units: str = Field(default="imperial", description="Units (standard/metric/imperial)")
    openweather_exclude: str = Field(
        default="minutely,hourly,alerts", description="One Call parts to exclude"
    )

    # Upstream HTTP Configuration
    upstream_timeout_seconds: float = Field(default=15.0, gt=0, description="Upstream request timeout")
    upstream_connect_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Upstream connect timeout"
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=3000, ge=1, le=65535, description="FastAPI port")
    cors_allow_origins: List[str] = Field(default=["*"], description="Allowed CORS origins")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_to_file: bool = Field(default=False, description="Also write logs under ./logs")

    @field_validator("openweathermap_api_key")
    def validate_openweathermap_api_key(cls, v):
        if not v.get_secret_value().strip():
            raise WeatherAPIKeyError("OpenWeatherMap API key is required")
        return v

    @field_validator("openweather_units")
    def validate_units(cls, v):
        valid_units = ["standard", "metric", "imperial"]
        if v.lower() not in valid_units:
            raise ValueError(f"Invalid units: {v}. Must be one of {valid_units}")
        return v.lower()

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    def get_log_directory(self) -> Path:
        """Get the absolute path of the log directory."""
        return Path("logs").resolve()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


config = Config()
