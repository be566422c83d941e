from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientConfig(BaseSettings):
    """
    Settings for the desktop-side proxy client.

    The client never sees the provider key; it only needs to know where the
    proxy lives and how to look up the user's location.
    """

    weather_proxy_url: str = Field(
        default="http://localhost:3000", description="Base URL of the weather proxy"
    )
    location_lookup_url: str = Field(
        default="http://ip-api.com/json/", description="IP geolocation endpoint"
    )
    proxy_timeout_seconds: float = Field(default=30.0, gt=0, description="Timeout for proxy calls")
    location_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Timeout for the location lookup"
    )
    default_city: str = Field(default="Unknown City", description="City used when lookup omits it")
    default_country_code: str = Field(default="US", description="Country used when lookup omits it")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
