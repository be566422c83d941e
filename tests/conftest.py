import os

# Config is built at import time, so the key must exist before src is imported
TEST_API_KEY = "test-weather-key-5f2c9a1d"
os.environ["OPENWEATHERMAP_API_KEY"] = TEST_API_KEY

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr


@pytest.fixture
def api_key():
    """The provider key the application was configured with."""
    return TEST_API_KEY


@pytest.fixture
def mock_config():
    """Mock the config object."""
    mock_config = MagicMock()
    mock_config.openweathermap_api_key = SecretStr("mock-weather-key")
    mock_config.openweather_geocoding_url = "http://geo.test/geo/1.0/direct"
    mock_config.openweather_onecall_url = "https://onecall.test/data/3.0/onecall"
    mock_config.openweather_units = "imperial"
    mock_config.openweather_exclude = "minutely,hourly,alerts"
    mock_config.upstream_timeout_seconds = 15.0
    mock_config.upstream_connect_timeout_seconds = 5.0
    return mock_config


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and hand back the client used inside `async with`."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def geocode_payload():
    """Direct geocoding response for New York, US."""
    return [
        {
            "name": "New York",
            "local_names": {"en": "New York"},
            "lat": 40.7127281,
            "lon": -74.0060152,
            "country": "US",
            "state": "New York",
        }
    ]


@pytest.fixture
def onecall_payload():
    """One Call 3.0 response with a clear day followed by light snow."""
    return {
        "lat": 40.7127,
        "lon": -74.006,
        "timezone": "America/New_York",
        "timezone_offset": -14400,
        "current": {
            "dt": 1696161600,
            "temp": 68.4,
            "feels_like": 67.9,
            "pressure": 1017,
            "humidity": 55,
            "wind_speed": 8.2,
            "wind_deg": 200,
            "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        },
        "daily": [
            {
                "dt": 1696176000,
                "summary": "Expect a day of partly cloudy with clear spells",
                "temp": {"day": 70.1, "min": 60.2, "max": 74.3, "night": 62.0},
                "pop": 0.1,
                "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
            },
            {
                "dt": 1696262400,
                "summary": "You can expect snow in the afternoon",
                "temp": {"day": 35.0, "min": 28.4, "max": 36.9, "night": 30.1},
                "pop": 0.65,
                "weather": [{"id": 600, "main": "Snow", "description": "light snow", "icon": "13d"}],
            },
        ],
    }


@pytest.fixture
def client():
    """Test client for the FastAPI application with lifespan enabled."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
