import pytest
from pydantic import ValidationError

from src.config.config import Config
from src.exceptions.config import WeatherAPIKeyError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("API_PORT", "API_HOST", "OPENWEATHER_UNITS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Test cases for application settings."""

    def test_defaults(self, api_key):
        settings = Config(_env_file=None)

        assert settings.openweathermap_api_key.get_secret_value() == api_key
        assert settings.api_port == 3000
        assert settings.openweather_units == "imperial"
        assert settings.openweather_exclude == "minutely,hourly,alerts"
        assert settings.log_level == "INFO"

    def test_key_is_masked(self, api_key):
        settings = Config(_env_file=None)

        assert api_key not in repr(settings)
        assert api_key not in str(settings.openweathermap_api_key)

    def test_key_required(self, monkeypatch):
        monkeypatch.delenv("OPENWEATHERMAP_API_KEY")

        with pytest.raises(ValidationError):
            Config(_env_file=None)

    def test_empty_key_rejected(self):
        with pytest.raises(WeatherAPIKeyError):
            Config(_env_file=None, openweathermap_api_key="  ")

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "8080")

        assert Config(_env_file=None).api_port == 8080

    def test_normalizes_values(self):
        settings = Config(
            _env_file=None, openweather_units="METRIC", log_level="debug", log_format="JSON"
        )

        assert settings.openweather_units == "metric"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    @pytest.mark.parametrize(
        "field, value",
        [("openweather_units", "kelvin"), ("log_level", "LOUD"), ("log_format", "xml"), ("api_port", 0)],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Config(_env_file=None, **{field: value})
