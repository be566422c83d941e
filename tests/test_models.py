import pytest
from pydantic import ValidationError

from src.models.weather.weather import WeatherRequest, WeatherResponse


class TestWeatherRequest:
    """Test cases for WeatherRequest validation."""

    def test_city_kept_as_sent(self):
        request = WeatherRequest(city="  Berlin ", country_code=" DE ")

        assert request.city == "  Berlin "
        assert request.country_code == "DE"
        assert request.geocoding_query() == "Berlin,DE"

    def test_blank_country_code_is_absent(self):
        request = WeatherRequest(city="Berlin", country_code="  ")

        assert request.country_code is None
        assert request.geocoding_query() == "Berlin"

    @pytest.mark.parametrize("city", ["", "   ", "\t\n"])
    def test_empty_city_rejected(self, city):
        with pytest.raises(ValidationError, match="City is required"):
            WeatherRequest(city=city)

    def test_city_required(self):
        with pytest.raises(ValidationError):
            WeatherRequest(country_code="US")


class TestWeatherResponse:
    """Test cases for daily description extraction."""

    def test_extracts_description(self, onecall_payload):
        response = WeatherResponse.from_onecall_response(onecall_payload, "New York")

        assert response.daily_weather_description == "clear sky"
        assert response.weather_data is not None
        assert response.city == "New York"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"daily": []},
            {"daily": [{}]},
            {"daily": [{"weather": []}]},
            {"daily": [{"weather": [{"main": "Clear"}]}]},
            {"daily": [{"weather": [{"description": 42}]}]},
            {"daily": "not a list"},
        ],
    )
    def test_defaults_to_unknown(self, payload):
        assert WeatherResponse.extract_daily_description(payload) == "Unknown"
