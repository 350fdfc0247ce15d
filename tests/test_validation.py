"""Location validation and query building."""

import pytest

from weather.outcome import InputError
from weather.validation import LocationQuery, build_query, validate

EMPTY_CITY = "City name cannot be empty or whitespace."
BAD_CITY = "City name can only contain letters, spaces, and hyphens."
EMPTY_CODE = "Country code cannot be empty or whitespace."
BAD_CODE = "Country code must be a 2-letter uppercase code (e.g., 'US', 'UK')."


class TestValidate:
    @pytest.mark.parametrize("city", ["London", "New York", "Saint-Étienne", "München", "São Paulo", "東京"])
    def test_accepts_letters_spaces_hyphens(self, city):
        result = validate(city)
        assert isinstance(result, LocationQuery)
        assert result.city == city
        assert result.country_code is None

    @pytest.mark.parametrize("city", ["", "   ", "\t\n"])
    def test_rejects_empty_city(self, city):
        assert validate(city) == InputError("city", EMPTY_CITY)

    @pytest.mark.parametrize("city", ["London123!", "Paris1", "St. Louis", "O'Fallon", "a_b"])
    def test_rejects_symbols_and_digits(self, city):
        assert validate(city) == InputError("city", BAD_CITY)

    def test_city_rule_wins_over_country_code_rules(self):
        """Multiple violations report the earliest rule."""
        assert validate("London123!", "U123") == InputError("city", BAD_CITY)
        assert validate("London123!", "") == InputError("city", BAD_CITY)
        assert validate("", "U123") == InputError("city", EMPTY_CITY)

    @pytest.mark.parametrize("code", ["", "  "])
    def test_rejects_empty_country_code(self, code):
        assert validate("London", code) == InputError("countryCode", EMPTY_CODE)

    @pytest.mark.parametrize("code", ["U123", "USA", "U", "1A", "U-", "\u017fe", "\u0131s", "\u212aR"])
    def test_rejects_malformed_country_code(self, code):
        assert validate("London", code) == InputError("countryCode", BAD_CODE)

    def test_country_code_is_case_insensitive(self):
        result = validate("London", "uk")
        assert isinstance(result, LocationQuery)
        assert result.country_code == "UK"

    def test_city_is_trimmed(self):
        result = validate("  London ")
        assert isinstance(result, LocationQuery)
        assert result.city == "London"


class TestBuildQuery:
    def test_city_only(self):
        assert build_query("London") == "London"

    def test_city_and_country(self):
        assert build_query("London", "UK") == "London,UK"

    def test_location_query_property(self):
        result = validate("London", "UK")
        assert isinstance(result, LocationQuery)
        assert result.query == "London,UK"
