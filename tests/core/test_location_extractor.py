"""
Test suite for coordinate extraction.

Covers the tolerant decoder (top level, location, data) and the strict
decoder (data.latitude / data.longitude only), including malformed input.

System role: Verification of the result payload normalizer
"""

import json

import pytest

from lookup_dashboard.core.location_extractor import (
    Coordinates,
    coerce_coordinate,
    extract_strict,
    extract_tolerant,
    parse_payload,
)


class TestParsePayload:
    """Test suite for parse_payload()."""

    @pytest.mark.parametrize("raw", [None, "", "not json", "{bad", "[1, 2]", "42", "null", 7])
    def test_non_object_input_should_return_none(self, raw) -> None:
        assert parse_payload(raw) is None

    def test_decoded_dict_should_pass_through(self) -> None:
        payload = {"lat": 1}
        assert parse_payload(payload) is payload


class TestCoerceCoordinate:
    """Test suite for coerce_coordinate()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, 0.0), ("0", 0.0), (-6.2, -6.2), (" 106.8 ", 106.8), (12, 12.0)],
    )
    def test_numeric_values_should_convert(self, value, expected) -> None:
        assert coerce_coordinate(value) == expected

    @pytest.mark.parametrize("value", [None, True, "abc", "", "NaN", "inf", [1], {"v": 1}, 10**400])
    def test_non_numeric_or_non_finite_should_return_none(self, value) -> None:
        assert coerce_coordinate(value) is None


class TestExtractTolerant:
    """Test suite for the tolerant decoder."""

    def test_top_level_lat_lng(self) -> None:
        assert extract_tolerant('{"lat": 1.5, "lng": 2.5}') == Coordinates(1.5, 2.5)

    def test_top_level_latitude_longitude_strings(self) -> None:
        raw = json.dumps({"latitude": "-6.2", "longitude": "106.8"})
        assert extract_tolerant(raw) == Coordinates(-6.2, 106.8)

    def test_location_long_key(self) -> None:
        assert extract_tolerant('{"location":{"lat":10,"long":20}}') == Coordinates(10.0, 20.0)

    def test_data_level(self) -> None:
        raw = json.dumps({"data": {"latitude": "1.5", "longitude": "2.5"}})
        assert extract_tolerant(raw) == Coordinates(1.5, 2.5)

    def test_fields_resolve_independently_across_levels(self) -> None:
        raw = json.dumps({"lat": 1, "location": {"lng": 2}, "data": {"lat": 9, "lng": 9}})
        assert extract_tolerant(raw) == Coordinates(1.0, 2.0)

    def test_shallowest_level_wins(self) -> None:
        raw = json.dumps(
            {"lat": 1, "lng": 2, "location": {"lat": 3, "lng": 4}, "data": {"lat": 5, "lng": 6}}
        )
        assert extract_tolerant(raw) == Coordinates(1.0, 2.0)

    def test_null_candidate_falls_through_to_next_key(self) -> None:
        raw = json.dumps({"lat": None, "latitude": 3, "lng": 4})
        assert extract_tolerant(raw) == Coordinates(3.0, 4.0)

    def test_zero_is_a_valid_coordinate(self) -> None:
        assert extract_tolerant('{"lat": 0, "lng": 0}') == Coordinates(0.0, 0.0)

    def test_non_numeric_first_candidate_rejects_pair(self) -> None:
        raw = json.dumps({"lat": "north", "lng": 2, "data": {"lat": 1}})
        assert extract_tolerant(raw) is None

    def test_missing_longitude_returns_none(self) -> None:
        assert extract_tolerant('{"lat": 1}') is None

    def test_non_object_nested_level_is_skipped(self) -> None:
        raw = json.dumps({"location": "Jakarta", "data": {"lat": 1, "lng": 2}})
        assert extract_tolerant(raw) == Coordinates(1.0, 2.0)

    def test_malformed_json_returns_none(self) -> None:
        assert extract_tolerant('{"lat": 1, "lng":') is None

    def test_top_level_long_key_is_not_recognised(self) -> None:
        assert extract_tolerant('{"lat": 1, "long": 2}') is None


class TestExtractStrict:
    """Test suite for the strict decoder."""

    def test_data_latitude_longitude(self) -> None:
        raw = '{"data":{"latitude":"1.5","longitude":"2.5"}}'
        assert extract_strict(raw) == Coordinates(1.5, 2.5)

    @pytest.mark.parametrize(
        "payload",
        [
            {"lat": 3, "lng": 4},
            {"latitude": 3, "longitude": 4},
            {"location": {"latitude": 3, "longitude": 4}},
            {"data": {"lat": 3, "lng": 4}},
            {"data": {"latitude": 3, "long": 4}},
            {"data": {"latitude": 3}},
            {"data": [3, 4]},
        ],
    )
    def test_other_shapes_return_none(self, payload) -> None:
        assert extract_strict(json.dumps(payload)) is None

    def test_zero_is_accepted(self) -> None:
        assert extract_strict('{"data":{"latitude":0,"longitude":0}}') == Coordinates(0.0, 0.0)

    def test_nan_string_is_rejected(self) -> None:
        assert extract_strict('{"data":{"latitude":"NaN","longitude":"2"}}') is None

    def test_malformed_json_returns_none(self) -> None:
        assert extract_strict("oops") is None
