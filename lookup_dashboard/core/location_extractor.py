"""
Coordinate extraction from job result payloads.

Result payloads are written by an external geocoding worker and have no fixed
shape. Extraction is modelled as a decoder over an ordered tuple of
``CoordinateSource`` variants: each variant names one nesting level and the
keys that may carry latitude and longitude there. Latitude and longitude are
resolved independently, so the two values may come from different levels.

Two decoders are in use and must stay separate, because they back different
views and merging them changes which map points appear where:

- ``TOLERANT_SOURCES`` (phone drill-down): top level, then ``location``,
  then ``data``.
- ``STRICT_SOURCES`` (stats map): only ``data.latitude`` / ``data.longitude``.

Extraction is best-effort. Malformed JSON, missing keys and non-numeric values
all yield ``None``; nothing here raises to the caller.

Dependencies: json, math (stdlib)
System role: Result payload normalizer
"""

import json
import math
from dataclasses import dataclass
from typing import Any, NamedTuple


class Coordinates(NamedTuple):
    """A finite latitude/longitude pair."""

    lat: float
    lng: float


@dataclass(frozen=True)
class CoordinateSource:
    """
    One nesting level a coordinate may be read from.

    Attributes:
        container: Key of the nested object, or None for the top level
        lat_keys: Latitude keys in priority order
        lng_keys: Longitude keys in priority order
    """

    container: str | None
    lat_keys: tuple[str, ...]
    lng_keys: tuple[str, ...]

    def scope(self, payload: dict[str, Any]) -> dict[str, Any] | None:
        if self.container is None:
            return payload
        nested = payload.get(self.container)
        return nested if isinstance(nested, dict) else None


TOLERANT_SOURCES: tuple[CoordinateSource, ...] = (
    CoordinateSource(None, ("lat", "latitude"), ("lng", "longitude")),
    CoordinateSource("location", ("lat", "latitude"), ("lng", "longitude", "long")),
    CoordinateSource("data", ("lat", "latitude"), ("lng", "longitude", "long")),
)

STRICT_SOURCES: tuple[CoordinateSource, ...] = (
    CoordinateSource("data", ("latitude",), ("longitude",)),
)


def parse_payload(raw: Any) -> dict[str, Any] | None:
    """
    Decode a raw result value into a JSON object.

    Accepts an already-decoded dict (JSON columns) or JSON text. Anything that
    does not decode to an object returns None.
    """
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, (str, bytes, bytearray)):
        return None
    try:
        decoded = json.loads(raw)
    except (ValueError, RecursionError):
        return None
    return decoded if isinstance(decoded, dict) else None


def coerce_coordinate(value: Any) -> float | None:
    """Convert a JSON scalar to a finite float, or None. Zero is valid."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _first_candidate(
    payload: dict[str, Any],
    sources: tuple[CoordinateSource, ...],
    field: str,
) -> Any:
    # first non-null value wins, even if it later fails coercion
    for source in sources:
        scope = source.scope(payload)
        if scope is None:
            continue
        keys = source.lat_keys if field == "lat" else source.lng_keys
        for key in keys:
            value = scope.get(key)
            if value is not None:
                return value
    return None


def extract_coordinates(
    raw: Any,
    sources: tuple[CoordinateSource, ...] = TOLERANT_SOURCES,
) -> Coordinates | None:
    """
    Extract a coordinate pair using the given source variants.

    Args:
        raw: Raw result value (JSON text or decoded dict)
        sources: Ordered nesting levels to scan

    Returns:
        Coordinates if both values resolve to finite numbers, None otherwise
    """
    payload = parse_payload(raw)
    if payload is None:
        return None

    lat = coerce_coordinate(_first_candidate(payload, sources, "lat"))
    lng = coerce_coordinate(_first_candidate(payload, sources, "lng"))
    if lat is None or lng is None:
        return None
    return Coordinates(lat=lat, lng=lng)


def extract_tolerant(raw: Any) -> Coordinates | None:
    """Top-level, then ``location``, then ``data``; used by the phone drill-down."""
    return extract_coordinates(raw, TOLERANT_SOURCES)


def extract_strict(raw: Any) -> Coordinates | None:
    """Only ``{"data": {"latitude": ..., "longitude": ...}}``; used by the stats map."""
    return extract_coordinates(raw, STRICT_SOURCES)
