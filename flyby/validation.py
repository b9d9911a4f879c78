import math
from typing import Any

from flyby.errors.validation_errors import MissingFieldError, OutOfRangeError
from flyby.types.geo import COORDINATE_BOUNDS, LatLon


def _to_degrees(field: str, value: Any) -> float:
    # bool converts to 0.0 or 1.0 but is never a coordinate
    if isinstance(value, bool):
        raise OutOfRangeError(field, value)

    try:
        degrees = float(value)
    except (TypeError, ValueError, OverflowError):
        raise OutOfRangeError(field, value) from None

    low, high = COORDINATE_BOUNDS[field]
    if math.isnan(degrees) or not low <= degrees <= high:
        raise OutOfRangeError(field, value)
    return degrees


def validate_coordinates(latitude: Any, longitude: Any) -> LatLon:
    """Check a latitude/longitude pair and return it as a LatLon.

    Presence is checked before range, and latitude before longitude, so the
    first problem found is always the one reported.

    Args:
        latitude: Latitude in decimal degrees. Numeric strings are accepted.
        longitude: Longitude in decimal degrees. Numeric strings are accepted.

    Returns:
        The validated, immutable coordinate.

    Raises:
        MissingFieldError: If either value is None.
        OutOfRangeError: If a value is not a number or lies outside its range.
    """
    if latitude is None:
        raise MissingFieldError("latitude")
    if longitude is None:
        raise MissingFieldError("longitude")

    lat = _to_degrees("latitude", latitude)
    lon = _to_degrees("longitude", longitude)
    return LatLon(lat=lat, lon=lon)
