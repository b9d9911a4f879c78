from pydantic import Field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class LatLon:
    """Geographic coordinate representing a point on Earth's surface.

    Attributes:
        lat: Latitude in decimal degrees (range: -90 to 90).
        lon: Longitude in decimal degrees (range: -180 to 180).
    """

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


COORDINATE_BOUNDS = {
    "latitude": (-90.0, 90.0),
    "longitude": (-180.0, 180.0),
}
