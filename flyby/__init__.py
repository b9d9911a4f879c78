from flyby.client import FlyByClient
from flyby.flyby import fly_by
from flyby.settings.flyby_settings import FlyBySettings
from flyby.types.geo import LatLon
from flyby.validation import validate_coordinates

__all__ = [
    "FlyByClient",
    "FlyBySettings",
    "LatLon",
    "fly_by",
    "validate_coordinates",
]
