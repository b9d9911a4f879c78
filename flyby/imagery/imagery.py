from datetime import datetime
from typing import Any

from flyby.client import FlyByClient
from flyby.imagery._api import ImageryAPI
from flyby.imagery.prediction import predict_next_capture
from flyby.types.imagery import CaptureRecord
from flyby.validation import validate_coordinates


class Imagery:
    """Historical imagery for a location and predictions built on it."""

    def __init__(self, client: FlyByClient):
        self._api = ImageryAPI(client)

    def get_captures(self, latitude: Any, longitude: Any) -> list[CaptureRecord]:
        """Return every capture the catalog holds for a coordinate.

        The coordinate is validated before any request is sent.
        """
        point = validate_coordinates(latitude, longitude)
        return self._api.get_assets(point).results

    def predict_next_capture(self, latitude: Any, longitude: Any) -> datetime:
        """Predict the next time imagery will be captured for a coordinate.

        Args:
            latitude: Latitude in decimal degrees (-90 to 90).
            longitude: Longitude in decimal degrees (-180 to 180).

        Returns:
            The predicted capture time as a timezone-aware UTC datetime.

        Raises:
            ValidationError: If the coordinate is missing or out of range.
            CatalogError: If the catalog lookup fails.
            InsufficientDataError: If fewer than two captures are known.
        """
        return predict_next_capture(self.get_captures(latitude, longitude))
