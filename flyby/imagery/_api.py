from pydantic import ValidationError as PydanticValidationError

from flyby._api import API
from flyby.client import FlyByClient
from flyby.errors.api_errors import CatalogError
from flyby.logging import get_logger
from flyby.types.geo import LatLon
from flyby.types.imagery import AssetsResponse

logger = get_logger(__name__)


class ImageryAPI:
    def __init__(self, client: FlyByClient):
        self._client = client
        self._api = API(client)

    def get_assets(self, point: LatLon) -> AssetsResponse:
        """Fetch the imagery captured over a point.

        Raises:
            CatalogError: If the request fails or the response is malformed.
        """
        logger.info(f"Requesting imagery assets for lat={point.lat}, lon={point.lon}")
        response = self._api.get(
            self._client.settings.assets_path,
            params={"lat": point.lat, "lon": point.lon},
        )

        try:
            assets = AssetsResponse.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise CatalogError(
                response.status_code,
                detail=str(e),
                message="Unexpected response from the imagery catalog",
            ) from e

        logger.info(f"Catalog returned {len(assets.results)} captures")
        return assets
