from urllib.parse import quote_plus

import requests  # type: ignore[import-untyped]

from flyby.client import FlyByClient
from flyby.errors.api_errors import (
    CatalogError,
    NotAuthenticatedError,
    NotFoundError,
    RateLimitedError,
)
from flyby.logging import get_logger

logger = get_logger(__name__)


class API:
    def __init__(self, flyby_client: FlyByClient):
        self._flyby_client = flyby_client

    def _get_headers(self) -> dict:
        return {
            "Accept": "application/json",
            # The assets endpoint rejects some cached HTTPS requests
            "cache-control": "no-cache",
        }

    def _get_params(self, params: dict | None, requires_auth: bool) -> dict:
        params = dict(params or {})
        if requires_auth:
            params["api_key"] = self._flyby_client.settings.auth.get_api_key()
        return params

    def _redact(self, text: str, params: dict) -> str:
        api_key = params.get("api_key")
        if not api_key:
            return text
        for form in (api_key, quote_plus(api_key)):
            text = text.replace(form, "***")
        return text

    def _validate_response_status(self, url: str, response: requests.Response) -> None:
        if response.ok:
            return

        # response.url carries the api_key query parameter
        logger.warning(f"Request to {url} failed: {response.status_code}")

        # NASA answers 403 for missing or invalid keys
        if response.status_code in (401, 403):
            raise NotAuthenticatedError(response.status_code)

        if response.status_code == 404:
            raise NotFoundError(response.status_code)

        if response.status_code == 429:
            raise RateLimitedError(response.status_code)

        raise CatalogError(response.status_code, detail=response.text)

    def _get_url(self, url: str) -> str:
        return f"{self._flyby_client.settings.api_url.rstrip('/')}/{url.lstrip('/')}"

    def get(
        self, url: str, params: dict | None = None, requires_auth: bool = True
    ) -> requests.Response:
        full_url = self._get_url(url)
        params = self._get_params(params, requires_auth)
        try:
            response = requests.get(
                full_url,
                headers=self._get_headers(),
                params=params,
                timeout=self._flyby_client.settings.request_timeout,
            )
        except requests.RequestException as e:
            detail = self._redact(str(e), params)
            logger.warning(f"Request to {full_url} failed: {detail}")
            raise CatalogError(detail=detail) from e

        self._validate_response_status(full_url, response)
        return response
