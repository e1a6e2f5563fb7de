from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional
from urllib.parse import quote, urlencode

import httpx

from .config import Settings
from .models import ApiResult, Failure, Success

logger = logging.getLogger(__name__)

BASE_URL = "https://api.propertydata.co.uk"


class PropertyDataClient:
    """
    Thin async wrapper around the PropertyData REST API.

    Every call is a single `GET {base_url}{path}?key=<api key>&<params>`.
    Remote failures are returned as `Failure` values rather than raised:
    - transport errors (DNS, refused connections, timeouts) -> "Request failed: ..."
    - non-2xx responses -> "API Error <status>: <body>"

    A 2xx response whose body is not JSON is not special-cased; the decode
    error propagates to the caller.
    """

    def __init__(
        self,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = BASE_URL,
    ) -> None:
        self._api_key = settings.api_key
        self._base_url = base_url.rstrip("/")
        # No timeout override: httpx defaults apply.
        self._http = http_client or httpx.AsyncClient()

    def build_url(self, path: str, params: Mapping[str, str]) -> str:
        query: Dict[str, str] = {"key": self._api_key}
        query.update(params)
        return f"{self._base_url}{path}?{urlencode(query, quote_via=quote)}"

    async def get(self, path: str, params: Mapping[str, str]) -> ApiResult:
        url = self.build_url(path, params)
        logger.debug("GET %s params=%s", path, sorted(params))

        try:
            response = await self._http.get(url)
        except httpx.TransportError as e:
            logger.warning("PropertyData request to %s failed: %s", path, e)
            return Failure(message=f"Request failed: {e}")

        if not response.is_success:
            logger.info("PropertyData %s returned HTTP %s", path, response.status_code)
            return Failure(message=f"API Error {response.status_code}: {response.text}")

        return Success(value=response.json())

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()
