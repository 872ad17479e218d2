"""
Search engine client.

The search engine is an external collaborator reached through the
storefront API, which proxies it at ``/api/ms/products``. The service only
depends on AbstractSearchClient; StorefrontSearchClient is the HTTP adapter
used in production.

The client raises on any transport, status or decoding problem. It does not
retry: failures are absorbed by SearchService into the empty result.
"""

from typing import Any, Mapping, Optional

import httpx

from config.settings import Settings, get_settings
from core.logging import get_logger
from product_search.models import SearchRequest

logger = get_logger(__name__)


class AbstractSearchClient:
    """Interface for search engine clients."""

    async def search(self, request: SearchRequest) -> Mapping[str, Any]:
        """Return the raw engine response for a compiled request."""
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release any network resources."""


class StorefrontSearchClient(AbstractSearchClient):
    """
    Async HTTP adapter for the storefront's product search endpoint.

    Owns one httpx.AsyncClient (connection pool) for its lifetime; create it
    once at startup and close it with ``aclose()`` at shutdown.
    """

    def __init__(
        self,
        api_base_url: Optional[str] = None,
        search_path: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.api_base_url = (api_base_url or settings.api_base_url).rstrip("/")
        self.search_path = search_path or settings.search_path
        timeout = timeout_seconds or settings.search_timeout_seconds

        if not self.api_base_url:
            raise ValueError("API_BASE_URL is required")

        self._client = httpx.AsyncClient(
            base_url=self.api_base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def search(self, request: SearchRequest) -> Mapping[str, Any]:
        """
        GET the search endpoint with the request's query parameters.

        Raises:
            httpx.HTTPError: Transport failure or non-2xx response.
            ValueError: Body is not JSON or not a JSON object.
        """
        params = request.to_query_params()
        resp = await self._client.get(self.search_path, params=params)
        resp.raise_for_status()

        payload = resp.json()
        if not isinstance(payload, Mapping):
            raise ValueError(
                f"Search response is not a JSON object: {type(payload).__name__}"
            )

        logger.debug(
            "Search engine responded",
            status_code=resp.status_code,
            page=request.page,
            total_hits=payload.get("totalHits"),
        )
        return payload

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
