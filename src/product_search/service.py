"""
Product Search Service.

Entry points used by listing pages and quick search:
- search_by_url(): compile URL filters -> search engine -> normalize
- search_by_text(): free-text term only -> search engine -> normalize

Neither entry point raises for search failures. Anything that goes wrong
while compiling, calling the engine or normalizing is logged and turned into
empty_result(), so callers always get a renderable SearchResult. The cost is
that "no results" and "search unavailable" look the same to the caller; the
difference is only visible in the logs.
"""

import time
from typing import Optional, Union

import httpx

from core.logging import get_logger
from product_search.client import AbstractSearchClient
from product_search.models import SearchRequest, SearchResult
from product_search.normalizer import empty_result, normalize_search_response
from product_search.query_compiler import compile_search_request, compile_text_request

logger = get_logger(__name__)


class SearchService:
    """
    Compose the query compiler, a search client and the result normalizer.

    Holds no per-call state; one instance is shared by all requests.
    """

    def __init__(self, client: AbstractSearchClient):
        self._client = client

    @property
    def client(self) -> AbstractSearchClient:
        return self._client

    async def search_by_url(
        self,
        url: Union[str, httpx.URL],
        category_slug: Optional[str] = None,
    ) -> SearchResult:
        """
        Search using the filters carried by a listing URL's query string.

        Args:
            url: Page URL, e.g. 'https://shop.test/search?search=shoes&priceFrom=50'.
            category_slug: Category from the route; overrides ``categories``.

        Returns:
            Normalized SearchResult, or the empty result on any failure.

        Raises:
            TypeError: ``url`` is not a str or httpx.URL.
        """
        if not isinstance(url, (str, httpx.URL)):
            raise TypeError(f"url must be a str or httpx.URL, got {type(url).__name__}")

        try:
            request = compile_search_request(url, category_slug)
            return await self._execute(request)
        except Exception as e:
            logger.error(
                "Product search failed",
                entry_point="search_by_url",
                url=str(url),
                category_slug=category_slug,
                error=str(e),
                error_type=type(e).__name__,
            )
            return empty_result()

    async def search_by_text(self, query: Optional[str]) -> SearchResult:
        """
        Search with a free-text term only (autocomplete, search bar).

        Returns:
            Normalized SearchResult, or the empty result on any failure.
        """
        try:
            request = compile_text_request(query)
            return await self._execute(request)
        except Exception as e:
            logger.error(
                "Product search failed",
                entry_point="search_by_text",
                query=query,
                error=str(e),
                error_type=type(e).__name__,
            )
            return empty_result()

    async def _execute(self, request: SearchRequest) -> SearchResult:
        t_start = time.perf_counter()
        raw = await self._client.search(request)
        result = normalize_search_response(raw)

        logger.info(
            "Product search completed",
            query=request.query,
            categories=request.categories or None,
            page=request.page,
            count=result.count,
            returned=len(result.data),
            elapsed_ms=int((time.perf_counter() - t_start) * 1000),
        )
        return result
