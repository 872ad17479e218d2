"""
Unit tests for SearchService: both entry points and the empty-result fallback.

Run with: PYTHONPATH=src python -m pytest tests/unit/test_search_service.py -v
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from product_search.models import SearchRequest
from product_search.service import SearchService


EMPTY_LITERAL = {
    "data": [],
    "count": 0,
    "totalPages": 0,
    "categoryHierarchy": [],
    "facets": {
        "priceStat": {},
        "categories": [],
        "tags": [],
        "allFilters": {},
    },
}


def _sent_request(mock_search_client) -> SearchRequest:
    mock_search_client.search.assert_awaited_once()
    return mock_search_client.search.await_args.args[0]


# =============================================================================
# search_by_url
# =============================================================================

class TestSearchByUrl:

    async def test_compiles_and_normalizes(self, search_service, mock_search_client):
        result = await search_service.search_by_url(
            "https://shop.test/search?search=leather&priceFrom=50&attributes.color=black&page=2"
        )

        request = _sent_request(mock_search_client)
        assert request.query == "leather"
        assert request.price == "50,"
        assert request.page == 2
        assert request.attribute_params == {"attributes.color": "black"}

        assert result.count == 27
        assert [f.name for f in result.facets.categories] == ["shoes", "bags"]

    async def test_category_slug_override(self, search_service, mock_search_client):
        await search_service.search_by_url("https://shop.test/c?categories=shoes", "bags")
        assert _sent_request(mock_search_client).categories == "bags"

    async def test_accepts_httpx_url(self, search_service, mock_search_client):
        await search_service.search_by_url(httpx.URL("https://shop.test/search?search=lamp"))
        assert _sent_request(mock_search_client).query == "lamp"

    async def test_engine_failure_returns_empty_literal(self, search_service, mock_search_client):
        mock_search_client.search.side_effect = httpx.ConnectError("connection refused")

        result = await search_service.search_by_url("https://shop.test/search?search=x")

        assert result.model_dump(by_alias=True, exclude_none=True) == EMPTY_LITERAL

    async def test_any_exception_is_absorbed(self, search_service, mock_search_client):
        mock_search_client.search.side_effect = RuntimeError("boom")
        result = await search_service.search_by_url("https://shop.test/search")
        assert result.count == 0
        assert result.data == []

    async def test_compile_failure_is_absorbed(self, search_service, mock_search_client):
        with patch("product_search.service.compile_search_request", side_effect=ValueError("bad")):
            result = await search_service.search_by_url("https://shop.test/search")

        assert result.model_dump(by_alias=True, exclude_none=True) == EMPTY_LITERAL
        mock_search_client.search.assert_not_awaited()

    async def test_normalize_failure_is_absorbed(self, search_service):
        with patch("product_search.service.normalize_search_response", side_effect=KeyError("x")):
            result = await search_service.search_by_url("https://shop.test/search")
        assert result.model_dump(by_alias=True, exclude_none=True) == EMPTY_LITERAL

    async def test_failure_is_logged(self, search_service, mock_search_client):
        mock_search_client.search.side_effect = RuntimeError("boom")
        with patch("product_search.service.logger") as mock_logger:
            await search_service.search_by_url("https://shop.test/search", "bags")

        mock_logger.error.assert_called_once()
        kwargs = mock_logger.error.call_args.kwargs
        assert kwargs["entry_point"] == "search_by_url"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["category_slug"] == "bags"

    @pytest.mark.parametrize("bad_url", [None, 42, b"https://shop.test/", ["https://shop.test/"]])
    async def test_non_url_raises_type_error(self, search_service, mock_search_client, bad_url):
        with pytest.raises(TypeError):
            await search_service.search_by_url(bad_url)
        mock_search_client.search.assert_not_awaited()

    async def test_cancellation_propagates(self, search_service, mock_search_client):
        mock_search_client.search.side_effect = asyncio.CancelledError()
        with pytest.raises(asyncio.CancelledError):
            await search_service.search_by_url("https://shop.test/search")


# =============================================================================
# search_by_text
# =============================================================================

class TestSearchByText:

    async def test_only_query_is_set(self, search_service, mock_search_client):
        result = await search_service.search_by_text("red shoes")

        request = _sent_request(mock_search_client)
        assert request == SearchRequest(query="red shoes")
        assert result.count == 27

    async def test_none_query(self, search_service, mock_search_client):
        await search_service.search_by_text(None)
        assert _sent_request(mock_search_client).query == ""

    async def test_failure_returns_empty_literal(self, search_service, mock_search_client):
        mock_search_client.search.side_effect = httpx.ReadTimeout("slow")
        result = await search_service.search_by_text("red shoes")
        assert result.model_dump(by_alias=True, exclude_none=True) == EMPTY_LITERAL

    async def test_partial_engine_payload(self, mock_search_client):
        mock_search_client.search.return_value = {"hits": [{"id": "p9"}], "estimatedTotalHits": 1}
        service = SearchService(client=mock_search_client)

        result = await service.search_by_text("lamp")

        assert result.data == [{"id": "p9"}]
        assert result.count == 1
        assert result.facets.all_filters == {}


# =============================================================================
# Independence
# =============================================================================

class TestConcurrency:

    async def test_concurrent_calls_are_independent(self, mock_search_client):
        async def fake_search(request):
            await asyncio.sleep(0)
            if request.query == "fail":
                raise RuntimeError("down")
            return {"hits": [{"id": request.query}], "totalHits": 1}

        mock_search_client.search.side_effect = fake_search
        service = SearchService(client=mock_search_client)

        ok, failed, other = await asyncio.gather(
            service.search_by_text("a"),
            service.search_by_text("fail"),
            service.search_by_url("https://shop.test/search?search=b"),
        )

        assert ok.data == [{"id": "a"}]
        assert failed.count == 0
        assert other.data == [{"id": "b"}]
