"""
Integration tests against a live storefront search endpoint.

Requires:
- Env var TEST_API_BASE_URL pointing at a storefront API with indexed products
- (Optional) TEST_SEARCH_TERM, a term known to return results

Run with:
    TEST_API_BASE_URL=https://api.shop.example PYTHONPATH=src python -m pytest tests/integration -v -s
"""

import os

import pytest

from config.settings import get_settings_for_testing
from product_search.client import StorefrontSearchClient
from product_search.query_compiler import compile_text_request
from product_search.service import SearchService

pytestmark = pytest.mark.integration

BASE_URL = os.getenv("TEST_API_BASE_URL", "")
SEARCH_TERM = os.getenv("TEST_SEARCH_TERM", "shirt")


@pytest.fixture
async def live_service():
    client = StorefrontSearchClient(
        settings=get_settings_for_testing(api_base_url=BASE_URL),
    )
    yield SearchService(client=client)
    await client.aclose()


async def test_raw_response_shape():
    client = StorefrontSearchClient(settings=get_settings_for_testing(api_base_url=BASE_URL))
    try:
        raw = await client.search(compile_text_request(SEARCH_TERM))
    finally:
        await client.aclose()

    assert "hits" in raw
    assert "totalHits" in raw or "estimatedTotalHits" in raw


async def test_text_search_returns_products(live_service):
    result = await live_service.search_by_text(SEARCH_TERM)

    assert result.count >= len(result.data)
    print(f"\n'{SEARCH_TERM}': {result.count} products, {result.total_pages} pages")


async def test_url_search_with_filters(live_service):
    result = await live_service.search_by_url(
        f"https://shop.test/search?search={SEARCH_TERM}&priceFrom=0&page=1"
    )

    assert result.count >= len(result.data)
    assert all(isinstance(hit, dict) for hit in result.data)


async def test_facets_are_consistent(live_service):
    result = await live_service.search_by_text("")

    for facet in result.facets.categories:
        assert result.facets.all_filters["categories.category.slug"][facet.name] == facet.count
    for facet in result.facets.tags:
        assert result.facets.all_filters["tags.name"][facet.name] == facet.count
