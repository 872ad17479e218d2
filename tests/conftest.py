"""
Pytest configuration and shared fixtures for the product search tests.
"""
import os
import sys
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))


# ============================================================================
# Fixtures: Raw Engine Payloads
# ============================================================================

@pytest.fixture
def raw_engine_response() -> dict:
    """A complete search engine response as proxied by the storefront API."""
    return {
        "hits": [
            {"id": "p1", "name": "Leather Sneaker", "price": 89.0, "slug": "leather-sneaker"},
            {"id": "p2", "name": "Canvas Tote", "price": 35.5, "slug": "canvas-tote"},
        ],
        "totalHits": 27,
        "estimatedTotalHits": 30,
        "totalPages": 3,
        "page": 1,
        "processingTimeMs": 4,
        "query": "leather",
        "categories": [
            {"name": "Shoes", "slug": "shoes", "children": [{"name": "Sneakers", "slug": "sneakers"}]},
        ],
        "facetDistribution": {
            "categories.category.slug": {"shoes": 10, "bags": 3},
            "tags.name": {"new": 7, "sale": 2},
            "attributes.color": {"black": 12, "brown": 5},
        },
        "facetStats": {"price": {"min": 20.0, "max": 150.0}},
        "allfacetStats": {"price": {"min": 9.99, "max": 499.0}},
    }


# ============================================================================
# Fixtures: Mock Services
# ============================================================================

@pytest.fixture
def mock_search_client(raw_engine_response):
    """Search client stub whose search() resolves to raw_engine_response."""
    from product_search.client import AbstractSearchClient

    client = AsyncMock(spec=AbstractSearchClient)
    client.search.return_value = raw_engine_response
    return client


@pytest.fixture
def search_service(mock_search_client):
    """SearchService backed by the mocked search client."""
    from product_search.service import SearchService
    return SearchService(client=mock_search_client)


# ============================================================================
# Fixtures: FastAPI Test Client
# ============================================================================

@pytest.fixture
def app(search_service):
    """FastAPI application with the mocked search service injected."""
    from api.app import create_app
    return create_app(search_service=search_service)


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests if no storefront API is configured."""
    skip_integration = pytest.mark.skip(reason="Integration tests require TEST_API_BASE_URL")

    if os.getenv("TEST_API_BASE_URL"):
        return

    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
