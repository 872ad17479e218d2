"""
Product Search API Routes.

Listing pages pass all their filters as query parameters; the full request
URL is handed to the search service, which classifies the parameters itself.

Every route answers 200 with a SearchResult. A failed search yields the
empty result, never an error response.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from product_search.models import SearchResult
from product_search.service import SearchService

router = APIRouter(prefix="/api/search", tags=["Search"])


def get_search_service(request: Request) -> SearchService:
    """Return the SearchService created for this application at startup."""
    return request.app.state.search_service


# =============================================================================
# Listing Search
# =============================================================================

@router.get(
    "/products",
    response_model=SearchResult,
    response_model_exclude_none=True,
    summary="Search products using storefront URL parameters",
)
async def search_products(
    request: Request,
    service: SearchService = Depends(get_search_service),
) -> SearchResult:
    """
    Search products with listing-page filters.

    - **Standard**: search, categories, tags, originCountry, keywords, page, sort
    - **Price**: priceFrom / priceTo
    - **Attributes**: attributes.<name>=<value>
    - **Options**: option.<name>=<value>
    - Any other parameter is passed through to the search engine.
    """
    return await service.search_by_url(str(request.url))


@router.get(
    "/categories/{category_slug}/products",
    response_model=SearchResult,
    response_model_exclude_none=True,
    summary="Search products within a category",
)
async def search_category_products(
    category_slug: str,
    request: Request,
    service: SearchService = Depends(get_search_service),
) -> SearchResult:
    """Same as /products, with the path's category overriding ``categories``."""
    return await service.search_by_url(str(request.url), category_slug)


# =============================================================================
# Quick Search
# =============================================================================

@router.get(
    "/quick",
    response_model=SearchResult,
    response_model_exclude_none=True,
    summary="Free-text product search",
)
async def quick_search(
    q: Optional[str] = Query(None, description="Search text"),
    service: SearchService = Depends(get_search_service),
) -> SearchResult:
    """Free-text search for the search bar and autocomplete; no facet filters."""
    return await service.search_by_text(q or "")
