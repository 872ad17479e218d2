"""
Product Search Module.

Provides:
- compile_search_request: Storefront URL parameters -> SearchRequest
- normalize_search_response: Raw search engine payload -> SearchResult
- StorefrontSearchClient: Async HTTP client for the storefront search endpoint
- SearchService: search_by_url / search_by_text with empty-result fallback
"""

from product_search.client import AbstractSearchClient, StorefrontSearchClient
from product_search.models import SearchRequest, SearchResult
from product_search.normalizer import empty_result, normalize_search_response
from product_search.query_compiler import compile_search_request, compile_text_request
from product_search.service import SearchService

__all__ = [
    "AbstractSearchClient",
    "StorefrontSearchClient",
    "SearchRequest",
    "SearchResult",
    "empty_result",
    "normalize_search_response",
    "compile_search_request",
    "compile_text_request",
    "SearchService",
]
