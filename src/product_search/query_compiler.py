"""
Query Compiler: storefront URL parameters -> SearchRequest.

Every query key is classified exactly once:
1. Reserved names fill the standard fields (priceFrom/priceTo fold into
   the single ``price`` token).
2. ``attributes.*`` keys go to attribute_params.
3. ``option.*`` keys go to option_params.
4. Anything else goes to other_params.

Duplicate keys: the first occurrence wins, matching URLSearchParams.get()
on the storefront frontend. Multi-value keys are not modeled.
"""

from typing import Dict, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlsplit

import httpx

from product_search.facet_config import (
    ATTRIBUTE_PREFIX,
    CATEGORIES_PARAM,
    DEFAULT_PAGE,
    KEYWORDS_PARAM,
    OPTION_PREFIX,
    ORIGIN_COUNTRY_PARAM,
    PAGE_PARAM,
    PRICE_FROM_PARAM,
    PRICE_TO_PARAM,
    RESERVED_PARAMS,
    SEARCH_PARAM,
    SORT_PARAM,
    TAGS_PARAM,
)
from product_search.models import SearchRequest


STANDARD = "standard"
ATTRIBUTE_PARAMS = "attribute_params"
OPTION_PARAMS = "option_params"
OTHER_PARAMS = "other_params"

# Checked in order; a key matching none of them is a passthrough parameter.
_PREFIX_RULES: Tuple[Tuple[str, str], ...] = (
    (ATTRIBUTE_PREFIX, ATTRIBUTE_PARAMS),
    (OPTION_PREFIX, OPTION_PARAMS),
)


def classify_param(key: str) -> str:
    """Return the bucket a query key belongs to."""
    if key in RESERVED_PARAMS:
        return STANDARD
    for prefix, bucket in _PREFIX_RULES:
        if key.startswith(prefix):
            return bucket
    return OTHER_PARAMS


def parse_query_params(url: Union[str, httpx.URL]) -> Dict[str, str]:
    """
    Parse the query component of ``url`` into an ordered key -> value dict.

    Blank values are kept (``?tags=`` yields ``{"tags": ""}``) and the first
    value of a repeated key wins.
    """
    query = urlsplit(str(url)).query
    params: Dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def coerce_page(raw: Optional[str]) -> int:
    """
    Parse a page number, falling back to 1.

    Non-numeric, non-finite and < 1 values all give the default;
    fractional pages are truncated ("2.7" -> 2).
    """
    if raw is None or not raw.strip():
        return DEFAULT_PAGE
    try:
        page = int(float(raw))
    except (ValueError, OverflowError):
        return DEFAULT_PAGE
    return page if page >= 1 else DEFAULT_PAGE


def build_price_range(price_from: str, price_to: str) -> str:
    """'' when neither bound is given, else '<from>,<to>' with empty sides kept."""
    if not price_from and not price_to:
        return ""
    return f"{price_from},{price_to}"


def compile_search_request(
    url: Union[str, httpx.URL],
    category_slug: Optional[str] = None,
) -> SearchRequest:
    """
    Compile a storefront listing URL into a SearchRequest.

    Args:
        url: Full URL (or bare "?a=b" query string) carrying the filters.
        category_slug: Category from the route path; overrides the
            ``categories`` query parameter when non-empty.

    Returns:
        SearchRequest with standard fields, price token and dynamic buckets.
    """
    params = parse_query_params(url)

    buckets: Dict[str, Dict[str, str]] = {
        ATTRIBUTE_PARAMS: {},
        OPTION_PARAMS: {},
        OTHER_PARAMS: {},
    }
    for key, value in params.items():
        bucket = classify_param(key)
        if bucket != STANDARD:
            buckets[bucket][key] = value

    return SearchRequest(
        query=params.get(SEARCH_PARAM, ""),
        categories=category_slug or params.get(CATEGORIES_PARAM, ""),
        tags=params.get(TAGS_PARAM, ""),
        origin_country=params.get(ORIGIN_COUNTRY_PARAM, ""),
        keywords=params.get(KEYWORDS_PARAM, ""),
        page=coerce_page(params.get(PAGE_PARAM)),
        sort=params.get(SORT_PARAM, ""),
        price=build_price_range(
            params.get(PRICE_FROM_PARAM, ""),
            params.get(PRICE_TO_PARAM, ""),
        ),
        attribute_params=buckets[ATTRIBUTE_PARAMS],
        option_params=buckets[OPTION_PARAMS],
        other_params=buckets[OTHER_PARAMS],
    )


def compile_text_request(query: Optional[str]) -> SearchRequest:
    """Quick-search request: only the free-text term, everything else default."""
    return SearchRequest(query=query or "")
