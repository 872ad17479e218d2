"""
Result Normalizer: raw search engine payload -> SearchResult.

The engine's response schema is treated as partial: any field may be
missing, null or of the wrong type. Every read degrades to the documented
default, so normalize_search_response() never raises.
"""

from collections.abc import Mapping
from typing import Any, Dict, List

from core.utils import (
    as_count,
    as_mapping,
    as_mapping_list,
    as_number,
    safe_get,
)
from product_search.facet_config import (
    CATEGORY_FACET,
    CATEGORY_HIERARCHY_FIELD,
    FACET_DISTRIBUTION_FIELD,
    FACET_STATS_FIELDS,
    HITS_FIELD,
    PRICE_STAT_KEY,
    TAG_FACET,
    TOTAL_FIELDS,
    TOTAL_PAGES_FIELD,
)
from product_search.models import FacetCount, PriceStat, SearchFacets, SearchResult


def empty_result() -> SearchResult:
    """
    The zero-value result returned whenever a search cannot produce an answer.

    data=[], count=0, totalPages=0, categoryHierarchy=[],
    facets={priceStat: {}, categories: [], tags: [], allFilters: {}}
    """
    return SearchResult()


def normalize_search_response(raw: Any) -> SearchResult:
    """
    Reshape a raw engine response into a SearchResult.

    Args:
        raw: Decoded engine payload; anything that is not a mapping is
             treated as an empty response.

    Returns:
        Fully populated SearchResult.
    """
    raw = as_mapping(raw)
    distribution = _facet_distribution(raw)

    return SearchResult(
        data=as_mapping_list(raw.get(HITS_FIELD)),
        count=_total_count(raw),
        total_pages=as_count(raw.get(TOTAL_PAGES_FIELD)) or 0,
        category_hierarchy=as_mapping_list(raw.get(CATEGORY_HIERARCHY_FIELD)),
        facets=SearchFacets(
            price_stat=_price_stat(raw),
            categories=_facet_counts(distribution.get(CATEGORY_FACET)),
            tags=_facet_counts(distribution.get(TAG_FACET)),
            all_filters=distribution,
        ),
    )


# =============================================================================
# Field Extraction
# =============================================================================

def _total_count(raw) -> int:
    """First present, valid total in priority order (exact, then estimate)."""
    for field in TOTAL_FIELDS:
        count = as_count(raw.get(field))
        if count is not None:
            return count
    return 0


def _price_stat(raw) -> PriceStat:
    """Price bounds from the first stats source that carries a price entry."""
    price: Mapping = {}
    for field in FACET_STATS_FIELDS:
        candidate = safe_get(raw, field, PRICE_STAT_KEY)
        if isinstance(candidate, Mapping):
            price = candidate
            break
    return PriceStat(
        min=as_number(price.get("min")),
        max=as_number(price.get("max")),
    )


def _facet_distribution(raw) -> Dict[str, Dict[str, int]]:
    """
    Type-checked copy of the facet distribution.

    Every facet bucket is kept; values whose count is not a
    non-negative integer are dropped.
    """
    distribution: Dict[str, Dict[str, int]] = {}
    for facet_name, values in as_mapping(raw.get(FACET_DISTRIBUTION_FIELD)).items():
        counts: Dict[str, int] = {}
        for value, count in as_mapping(values).items():
            count = as_count(count)
            if count is not None:
                counts[str(value)] = count
        distribution[str(facet_name)] = counts
    return distribution


def _facet_counts(bucket) -> List[FacetCount]:
    # Source order is kept: the engine already ranks values.
    return [
        FacetCount(name=name, count=count)
        for name, count in as_mapping(bucket).items()
    ]
