"""
Search Engine Facet Configuration.

Names shared with the search engine's index configuration and the
storefront URL surface. Changing a facet key here must be coordinated
with the index's faceting settings.
"""

from typing import Tuple


# ============================================================================
# Facet Distribution Keys
# ============================================================================

CATEGORY_FACET = "categories.category.slug"
TAG_FACET = "tags.name"

# Key of the price entry in the numeric facet statistics
PRICE_STAT_KEY = "price"


# ============================================================================
# Raw Response Fields
# ============================================================================

HITS_FIELD = "hits"
# Exact total first, estimate second
TOTAL_FIELDS: Tuple[str, ...] = ("totalHits", "estimatedTotalHits")
TOTAL_PAGES_FIELD = "totalPages"
CATEGORY_HIERARCHY_FIELD = "categories"
FACET_DISTRIBUTION_FIELD = "facetDistribution"
# The storefront's aggregated stats (unaffected by active filters) win
# over the engine's stats for the current result set.
FACET_STATS_FIELDS: Tuple[str, ...] = ("allfacetStats", "facetStats")


# ============================================================================
# URL Parameter Surface
# ============================================================================

SEARCH_PARAM = "search"
CATEGORIES_PARAM = "categories"
PRICE_FROM_PARAM = "priceFrom"
PRICE_TO_PARAM = "priceTo"
TAGS_PARAM = "tags"
ORIGIN_COUNTRY_PARAM = "originCountry"
KEYWORDS_PARAM = "keywords"
PAGE_PARAM = "page"
SORT_PARAM = "sort"

RESERVED_PARAMS = frozenset({
    SEARCH_PARAM,
    CATEGORIES_PARAM,
    PRICE_FROM_PARAM,
    PRICE_TO_PARAM,
    TAGS_PARAM,
    ORIGIN_COUNTRY_PARAM,
    KEYWORDS_PARAM,
    PAGE_PARAM,
    SORT_PARAM,
})

ATTRIBUTE_PREFIX = "attributes."
OPTION_PREFIX = "option."

# Only emitted on the outbound request; "price" is derived from priceFrom/priceTo.
PRICE_PARAM = "price"

DEFAULT_PAGE = 1
