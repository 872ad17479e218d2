"""
Pydantic models for product search.

Attributes are snake_case in Python; the wire form (storefront JSON and the
outbound query string) uses camelCase aliases. Both forms are accepted on
input.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from product_search.facet_config import (
    CATEGORIES_PARAM,
    KEYWORDS_PARAM,
    ORIGIN_COUNTRY_PARAM,
    PAGE_PARAM,
    PRICE_PARAM,
    SEARCH_PARAM,
    SORT_PARAM,
    TAGS_PARAM,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Request Models
# ============================================================================

class SearchRequest(_CamelModel):
    """Structured search request compiled from storefront URL parameters."""
    query: str = Field("", description="Free-text search term")

    # Standard filters
    categories: str = Field("", description="Category slug(s)")
    tags: str = Field("", description="Tag name(s)")
    origin_country: str = Field("", description="Country of origin")
    keywords: str = Field("", description="Additional keywords")

    # Pagination / ordering
    page: int = Field(1, ge=1, description="Page number (1-indexed)")
    sort: str = Field("", description="Raw sort token, e.g. 'price:asc'")

    # "<from>,<to>", either side may be empty; "" means no price filter
    price: str = Field("", description="Price range token")

    # Dynamic filters, keys keep their prefix
    attribute_params: Dict[str, str] = Field(default_factory=dict, description="attributes.* filters")
    option_params: Dict[str, str] = Field(default_factory=dict, description="option.* filters")
    other_params: Dict[str, str] = Field(default_factory=dict, description="Passthrough parameters")

    def to_query_params(self) -> Dict[str, str]:
        """
        Flatten into the storefront search endpoint's query parameters.

        Dynamic parameters are forwarded verbatim, attribute and option filters
        after passthrough keys. Standard fields are written last and a dynamic
        key that collides with a standard name is dropped, so the price filter
        only ever comes from priceFrom/priceTo. Empty standard fields are left
        out; page is always sent.
        """
        params: Dict[str, str] = {}
        params.update(self.other_params)
        params.update(self.attribute_params)
        params.update(self.option_params)

        standard = (
            (SEARCH_PARAM, self.query),
            (CATEGORIES_PARAM, self.categories),
            (TAGS_PARAM, self.tags),
            (ORIGIN_COUNTRY_PARAM, self.origin_country),
            (KEYWORDS_PARAM, self.keywords),
            (SORT_PARAM, self.sort),
            (PRICE_PARAM, self.price),
        )
        for name, value in standard:
            params.pop(name, None)
            if value:
                params[name] = value
        params[PAGE_PARAM] = str(self.page)
        return params


# ============================================================================
# Response Models
# ============================================================================

class FacetCount(_CamelModel):
    """A single facet value with its document count."""
    name: str
    count: int


class PriceStat(_CamelModel):
    """Price bounds over the result set. A missing side stays None (0 is a real price)."""
    min: Optional[float] = None
    max: Optional[float] = None


class SearchFacets(_CamelModel):
    """Filter options derived from the engine's facet output."""
    price_stat: PriceStat = Field(default_factory=PriceStat)
    categories: List[FacetCount] = Field(default_factory=list)
    tags: List[FacetCount] = Field(default_factory=list)
    all_filters: Dict[str, Dict[str, int]] = Field(
        default_factory=dict,
        description="Complete facet distribution: facet name -> value -> count",
    )


class SearchResult(_CamelModel):
    """Fixed-shape search result; every top-level field is always populated."""
    data: List[Dict[str, Any]] = Field(default_factory=list, description="Product hits")
    count: int = Field(0, ge=0, description="Total matching products")
    total_pages: int = Field(0, ge=0)
    category_hierarchy: List[Dict[str, Any]] = Field(default_factory=list)
    facets: SearchFacets = Field(default_factory=SearchFacets)
