"""
Schema package for the component catalog service.

Domain records and the argument models of every catalog operation.
"""

from .component_catalog import (
    Category,
    ComponentRecord,
    FetchResult,
    Resolution,
    CatalogStore,
    build_component_record,
    canonical_url,
    to_title_case,
)

from .requests import (
    ListComponentsRequest,
    SearchComponentsRequest,
    GetComponentCodeRequest,
    FetchComponentRequest,
    ImplementComponentRequest,
    FetchAndImplementComponentRequest,
    MAX_SEARCH_LIMIT,
    DEFAULT_SEARCH_LIMIT,
)

__all__ = [
    "Category",
    "ComponentRecord",
    "FetchResult",
    "Resolution",
    "CatalogStore",
    "build_component_record",
    "canonical_url",
    "to_title_case",
    "ListComponentsRequest",
    "SearchComponentsRequest",
    "GetComponentCodeRequest",
    "FetchComponentRequest",
    "ImplementComponentRequest",
    "FetchAndImplementComponentRequest",
    "MAX_SEARCH_LIMIT",
    "DEFAULT_SEARCH_LIMIT",
]
