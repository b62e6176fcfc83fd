"""
Catalog search and ranking.

Filters apply cumulatively: category, then tags, then the free-text query.
Ranking only looks at how strongly the query matches the component name.
"""
from typing import Iterable, List, Optional, Sequence

from jokoui_mcp.models.schemas.component_catalog import (
    CatalogStore,
    Category,
    ComponentRecord,
)
from jokoui_mcp.models.schemas.requests import DEFAULT_SEARCH_LIMIT

EXACT_NAME_SCORE = 3
PARTIAL_NAME_SCORE = 2
OTHER_MATCH_SCORE = 1


def matches_tags(record: ComponentRecord, tags: Sequence[str]) -> bool:
    """Every requested tag must be a substring of at least one record tag."""
    own = [t.lower() for t in record.tags]
    return all(any(tag.lower() in candidate for candidate in own) for tag in tags)


def matches_query(record: ComponentRecord, query: str) -> bool:
    q = query.lower()
    return (
        q in record.name.lower()
        or q in record.description.lower()
        or any(q in t.lower() for t in record.tags)
    )


def relevance(record: ComponentRecord, query: str) -> int:
    name = record.name.lower()
    q = query.lower()
    if name == q:
        return EXACT_NAME_SCORE
    if q in name:
        return PARTIAL_NAME_SCORE
    return OTHER_MATCH_SCORE


def rank(
    records: Iterable[ComponentRecord],
    query: Optional[str] = None,
    category: Optional[Category] = None,
    tags: Optional[Sequence[str]] = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> List[ComponentRecord]:
    results = list(records)

    if category is not None:
        results = [r for r in results if r.category is category]

    if tags:
        results = [r for r in results if matches_tags(r, tags)]

    if query:
        results = [r for r in results if matches_query(r, query)]
        # sorted() is stable, ties keep catalog order
        results = sorted(results, key=lambda r: relevance(r, query), reverse=True)

    return results[:limit]


class SearchRanker:
    """Searches the records held by a ``CatalogStore``."""

    def __init__(self, store: CatalogStore):
        self.store = store

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[Category] = None,
        tags: Optional[Sequence[str]] = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> List[ComponentRecord]:
        return rank(self.store.snapshot(), query=query, category=category, tags=tags, limit=limit)
