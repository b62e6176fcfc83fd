"""Component catalog domain types.

``ComponentRecord`` is the unit of the catalog, ``CatalogStore`` owns the
ordered sequence of records for the process lifetime. Records built by the
loader and records synthesized by the fallback probe go through the same
``build_component_record`` so both follow identical naming and tagging rules.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

GENERIC_TAG = "ui"

_SEGMENT_SPLIT = re.compile(r"[-_]")


class Category(str, Enum):
    """The two fixed partitions every component belongs to."""

    APPLICATION = "application"
    MARKETING = "marketing"

    @classmethod
    def ordered(cls) -> Tuple["Category", ...]:
        """Categories in lookup order: application first, then marketing."""
        return (cls.APPLICATION, cls.MARKETING)

    @property
    def description_suffix(self) -> str:
        if self is Category.APPLICATION:
            return "component for application UI"
        return "component for marketing pages"


class ComponentRecord(BaseModel):
    """A single catalog entry."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    id: str = Field(..., min_length=1, description="Filename-derived identifier")
    name: str = Field(..., description="Title-cased id")
    category: Category
    description: str
    tags: Tuple[str, ...] = Field(default_factory=tuple)
    url: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation with exactly the public keys."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "tags": list(self.tags),
            "url": self.url,
        }


class FetchResult(BaseModel):
    """Source text produced by a successful fallback probe."""

    model_config = ConfigDict(frozen=True)

    code: str
    category: Category
    url: str


class Resolution(BaseModel):
    """Outcome of resolving a component id."""

    model_config = ConfigDict(frozen=True)

    record: ComponentRecord
    discovered: bool = False
    fetched: Optional[FetchResult] = None


def to_title_case(component_id: str) -> str:
    """``hero-section`` -> ``Hero Section``; ``auth_forms`` -> ``Auth Forms``."""
    segments = [s for s in _SEGMENT_SPLIT.split(component_id) if s]
    return " ".join(s[:1].upper() + s[1:] for s in segments)


def canonical_url(site_base_url: str, category: Category, component_id: str) -> str:
    return f"{site_base_url.rstrip('/')}/{category.value}/{component_id}"


def build_component_record(
    component_id: str,
    category: Category,
    site_base_url: str,
) -> ComponentRecord:
    name = to_title_case(component_id)
    return ComponentRecord(
        id=component_id,
        name=name,
        category=category,
        description=f"{name} {category.description_suffix}",
        tags=(component_id, category.value, GENERIC_TAG),
        url=canonical_url(site_base_url, category, component_id),
    )


class CatalogStore:
    """
    Owner of the in-memory catalog.

    Written once at startup and read-only afterwards. ``replace`` swaps the whole
    sequence in a single assignment, so readers see either the old or the new
    catalog, never a mix.
    """

    def __init__(self, records: Iterable[ComponentRecord] = ()):
        self._records: Tuple[ComponentRecord, ...] = tuple(records)

    def snapshot(self) -> Tuple[ComponentRecord, ...]:
        return self._records

    def replace(self, records: Iterable[ComponentRecord]) -> None:
        self._records = tuple(records)

    def find(self, component_id: str) -> Optional[ComponentRecord]:
        return next((r for r in self._records if r.id == component_id), None)

    def by_category(self, category: Optional[Category]) -> List[ComponentRecord]:
        if category is None:
            return list(self._records)
        return [r for r in self._records if r.category is category]

    @property
    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)
