"""
Tests for catalog records and the catalog store
"""
import pytest
from pydantic import ValidationError

from jokoui_mcp.models.schemas.component_catalog import (
    CatalogStore,
    Category,
    build_component_record,
    to_title_case,
)

from tests.conftest import SITE_BASE


@pytest.mark.parametrize(
    "component_id, expected",
    [
        ("hero-section", "Hero Section"),
        ("pricing_table", "Pricing Table"),
        ("faq", "Faq"),
        ("description-list_v2", "Description List V2"),
        ("ctaBanner", "CtaBanner"),
        ("double--dash", "Double Dash"),
    ],
)
def test_title_case(component_id, expected):
    assert to_title_case(component_id) == expected


def test_build_record_follows_naming_rules():
    record = build_component_record("hero-section", Category.MARKETING, SITE_BASE)

    assert record.id == "hero-section"
    assert record.name == "Hero Section"
    assert record.description == "Hero Section component for marketing pages"
    assert record.tags == ("hero-section", "marketing", "ui")
    assert record.url == f"{SITE_BASE}/marketing/hero-section"


def test_application_description():
    record = build_component_record("alerts", Category.APPLICATION, SITE_BASE)
    assert record.description == "Alerts component for application UI"


def test_record_payload_keys():
    record = build_component_record("alerts", Category.APPLICATION, SITE_BASE)
    payload = record.to_payload()

    assert list(payload) == ["id", "name", "category", "description", "tags", "url"]
    assert payload["category"] == "application"
    assert payload["tags"] == ["alerts", "application", "ui"]


def test_record_is_immutable():
    record = build_component_record("alerts", Category.APPLICATION, SITE_BASE)
    with pytest.raises(ValidationError):
        record.id = "other"


def test_category_is_closed():
    with pytest.raises(ValueError):
        Category("dashboard")
    assert Category.ordered() == (Category.APPLICATION, Category.MARKETING)


def test_store_find_and_filter(catalog_records):
    store = CatalogStore(catalog_records)

    assert store.find("hero").name == "Hero"
    assert store.find("missing") is None
    assert all(r.category is Category.APPLICATION for r in store.by_category(Category.APPLICATION))
    assert len(store.by_category(None)) == len(catalog_records)


def test_store_replace_swaps_whole_catalog(catalog_records):
    store = CatalogStore(catalog_records)
    before = store.snapshot()

    store.replace(catalog_records[:2])

    assert len(store) == 2
    # earlier snapshots are unaffected by the swap
    assert len(before) == len(catalog_records)


def test_empty_store_is_valid():
    store = CatalogStore()
    assert store.is_empty
    assert store.snapshot() == ()
