"""
Tests for readable catalog resources
"""
import json

from jokoui_mcp.services.resources import (
    ALL_COMPONENTS_URI,
    INTRODUCTION_URI,
    CatalogResources,
)
from jokoui_mcp.models.schemas.component_catalog import CatalogStore


def test_descriptors(service):
    uris = [d.uri for d in service.resources.list_resources()]

    assert uris == [
        "jokoui://components/all",
        "jokoui://components/application",
        "jokoui://components/marketing",
        "jokoui://docs/introduction",
    ]


def test_all_components_snapshot(service, catalog_records):
    content = service.resources.read(ALL_COMPONENTS_URI)

    assert content.mime_type == "application/json"
    assert json.loads(content.text) == [r.to_payload() for r in catalog_records]


def test_category_snapshot(service):
    content = service.resources.read("jokoui://components/marketing")

    records = json.loads(content.text)
    assert {r["category"] for r in records} == {"marketing"}
    assert len(records) == 4


def test_introduction_document(service):
    content = service.resources.read(INTRODUCTION_URI)

    assert content.mime_type == "text/markdown"
    assert content.text.startswith("# Joko UI")


def test_unknown_resource(service):
    content = service.resources.read("jokoui://components/dashboard")

    assert content.mime_type == "text/plain"
    assert content.text == "Resource not found: jokoui://components/dashboard"


def test_snapshot_follows_store_swap(catalog_records):
    store = CatalogStore()
    resources = CatalogResources(store)
    assert json.loads(resources.read(ALL_COMPONENTS_URI).text) == []

    store.replace(catalog_records)
    assert len(json.loads(resources.read(ALL_COMPONENTS_URI).text)) == len(catalog_records)
