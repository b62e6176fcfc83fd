"""
Tests for the HTTP surface
"""
import pytest
from fastapi.testclient import TestClient

from jokoui_mcp.main import create_app
from jokoui_mcp.models.schemas.component_catalog import Category


@pytest.fixture
def api(service):
    app = create_app(use_lifespan=False)
    app.state.component_service = service
    return TestClient(app)


def test_root(api):
    response = api.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_readiness_reports_catalog_size(api, catalog_records):
    body = api.get("/health/ready").json()

    assert body["ready"] is True
    assert body["status"] == "ready"
    assert body["catalog_size"] == len(catalog_records)


def test_readiness_degraded_when_catalog_empty(empty_service):
    app = create_app(use_lifespan=False)
    app.state.component_service = empty_service

    body = TestClient(app).get("/health/ready").json()

    assert body["status"] == "degraded"
    assert body["ready"] is True


def test_list_components(api):
    response = api.get("/api/v1/components", params={"category": "marketing"})

    assert response.status_code == 200
    assert response.json()["total"] == 4
    assert response.headers["X-Correlation-ID"]


def test_search_components(api):
    response = api.get("/api/v1/components/search", params={"query": "hero", "tags": ["marketing"]})

    assert [c["id"] for c in response.json()["components"]] == ["hero", "hero-section", "banner"]


def test_search_limit_out_of_range(api):
    response = api.get("/api/v1/components/search", params={"limit": 51})

    assert response.status_code == 422
    assert response.json()["error"] == "validation_error"


def test_component_code_not_found(api):
    response = api.get("/api/v1/components/unknown-thing/code")

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_fetch_and_implement(api, remote, tmp_path):
    remote.add_source(Category.APPLICATION, "buttons", "export function Buttons() {}\n")
    target = tmp_path / "components" / "Buttons.tsx"

    response = api.post(
        "/api/v1/components/fetch-and-implement",
        json={"componentId": "buttons", "outputPath": str(target)},
    )

    assert response.status_code == 200
    assert target.read_text() == "export function Buttons() {}\n"


def test_fetch_failure_maps_to_bad_gateway(api):
    response = api.post("/api/v1/components/fetch", json={"componentId": "alerts"})

    assert response.status_code == 502
    assert response.json()["status"] == 404


def test_read_resource(api):
    response = api.get("/api/v1/resources/read", params={"uri": "jokoui://docs/introduction"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
