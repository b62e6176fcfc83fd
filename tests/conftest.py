"""
Pytest configuration and fixtures
"""
from typing import AsyncIterator, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from jokoui_mcp.config import Settings
from jokoui_mcp.models.schemas.component_catalog import (
    Category,
    ComponentRecord,
    build_component_record,
)
from jokoui_mcp.services.container import ComponentService

SITE_BASE = "https://jokoui.web.id/components"
LISTING_BASE = "https://api.github.test/repos/jokoui/jokoui/contents/components"
RAW_BASE = "https://raw.github.test/jokoui/jokoui/main/components"


class FakeRemote:
    """
    In-memory stand-in for the listing API, the raw-content host and any
    other URL. Records every request it serves.
    """

    def __init__(self):
        self.listings: Dict[Category, object] = {
            Category.APPLICATION: [],
            Category.MARKETING: [],
        }
        self.listing_status: Dict[Category, int] = {
            Category.APPLICATION: 200,
            Category.MARKETING: 200,
        }
        self.raw_files: Dict[Tuple[str, str], str] = {}
        self.pages: Dict[str, Tuple[int, str]] = {}
        self.broken_urls: set = set()
        self.requests: List[httpx.Request] = []

    def add_source(self, category: Category, component_id: str, code: str) -> None:
        self.raw_files[(category.value, component_id)] = code

    def urls(self) -> List[str]:
        return [str(r.url) for r in self.requests]

    def raw_requests(self) -> List[str]:
        return [u for u in self.urls() if u.startswith(RAW_BASE)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)

        if url in self.broken_urls:
            raise httpx.ConnectError("connection refused", request=request)

        for category in Category.ordered():
            if url == f"{LISTING_BASE}/{category.value}":
                status = self.listing_status[category]
                body = self.listings[category]
                if isinstance(body, str):
                    return httpx.Response(status, text=body)
                return httpx.Response(status, json=body)

        if url.startswith(RAW_BASE + "/"):
            category, _, filename = url[len(RAW_BASE) + 1:].partition("/")
            component_id = filename[: -len(".tsx")] if filename.endswith(".tsx") else None
            code = self.raw_files.get((category, component_id))
            if code is None:
                return httpx.Response(404, text="404: Not Found")
            return httpx.Response(200, text=code)

        if url in self.pages:
            status, text = self.pages[url]
            return httpx.Response(status, text=text)

        return httpx.Response(404, text="not found")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        site_base_url=SITE_BASE,
        listing_api_base_url=LISTING_BASE,
        raw_content_base_url=RAW_BASE,
        request_timeout=5.0,
    )


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest_asyncio.fixture
async def http_client(remote: FakeRemote, settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(remote.handler),
        headers={"User-Agent": settings.user_agent},
    )
    yield client
    await client.aclose()


def make_record(component_id: str, category: Category, extra_tags: Optional[List[str]] = None) -> ComponentRecord:
    record = build_component_record(component_id, category, SITE_BASE)
    if extra_tags:
        record = record.model_copy(update={"tags": record.tags + tuple(extra_tags)})
    return record


@pytest.fixture
def catalog_records() -> List[ComponentRecord]:
    """Fixed catalog used across operation tests"""
    return [
        make_record("alerts", Category.APPLICATION),
        make_record("auth-forms", Category.APPLICATION),
        make_record("buttons", Category.APPLICATION),
        make_record("banner", Category.MARKETING, extra_tags=["hero"]),
        make_record("hero-section", Category.MARKETING),
        make_record("hero", Category.MARKETING),
        make_record("pricing_table", Category.MARKETING),
    ]


@pytest.fixture
def service(settings: Settings, http_client: httpx.AsyncClient, catalog_records) -> ComponentService:
    return ComponentService(config=settings, client=http_client, records=catalog_records)


@pytest.fixture
def empty_service(settings: Settings, http_client: httpx.AsyncClient) -> ComponentService:
    return ComponentService(config=settings, client=http_client)
