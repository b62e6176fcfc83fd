"""
Service container.

Owns the shared HTTP client and the catalog store, and wires the loader,
fetcher, resolver, ranker, resources and operations around them. Both
dispatchers (MCP server and FastAPI app) build one of these at startup.
"""
from typing import Iterable, Optional

import httpx

from jokoui_mcp.config import Settings, settings as default_settings
from jokoui_mcp.models.schemas.component_catalog import CatalogStore, ComponentRecord
from jokoui_mcp.services.catalog_loader import CatalogLoader
from jokoui_mcp.services.fetcher import ComponentFetcher
from jokoui_mcp.services.operations import ComponentOperations
from jokoui_mcp.services.resolver import ComponentResolver
from jokoui_mcp.services.resources import CatalogResources
from jokoui_mcp.services.search import SearchRanker
from jokoui_mcp.utils.logging import get_logger

logger = get_logger(__name__)


def create_http_client(config: Settings) -> httpx.AsyncClient:
    """HTTP client shared by every outbound request."""
    return httpx.AsyncClient(
        headers={"User-Agent": config.user_agent},
        timeout=config.request_timeout,
        follow_redirects=True,
    )


class ComponentService:
    """
    Everything one process needs to answer catalog operations.

    Args:
        config: Settings to use (defaults to the process settings)
        client: HTTP client; created from ``config`` when omitted
        records: Initial catalog, mainly for tests
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        records: Iterable[ComponentRecord] = (),
    ):
        self.settings = config or default_settings
        self._owns_client = client is None
        self.client = client or create_http_client(self.settings)

        self.store = CatalogStore(records)
        self.loader = CatalogLoader(self.client, self.settings)
        self.fetcher = ComponentFetcher(self.client, self.settings)
        self.resolver = ComponentResolver(self.store, self.fetcher, self.settings)
        self.ranker = SearchRanker(self.store)
        self.resources = CatalogResources(self.store)
        self.operations = ComponentOperations(self.store, self.resolver, self.ranker, self.fetcher)

    async def load_catalog(self) -> int:
        """Build the catalog and swap it into the store. Returns its size."""
        records = await self.loader.load()
        self.store.replace(records)
        if self.store.is_empty:
            logger.warning(
                "catalog.degraded",
                message="Catalog is empty; lookups will use the fallback probe",
            )
        return len(self.store)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "ComponentService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
