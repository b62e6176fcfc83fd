"""
Component resolver.

Looks ids up in the catalog first; on a miss it asks the fetcher to probe the
remote repository so components added upstream after startup are still found.
Discovered records are returned to the caller only and never written back into
the catalog.
"""
from jokoui_mcp.config import Settings
from jokoui_mcp.core.errors import ComponentNotFoundError
from jokoui_mcp.models.schemas.component_catalog import (
    CatalogStore,
    Resolution,
    build_component_record,
)
from jokoui_mcp.services.fetcher import ComponentFetcher
from jokoui_mcp.utils.logging import get_logger

logger = get_logger(__name__)


class ComponentResolver:

    def __init__(self, store: CatalogStore, fetcher: ComponentFetcher, settings: Settings):
        self.store = store
        self.fetcher = fetcher
        self.settings = settings

    async def resolve(self, component_id: str) -> Resolution:
        """
        Resolve ``component_id`` to a record.

        Raises:
            ComponentNotFoundError: absent from the catalog and from every
                fallback category.
        """
        record = self.store.find(component_id)
        if record is not None:
            logger.debug("resolver.catalog.hit", extra={"component_id": component_id})
            return Resolution(record=record)

        logger.info(
            "resolver.catalog.miss",
            message=f"Component not found in loaded list: {component_id}. Trying fallback probe...",
            extra={"component_id": component_id, "catalog_size": len(self.store)},
        )

        fetched = await self.fetcher.probe(component_id)
        if fetched is None:
            raise ComponentNotFoundError(component_id)

        record = build_component_record(component_id, fetched.category, self.settings.site_base_url)
        return Resolution(record=record, discovered=True, fetched=fetched)
