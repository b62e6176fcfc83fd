"""
Catalog loader.

Builds the component list from the repository's directory listing. Both
category listings are requested concurrently and the load is all-or-nothing: if
either listing fails the result is an empty catalog, which the resolver handles
through its fallback probe.
"""
import asyncio
from typing import Any, List

import httpx

from jokoui_mcp.config import Settings
from jokoui_mcp.core.errors import CatalogLoadError
from jokoui_mcp.models.schemas.component_catalog import (
    Category,
    ComponentRecord,
    build_component_record,
)
from jokoui_mcp.utils.logging import get_logger, trace_async

logger = get_logger(__name__)


class CatalogLoader:
    """Maps remote directory listings into component records."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    def listing_url(self, category: Category) -> str:
        return f"{self.settings.listing_api_base_url}/{category.value}"

    def is_component_entry(self, entry: Any) -> bool:
        if not isinstance(entry, dict):
            return False
        name = entry.get("name")
        return (
            entry.get("type") == "file"
            and isinstance(name, str)
            and name.endswith(self.settings.source_extension)
            and name not in self.settings.reserved_index_filenames
        )

    def records_from_listing(self, category: Category, entries: List[Any]) -> List[ComponentRecord]:
        extension = self.settings.source_extension
        records = []
        for entry in entries:
            if not self.is_component_entry(entry):
                continue
            component_id = entry["name"][: -len(extension)]
            if not component_id:
                continue
            records.append(
                build_component_record(component_id, category, self.settings.site_base_url)
            )
        return records

    async def _fetch_listing(self, category: Category) -> List[Any]:
        url = self.listing_url(category)
        response = await self.client.get(url)
        if not response.is_success:
            raise CatalogLoadError(
                f"Listing for '{category.value}' returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogLoadError(f"Listing for '{category.value}' is not valid JSON") from e
        if not isinstance(payload, list):
            raise CatalogLoadError(f"Listing for '{category.value}' is not a directory listing")
        return payload

    @trace_async("catalog.load")
    async def load(self) -> List[ComponentRecord]:
        """
        Fetch both category listings concurrently and build the catalog.

        Never raises: any failure yields an empty list.
        """
        categories = Category.ordered()
        logger.info("catalog.load.started", extra={"categories": [c.value for c in categories]})

        results = await asyncio.gather(
            *(self._fetch_listing(category) for category in categories),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            for failure in failures:
                if not isinstance(failure, Exception):
                    raise failure
            for failure in failures:
                logger.error(
                    "catalog.load.failed",
                    message="Error fetching component data; continuing with an empty catalog",
                    extra={"error_type": type(failure).__name__},
                    exc_info=failure,
                )
            return []

        components: List[ComponentRecord] = []
        for category, entries in zip(categories, results):
            components.extend(self.records_from_listing(category, entries))

        logger.info("catalog.load.completed", extra={"total": len(components)})
        return components
