"""
Component source retrieval.

Two entry points share one ``httpx.AsyncClient``:

- ``probe`` looks a component id up directly in the raw-content endpoint, one
  category at a time. A miss is ``None``, never an exception.
- ``fetch_code`` downloads source for a URL. Canonical catalog URLs are
  rewritten to the raw-content endpoint; anything else is fetched verbatim.
"""
import re
from typing import Optional
from urllib.parse import urlparse

import httpx

from jokoui_mcp.config import Settings
from jokoui_mcp.core.errors import FetchFailedError
from jokoui_mcp.models.schemas.component_catalog import (
    Category,
    FetchResult,
    canonical_url,
)
from jokoui_mcp.utils.logging import get_logger

logger = get_logger(__name__)

_CANONICAL_PATH = re.compile(
    r"components/(?P<category>application|marketing)/(?P<name>[^/?#]+)"
)


class ComponentFetcher:
    """Fetches raw component source from the remote repository."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    def raw_url(self, category: Category, name: str) -> str:
        return f"{self.settings.raw_content_base_url}/{category.value}/{name}{self.settings.source_extension}"

    def to_raw_url(self, url: str) -> Optional[str]:
        """Raw-content URL for a canonical catalog page URL, else ``None``."""
        host = urlparse(url).hostname
        site_host = self.settings.site_host
        if not host or not site_host or not (host == site_host or host.endswith("." + site_host)):
            return None
        match = _CANONICAL_PATH.search(url)
        if not match:
            return None
        return self.raw_url(Category(match.group("category")), match.group("name"))

    async def probe(self, component_id: str) -> Optional[FetchResult]:
        """
        Direct lookup of ``component_id`` across categories.

        Categories are tried in order, sequentially. The first HTTP success wins;
        network errors and non-success statuses count as a miss for that
        category only.
        """
        for category in Category.ordered():
            raw_url = self.raw_url(category, component_id)
            logger.debug("fallback.probe.request", extra={"url": raw_url, "category": category.value})

            try:
                response = await self.client.get(raw_url)
            except httpx.HTTPError as e:
                logger.warning(
                    "fallback.probe.error",
                    extra={"url": raw_url, "error_type": type(e).__name__, "error": str(e)},
                )
                continue

            if response.is_success:
                logger.info(
                    "fallback.probe.hit",
                    extra={"component_id": component_id, "category": category.value},
                )
                return FetchResult(
                    code=response.text,
                    category=category,
                    url=canonical_url(self.settings.site_base_url, category, component_id),
                )

            logger.debug(
                "fallback.probe.miss",
                extra={"url": raw_url, "status": response.status_code},
            )

        logger.info("fallback.probe.exhausted", extra={"component_id": component_id})
        return None

    async def fetch_code(self, url: str) -> str:
        """
        Download component source.

        Raises:
            FetchFailedError: non-success status (with ``status_code``) or
                network fault (``status_code`` is ``None``).
        """
        target = self.to_raw_url(url) or url
        if target != url:
            logger.debug("fetcher.url.rewritten", extra={"url": url, "raw_url": target})

        try:
            response = await self.client.get(target)
        except httpx.HTTPError as e:
            logger.error("fetcher.request.failed", extra={"url": target}, exc_info=e)
            raise FetchFailedError(target, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(
                "fetcher.request.unsuccessful",
                extra={"url": target, "status": response.status_code},
            )
            raise FetchFailedError(
                target,
                response.reason_phrase or "request failed",
                status_code=response.status_code,
            )

        logger.info("fetcher.request.completed", extra={"url": target, "chars": len(response.text)})
        return response.text
