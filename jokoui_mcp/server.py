"""
MCP server exposing the component catalog.

Tools map one-to-one onto ``ComponentOperations``; resources map onto
``CatalogResources``. The catalog is loaded once in the server lifespan.
"""
import argparse
import json
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from jokoui_mcp.config import settings
from jokoui_mcp.core.logger import setup_logging
from jokoui_mcp.services.container import ComponentService
from jokoui_mcp.services.operations import OperationResult
from jokoui_mcp.services.resources import RESOURCE_DESCRIPTORS
from jokoui_mcp.utils.logging import get_logger

logger = get_logger(__name__)

TRANSPORTS = ("stdio", "sse", "streamable-http")


def _render(result: OperationResult) -> str:
    if result.is_error:
        raise ToolError("\n".join([result.message, *result.error.next_steps]))
    return json.dumps(result.payload, indent=2)


def _drop_none(**arguments: Any) -> Dict[str, Any]:
    return {k: v for k, v in arguments.items() if v is not None}


def create_server(service: ComponentService, load_catalog: bool = True) -> FastMCP:
    """
    Build the MCP server around ``service``.

    Args:
        service: Wired component service
        load_catalog: Load the catalog when the server starts
    """

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[ComponentService]:
        if load_catalog:
            total = await service.load_catalog()
            logger.info("mcp.startup.catalog_loaded", extra={"total": total})
        try:
            yield service
        finally:
            await service.aclose()
            logger.info("mcp.shutdown.completed")

    mcp = FastMCP(settings.app_name, lifespan=lifespan)
    operations = service.operations

    @mcp.tool()
    async def list_components(category: Optional[str] = None) -> str:
        """
        Lists all available Joko UI components with their IDs, names,
        categories, descriptions, and tags.

        Args:
            category: Optional filter, "application" or "marketing"
        """
        return _render(await operations.list_components(_drop_none(category=category)))

    @mcp.tool()
    async def search_components(
        query: Optional[str] = None,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
        limit: Optional[int] = None,
    ) -> str:
        """
        Search Joko UI components by name, description, or tags, ranked by
        how closely the name matches the query.

        Args:
            query: Search query (e.g. 'auth', 'pricing', 'hero')
            category: Optional filter, "application" or "marketing"
            tags: Optional tags that must all match
            limit: Maximum number of results (default: 10, max: 50)
        """
        return _render(await operations.search_components(
            _drop_none(query=query, category=category, tags=tags, limit=limit)
        ))

    @mcp.tool()
    async def get_component_code(componentId: str, language: Optional[str] = None) -> str:
        """
        Get a starter code template and usage instructions for a component.

        Args:
            componentId: Component ID (e.g. 'hero-section')
            language: "tsx" (default) or "typescript"
        """
        return _render(await operations.get_component_code(
            _drop_none(componentId=componentId, language=language)
        ))

    @mcp.tool()
    async def fetch_component(componentId: Optional[str] = None, url: Optional[str] = None) -> str:
        """
        Fetch the actual component source code from the Joko UI repository.

        Args:
            componentId: Component ID (e.g. 'hero-section')
            url: Direct URL to the component; overrides componentId
        """
        return _render(await operations.fetch_component(_drop_none(componentId=componentId, url=url)))

    @mcp.tool()
    async def implement_component(
        code: str,
        outputPath: str,
        createDirectories: Optional[bool] = None,
    ) -> str:
        """
        Write component code to a file.

        Args:
            code: The component source code
            outputPath: File path (e.g. ./src/components/Hero.tsx)
            createDirectories: Create parent directories if missing (default: true)
        """
        return _render(await operations.implement_component(
            _drop_none(code=code, outputPath=outputPath, createDirectories=createDirectories)
        ))

    @mcp.tool()
    async def fetch_and_implement_component(
        outputPath: str,
        componentId: Optional[str] = None,
        url: Optional[str] = None,
        createDirectories: Optional[bool] = None,
    ) -> str:
        """
        Fetch a component from the repository and write it to a file in one step.

        Args:
            outputPath: File path (e.g. ./src/components/Hero.tsx)
            componentId: Component ID (e.g. 'hero-section')
            url: Direct URL to the component; overrides componentId
            createDirectories: Create parent directories if missing (default: true)
        """
        return _render(await operations.fetch_and_implement_component(
            _drop_none(
                componentId=componentId,
                outputPath=outputPath,
                url=url,
                createDirectories=createDirectories,
            )
        ))

    for descriptor in RESOURCE_DESCRIPTORS:
        _register_resource(mcp, service, descriptor.uri, descriptor.name, descriptor.description, descriptor.mime_type)

    return mcp


def _register_resource(mcp: FastMCP, service: ComponentService, uri: str, name: str, description: str, mime_type: str):
    @mcp.resource(uri, name=name, description=description, mime_type=mime_type)
    def read_resource() -> str:
        return service.resources.read(uri).text


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the MCP server."""
    parser = argparse.ArgumentParser(description="Joko UI component catalog MCP server")
    parser.add_argument("--transport", choices=TRANSPORTS, default="stdio")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        server = create_server(ComponentService())
        logger.info("mcp.server.starting", extra={"transport": args.transport})
        server.run(transport=args.transport)
    except Exception as e:
        logger.critical("mcp.server.fatal", message="Fatal error in main()", exc_info=e)
        sys.exit(1)


if __name__ == "__main__":
    main()
