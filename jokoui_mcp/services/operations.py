"""
Catalog operations.

The six named operations the dispatchers (MCP tools, HTTP routes) expose. Each
one validates its raw arguments, runs against the resolver / ranker / fetcher /
writer, and returns an ``OperationResult``. No exception escapes ``_run``:
failures become structured error results.
"""
import asyncio
import uuid
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from jokoui_mcp.core.errors import ArgumentValidationError, ComponentServiceError
from jokoui_mcp.models.schemas.component_catalog import CatalogStore, Resolution
from jokoui_mcp.models.schemas.requests import (
    FetchAndImplementComponentRequest,
    FetchComponentRequest,
    GetComponentCodeRequest,
    ImplementComponentRequest,
    ListComponentsRequest,
    SearchComponentsRequest,
)
from jokoui_mcp.services.fetcher import ComponentFetcher
from jokoui_mcp.services.generators import generate_component_code
from jokoui_mcp.services.resolver import ComponentResolver
from jokoui_mcp.services.search import SearchRanker
from jokoui_mcp.services.writer import write_component
from jokoui_mcp.utils.logging import get_logger, log_context

logger = get_logger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)

FETCH_NEXT_STEPS = [
    "Review the code to understand structure",
    "Use 'implement_component' tool to save to file",
    "Or use 'fetch_and_implement_component' to do both in one step",
]

IMPLEMENT_NEXT_STEPS = [
    "Open the file to review the component",
    "Import it in your application",
    "Customize styling and functionality as needed",
]

DISCOVERED_NOTE = (
    "Note: This component was found in the repository but is not yet in the cached component list."
)


@dataclass
class OperationResult:
    """Payload of a finished operation, or the error that ended it."""

    payload: Dict[str, Any]
    error: Optional[ComponentServiceError] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, payload: Dict[str, Any]) -> "OperationResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: ComponentServiceError) -> "OperationResult":
        return cls(payload=error.to_dict(), error=error)

    @property
    def message(self) -> str:
        return self.error.message if self.error else ""


@dataclass(frozen=True)
class Retrieval:
    """Code retrieved for a component id or URL."""

    source: str
    code: str
    resolution: Optional[Resolution] = None

    @property
    def discovered(self) -> bool:
        return bool(self.resolution and self.resolution.discovered)


def build_instructions(component_id: str, url: Optional[str], discovered: bool) -> str:
    lines = [
        "Copy and paste this code into your project.",
        "",
        "1. Ensure you have Tailwind CSS installed and configured",
        f"2. Create a new component file (e.g., {component_id}.tsx)",
        "3. Paste code",
        "4. Customize as needed",
        "",
        f"Visit {url or ''} to view component live and see more examples.",
    ]
    if discovered:
        lines.append(DISCOVERED_NOTE)
    return "\n".join(lines)


def format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item.get("loc", ())) or "arguments"
        parts.append(f"{location}: {item.get('msg')}")
    return "; ".join(parts)


class ComponentOperations:
    """Operation layer over an injected catalog and its collaborators."""

    def __init__(
        self,
        store: CatalogStore,
        resolver: ComponentResolver,
        ranker: SearchRanker,
        fetcher: ComponentFetcher,
    ):
        self.store = store
        self.resolver = resolver
        self.ranker = ranker
        self.fetcher = fetcher

    # ------------------------------------------------------------------ #
    # Boundary helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _parse(model: Type[RequestT], arguments: Optional[Mapping[str, Any]]) -> RequestT:
        try:
            return model.model_validate(dict(arguments or {}))
        except ValidationError as e:
            raise ArgumentValidationError(format_validation_error(e)) from e

    async def _run(
        self,
        operation: str,
        handler: Callable[[], Awaitable[Dict[str, Any]]],
    ) -> OperationResult:
        with log_context(correlation_id=str(uuid.uuid4()), operation=operation):
            try:
                payload = await handler()
            except ComponentServiceError as e:
                logger.warning(
                    "operation.failed",
                    message=e.message,
                    extra={"operation": operation, "error": e.code},
                )
                return OperationResult.failure(e)
            except Exception as e:
                logger.error(
                    "operation.crashed",
                    extra={"operation": operation, "error_type": type(e).__name__},
                    exc_info=e,
                )
                return OperationResult.failure(ComponentServiceError(f"Error: {e}"))

            logger.debug("operation.completed", extra={"operation": operation})
            return OperationResult.ok(payload)

    async def _retrieve(self, component_id: Optional[str], url: Optional[str]) -> Retrieval:
        """Code for an explicit URL, or for a component id via the resolver."""
        if url:
            return Retrieval(source=url, code=await self.fetcher.fetch_code(url))

        resolution = await self.resolver.resolve(component_id)
        if resolution.fetched is not None:
            return Retrieval(
                source=resolution.fetched.url,
                code=resolution.fetched.code,
                resolution=resolution,
            )

        record = resolution.record
        source = record.url or self.fetcher.raw_url(record.category, record.id)
        return Retrieval(source=source, code=await self.fetcher.fetch_code(source), resolution=resolution)

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    async def list_components(self, arguments: Optional[Mapping[str, Any]] = None) -> OperationResult:
        async def handler():
            request = self._parse(ListComponentsRequest, arguments)
            components = self.store.by_category(request.category)
            return {
                "total": len(components),
                "components": [c.to_payload() for c in components],
            }

        return await self._run("list_components", handler)

    async def search_components(self, arguments: Optional[Mapping[str, Any]] = None) -> OperationResult:
        async def handler():
            request = self._parse(SearchComponentsRequest, arguments)
            results = self.ranker.search(
                query=request.query,
                category=request.category,
                tags=request.tags,
                limit=request.limit,
            )
            return {
                "query": request.query or "(all)",
                "total": len(results),
                "components": [c.to_payload() for c in results],
            }

        return await self._run("search_components", handler)

    async def get_component_code(self, arguments: Optional[Mapping[str, Any]] = None) -> OperationResult:
        async def handler():
            request = self._parse(GetComponentCodeRequest, arguments)
            resolution = await self.resolver.resolve(request.component_id)
            record = resolution.record

            payload: Dict[str, Any] = {
                "component": record.to_payload(),
                "code": generate_component_code(record, request.language),
                "instructions": build_instructions(record.id, record.url, resolution.discovered),
            }
            if resolution.discovered:
                payload["newlyDiscovered"] = True
            return payload

        return await self._run("get_component_code", handler)

    async def fetch_component(self, arguments: Optional[Mapping[str, Any]] = None) -> OperationResult:
        async def handler():
            request = self._parse(FetchComponentRequest, arguments)
            retrieval = await self._retrieve(request.component_id, request.url)

            payload: Dict[str, Any] = {
                "source": retrieval.source,
                "code": retrieval.code,
                "info": "Successfully fetched component code from Joko UI repository",
                "nextSteps": list(FETCH_NEXT_STEPS),
            }
            if retrieval.discovered:
                record = retrieval.resolution.record
                payload["component"] = {
                    "id": record.id,
                    "name": record.name,
                    "category": record.category.value,
                    "url": record.url,
                }
                payload["info"] = (
                    f"Successfully fetched component '{record.id}' from GitHub repository "
                    "(newly added, not in cache)"
                )
            return payload

        return await self._run("fetch_component", handler)

    async def implement_component(self, arguments: Optional[Mapping[str, Any]] = None) -> OperationResult:
        async def handler():
            request = self._parse(ImplementComponentRequest, arguments)
            outcome = await asyncio.to_thread(
                write_component, request.code, request.output_path, request.create_directories
            )
            return {
                "success": True,
                "outputPath": outcome.output_path,
                "bytesWritten": outcome.bytes_written,
                "info": "Component successfully written to file",
            }

        return await self._run("implement_component", handler)

    async def fetch_and_implement_component(
        self, arguments: Optional[Mapping[str, Any]] = None
    ) -> OperationResult:
        async def handler():
            request = self._parse(FetchAndImplementComponentRequest, arguments)
            retrieval = await self._retrieve(request.component_id, request.url)
            outcome = await asyncio.to_thread(
                write_component, retrieval.code, request.output_path, request.create_directories
            )

            info = "Successfully fetched and implemented component"
            if retrieval.discovered:
                info = (
                    f"Successfully fetched and implemented component '{request.component_id}' "
                    "from GitHub repository (newly added, not in cache)"
                )
            payload: Dict[str, Any] = {"success": True}
            if request.component_id:
                payload["component"] = request.component_id
            payload.update(
                {
                    "source": retrieval.source,
                    "outputPath": outcome.output_path,
                    "bytesWritten": outcome.bytes_written,
                    "info": info,
                    "nextSteps": list(IMPLEMENT_NEXT_STEPS),
                }
            )
            return payload

        return await self._run("fetch_and_implement_component", handler)

    def operation_names(self) -> List[str]:
        return [
            "list_components",
            "search_components",
            "get_component_code",
            "fetch_component",
            "implement_component",
            "fetch_and_implement_component",
        ]

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> OperationResult:
        """Run an operation by name."""
        if name not in self.operation_names():
            return OperationResult.failure(ComponentServiceError(f"Unknown tool: {name}"))
        return await getattr(self, name)(arguments)
