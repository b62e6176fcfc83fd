"""
Error taxonomy for the component catalog service.

Every per-operation failure is one of these and is converted to a structured
error result at the operation boundary. ``CatalogLoadError`` is the exception:
it never leaves the catalog loader.
"""
from typing import Any, Dict, List, Optional


class ComponentServiceError(Exception):
    """Base class for errors surfaced to operation callers."""

    code = "component_service_error"
    http_status = 500

    def __init__(self, message: str, next_steps: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.next_steps = list(next_steps or [])

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.code, "message": self.message}
        if self.next_steps:
            payload["nextSteps"] = self.next_steps
        return payload


class ArgumentValidationError(ComponentServiceError):
    """Malformed operation arguments."""

    code = "validation_error"
    http_status = 422

    def __init__(self, detail: str):
        super().__init__(f"Validation error: {detail}")
        self.detail = detail


class ComponentNotFoundError(ComponentServiceError):
    """Id absent from the catalog and from every fallback category."""

    code = "not_found"
    http_status = 404

    def __init__(self, component_id: str):
        super().__init__(
            f"Component not found: {component_id}. "
            "Use list_components to see available components.",
            next_steps=[
                "Use 'list_components' to see available components",
                "Use 'search_components' to find a component by name or tag",
            ],
        )
        self.component_id = component_id


class FetchFailedError(ComponentServiceError):
    """Non-success HTTP status or network fault while retrieving code."""

    code = "fetch_failed"
    http_status = 502

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        detail = f"HTTP {status_code}: {reason}" if status_code is not None else reason
        super().__init__(
            f"Failed to fetch component: {detail}",
            next_steps=[
                "Try providing a direct URL",
                "Check if the component exists in the repository",
            ],
        )
        self.url = url
        self.reason = reason
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["url"] = self.url
        payload["status"] = self.status_code
        return payload


class WriteFailedError(ComponentServiceError):
    """Filesystem error while persisting component code."""

    code = "write_failed"
    http_status = 500

    def __init__(self, output_path: str, reason: str):
        super().__init__(f"Failed to write component: {reason}")
        self.output_path = output_path
        self.reason = reason


class CatalogLoadError(Exception):
    """Catalog could not be built. Logged by the loader, never surfaced."""

    code = "catalog_load_failed"

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
