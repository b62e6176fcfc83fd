"""
Catalog services: loading, resolution, search, retrieval and persistence.
"""

from .container import ComponentService, create_http_client
from .operations import ComponentOperations, OperationResult

__all__ = [
    "ComponentService",
    "create_http_client",
    "ComponentOperations",
    "OperationResult",
]
