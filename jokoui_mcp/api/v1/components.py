"""Component catalog API endpoints."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from jokoui_mcp.services.container import ComponentService
from jokoui_mcp.services.operations import OperationResult

router = APIRouter()


def get_component_service(request: Request) -> ComponentService:
    return request.app.state.component_service


def _respond(result: OperationResult) -> JSONResponse:
    if result.is_error:
        return JSONResponse(status_code=result.error.http_status, content=result.payload)
    return JSONResponse(content=result.payload)


def _drop_none(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in arguments.items() if v is not None}


@router.get(
    "/components",
    tags=["Components"],
    summary="List components",
    description="Lists every catalog component, optionally filtered by category."
)
async def list_components(
    category: Optional[str] = None,
    service: ComponentService = Depends(get_component_service),
) -> JSONResponse:
    return _respond(await service.operations.list_components(_drop_none({"category": category})))


@router.get(
    "/components/search",
    tags=["Components"],
    summary="Search components",
    description="Filters by category and tags, then ranks by how well the query matches the name."
)
async def search_components(
    query: Optional[str] = None,
    category: Optional[str] = None,
    tags: Optional[List[str]] = Query(default=None),
    limit: Optional[int] = None,
    service: ComponentService = Depends(get_component_service),
) -> JSONResponse:
    arguments = _drop_none({"query": query, "category": category, "tags": tags, "limit": limit})
    return _respond(await service.operations.search_components(arguments))


@router.get(
    "/components/{component_id}/code",
    tags=["Components"],
    summary="Get component starter code",
)
async def get_component_code(
    component_id: str,
    language: Optional[str] = None,
    service: ComponentService = Depends(get_component_service),
) -> JSONResponse:
    arguments = _drop_none({"componentId": component_id, "language": language})
    return _respond(await service.operations.get_component_code(arguments))


@router.post(
    "/components/fetch",
    tags=["Components"],
    summary="Fetch component source",
)
async def fetch_component(
    arguments: Dict[str, Any] = Body(...),
    service: ComponentService = Depends(get_component_service),
) -> JSONResponse:
    return _respond(await service.operations.fetch_component(arguments))


@router.post(
    "/components/implement",
    tags=["Components"],
    summary="Write component code to a file",
)
async def implement_component(
    arguments: Dict[str, Any] = Body(...),
    service: ComponentService = Depends(get_component_service),
) -> JSONResponse:
    return _respond(await service.operations.implement_component(arguments))


@router.post(
    "/components/fetch-and-implement",
    tags=["Components"],
    summary="Fetch component source and write it to a file",
)
async def fetch_and_implement_component(
    arguments: Dict[str, Any] = Body(...),
    service: ComponentService = Depends(get_component_service),
) -> JSONResponse:
    return _respond(await service.operations.fetch_and_implement_component(arguments))


@router.get(
    "/resources",
    tags=["Resources"],
    summary="List readable catalog resources",
)
async def list_resources(service: ComponentService = Depends(get_component_service)) -> Dict[str, Any]:
    return {"resources": [d.to_payload() for d in service.resources.list_resources()]}


@router.get(
    "/resources/read",
    tags=["Resources"],
    summary="Read a catalog resource by URI",
)
async def read_resource(
    uri: str,
    service: ComponentService = Depends(get_component_service),
) -> PlainTextResponse:
    content = service.resources.read(uri)
    return PlainTextResponse(content.text, media_type=content.mime_type)
