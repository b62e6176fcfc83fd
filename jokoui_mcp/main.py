"""
FastAPI application exposing the component catalog over HTTP.

Mirrors the MCP tools as REST routes and adds liveness/readiness probes.
"""
from contextlib import asynccontextmanager
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jokoui_mcp.config import settings
from jokoui_mcp.core.logger import setup_logging
from jokoui_mcp.services.container import ComponentService
from jokoui_mcp.utils.logging import get_logger, log_context
from jokoui_mcp.api.v1 import health, components

logger = get_logger(__name__)


# ============================================================================
# APPLICATION LIFESPAN
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the component service and load the catalog once."""

    with log_context(correlation_id=str(uuid.uuid4()), operation="startup"):
        logger.info(
            "app.startup.started",
            extra={"service": settings.app_name, "version": settings.app_version}
        )

        service = ComponentService()
        total = await service.load_catalog()
        app.state.component_service = service

        logger.info("app.startup.completed", extra={"catalog_size": total})

    yield

    with log_context(correlation_id=str(uuid.uuid4()), operation="shutdown"):
        await service.aclose()
        logger.info("app.shutdown.completed")


def create_app(use_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description="Joko UI component catalog: list, search, fetch and implement components",
        lifespan=lifespan if use_lifespan else None,
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log all HTTP requests with correlation tracking"""
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        start_time = time.time()

        with log_context(correlation_id=correlation_id, operation=request.url.path):
            response = await call_next(request)
            logger.performance(
                "http.request.completed",
                duration_ms=(time.time() - start_time) * 1000,
                extra={
                    "status_code": response.status_code,
                    "path": request.url.path,
                    "method": request.method
                }
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "app.exception.unhandled",
            extra={"path": request.url.path, "exception_type": type(exc).__name__},
            exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
            }
        )

    app.include_router(health.router, tags=["Health"])
    app.include_router(components.router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """Root endpoint with service info"""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "health": {
                "liveness": "/health/live",
                "readiness": "/health/ready"
            },
            "api": {
                "list": "GET /api/v1/components",
                "search": "GET /api/v1/components/search",
                "code": "GET /api/v1/components/{componentId}/code",
                "fetch": "POST /api/v1/components/fetch",
                "implement": "POST /api/v1/components/implement",
                "fetch_and_implement": "POST /api/v1/components/fetch-and-implement"
            }
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    setup_logging()
    logger.info(
        "app.dev_server.starting",
        extra={"host": settings.http_host, "port": settings.http_port}
    )

    uvicorn.run(
        "jokoui_mcp.main:app",
        host=settings.http_host,
        port=settings.http_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
