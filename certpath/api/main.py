"""
FastAPI Application

Main application entry point with:
- CORS middleware
- Health and metrics endpoints
- API routes
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from certpath import __version__
from certpath.config import get_settings

# Configure root logger BEFORE the application modules log anything
logging.basicConfig(
    level=get_settings().log_level,
    format="%(levelname)s  %(name)s  %(message)s",
)
logging.getLogger("watchfiles").setLevel(logging.WARNING)

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from certpath.api.routes import get_catalog_service, router
from certpath.catalog.service import CatalogService
from certpath.errors import DataUnavailableError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    app.state.start_time = datetime.now(timezone.utc)
    app.state.request_count = 0
    app.state.error_count = 0

    # Warm the catalog cache; requests retry the load if this fails
    try:
        records = get_catalog_service().records()
        logger.info("Catalog ready with %d certifications", len(records))
    except DataUnavailableError as exc:
        logger.warning("Catalog load failed (will retry on first request): %s", exc)

    yield

    logger.info("Shutting down")


settings = get_settings()

app = FastAPI(
    title="CertPath API",
    description="Cloud certification catalog with comparison and learning paths",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Track request metrics."""
    start_time = time.perf_counter()

    # Ensure state is initialized when the lifespan did not run
    if not hasattr(app.state, "request_count"):
        app.state.request_count = 0
        app.state.error_count = 0
        app.state.start_time = datetime.now(timezone.utc)

    try:
        response = await call_next(request)
    except Exception:
        app.state.error_count += 1
        raise

    app.state.request_count += 1
    if response.status_code >= 500:
        app.state.error_count += 1
    logger.debug(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - start_time) * 1000,
    )
    return response


@app.get("/health")
async def health_check(service: CatalogService = Depends(get_catalog_service)) -> dict[str, Any]:
    """Health check endpoint; degraded when the catalog cannot be loaded."""
    try:
        certifications = len(service.records())
        status = "healthy"
    except DataUnavailableError as exc:
        logger.warning("Health check: %s", exc)
        certifications = 0
        status = "degraded"

    return {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "certifications": certifications,
    }


@app.get("/metrics")
async def metrics() -> dict[str, Any]:
    """Basic metrics endpoint."""
    uptime = datetime.now(timezone.utc) - app.state.start_time

    return {
        "uptime_seconds": uptime.total_seconds(),
        "request_count": app.state.request_count,
        "error_count": app.state.error_count,
    }


# Include API routes
app.include_router(router, prefix=settings.api_prefix)
