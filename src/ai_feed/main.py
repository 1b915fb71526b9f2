# ============================================================================
# AI Content Feed - FastAPI Application Entry Point
# ============================================================================
"""
Main FastAPI application module for the AI content feed.

This module sets up the FastAPI application with:
- Logging configuration
- CORS middleware configuration
- Application lifespan (table creation, engine disposal)
- Error handling for HTTP and unexpected errors
- API router integration

Usage:
    Direct: python -m ai_feed.main
    Server: uvicorn ai_feed.main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .models.schemas import ErrorResponse
from .routers import content, health
from .services.database_service import database_service

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("ai_feed.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    if settings.auto_create_tables:
        await database_service.init_db()

    yield

    logger.info(f"Shutting down {settings.api_title}")
    await database_service.close()


# ============================================================================
# APPLICATION INITIALIZATION
# ============================================================================

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Read-only JSON feed of published content for search and embedding pipelines.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

# ============================================================================
# ERROR HANDLERS
# ============================================================================


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Formats HTTP exceptions (404, 405, ...) as ErrorResponse bodies."""
    error_response = ErrorResponse(
        error=f"HTTP {exc.status_code}",
        detail=str(exc.detail),
        timestamp=datetime.now(),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for collaborator failures (repository, rendering, ...).

    The error is logged with its traceback and answered with a 500. The
    exception text is only exposed in debug mode.
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    error_response = ErrorResponse(
        error="Internal Server Error",
        detail=str(exc) if settings.debug else "An unexpected error occurred",
        timestamp=datetime.now(),
    )
    return JSONResponse(
        status_code=500,
        content=error_response.model_dump(mode="json"),
    )


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================

app.include_router(health.router, tags=["health"])
app.include_router(content.router)


@app.get("/", tags=["root"])
async def root() -> Dict[str, Any]:
    """API information and links."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "status": "running",
        "feed_url": "/api/ai/v1/content",
        "health_check": "/healthz",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ai_feed.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
