# src/content_graph/main.py
"""Main entry point for the content graph API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from content_graph.api.v1 import feed_router, hashtags_router, mentions_router, posts_router
from content_graph.core.errors import ContentGraphError
from content_graph.core.logging import configure_logging
from content_graph.core.settings import settings

logger = logging.getLogger(__name__)

# One HTTP status per error kind.
ERROR_STATUS = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "forbidden": status.HTTP_403_FORBIDDEN,
    "invalid_input": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "conflict": status.HTTP_409_CONFLICT,
}

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Hashtags, mentions and feeds over a social content graph",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(posts_router, prefix="/api/v1")
app.include_router(feed_router, prefix="/api/v1")
app.include_router(hashtags_router, prefix="/api/v1")
app.include_router(mentions_router, prefix="/api/v1")


@app.exception_handler(ContentGraphError)
async def content_graph_error_handler(request: Request, exc: ContentGraphError) -> JSONResponse:
    """Translate engine failures into a stable status and error kind."""
    status_code = ERROR_STATUS.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unhandled engine error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.kind, "detail": str(exc)},
    )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("content_graph.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
