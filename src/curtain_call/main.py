# src/curtain_call/main.py
"""Main entry point for the Curtain Call application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from curtain_call.api.v1 import performances_router, posts_router, users_router
from curtain_call.core.logging import configure_logging
from curtain_call.core.settings import settings

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="Impressions of the performances you saw",
    version=settings.app_version,
)

app.include_router(posts_router)
app.include_router(users_router)
app.include_router(performances_router)


@app.exception_handler(RequestValidationError)
async def malformed_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed ids and parameters as a missing page."""
    logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse({"detail": "Not found"}, status_code=status.HTTP_404_NOT_FOUND)


@app.on_event("startup")
async def on_startup() -> None:
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the service."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "timeline": "/posts",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("curtain_call.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
