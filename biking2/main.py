"""
biking2 Backend API - FastAPI Application

Main entry point for the FastAPI application.
"""

from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from biking2.api import router as api_router
from biking2.core.config import get_settings
from biking2.db.base import Base
from biking2.db import models_registry  # noqa: F401 - Import to register models
from biking2.db.session import engine
from biking2.services.dailyfratze import build_daily_fratze_provider

settings = get_settings()


async def init_database() -> None:
    """Initialize database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting biking2 API...")

    # Ensure datastore directories exist
    Path(settings.datastore_base_directory).mkdir(parents=True, exist_ok=True)
    settings.gallery_pictures_directory.mkdir(parents=True, exist_ok=True)

    await init_database()

    http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.dailyfratze_timeout),
        follow_redirects=True,
    )
    app.state.daily_fratze_provider = build_daily_fratze_provider(settings, http_client)

    logger.info(f"biking2 API started on port {settings.port}")

    yield

    # Shutdown
    logger.info("Shutting down biking2 API...")
    await http_client.aclose()
    await engine.dispose()
    logger.info("biking2 API stopped")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="biking2 API - Gallery pictures and biking pictures",
    lifespan=lifespan,
    docs_url="/swagger" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
    expose_headers=["Content-Length"],
)


# Exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation errors as bad requests."""
    logger.debug(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "Code": 400,
            "Message": "Validation error",
            "Errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"Code": 500, "Message": str(exc)},
    )


# Include API router
app.include_router(api_router)


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "dailyfratze": settings.dailyfratze_enabled,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "biking2.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
