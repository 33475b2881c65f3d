"""
Avatar Registry API - Main Application Entry Point.

FastAPI application storing one avatar record per user and exposing
create, read, update and delete endpoints with a uniform response envelope.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.api.v1 import health
from app.api.v1.router import api_router
from app.config import get_settings
from app.core.exceptions import AvatarAPIException
from app.core.responses import create_error_response
from app.stores import DatabaseAvatarStore, get_avatar_store_backend

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Builds the avatar store on startup and releases it on shutdown.
    """
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Avatar store backend: {settings.AVATAR_STORE_BACKEND}")
    logger.info(f"Hide inactive avatars: {settings.HIDE_INACTIVE_AVATARS}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    store = get_avatar_store_backend()

    # Auto-create tables for SQLite (dev mode)
    if isinstance(store, DatabaseAvatarStore) and store.engine.url.get_backend_name() == "sqlite":
        logger.info("Creating SQLite development tables...")
        await store.init_schema()
        logger.info("Development database ready")

    yield

    # Shutdown
    await store.close()
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Avatar Registry API

Stores the avatar each user picked: a preset type, the URL of its 3D (GLB)
asset and a gender.

### Features
- **One avatar per user**: keyed by the Active Directory user id
- **Logical delete**: deleted avatars are kept as inactive records
- **Pluggable stores**: in-memory, SQL database or a remote avatar API

Every response uses the envelope `{"data": ..., "error": bool, "message": str}`.
    """,
    version=__version__,
    openapi_tags=[
        {"name": "avatars", "description": "Avatar record operations"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

# CORS middleware for cross-origin requests from the avatar creator frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AvatarAPIException)
async def avatar_exception_handler(request: Request, exc: AvatarAPIException) -> JSONResponse:
    """
    Global exception handler for Avatar API exceptions.
    Renders the exception into the standard envelope.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message} {exc.details}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or invalid request input is a bad request."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])
    message = f"Bad request: {'; '.join(problems)}" if problems else "Bad request"
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return create_error_response(message, status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown route, wrong method) in the envelope shape."""
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return create_error_response(message, status_code=exc.status_code)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error and returns its message in the envelope.
    """
    logger.exception(f"Unexpected error: {exc}")
    return create_error_response(str(exc) or "Internal server error", status_code=500)


# Include API routers
app.include_router(health.router, tags=["health"])
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Service info."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_PREFIX,
    }


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
