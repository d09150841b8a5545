"""FastAPI Application.

REST API serving the analytics dashboard.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from braindiff.domain import EntityNotFoundError, ValidationError
from braindiff.infrastructure.database import close_database, init_database
from braindiff.presentation.api import routes
from braindiff.shared.config import settings
from braindiff.shared.logging import get_logger
from braindiff.shared.result import WrappedError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan.

    Initializes database on startup, closes on shutdown.
    """
    logger.info("Starting Braindiff API", version=settings.app_version)
    await init_database()

    yield

    await close_database()
    logger.info("Braindiff API stopped")


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    """Map missing entities to 404."""
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def bad_request_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map invalid input to 400."""
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def wrapped_error_handler(request: Request, exc: WrappedError) -> JSONResponse:
    """Log the full error chain, expose only the outermost message."""
    logger.error(
        "Request failed",
        path=request.url.path,
        error=exc,
    )
    return JSONResponse(status_code=503, content={"detail": exc.message})


def create_app(*, use_lifespan: bool = True) -> FastAPI:
    """Create FastAPI application.

    Args:
        use_lifespan: Connect to the database on startup

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, bad_request_handler)
    app.add_exception_handler(ValueError, bad_request_handler)
    app.add_exception_handler(WrappedError, wrapped_error_handler)

    app.include_router(routes.geography.router, prefix="/api/v1", tags=["v1-geography"])
    app.include_router(routes.metrics.router, prefix="/api/v1", tags=["v1-metrics"])

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "service": "braindiff-api"}

    return app


# Create app instance (uvicorn braindiff.presentation.api.app:app)
app = create_app()
