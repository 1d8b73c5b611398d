"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sportsfeed.api.dependencies import get_provider_clients
from sportsfeed.api.routes import health, sports
from sportsfeed.api.routes.sports import FETCH_FAILED_MESSAGE
from sportsfeed.config import VERSION
from sportsfeed.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup
    setup_logging()
    logger.info(f"Starting sportsfeed {VERSION}")

    yield

    # Shutdown
    logger.info("Shutting down sportsfeed...")
    get_provider_clients().close()


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as the {success: false, error} envelope."""
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid query/path parameters are client errors (400)."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "query")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return _error_response(status.HTTP_400_BAD_REQUEST, "; ".join(messages) or "Invalid request")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything that escapes a route still gets the error envelope."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, FETCH_FAILED_MESSAGE)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Sportsfeed API",
        description="Live and upcoming sports events aggregated from ESPN and 365Scores",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(sports.router, tags=["Sports"])

    return app


app = create_app()
