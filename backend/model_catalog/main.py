"""FastAPI application entrypoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from model_catalog.api.routes import api_router
from model_catalog.core.config import settings
from model_catalog.core.exceptions import AppException
from model_catalog.core.logfire_setup import (
    instrument_app,
    instrument_pydantic_ai,
    setup_logfire,
)
from model_catalog.core.messages import get_message

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting %s (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
    instrument_pydantic_ai()
    yield
    logger.info("Shutting down %s", settings.PROJECT_NAME)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render domain exceptions as `{error, code, details}`."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.code, "details": exc.details},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and hide their details from the caller."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": get_message("internal_error")})


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    setup_logfire()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Lists the language models whose providers are configured",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    instrument_app(app)
    return app


app = create_app()
