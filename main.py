"""
Food API FastAPI Application
Main entry point: configuration, store lifecycle, middleware and routes
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

from api.routes import foods, health

from adapters.mongo_adapter import MongoStore

from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    app_error_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from app.exceptions import AppError, StoreConnectionError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("foodapi.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.

    Opens the single MongoDB client before any request is served and closes
    it on shutdown. A missing DB_CONNECTION or an unreachable server aborts
    startup, which makes the server process exit with a non-zero status.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    store = MongoStore(
        settings.db_connection,
        db_name=settings.mongo_db_name,
        server_selection_timeout_ms=settings.server_selection_timeout_ms,
    )
    try:
        await store.connect()
    except StoreConnectionError as exc:
        _logger.error("Error connecting to the database: %s", exc)
        raise

    app.state.store = store

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        app.state.store = None
        await store.close()


app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url="/openapi.json" if not settings.is_production() else None,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(health.router)
app.include_router(foods.router)


def run():
    """Serve the app with uvicorn; reloading is opt-in via RELOAD=true"""
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
