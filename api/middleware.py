"""
Consolidated middleware and error handlers for the Food API
"""

import time
import logging
from typing import Any, Iterable, Mapping
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import AppError, ErrorKind

logger = logging.getLogger("foodapi.middleware")

# Store failures on these methods are server errors; on writes they are the client's.
READ_METHODS = frozenset({"GET", "HEAD"})


# ============================================================================
# Helper Functions
# ============================================================================


def status_for(kind: ErrorKind, method: str) -> int:
    """Pick the HTTP status for an error kind raised while serving `method`."""
    if kind == ErrorKind.NOT_FOUND:
        return status.HTTP_404_NOT_FOUND
    if kind == ErrorKind.INVALID_INPUT:
        return status.HTTP_400_BAD_REQUEST
    if method.upper() in READ_METHODS:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Flatten pydantic errors into one line, e.g. 'quantity: Input should be a valid number'"""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "Request validation failed: " + ", ".join(parts)


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def app_error_handler(request: Request, exc: AppError):
    """Handle NotFoundError, ServiceValidationError and StoreError by kind"""
    status_code = status_for(exc.kind, request.method)
    if status_code >= 500:
        logger.error(f"{exc.kind.value} error on {request.method} {request.url}: {exc}")
    else:
        logger.warning(f"{exc.kind.value} error on {request.method} {request.url}: {exc}")

    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors on request bodies"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": format_validation_errors(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions (unknown routes, wrong methods)"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "An unexpected error occurred"},
    )
