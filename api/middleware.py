"""
Consolidated middleware and error handlers for the Diet API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from api.responses import error_response
from app.exceptions import DatabaseError, NotFoundError, ServiceValidationError

logger = logging.getLogger("dietapi.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with its status and duration.

    A caller-supplied X-Request-ID is kept, otherwise a new one is generated;
    either way it is echoed back together with X-Process-Time.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed after %.4fs [%s]",
                request.method,
                request.url.path,
                time.perf_counter() - started,
                request_id,
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            "%s %s -> %d in %.4fs [%s]",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            request_id,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed path/query parameters"""
    logger.warning("Invalid parameters for %s: %s", request.url.path, exc.errors())

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response("Invalid request parameters"),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions, including unknown routes"""
    logger.warning("HTTP %d for %s: %s", exc.status_code, request.url.path, exc.detail)

    message = "Not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(message),
        headers=getattr(exc, "headers", None),
    )


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Handle payload validation errors"""
    logger.warning(
        "Rejected payload for %s: %s (code=%s)", request.url.path, exc, exc.code
    )

    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(exc.message),
    )


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Missing template, category or food"""
    logger.info("Not found for %s: %s %s", request.url.path, exc, exc.details or "")

    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(exc.message),
    )


async def database_exception_handler(request: Request, exc: DatabaseError):
    """Handle store failures; the underlying message stays in the logs"""
    logger.error(
        "Database error for %s: %s (code=%s)", request.url.path, exc, exc.code
    )

    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(exc.public_message),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Anything not mapped above; details stay in the logs"""
    logger.error("Unhandled error for %s", request.url.path, exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("Internal server error"),
    )
