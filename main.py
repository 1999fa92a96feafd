"""
Diet API FastAPI Application
Main entry point: configuration, lifespan, middleware and routers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import health, templates, benchmark, categories, foods
from app.config import settings
from app.context import AppContext
from app.exceptions import DatabaseError, NotFoundError, ServiceValidationError

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    database_exception_handler,
    general_exception_handler,
)

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("dietapi.main")


async def connect_with_retries(context: AppContext) -> bool:
    """
    Open the gate's connection, retrying db_init_attempts times.

    Returns False when every attempt failed; the service then keeps running
    and data routes answer "Database error" until it is restarted.
    """
    last_exc: Optional[Exception] = None
    attempts = context.settings.db_init_attempts

    for attempt in range(1, attempts + 1):
        try:
            # Blocking connect runs in a worker thread
            await anyio.to_thread.run_sync(context.gate.connect)
            _logger.info("Database connection established")
            return True
        except DatabaseError as exc:
            last_exc = exc
            _logger.warning(
                "Database connect attempt %d/%d failed: %s", attempt, attempts, exc
            )
            if attempt < attempts:
                await anyio.sleep(context.settings.db_init_delay_sec)

    _logger.error(
        "Database unavailable after %d attempts, continuing without it: %s",
        attempts,
        last_exc,
    )
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Builds the process context, connects the query gate, and closes it once
    the server has drained in-flight requests.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    context = AppContext.from_settings(settings)
    await connect_with_retries(context)
    app.state.context = context

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        app.state.context = None
        context.close()


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Request logging sits outside CORS so preflights are logged too
app.add_middleware(RequestLoggingMiddleware)

# Every failure leaves as {"success": false, "error": ...}
EXCEPTION_HANDLERS = {
    RequestValidationError: validation_exception_handler,
    StarletteHTTPException: http_exception_handler,
    ServiceValidationError: service_validation_exception_handler,
    NotFoundError: not_found_exception_handler,
    DatabaseError: database_exception_handler,
    Exception: general_exception_handler,
}
for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

for module in (health, templates, benchmark, categories, foods):
    app.include_router(module.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    # uvicorn handles SIGINT/SIGTERM: it stops accepting, drains in-flight
    # requests, then runs the lifespan shutdown that closes the database.
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
