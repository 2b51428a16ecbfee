"""FastAPI application main entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.api.endpoints import health, orders
from apps.api.middleware import log_requests, simulate_chaos
from core import __version__
from core.domain.exceptions import OrderError
from core.infrastructure.chaos import FaultInjector
from core.infrastructure.database import create_engine, create_session_factory, init_database
from core.infrastructure.logging import setup_logging
from core.settings import AppSettings, get_app_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup, release connections on shutdown."""
    settings = app.state.settings
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    engine = create_engine(app.state.database_url)
    await init_database(engine)
    app.state.session_factory = create_session_factory(engine)

    profile = app.state.fault_injector.profile
    logger.info(
        f"Order API v{__version__} ready "
        f"(chaos failure rate {profile.failure_rate:.0%})"
    )
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Order API shutting down")


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def order_error_handler(request: Request, exc: OrderError) -> JSONResponse:
    """Map the order error taxonomy to `{"error": ...}` responses.

    Args:
        request: FastAPI request
        exc: OrderError subclass (already logged where it was raised)

    Returns:
        JSONResponse with the error's status code
    """
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed path or query parameters as 400."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning(
        f"Invalid request: {message}",
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework errors (unknown route, bad method) in the same body shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error"},
    )


# =============================================================================
# APP FACTORY
# =============================================================================

def create_app(
    settings: Optional[AppSettings] = None,
    fault_injector: Optional[FaultInjector] = None,
    database_url: Optional[str] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to read the chaos profile from
        fault_injector: Explicit injector; overrides the settings profile
        database_url: Store URL; defaults to the DB_DATABASE_URL setting

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_app_settings()

    app = FastAPI(
        title="Order Chaos API",
        description="Order CRUD API with simulated backend failures",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database_url = database_url
    app.state.fault_injector = fault_injector or FaultInjector(settings.chaos_profile())

    # Last registered runs first: request logging wraps fault injection
    app.middleware("http")(simulate_chaos)
    app.middleware("http")(log_requests)

    app.add_exception_handler(OrderError, order_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health.router)
    app.include_router(orders.router)

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_app_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
