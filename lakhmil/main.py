import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .db.migrate import apply_migrations
from .core import errors
from .routers import health, convert, rates, history
from .services.rates.cache_service import RateCacheService
from .services.rates.providers import make_rate_provider


def create_app(
    settings_override: Settings | None = None,
    rate_service: RateCacheService | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., temp DB). Falls back to cached get_settings().
    rate_service: inject a prepared rate cache (tests use stub providers).
    """
    settings = settings_override or get_settings()
    settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    # Ensure database schema (idempotent) so test-injected fresh DBs have tables
    try:
        apply_migrations(settings.db_path)  # type: ignore[arg-type]
    except Exception:
        # Failing to init DB is fatal; re-raise after logging
        logging.getLogger("lakhmil").exception("failed to apply migrations on startup")
        raise

    if rate_service is None:
        rate_service = RateCacheService(
            make_rate_provider(settings), settings.rates_cache_ttl_seconds
        )

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings
    app.state.rate_service = rate_service

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(convert.router)
    app.include_router(rates.router)
    app.include_router(history.router)

    @app.get("/")
    async def root():
        return {"message": "INR lakh/crore <-> USD K/M/B converter", "version": settings.version}

    return app
