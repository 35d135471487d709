"""
Main FastAPI application entrypoint.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import settings, load_locale_config
from src.api.health import API_VERSION, router as health_router
from src.api.paths import router as paths_router
from src.domain.errors import LocaleRoutingError, NotProvidedError
from src.domain.models import LocaleConfig
from src.i18n.middleware import LocaleMiddleware

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler for startup and shutdown.
    """
    # Startup
    config: LocaleConfig = app.state.locale_config
    logger.info(f"Starting Locale Router API on {settings.host}:{settings.port}")
    logger.info(
        f"Locales: {list(config.locales)}, default: {config.default_locale}, "
        f"prefix default: {config.prefix_default}"
    )

    yield

    # Shutdown
    logger.info("Shutting down Locale Router API")


async def locale_routing_error_handler(request: Request, exc: LocaleRoutingError) -> JSONResponse:
    """Render locale routing errors as {code, message} bodies."""
    # A missing context here means the middleware is not installed
    status_code = (
        status.HTTP_500_INTERNAL_SERVER_ERROR
        if isinstance(exc, NotProvidedError)
        else status.HTTP_400_BAD_REQUEST
    )
    logger.warning(f"{exc.code} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"code": exc.code, "message": str(exc)},
    )


def create_app(locale_config: Optional[LocaleConfig] = None) -> FastAPI:
    """
    Build the application.

    Args:
        locale_config: Locale configuration; loaded from settings when omitted

    Raises:
        ConfigError: If the locale settings are invalid
    """
    config = locale_config or load_locale_config(settings)

    app = FastAPI(
        title="Locale Router API",
        description="Locale-aware path localization and routing",
        version=API_VERSION,
        lifespan=lifespan,
    )
    app.state.locale_config = config

    app.add_exception_handler(LocaleRoutingError, locale_routing_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it runs first and sees the localized path
    app.add_middleware(
        LocaleMiddleware,
        config=config,
        rewrite=settings.rewrite_localized_paths,
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(paths_router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Locale Router API",
            "version": API_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    return app


# Create FastAPI app
app = create_app()
