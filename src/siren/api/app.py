"""
FastAPI application factory.

Provides create_app() which wires configuration, logging, middleware,
exception handlers, routers and the lifespan that owns the oracle client and
the record store connection.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..config import Settings, configure_logging, get_logger, get_settings, log_error
from ..repositories import create_repository
from ..services import GeminiClient, OracleConfig
from .middleware import configure_cors, error_handling_middleware, request_logging_middleware
from .responses import register_exception_handlers
from .routers import chiron, health, siren


@asynccontextmanager
async def create_lifespan_manager(app: FastAPI):
    """
    Create application lifespan manager.

    Builds the shared oracle client and repository on startup and closes
    them on shutdown.
    """
    logger = get_logger("app.lifespan")
    settings: Settings = app.state.settings

    logger.info("Starting SIREN Incident API")

    oracle_config = OracleConfig.from_settings(settings)
    app.state.oracle_client = GeminiClient(oracle_config)
    app.state.repository = create_repository(settings)

    if not oracle_config.is_configured:
        logger.warning("GEMINI_API_KEY is not set; every report will be stored as a fallback record")

    logger.info("Application startup completed", storage_backend=settings.storage_backend, model=oracle_config.model)

    yield

    logger.info("Shutting down SIREN Incident API")
    try:
        await app.state.oracle_client.close()
        await app.state.repository.close()
        logger.info("Application shutdown completed successfully")
    except Exception as e:
        log_error(e, {"phase": "shutdown"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()

    configure_logging(settings)
    logger = get_logger("app.factory")

    logger.info(
        "Creating FastAPI application", app_name=settings.app_name, version=settings.app_version, environment=settings.environment
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Turns free-text emergency reports into structured incident records",
        lifespan=create_lifespan_manager,
        debug=settings.debug,
        openapi_tags=[
            {"name": "intake", "description": "Emergency report intake and extraction"},
            {"name": "records", "description": "Incident record listing and deletion"},
            {"name": "health", "description": "Service health"},
        ],
    )
    app.state.settings = settings

    register_exception_handlers(app)

    # Added inner to outer: request logging wraps the error handler
    app.middleware("http")(error_handling_middleware)
    app.middleware("http")(request_logging_middleware)
    configure_cors(app, settings)

    app.include_router(health.router, prefix="/api")
    app.include_router(chiron.router, prefix="/api")
    app.include_router(siren.router, prefix="/api")

    logger.info("FastAPI application created successfully")

    return app
