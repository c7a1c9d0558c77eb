"""CORS middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ...config import Settings, get_logger


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """
    Configure CORS for the FastAPI application.

    Args:
        app: The FastAPI application instance
        settings: Application settings holding the allowed origins
    """
    logger = get_logger("api.cors")
    cors_settings = settings.get_cors_settings()

    logger.info("Adding CORS middleware", allowed_origins=cors_settings["allow_origins"])

    app.add_middleware(
        CORSMiddleware,
        expose_headers=["X-Request-ID", "X-Processing-Time"],
        max_age=600,
        **cors_settings,
    )
