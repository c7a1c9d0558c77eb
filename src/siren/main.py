"""
SIREN - Application Launcher.

Entry points for running the API under uvicorn in development or
production mode.
"""

from typing import Any

import uvicorn
from fastapi import FastAPI

from .api.app import create_app
from .config import get_logger, get_settings


class ApplicationManager:
    """Holds the single application instance for this process."""

    def __init__(self) -> None:
        self.app: FastAPI | None = None
        self.logger = get_logger("app.manager")

    def create_application(self) -> FastAPI:
        """
        Create the FastAPI application instance once.

        Returns:
            FastAPI: Configured application instance
        """
        if self.app is None:
            self.logger.info("Creating new application instance")
            self.app = create_app()

        return self.app


app_manager = ApplicationManager()


def get_server_config(host: str, port: int, **kwargs: Any) -> dict[str, Any]:
    """
    Get uvicorn configuration for the current environment.

    Args:
        host: Server host address
        port: Server port number
        **kwargs: Additional server configuration options

    Returns:
        Dict[str, Any]: Server configuration dictionary
    """
    settings = get_settings()

    config: dict[str, Any] = {
        "host": host,
        "port": port,
        "log_level": "debug" if settings.debug else settings.log_level.lower(),
        "access_log": settings.is_development,
        "server_header": False,
    }
    config.update(kwargs)

    get_logger("app.config").info("Server configuration prepared", host=host, port=port, environment=settings.environment)
    return config


def run_development_server(host: str | None = None, port: int | None = None, reload: bool = True, **kwargs: Any) -> None:
    """
    Run the development server with auto-reload.

    Args:
        host: Server host address (defaults to settings)
        port: Server port number (defaults to settings)
        reload: Enable auto-reload for development
        **kwargs: Additional server configuration
    """
    logger = get_logger("app.dev")
    settings = get_settings()

    host = host or settings.api_host
    port = port or settings.api_port

    logger.info("Starting development server", host=host, port=port, reload=reload)

    config = get_server_config(host=host, port=port, reload=reload, **kwargs)
    if reload:
        # uvicorn needs an import string to reload
        uvicorn.run("siren.main:get_application", factory=True, reload_dirs=["src"], **config)
    else:
        uvicorn.run(app_manager.create_application(), **config)


def run_production_server(host: str | None = None, port: int | None = None, **kwargs: Any) -> None:
    """
    Run the production server.

    Args:
        host: Server host address (defaults to settings)
        port: Server port number (defaults to settings)
        **kwargs: Additional server configuration
    """
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    get_logger("app.prod").info("Starting production server", host=host, port=port)

    config = get_server_config(host=host, port=port, **kwargs)
    uvicorn.run(app_manager.create_application(), **config)


def main() -> None:
    """Run the server matching the configured environment."""
    if get_settings().is_production:
        run_production_server()
    else:
        run_development_server()


def get_application() -> FastAPI:
    """
    Get the application instance for ASGI servers and tests.

    Returns:
        FastAPI: The configured application instance
    """
    return app_manager.create_application()


if __name__ == "__main__":
    main()
