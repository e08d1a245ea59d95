"""
Application factory for FastAPI.

Handles FastAPI application creation and configuration only.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediflow.api.exception_handlers import register_exception_handlers
from mediflow.api.middleware.logging_middleware import RequestLoggingMiddleware
from mediflow.api.router import api_router
from mediflow.config.settings import Settings, get_settings
from mediflow.core.container import DependencyContainer
from mediflow.core.lifecycle import lifespan

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        container: DependencyContainer | None = None,
    ) -> None:
        """
        Initialize app factory.

        Args:
            settings: Application settings (uses default if not provided)
            container: Dependency container (a fresh one if not provided)
        """
        self._settings = settings or get_settings()
        self._container = container or DependencyContainer(self._settings)

    def create_app(self) -> FastAPI:
        """
        Create and configure the FastAPI application.

        Returns:
            Configured FastAPI application instance.
        """
        app = self._create_base_app()
        app.state.container = self._container

        self._configure_middleware(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        """Create the base FastAPI application with lifespan."""
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_V1_STR}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_V1_STR}/redoc" if self._settings.DEBUG else None,
            lifespan=lifespan,
        )

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Configure application middleware.

        Middleware order matters:
        1. CORS (outermost)
        2. Request logging
        """
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        app.add_middleware(RequestLoggingMiddleware)

        logger.info("Middleware configured")

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        """Register exception handlers."""
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        """Configure API routes."""
        app.include_router(api_router, prefix=self._settings.API_V1_STR)
        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        """Add health check endpoint."""
        container = self._container

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str | int]:
            """
            Verify application health status.

            Returns basic status, environment and the number of armed reminders.
            """
            return {
                "status": "ok",
                "environment": self._settings.ENVIRONMENT,
                "scheduled_reminders": len(container.registry),
            }


def create_app(
    settings: Settings | None = None,
    container: DependencyContainer | None = None,
) -> FastAPI:
    """
    Create FastAPI application using the factory.

    Args:
        settings: Optional settings override
        container: Optional dependency container override

    Returns:
        Configured FastAPI application
    """
    factory = AppFactory(settings, container)
    return factory.create_app()
