"""
Application lifecycle management using the FastAPI lifespan pattern.

Starts the reminder timer on startup; on shutdown cancels every armed
reminder and stops the timer.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mediflow.core.container import DependencyContainer, get_container

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self, container: DependencyContainer) -> None:
        self._container = container
        self._initialized = False

    async def startup(self) -> None:
        """Execute startup tasks."""
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        self._verify_configurations()
        await self._container.timer.start()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """Execute shutdown tasks."""
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")

        canceled = self._container.reminder_scheduler.cancel_all()
        if canceled:
            logger.info(f"Dropped {canceled} pending reminder(s)")
        await self._container.timer.stop()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Log configuration that affects reminder delivery."""
        settings = self._container.settings
        if not settings.REMINDERS_ENABLED:
            logger.warning("REMINDERS_ENABLED=False - appointment reminders will not be scheduled")
        logger.info(f"Clinic timezone: {settings.CLINIC_TIMEZONE}")


def get_lifecycle_manager(app: FastAPI) -> LifecycleManager:
    """Get or create the lifecycle manager bound to an application."""
    manager = getattr(app.state, "lifecycle", None)
    if manager is None:
        container = getattr(app.state, "container", None) or get_container()
        manager = LifecycleManager(container)
        app.state.lifecycle = manager
    return manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager(app)

    # Startup
    await lifecycle.startup()

    yield  # Application runs here

    # Shutdown
    await lifecycle.shutdown()
