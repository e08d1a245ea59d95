"""
Application entry point.

Configures logging and error tracking, then builds the application.
"""

import logging

import sentry_sdk

from mediflow.config.settings import get_settings
from mediflow.core.app_factory import create_app
from mediflow.core.container import get_container

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )

app = create_app(settings, get_container())

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "mediflow.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
