#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from askit.config import Settings
from askit.util.error import ConfigurationError
from askit.util.logging import setup_logging
from askit.util.observability import configure_logfire

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to start production with the placeholder JWT secret.

    Raises:
        ConfigurationError: If AUTH__JWT_SECRET was not set in production
    """
    if settings.environment == "production" and settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_settings(settings)
        logfire.info("Starting AskIt API", host=settings.host, port=settings.port)

        # Importing the app configures Logfire again, which is a no-op
        uvicorn.run(
            "askit.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
