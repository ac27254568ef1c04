"""Standard library logging setup.

uvicorn, alembic and SQLAlchemy log through the standard library. Their
records are forwarded to logfire so they end up next to the application's
own spans.
"""

import logging

import logfire

from askit.config import Settings

# Third-party loggers that are too chatty below WARNING
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncio")


def log_level(settings: Settings) -> int:
    """Pick the root log level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route standard library logging into logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level, handlers=[logfire.LogfireLoggingHandler()], force=True
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
