"""Logfire setup for the AskIt API.

Application code logs and traces through logfire directly:

    import logfire

    logfire.info("Question created", question_id=str(question.id))

    with logfire.span("vote_service.vote_question", question_id=str(question_id)):
        ...

This module only configures logfire and instruments FastAPI and SQLAlchemy.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from askit.config import Settings

SERVICE_NAME = "askit-api"

# Load balancer probes would otherwise produce a span every few seconds
UNTRACED_URLS = r"/health$"


def _send_to_logfire(settings: Settings) -> bool:
    """An explicit setting wins, otherwise send only when a token is present."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Without OBSERVABILITY__LOGFIRE_TOKEN everything stays on the console.
    The deployed git SHA is reported as the service version.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks.

    Args:
        app: FastAPI application instance
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "path": request.url.path}
        if getattr(request, "method", None):
            result["method"] = request.method
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented", dialect=engine.dialect.name)
