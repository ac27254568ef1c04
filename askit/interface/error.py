"""Mapping of errors to HTTP responses.

Routes let domain errors propagate; the handlers registered here turn them
into the response envelope with the matching status code.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from askit.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from askit.util.jwt import JWTError

# Most specific first
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (JWTError, status.HTTP_401_UNAUTHORIZED),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def error_body(message: str, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return body


def status_for(exc: Exception) -> int:
    """HTTP status for a domain or token error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _field_errors(raw_errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten pydantic error entries to ``{field, message}`` pairs."""
    errors = []
    for error in raw_errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(location), "message": error.get("msg", "")})
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Handler hierarchy:
        NotFoundError                                  -> 404
        ForbiddenError                                 -> 403
        AuthenticationError, JWTError                  -> 401
        BusinessRuleViolationError, ValidationError    -> 400
        Request / model validation errors              -> 400 with ``errors``
        Anything else                                  -> 500, logged
    """

    async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
        code = status_for(exc)
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=code,
            error_type=exc.__class__.__name__,
            error=str(exc),
        )
        return JSONResponse(status_code=code, content=error_body(str(exc)))

    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = _field_errors(list(exc.errors()))
        logfire.info("Request validation failed", path=request.url.path, errors=errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Validation failed", errors),
        )

    async def handle_model_validation(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        errors = _field_errors(list(exc.errors()))
        logfire.info("Model validation failed", path=request.url.path, errors=errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Validation failed", errors),
        )

    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception(
            "Unhandled error", path=request.url.path, error_type=exc.__class__.__name__
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )

    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(JWTError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(PydanticValidationError, handle_model_validation)
    app.add_exception_handler(Exception, handle_unexpected)
