"""Centralized exception handlers for the FastAPI application.

Domain and identity exceptions are mapped to HTTP responses with a
consistent error format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Identity validation failures additionally carry an ``errors`` list with
one ``{"code", "description"}`` entry per violated rule.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from housebroker.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from housebroker_identity import (
    AuthError,
    InvalidCredentialsError,
    InvalidRoleError,
    InvalidTokenError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

INVALID_ROLE = "INVALID_ROLE"
VALIDATION_FAILED = "VALIDATION_FAILED"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
INVALID_TOKEN = "INVALID_TOKEN"


def _get_status_for_exception(exc: DomainException) -> int:
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    # Default to 400 for domain exceptions
    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    **extra: object,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
            **extra,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle identity errors.

        Failed logins get one fixed response regardless of the cause.
        """
        if isinstance(exc, ValidationFailedError):
            logger.info(
                "Validation failed on %s %s: %s",
                request.method,
                request.url.path,
                ", ".join(exc.codes),
            )
            return _create_error_response(
                status_code=status.HTTP_400_BAD_REQUEST,
                message="Validation failed.",
                code=VALIDATION_FAILED,
                errors=[
                    {"code": e.code, "description": e.description}
                    for e in exc.errors
                ],
            )

        if isinstance(exc, InvalidRoleError):
            return _create_error_response(
                status_code=status.HTTP_400_BAD_REQUEST,
                message=exc.message,
                code=INVALID_ROLE,
            )

        if isinstance(exc, InvalidCredentialsError):
            return _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message=InvalidCredentialsError().message,
                code=INVALID_CREDENTIALS,
            )

        if isinstance(exc, InvalidTokenError):
            response = _create_error_response(
                status_code=status.HTTP_401_UNAUTHORIZED,
                message="Invalid or expired token",
                code=INVALID_TOKEN,
            )
            response.headers["WWW-Authenticate"] = "Bearer"
            return response

        logger.error(
            "Unmapped auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for exceptions not handled above."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
