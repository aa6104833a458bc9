"""Centralized exception handlers for the FastAPI application.

Warden errors are mapped to HTTP responses by their ``ErrorKind`` alone.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_KIND"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from warden_auth.exceptions import ErrorKind, WardenError

logger = logging.getLogger(__name__)


ERROR_KIND_TO_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NO_FIELDS_TO_UPDATE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_MALFORMED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_REVOKED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CLAIM_NOT_FOUND: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.DEPENDENCY_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Kinds whose message may leak internals; a fixed text is returned instead
HIDDEN_DETAIL: dict[ErrorKind, str] = {
    ErrorKind.DEPENDENCY_UNAVAILABLE: "Service temporarily unavailable",
    ErrorKind.TIMEOUT: "Request timed out",
    ErrorKind.INTERNAL: "Internal error",
}

TOKEN_KINDS = {
    ErrorKind.TOKEN_EXPIRED,
    ErrorKind.TOKEN_MALFORMED,
    ErrorKind.TOKEN_REVOKED,
    ErrorKind.CLAIM_NOT_FOUND,
}


def _warden_error_response(exc: WardenError) -> JSONResponse:
    status_code = ERROR_KIND_TO_STATUS.get(exc.kind, 500)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s failed: %s", exc.kind.value, exc, exc_info=exc)
    elif exc.kind == ErrorKind.TOKEN_REVOKED:
        # A consumed refresh token was presented again
        logger.warning("Refresh token replay rejected: %s", exc)
    else:
        logger.debug("Request rejected (%s): %s", exc.kind.value, exc)

    headers = None
    if exc.kind in TOKEN_KINDS or exc.kind == ErrorKind.INVALID_CREDENTIALS:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": HIDDEN_DETAIL.get(exc.kind, exc.message),
            "code": exc.kind.value,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the FastAPI app.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(WardenError)
    async def warden_error_handler(
        _: Request,
        exc: WardenError,
    ) -> JSONResponse:
        return _warden_error_response(exc)
