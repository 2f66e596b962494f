"""Typed request failures and their translation into HTTP responses.

Each error terminates only the current request. The surrounding app turns it
into a JSON body via ``http_error_handler``; nothing internal is echoed back.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class HttpError(Exception):
    """Base class for failures that map onto an HTTP response."""

    status_code = 500
    default_message = "Internal Error"

    def __init__(self, message: str | None = None, error_code: int | None = None) -> None:
        self.message = message or self.default_message
        self.error_code = error_code if error_code is not None else self.status_code
        super().__init__(self.message)

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500

    @property
    def public_message(self) -> str:
        return self.message


class NotLoggedIn(HttpError):
    status_code = 403
    default_message = "Not logged in"


class InvalidInput(HttpError):
    status_code = 400
    default_message = "Invalid input"


class AccessDenied(HttpError):
    status_code = 403
    default_message = "Forbidden"


class StorageError(HttpError):
    """Session backend failure. The detail stays in the server log."""

    status_code = 500
    default_message = "Session storage failure"

    @property
    def public_message(self) -> str:
        return "Internal Error"


def error_body(status_code: int, error_code: int, message: str) -> dict:
    return {
        "success": False,
        "code": status_code,
        "errorCode": error_code,
        "message": message,
    }


async def http_error_handler(request: Request, exc: HttpError) -> JSONResponse:
    if exc.is_server_error:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message,
            exc_info=exc.__cause__ or exc,
        )
    else:
        logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        error_body(exc.status_code, exc.error_code, exc.public_message),
        status_code=exc.status_code,
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HttpError, http_error_handler)
