"""Request handler combinators that dispatch on the current session.

``with_session`` turns a session store plus two continuations into a
Starlette endpoint::

    app.add_route(
        "/auth/logout",
        with_session(store, no_content(), require_csrf_token(logout(store))),
        methods=["POST"],
    )

Failures are raised as ``HttpError`` subclasses and rendered by the app's
exception handler.
"""

from __future__ import annotations

import hmac
from typing import Any, Awaitable, Callable

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from .. import ocsf
from ..errors import AccessDenied, NotLoggedIn
from .store import SessionStore

CSRF_TOKEN_HEADER = "CSRF-Token"

AnonymousHandler = Callable[[Request], Awaitable[Response]]
AuthenticatedHandler = Callable[[Any, Request], Awaitable[Response]]


def with_session(
    store: SessionStore,
    anonymous: AnonymousHandler,
    authenticated: AuthenticatedHandler,
) -> AnonymousHandler:
    async def endpoint(request: Request) -> Response:
        session = await store.get_session(request)
        if session is None:
            return await anonymous(request)
        return await authenticated(session, request)

    return endpoint


def verify_csrf_token(session: Any, request: Request) -> None:
    """Raise AccessDenied unless the CSRF-Token header equals the session's token."""
    request_token = request.headers.get(CSRF_TOKEN_HEADER)
    if not request_token:
        _deny(session, request, "Missing CSRF Token")
    if not hmac.compare_digest(request_token.encode(), session.csrf_token().encode()):
        _deny(session, request, "Invalid CSRF Token")


def _deny(session: Any, request: Request, reason: str) -> None:
    ocsf.authorization_event(
        action=f"{request.method} {request.url.path}",
        decision="deny",
        reason=reason,
        severity_id=ocsf.Severity.MEDIUM,
        session=session,
    )
    raise AccessDenied(reason)


def require_csrf_token(next_handler: AuthenticatedHandler) -> AuthenticatedHandler:
    async def handler(session: Any, request: Request) -> Response:
        verify_csrf_token(session, request)
        return await next_handler(session, request)

    return handler


def logout(store: SessionStore) -> AuthenticatedHandler:
    async def handler(session: Any, request: Request) -> Response:
        await store.delete_session(request)
        return Response(status_code=204)

    return handler


def logged_in() -> AuthenticatedHandler:
    async def handler(session: Any, request: Request) -> Response:
        return JSONResponse({"loggedIn": True})

    return handler


def not_logged_in() -> AnonymousHandler:
    async def handler(request: Request) -> Response:
        return JSONResponse({"loggedIn": False})

    return handler


def csrf_token() -> AuthenticatedHandler:
    async def handler(session: Any, request: Request) -> Response:
        return PlainTextResponse(session.csrf_token())

    return handler


def no_content() -> AnonymousHandler:
    async def handler(request: Request) -> Response:
        return Response(status_code=204)

    return handler


def ignore_session(next_handler: AnonymousHandler) -> AuthenticatedHandler:
    async def handler(session: Any, request: Request) -> Response:
        return await next_handler(request)

    return handler


def access_denied(message: str) -> AnonymousHandler:
    async def handler(request: Request) -> Response:
        raise AccessDenied(message)

    return handler


def login_required() -> AnonymousHandler:
    async def handler(request: Request) -> Response:
        raise NotLoggedIn()

    return handler
