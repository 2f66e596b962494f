"""FastAPI dependency injection: session access and CSRF."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Request

from .errors import NotLoggedIn
from .session import SessionStore, verify_csrf_token


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


async def optional_session(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> Any | None:
    """The current session, or None for anonymous requests."""
    return await store.get_session(request)


async def require_session(session: Any | None = Depends(optional_session)) -> Any:
    """Require a logged-in session."""
    if session is None:
        raise NotLoggedIn()
    return session


async def require_csrf(
    request: Request,
    session: Any = Depends(require_session),
) -> Any:
    """Require a CSRF-Token header matching the session's token."""
    verify_csrf_token(session, request)
    return session
