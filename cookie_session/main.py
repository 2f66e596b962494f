"""FastAPI application wiring for cookie-based sessions.

Either session strategy (signed token or opaque id) can be plugged in;
routes and dependencies only see the ``SessionStore`` capability.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .config import DEFAULT_SESSION_SECRET, build_session_store, get_settings
from .errors import install_error_handlers
from .routes import health, me
from .routes.auth import session_routes
from .session import SessionCookieMiddleware, SessionStore

logger = logging.getLogger(__name__)


def create_app(*, session_store: SessionStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        session_store: Custom session store (default: built from settings).
    """
    app = FastAPI(title="Cookie Sessions")
    s = get_settings()

    if session_store is None:
        if s.session_strategy == "token" and s.session_secret == DEFAULT_SESSION_SECRET:
            logger.warning("SESSION_SECRET is the default value; signed sessions are forgeable")
        session_store = build_session_store(s)
    app.state.session_store = session_store

    install_error_handlers(app)

    # Delivers Set-Cookie headers queued by the store
    app.add_middleware(SessionCookieMiddleware)

    # Routes
    app.router.routes.extend(session_routes(session_store))
    app.include_router(me.router)
    app.include_router(health.router)

    return app
