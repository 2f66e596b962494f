from .backend import InMemoryBackend, SessionBackend
from .codec import TokenCodec
from .cookies import get_value_for_cookie, session_cookie
from .handlers import (
    access_denied,
    csrf_token,
    ignore_session,
    logged_in,
    login_required,
    logout,
    no_content,
    not_logged_in,
    require_csrf_token,
    verify_csrf_token,
    with_session,
)
from .ids import generate_session_id
from .middleware import SessionCookieMiddleware
from .models import Session, SignedSession, UserSession
from .store import RandomIdSessionStore, SessionStore
from .token_store import SignedTokenSessionStore

__all__ = [
    "SessionBackend",
    "InMemoryBackend",
    "TokenCodec",
    "get_value_for_cookie",
    "session_cookie",
    "access_denied",
    "csrf_token",
    "ignore_session",
    "logged_in",
    "login_required",
    "logout",
    "no_content",
    "not_logged_in",
    "require_csrf_token",
    "verify_csrf_token",
    "with_session",
    "generate_session_id",
    "SessionCookieMiddleware",
    "Session",
    "SignedSession",
    "UserSession",
    "SessionStore",
    "RandomIdSessionStore",
    "SignedTokenSessionStore",
]
