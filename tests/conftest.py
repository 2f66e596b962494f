"""Shared fixtures for the cookie session test suite."""

from __future__ import annotations

import asyncio
from typing import Callable

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from cookie_session.config import Settings, override_settings
from cookie_session.main import create_app
from cookie_session.session import (
    InMemoryBackend,
    RandomIdSessionStore,
    SignedTokenSessionStore,
    TokenCodec,
    UserSession,
)
from cookie_session.session.cookies import pending_set_cookies

SECRET = "test-secret-key-for-sessions"
NOW = 1_700_000_000_000  # ms
DURATION = 30 * 60  # seconds
DURATION_MS = DURATION * 1000


# ── Requests ──────────────────────────────────────────────────────────────

def build_request(*cookie_headers: str, headers: dict[str, str] | None = None) -> Request:
    """Bare Starlette request; one raw Cookie header per positional arg."""
    raw = [(b"cookie", h.encode("latin-1")) for h in cookie_headers]
    for name, value in (headers or {}).items():
        raw.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": b"",
        "headers": raw,
        "client": ("127.0.0.1", 12345),
        "state": {},
    }
    return Request(scope)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    return build_request


# ── Sessions ──────────────────────────────────────────────────────────────

@pytest.fixture
def make_session() -> Callable[..., UserSession]:
    def _make(user_id: str = "user-123", exp: int = NOW + DURATION_MS, **kwargs) -> UserSession:
        return UserSession(user_id=user_id, exp=exp, **kwargs)

    return _make


@pytest.fixture
def codec() -> TokenCodec[UserSession]:
    return TokenCodec(SECRET, UserSession)


# ── Stores ────────────────────────────────────────────────────────────────

@pytest.fixture
def session_backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def opaque_store(session_backend) -> RandomIdSessionStore:
    return RandomIdSessionStore(session_backend)


@pytest.fixture
def token_store(codec) -> SignedTokenSessionStore:
    return SignedTokenSessionStore(codec, session_duration=DURATION, clock=lambda: NOW)


# ── App & Client ──────────────────────────────────────────────────────────

@pytest.fixture
def test_settings() -> Settings:
    return Settings(session_secret=SECRET)


@pytest.fixture(params=["token", "opaque"])
def session_store(request, token_store, opaque_store):
    """Runs app-level tests once per session strategy."""
    return token_store if request.param == "token" else opaque_store


@pytest.fixture
def app(test_settings, session_store):
    override_settings(test_settings)
    return create_app(session_store=session_store)


@pytest.fixture
def client(app) -> TestClient:
    """HTTPS TestClient so Secure cookies are sent back."""
    return TestClient(app, base_url="https://testserver", cookies={})


@pytest.fixture
def login(session_store, make_session):
    """Create a session through the store; returns (cookie value, session)."""

    def _login(**kwargs) -> tuple[str, UserSession]:
        session = make_session(**kwargs)
        request = build_request()
        asyncio.run(session_store.set_session(request, session))
        (set_cookie,) = pending_set_cookies(request)
        value = set_cookie.split(";", 1)[0].split("=", 1)[1]
        return value, session

    return _login
