"""Tests for settings and store construction."""

import pytest
from pydantic import BaseModel, ValidationError

from cookie_session.config import Settings, build_session_store, get_settings, override_settings
from cookie_session.session import InMemoryBackend, RandomIdSessionStore, SignedTokenSessionStore


def test_defaults():
    s = Settings()
    assert s.session_strategy == "token"
    assert s.session_cookie_name == "session"
    assert s.session_id_length == 32
    assert s.session_duration == 30 * 60
    assert s.session_renew_automatically is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SESSION_STRATEGY", "opaque")
    monkeypatch.setenv("SESSION_COOKIE_NAME", "sid")
    monkeypatch.setenv("SESSION_DURATION", "600")
    monkeypatch.setenv("SESSION_RENEW_AUTOMATICALLY", "false")
    s = Settings()
    assert s.session_strategy == "opaque"
    assert s.session_cookie_name == "sid"
    assert s.session_duration == 600
    assert s.session_renew_automatically is False


def test_rejects_unknown_strategy():
    with pytest.raises(ValidationError):
        Settings(session_strategy="jwt")


def test_rejects_non_positive_id_length():
    with pytest.raises(ValidationError):
        Settings(session_id_length=0)


def test_override_settings():
    s = Settings(session_cookie_name="custom")
    override_settings(s)
    assert get_settings() is s


def test_build_token_store():
    store = build_session_store(
        Settings(session_secret="k", session_duration=60, session_renew_automatically=False)
    )
    assert isinstance(store, SignedTokenSessionStore)
    assert store.session_duration == 60
    assert store.renew_automatically is False


def test_build_opaque_store_with_backend():
    backend = InMemoryBackend()
    store = build_session_store(
        Settings(session_strategy="opaque", session_cookie_name="sid", session_id_length=16),
        backend=backend,
    )
    assert isinstance(store, RandomIdSessionStore)
    assert store.backend is backend
    assert store.cookie_name == "sid"
    assert store.id_length == 16


def test_build_opaque_store_keeps_empty_backend():
    backend = InMemoryBackend(max_age=5)
    assert len(backend) == 0
    store = build_session_store(Settings(session_strategy="opaque"), backend=backend)
    assert store.backend is backend
    assert store.backend._max_age == 5


def test_build_token_store_with_custom_model():
    class Preferences(BaseModel):
        theme: str

    store = build_session_store(Settings(session_secret="k"), model=Preferences)
    assert store.codec.model is Preferences
