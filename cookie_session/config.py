"""Application configuration via environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from .session import (
    InMemoryBackend,
    RandomIdSessionStore,
    SessionBackend,
    SessionStore,
    SignedTokenSessionStore,
    TokenCodec,
    UserSession,
)


DEFAULT_SESSION_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    session_strategy: Literal["token", "opaque"] = "token"
    session_secret: str = DEFAULT_SESSION_SECRET
    session_cookie_name: str = "session"
    session_id_length: int = Field(default=32, gt=0)  # bytes
    session_duration: int = Field(default=30 * 60, gt=0)  # seconds
    session_renew_automatically: bool = True

    model_config = {"env_prefix": "", "case_sensitive": False}


settings: Settings | None = None


def get_settings() -> Settings:
    global settings
    if settings is None:
        settings = Settings()
    return settings


def override_settings(s: Settings) -> None:
    """For testing: inject a Settings instance."""
    global settings
    settings = s


def build_session_store(
    s: Settings,
    *,
    backend: SessionBackend | None = None,
    model: type[BaseModel] = UserSession,
) -> SessionStore:
    """Construct the store selected by ``session_strategy``."""
    if s.session_strategy == "opaque":
        return RandomIdSessionStore(
            backend if backend is not None else InMemoryBackend(max_age=s.session_duration),
            cookie_name=s.session_cookie_name,
            id_length=s.session_id_length,
        )
    return SignedTokenSessionStore(
        TokenCodec(s.session_secret, model),
        cookie_name=s.session_cookie_name,
        session_duration=s.session_duration,
        renew_automatically=s.session_renew_automatically,
    )
