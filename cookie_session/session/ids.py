"""Unpredictable identifiers for session ids and CSRF tokens."""

from __future__ import annotations

import secrets

DEFAULT_ID_LENGTH = 32  # bytes


def generate_session_id(length: int = DEFAULT_ID_LENGTH) -> str:
    """Return ``length`` random bytes from the OS CSPRNG as lowercase hex."""
    if length <= 0:
        raise ValueError("Session id length must be positive")
    return secrets.token_hex(length)


def generate_csrf_token() -> str:
    return secrets.token_urlsafe(DEFAULT_ID_LENGTH)
