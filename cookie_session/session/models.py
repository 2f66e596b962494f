"""Session value shapes."""

from __future__ import annotations

import abc
import time
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .ids import generate_csrf_token


def now_millis() -> int:
    return int(time.time() * 1000)


@runtime_checkable
class Session(Protocol):
    """Anything that can hand out the CSRF token bound to it."""

    def csrf_token(self) -> str:
        ...


class SignedSession(BaseModel):
    """Session that travels in a signed cookie and carries its own expiry.

    ``exp`` is milliseconds since the epoch. Instances are immutable;
    ``renew`` returns a copy with a new deadline.
    """

    model_config = ConfigDict(frozen=True)

    exp: int

    def renew(self, expires_at: int) -> SignedSession:
        return self.model_copy(update={"exp": expires_at})

    @abc.abstractmethod
    def csrf_token(self) -> str:
        ...


class UserSession(SignedSession):
    user_id: str
    role: str = "user"
    csrf: str = Field(default_factory=generate_csrf_token)

    def csrf_token(self) -> str:
        return self.csrf
