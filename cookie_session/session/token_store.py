"""Stateless sessions: the whole session value lives in a signed cookie."""

from __future__ import annotations

import logging
from typing import Any, Callable

from starlette.requests import HTTPConnection

from .. import ocsf
from ..errors import InvalidInput
from .codec import TokenCodec
from .cookies import DEFAULT_COOKIE_NAME
from .models import SignedSession, now_millis
from .store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_SESSION_DURATION = 30 * 60  # seconds


class SignedTokenSessionStore(SessionStore):
    """Session store backed by ``TokenCodec``; nothing is kept server-side.

    ``SignedSession`` values expire once ``exp`` falls more than one session
    duration behind the clock. While still valid they are renewed on every
    read (sliding expiry) unless ``renew_automatically`` is off. Other models
    are treated as tokens without expiry.

    Deleting a session only clears the cookie of the current client. A token
    issued earlier keeps verifying until its ``exp`` lapses.
    """

    def __init__(
        self,
        codec: TokenCodec,
        cookie_name: str = DEFAULT_COOKIE_NAME,
        session_duration: int = DEFAULT_SESSION_DURATION,
        renew_automatically: bool = True,
        clock: Callable[[], int] = now_millis,
    ) -> None:
        super().__init__(cookie_name)
        self.codec = codec
        self.session_duration = session_duration
        self.renew_automatically = renew_automatically
        self._clock = clock

    @property
    def session_duration_ms(self) -> int:
        return self.session_duration * 1000

    async def set_session(self, conn: HTTPConnection, session: Any) -> None:
        self.write_cookie(conn, self.codec.encode(session))

    async def get_session(self, conn: HTTPConnection, default: Any = None) -> Any:
        token = self.read_cookie(conn)
        if token is None:
            return default

        try:
            session = self.codec.decode(token)
        except InvalidInput:
            logger.warning("Rejected session token from %s", _client_host(conn))
            ocsf.session_event(
                activity_id=ocsf.AuthActivity.LOGON,
                status_id=ocsf.Status.FAILURE,
                severity_id=ocsf.Severity.MEDIUM,
                message="Session token failed verification",
            )
            raise

        if not isinstance(session, SignedSession):
            return session

        now = self._clock()
        if self.is_expired(session, now):
            logger.debug("Session expired at %d", session.exp)
            return default
        if not self.renew_automatically:
            return session

        session = session.renew(now + self.session_duration_ms)
        await self.set_session(conn, session)
        logger.debug("Session renewed until %d", session.exp)
        return session

    async def delete_session(self, conn: HTTPConnection) -> None:
        if self.read_cookie(conn) is None:
            return
        self.write_cookie(conn)
        ocsf.session_event(
            activity_id=ocsf.AuthActivity.LOGOFF,
            status_id=ocsf.Status.SUCCESS,
            severity_id=ocsf.Severity.INFORMATIONAL,
            message="Session cookie cleared",
        )

    def is_expired(self, session: SignedSession, now: int) -> bool:
        return session.exp < now - self.session_duration_ms


def _client_host(conn: HTTPConnection) -> str:
    return conn.client.host if conn.client else "unknown"
