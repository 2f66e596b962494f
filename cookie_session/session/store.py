"""Session stores keyed on a cookie.

``SessionStore`` is the capability every strategy provides. Stores only read
request headers and queue ``Set-Cookie`` values; they hold no per-request
state and no locks, so one instance serves concurrent requests.
"""

from __future__ import annotations

import abc
import logging
from typing import Any

from starlette.requests import HTTPConnection

from .. import ocsf
from ..errors import NotLoggedIn, StorageError
from .backend import SessionBackend
from .cookies import DEFAULT_COOKIE_NAME, get_value_for_cookie, queue_set_cookie, session_cookie
from .ids import DEFAULT_ID_LENGTH, generate_session_id

logger = logging.getLogger(__name__)


class SessionStore(abc.ABC):
    """Resolve, issue and drop the session carried by a request."""

    def __init__(self, cookie_name: str = DEFAULT_COOKIE_NAME) -> None:
        self.cookie_name = cookie_name

    @abc.abstractmethod
    async def set_session(self, conn: HTTPConnection, session: Any) -> None:
        ...

    @abc.abstractmethod
    async def get_session(self, conn: HTTPConnection, default: Any = None) -> Any:
        """Return the current session, or ``default`` when there is none."""

    @abc.abstractmethod
    async def delete_session(self, conn: HTTPConnection) -> None:
        ...

    async def require_session(self, conn: HTTPConnection) -> Any:
        session = await self.get_session(conn)
        if session is None:
            raise NotLoggedIn()
        return session

    async def exists_session(self, conn: HTTPConnection) -> bool:
        # Existence checks must never fail the request that asks.
        try:
            return await self.get_session(conn) is not None
        except Exception:
            logger.debug("Session lookup failed during existence check", exc_info=True)
            return False

    def read_cookie(self, conn: HTTPConnection) -> str | None:
        """Cookie value, with an empty value (a cleared cookie) read as absent."""
        return get_value_for_cookie(conn.headers, self.cookie_name) or None

    def write_cookie(self, conn: HTTPConnection, value: str = "") -> None:
        queue_set_cookie(conn, session_cookie(self.cookie_name, value))


class RandomIdSessionStore(SessionStore):
    """Opaque random id in the cookie, session value in a backend.

    Expiry is the backend's business. An id the backend does not know is
    treated exactly like a missing cookie.
    """

    def __init__(
        self,
        backend: SessionBackend,
        cookie_name: str = DEFAULT_COOKIE_NAME,
        id_length: int = DEFAULT_ID_LENGTH,
    ) -> None:
        super().__init__(cookie_name)
        if id_length <= 0:
            raise ValueError("Session id length must be positive")
        self.backend = backend
        self.id_length = id_length

    async def set_session(self, conn: HTTPConnection, session: Any) -> None:
        session_id = generate_session_id(self.id_length)
        await self._call_backend("store", self.backend.store, session_id, session)
        self.write_cookie(conn, session_id)
        ocsf.session_event(
            activity_id=ocsf.AuthActivity.LOGON,
            status_id=ocsf.Status.SUCCESS,
            severity_id=ocsf.Severity.INFORMATIONAL,
            session=session,
            message="Session created",
        )

    async def get_session(self, conn: HTTPConnection, default: Any = None) -> Any:
        session_id = self.read_cookie(conn)
        if session_id is None:
            return default
        session = await self._call_backend("retrieve", self.backend.retrieve, session_id)
        return default if session is None else session

    async def delete_session(self, conn: HTTPConnection) -> None:
        session_id = self.read_cookie(conn)
        if session_id is None:
            return
        await self._call_backend("delete", self.backend.delete, session_id)
        self.write_cookie(conn)
        ocsf.session_event(
            activity_id=ocsf.AuthActivity.LOGOFF,
            status_id=ocsf.Status.SUCCESS,
            severity_id=ocsf.Severity.INFORMATIONAL,
            message="Session deleted",
        )

    async def _call_backend(self, operation: str, fn, *args: Any) -> Any:
        try:
            return await fn(*args)
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"Session backend {operation} failed: {e}") from e
