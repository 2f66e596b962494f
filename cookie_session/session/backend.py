"""Storage backends for opaque-id sessions."""

from __future__ import annotations

import time
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionBackend(Protocol):
    """Server-side mapping from session id to session value.

    Implementations own their eviction policy and report failures by raising
    ``StorageError``. Calls may block on I/O, so they are awaited.
    """

    async def store(self, session_id: str, value: Any) -> None:
        """Persist ``value`` under ``session_id``."""
        ...

    async def retrieve(self, session_id: str) -> Any | None:
        """Return the value for ``session_id``, or None if unknown or evicted."""
        ...

    async def delete(self, session_id: str) -> None:
        """Forget ``session_id``. Later retrievals must return None."""
        ...


class InMemoryBackend:
    """In-memory session backend for development/testing.

    Not suitable for production: sessions are lost on restart and not
    shared across processes.
    """

    def __init__(self, max_age: int | None = None) -> None:
        self._store: dict[str, tuple[Any, float]] = {}
        self._max_age = max_age

    async def store(self, session_id: str, value: Any) -> None:
        self._store[session_id] = (value, time.time())

    async def retrieve(self, session_id: str) -> Any | None:
        entry = self._store.get(session_id)
        if entry is None:
            return None
        value, created = entry
        if self._max_age is not None and time.time() - created > self._max_age:
            del self._store[session_id]
            return None
        return value

    async def delete(self, session_id: str) -> None:
        self._store.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._store)
