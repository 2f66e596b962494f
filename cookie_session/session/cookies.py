"""Cookie header parsing and Set-Cookie construction.

Stores never see a response object. They queue ``Set-Cookie`` values on the
request scope and ``SessionCookieMiddleware`` appends them to the response.
"""

from __future__ import annotations

from starlette.datastructures import Headers
from starlette.requests import HTTPConnection

DEFAULT_COOKIE_NAME = "session"
COOKIE_ATTRIBUTES = "; Path=/; Secure; HttpOnly; SameSite=strict"

PENDING_COOKIES_KEY = "session_set_cookies"


def get_value_for_cookie(headers: Headers, cookie_name: str) -> str | None:
    """Find ``cookie_name`` across every Cookie header occurrence.

    Starlette's ``request.cookies`` only looks at the first header, so the
    raw values are scanned here. First match wins.
    """
    for header in headers.getlist("cookie"):
        for pair in header.split(";"):
            name, sep, value = pair.partition("=")
            if sep and name.strip() == cookie_name:
                return value.strip()
    return None


def session_cookie(cookie_name: str, value: str = "") -> str:
    """Build a Set-Cookie value. An empty value tells the client to drop it."""
    return f"{cookie_name}={value}{COOKIE_ATTRIBUTES}"


def queue_set_cookie(conn: HTTPConnection, header_value: str) -> None:
    state = conn.scope.setdefault("state", {})
    state.setdefault(PENDING_COOKIES_KEY, []).append(header_value)


def pending_set_cookies(conn: HTTPConnection) -> list[str]:
    return list(conn.scope.get("state", {}).get(PENDING_COOKIES_KEY, []))
