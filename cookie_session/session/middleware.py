"""ASGI middleware that delivers session cookies.

Stores queue ``Set-Cookie`` values on the request scope while the request is
handled; this middleware appends them when the response starts. Responses
produced by exception handlers get them too, since those run further in.
"""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .cookies import PENDING_COOKIES_KEY


class SessionCookieMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        scope["state"] = scope.get("state", {})
        scope["state"][PENDING_COOKIES_KEY] = []

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                pending: list[str] = scope["state"].get(PENDING_COOKIES_KEY, [])
                if pending:
                    headers = MutableHeaders(scope=message)
                    for cookie in pending:
                        headers.append("set-cookie", cookie)
            await send(message)

        await self.app(scope, receive, send_wrapper)
