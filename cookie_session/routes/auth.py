"""Session status, CSRF token and logout endpoints.

Built from the handler combinators, so they need the store up front.
"""

from starlette.routing import Route

from ..session import (
    SessionStore,
    csrf_token,
    logged_in,
    login_required,
    logout,
    no_content,
    not_logged_in,
    require_csrf_token,
    with_session,
)


def session_routes(store: SessionStore) -> list[Route]:
    return [
        Route(
            "/auth/status",
            with_session(store, not_logged_in(), logged_in()),
            methods=["GET"],
        ),
        Route(
            "/auth/csrf-token",
            with_session(store, login_required(), csrf_token()),
            methods=["GET"],
        ),
        # Anonymous logout has nothing to delete and is not an error.
        Route(
            "/auth/logout",
            with_session(store, no_content(), require_csrf_token(logout(store))),
            methods=["POST"],
        ),
    ]
