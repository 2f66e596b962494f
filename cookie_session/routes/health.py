"""GET /health: Liveness check."""

from fastapi import APIRouter, Request

from ..session import RandomIdSessionStore

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    store = request.app.state.session_store
    return {
        "status": "ok",
        "sessions": "opaque" if isinstance(store, RandomIdSessionStore) else "token",
    }
