"""GET /auth/me: Return the identity held in the session."""

from typing import Any

from fastapi import APIRouter, Depends

from ..dependencies import require_session

router = APIRouter()


@router.get("/auth/me")
async def get_me(session: Any = Depends(require_session)):
    return {
        "user_id": getattr(session, "user_id", None),
        "role": getattr(session, "role", None),
    }
