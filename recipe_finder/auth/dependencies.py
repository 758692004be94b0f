from __future__ import annotations

from fastapi import HTTPException, Request

from ..storage.store import MemStore

SESSION_USER_KEY = "user_id"


def get_store(request: Request) -> MemStore:
    """Return the store the application was built with."""
    return request.app.state.store


def get_current_user_id(request: Request) -> int | None:
    """Return the logged-in user id from the session, or ``None``."""
    return request.session.get(SESSION_USER_KEY)


def require_user(request: Request) -> int:
    """Raise 401 if no user is logged in."""
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id
