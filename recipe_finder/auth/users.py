from __future__ import annotations

from ..storage.models import UserCreate, UserOut
from ..storage.store import MemStore


def authenticate(store: MemStore, username: str, password: str) -> UserOut | None:
    """Verify credentials. Returns the public user record or ``None``."""
    user = store.get_user_by_username(username)
    if user and user.password == password:
        return UserOut(id=user.id, username=user.username)
    return None


def register(store: MemStore, body: UserCreate) -> UserOut | None:
    """Create an account. Returns ``None`` if the username is already taken."""
    user = store.register_user(body)
    if user is None:
        return None
    return UserOut(id=user.id, username=user.username)
