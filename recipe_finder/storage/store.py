from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .favorites import find_favorite, join_favorite_recipes
from .models import Favorite, Recipe, RecipeSearch, User
from .search import search_recipes
from .seed import seed_store

logger = logging.getLogger(__name__)

# Assigned by the store, never taken from caller input.
_SERVER_FIELDS = frozenset({"id", "rating", "rating_count"})

_RECIPE_ALIASES: dict[str, str] = {to_camel(name): name for name in Recipe.model_fields}


def _recipe_fields(data: Mapping[str, Any] | BaseModel, *, exclude_unset: bool = False) -> dict[str, Any]:
    """Normalise a payload to ``Recipe`` field names (camelCase keys accepted)."""
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=False, exclude_unset=exclude_unset)
    return {_RECIPE_ALIASES.get(key, key): value for key, value in data.items()}


class MemStore:
    """
    Process-lifetime store for users, recipes and favorites.

    Collections are insertion-ordered dicts keyed by id, with one counter per
    collection. The store does no authorisation and no uniqueness checks
    (except in ``register_user``); callers validate first. Every public
    method holds a single store-wide lock.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: dict[int, User] = {}
        self._recipes: dict[int, Recipe] = {}
        self._favorites: dict[int, Favorite] = {}
        self._user_id_counter = 1
        self._recipe_id_counter = 1
        self._favorite_id_counter = 1

    @classmethod
    def seeded(cls) -> MemStore:
        """Return a store holding the demo user and the sample recipes."""
        store = cls()
        seed_store(store)
        return store

    # ── Users ────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return self._find_user(username)

    def create_user(self, data: Mapping[str, Any] | BaseModel) -> User:
        with self._lock:
            return self._insert_user(data)

    def register_user(self, data: Mapping[str, Any] | BaseModel) -> User | None:
        """Create the user unless the username is taken; ``None`` on conflict."""
        with self._lock:
            fields = data.model_dump(by_alias=False) if isinstance(data, BaseModel) else dict(data)
            if self._find_user(fields["username"]) is not None:
                return None
            return self._insert_user(fields)

    def _find_user(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def _insert_user(self, data: Mapping[str, Any] | BaseModel) -> User:
        fields = data.model_dump(by_alias=False) if isinstance(data, BaseModel) else dict(data)
        fields.pop("id", None)
        user = User(id=self._user_id_counter, **fields)
        self._user_id_counter += 1
        self._users[user.id] = user
        logger.info("Created user %d (%s)", user.id, user.username)
        return user

    # ── Recipes ──────────────────────────────────────────────────────────

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        with self._lock:
            return self._recipes.get(recipe_id)

    def get_all_recipes(self) -> list[Recipe]:
        with self._lock:
            return list(self._recipes.values())

    def search_recipes(self, search: RecipeSearch) -> list[Recipe]:
        with self._lock:
            return search_recipes(self._recipes.values(), search)

    def create_recipe(self, data: Mapping[str, Any] | BaseModel) -> Recipe:
        """Store a new recipe; ``rating`` and ``rating_count`` always start at 0."""
        fields = {k: v for k, v in _recipe_fields(data).items() if k not in _SERVER_FIELDS}
        with self._lock:
            recipe = Recipe(
                **fields,
                id=self._recipe_id_counter,
                rating=0,
                rating_count=0,
            )
            self._recipe_id_counter += 1
            self._recipes[recipe.id] = recipe
        logger.info("Created recipe %d (%s) by user %d", recipe.id, recipe.title, recipe.created_by)
        return recipe

    def update_recipe(self, recipe_id: int, partial: Mapping[str, Any] | BaseModel) -> Recipe | None:
        """
        Overwrite the fields present in ``partial`` on an existing recipe.

        Absent fields are preserved. No re-validation happens here. Returns
        ``None`` if the recipe does not exist.
        """
        changes = _recipe_fields(partial, exclude_unset=True)
        changes.pop("id", None)
        with self._lock:
            recipe = self._recipes.get(recipe_id)
            if recipe is None:
                return None
            updated = recipe.model_copy(update=changes)
            self._recipes[recipe_id] = updated
        return updated

    def delete_recipe(self, recipe_id: int) -> bool:
        with self._lock:
            removed = self._recipes.pop(recipe_id, None)
        if removed is not None:
            logger.info("Deleted recipe %d", recipe_id)
        return removed is not None

    # ── Favorites ────────────────────────────────────────────────────────

    def add_to_favorites(self, user_id: int, recipe_id: int) -> Favorite:
        """Idempotent: an existing favorite for the pair is returned as is."""
        with self._lock:
            existing = find_favorite(self._favorites.values(), user_id, recipe_id)
            if existing is not None:
                return existing
            favorite = Favorite(
                id=self._favorite_id_counter,
                user_id=user_id,
                recipe_id=recipe_id,
            )
            self._favorite_id_counter += 1
            self._favorites[favorite.id] = favorite
            return favorite

    def remove_from_favorites(self, user_id: int, recipe_id: int) -> bool:
        with self._lock:
            favorite = find_favorite(self._favorites.values(), user_id, recipe_id)
            if favorite is None:
                return False
            del self._favorites[favorite.id]
            return True

    def get_favorites(self, user_id: int) -> list[Recipe]:
        with self._lock:
            return join_favorite_recipes(
                self._recipes.values(),
                self._favorites.values(),
                user_id,
            )

    def is_favorite(self, user_id: int, recipe_id: int) -> bool:
        with self._lock:
            return find_favorite(self._favorites.values(), user_id, recipe_id) is not None

    def favorite_count(self) -> int:
        with self._lock:
            return len(self._favorites)
