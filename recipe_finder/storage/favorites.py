from __future__ import annotations

from collections.abc import Iterable

from .models import Favorite, Recipe


def find_favorite(
    favorites: Iterable[Favorite],
    user_id: int,
    recipe_id: int,
) -> Favorite | None:
    """Return the favorite row for ``(user_id, recipe_id)``, or ``None``."""
    for fav in favorites:
        if fav.user_id == user_id and fav.recipe_id == recipe_id:
            return fav
    return None


def favorite_recipe_ids(favorites: Iterable[Favorite], user_id: int) -> set[int]:
    return {fav.recipe_id for fav in favorites if fav.user_id == user_id}


def join_favorite_recipes(
    recipes: Iterable[Recipe],
    favorites: Iterable[Favorite],
    user_id: int,
) -> list[Recipe]:
    """
    Recipes favorited by ``user_id``.

    Output follows the recipe collection's order, not the order in which the
    favorites were added. Favorites pointing at deleted recipes are skipped.
    """
    wanted = favorite_recipe_ids(favorites, user_id)
    if not wanted:
        return []
    return [recipe for recipe in recipes if recipe.id in wanted]
