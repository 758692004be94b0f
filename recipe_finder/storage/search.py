from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .models import Recipe, RecipeSearch

# sort name -> (key, descending)
_SORT_KEYS: dict[str, tuple[Callable[[Recipe], Any], bool]] = {
    "popular": (lambda r: r.rating, True),
    "newest": (lambda r: r.id, True),
    "cookingTime": (lambda r: r.cooking_time, False),
}


def _matches_query(recipe: Recipe, query_lower: str) -> bool:
    """Substring match against the title or any single ingredient."""
    if query_lower in recipe.title.lower():
        return True
    return any(query_lower in ingredient.lower() for ingredient in recipe.ingredients)


def sort_recipes(recipes: list[Recipe], sort: str | None) -> list[Recipe]:
    """
    Reorder ``recipes`` by the named sort.

    ``sorted`` is stable (also with ``reverse=True``), so recipes with equal
    keys keep their incoming relative order. Unknown or missing sort names
    return the list unchanged.
    """
    if not sort or sort not in _SORT_KEYS:
        return recipes
    key, descending = _SORT_KEYS[sort]
    return sorted(recipes, key=key, reverse=descending)


def search_recipes(recipes: Iterable[Recipe], search: RecipeSearch) -> list[Recipe]:
    """
    Filter and order ``recipes`` (given in store order) by ``search``.

    Filters: free-text ``query`` (case-insensitive substring of the title or
    an ingredient), exact ``cuisine``, exact ``meal_type`` and membership of
    ``dietary_option``. Empty values mean no filter. The sort is applied last.
    """
    results = list(recipes)

    if search.query:
        query_lower = search.query.lower()
        results = [r for r in results if _matches_query(r, query_lower)]

    if search.cuisine:
        results = [r for r in results if r.cuisine == search.cuisine]

    if search.meal_type:
        results = [r for r in results if r.meal_type == search.meal_type]

    if search.dietary_option:
        results = [r for r in results if search.dietary_option in r.dietary_options]

    return sort_recipes(results, search.sort)
