from __future__ import annotations

import pytest

from recipe_finder.storage.models import RecipeSearch
from recipe_finder.storage.search import search_recipes, sort_recipes


def _titles(recipes):
    return [r.title for r in recipes]


def test_no_filters_returns_store_order(store):
    results = store.search_recipes(RecipeSearch())
    assert [r.id for r in results] == [1, 2, 3, 4, 5, 6]


def test_query_pizza_matches_only_margherita(store):
    results = store.search_recipes(RecipeSearch(query="pizza"))
    assert _titles(results) == ["Classic Margherita Pizza"]


def test_query_is_case_insensitive(store):
    results = store.search_recipes(RecipeSearch(query="PiZzA"))
    assert _titles(results) == ["Classic Margherita Pizza"]


def test_query_tomato_matches_ingredients(store):
    results = store.search_recipes(RecipeSearch(query="tomato"))
    assert _titles(results) == [
        "Mediterranean Quinoa Bowl",
        "Classic Margherita Pizza",
        "Hearty Vegetable Soup",
    ]


def test_query_does_not_search_description(store):
    # "decadent" only appears in the brownie description
    assert store.search_recipes(RecipeSearch(query="decadent")) == []


def test_query_without_matches_is_empty(store):
    assert store.search_recipes(RecipeSearch(query="durian")) == []


def test_cuisine_filter_is_exact(store):
    assert _titles(store.search_recipes(RecipeSearch(cuisine="Italian"))) == [
        "Classic Margherita Pizza",
    ]
    assert store.search_recipes(RecipeSearch(cuisine="italian")) == []


def test_meal_type_filter(store):
    results = store.search_recipes(RecipeSearch(meal_type="Dinner"))
    assert [r.id for r in results] == [2, 3, 5, 6]


def test_dietary_option_filter(store):
    results = store.search_recipes(RecipeSearch(dietary_option="Vegan"))
    assert _titles(results) == ["Hearty Vegetable Soup", "Quick Vegetable Stir Fry"]


def test_filters_combine(store):
    search = RecipeSearch(query="vegetable", cuisine="American", dietary_option="Vegan")
    assert _titles(store.search_recipes(search)) == ["Hearty Vegetable Soup"]


def test_empty_strings_mean_no_filter(store):
    search = RecipeSearch(query="", cuisine="", meal_type="", dietary_option="", sort="")
    assert len(store.search_recipes(search)) == 6


def test_sort_cooking_time_ascending_and_stable(store):
    results = store.search_recipes(RecipeSearch(sort="cookingTime"))
    assert _titles(results) == [
        "Mediterranean Quinoa Bowl",
        "Quick Vegetable Stir Fry",
        "Street-Style Tacos",
        "Classic Margherita Pizza",
        "Fudgy Chocolate Brownies",
        "Hearty Vegetable Soup",
    ]


def test_sort_newest_descending_by_id(store):
    results = store.search_recipes(RecipeSearch(sort="newest"))
    assert [r.id for r in results] == [6, 5, 4, 3, 2, 1]


def test_sort_popular_descending_by_rating(store):
    store.update_recipe(4, {"rating": 5})
    store.update_recipe(2, {"rating": 3})
    store.update_recipe(6, {"rating": 3})
    results = store.search_recipes(RecipeSearch(sort="popular"))
    # ties keep store order
    assert [r.id for r in results] == [4, 2, 6, 1, 3, 5]


@pytest.mark.parametrize("sort", ["rating", "oldest", "COOKINGTIME"])
def test_unknown_sort_passes_through(store, sort):
    results = store.search_recipes(RecipeSearch(sort=sort))
    assert [r.id for r in results] == [1, 2, 3, 4, 5, 6]


def test_sort_applies_after_filters(store):
    results = store.search_recipes(RecipeSearch(meal_type="Dinner", sort="newest"))
    assert [r.id for r in results] == [6, 5, 3, 2]


def test_search_does_not_mutate_input(store):
    recipes = store.get_all_recipes()
    search_recipes(recipes, RecipeSearch(sort="newest"))
    assert [r.id for r in recipes] == [1, 2, 3, 4, 5, 6]


def test_sort_recipes_without_sort_returns_same_list(store):
    recipes = store.get_all_recipes()
    assert sort_recipes(recipes, None) is recipes
