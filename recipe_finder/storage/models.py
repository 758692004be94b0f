from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Cuisine = Literal[
    "Italian",
    "Mexican",
    "Asian",
    "Mediterranean",
    "American",
    "Indian",
    "French",
    "Greek",
    "Thai",
    "Japanese",
    "Chinese",
    "Spanish",
    "Middle Eastern",
    "Korean",
    "Vietnamese",
]

MealType = Literal[
    "Breakfast",
    "Lunch",
    "Dinner",
    "Dessert",
    "Snack",
    "Appetizer",
    "Side Dish",
    "Drink",
]

DietaryOption = Literal[
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Dairy-Free",
    "Keto",
    "Paleo",
    "Low-Carb",
    "Low-Fat",
    "Pescatarian",
    "Nut-Free",
]

SortOrder = Literal["popular", "newest", "cookingTime"]

CUISINES: list[str] = list(get_args(Cuisine))
MEAL_TYPES: list[str] = list(get_args(MealType))
DIETARY_OPTIONS: list[str] = list(get_args(DietaryOption))
SORT_ORDERS: list[str] = list(get_args(SortOrder))


class CamelModel(BaseModel):
    """snake_case attributes, camelCase on the wire; both accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


# ── Users ────────────────────────────────────────────────────────────────


class User(CamelModel):
    id: int
    username: str
    password: str


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginRequest(CamelModel):
    username: str
    password: str


class UserOut(CamelModel):
    id: int
    username: str


# ── Recipes ──────────────────────────────────────────────────────────────


class RecipeCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: str
    image_url: str
    prep_time: int = Field(..., ge=0, description="Minutes")
    cooking_time: int = Field(..., ge=0, description="Minutes")
    servings: int = Field(..., ge=1)
    ingredients: list[str]
    instructions: list[str]
    cuisine: Cuisine
    meal_type: MealType
    dietary_options: list[DietaryOption] = Field(default_factory=list)


class RecipeUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    image_url: str | None = None
    prep_time: int | None = Field(default=None, ge=0)
    cooking_time: int | None = Field(default=None, ge=0)
    servings: int | None = Field(default=None, ge=1)
    ingredients: list[str] | None = None
    instructions: list[str] | None = None
    cuisine: Cuisine | None = None
    meal_type: MealType | None = None
    dietary_options: list[DietaryOption] | None = None


class Recipe(CamelModel):
    id: int
    title: str
    description: str
    image_url: str
    prep_time: int
    cooking_time: int
    servings: int
    ingredients: list[str]
    instructions: list[str]
    cuisine: str
    meal_type: str
    dietary_options: list[str]
    created_by: int
    rating: int = 0
    rating_count: int = 0


class RecipeDetail(Recipe):
    is_favorite: bool = False


class RecipeSearch(CamelModel):
    query: str | None = None
    cuisine: str | None = None
    meal_type: str | None = None
    dietary_option: str | None = None
    sort: str | None = None


# ── Favorites ────────────────────────────────────────────────────────────


class Favorite(CamelModel):
    id: int
    user_id: int
    recipe_id: int


class MessageResponse(BaseModel):
    message: str
