from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from starlette.middleware.sessions import SessionMiddleware

from .auth.dependencies import (
    SESSION_USER_KEY,
    get_current_user_id,
    get_store,
    require_user,
)
from .auth.users import authenticate, register
from .config import DEFAULT_APP_CONFIG, AppConfig
from .errors import install_exception_handlers
from .storage.models import (
    CUISINES,
    DIETARY_OPTIONS,
    MEAL_TYPES,
    LoginRequest,
    MessageResponse,
    Recipe,
    RecipeCreate,
    RecipeDetail,
    RecipeSearch,
    RecipeUpdate,
    SortOrder,
    UserCreate,
    UserOut,
)
from .storage.store import MemStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_owned_recipe(store: MemStore, recipe_id: int, user_id: int, action: str) -> Recipe:
    """Look up a recipe the current user may modify; 404 / 403 otherwise."""
    recipe = store.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    if recipe.created_by != user_id:
        logger.warning("User %d may not %s recipe %d", user_id, action, recipe_id)
        raise HTTPException(status_code=403, detail=f"Not authorized to {action} this recipe")
    return recipe


# ── Public endpoints ─────────────────────────────────────────────────────


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/metadata")
def metadata() -> dict[str, list[str]]:
    return {
        "cuisines": CUISINES,
        "mealTypes": MEAL_TYPES,
        "dietaryOptions": DIETARY_OPTIONS,
    }


# ── Auth endpoints ───────────────────────────────────────────────────────


@router.post("/api/auth/register", response_model=UserOut, status_code=201)
def register_user(
    body: UserCreate,
    request: Request,
    store: MemStore = Depends(get_store),
) -> UserOut:
    user = register(store, body)
    if user is None:
        raise HTTPException(status_code=409, detail="Username already exists")
    request.session[SESSION_USER_KEY] = user.id
    return user


@router.post("/api/auth/login", response_model=UserOut)
def login(
    body: LoginRequest,
    request: Request,
    store: MemStore = Depends(get_store),
) -> UserOut:
    user = authenticate(store, body.username, body.password)
    if not user:
        logger.warning("Failed login for %r", body.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session[SESSION_USER_KEY] = user.id
    return user


@router.post("/api/auth/logout", response_model=MessageResponse)
def logout(request: Request) -> MessageResponse:
    request.session.clear()
    return MessageResponse(message="Logged out successfully")


@router.get("/api/auth/current", response_model=UserOut | None)
def current_user(
    user_id: int | None = Depends(get_current_user_id),
    store: MemStore = Depends(get_store),
) -> UserOut | None:
    if user_id is None:
        return None
    user = store.get_user(user_id)
    if user is None:
        return None
    return UserOut(id=user.id, username=user.username)


# ── Recipe endpoints ─────────────────────────────────────────────────────


@router.get("/api/recipes", response_model=list[Recipe])
def list_recipes(
    query: str | None = None,
    cuisine: str | None = None,
    meal_type: str | None = Query(default=None, alias="mealType"),
    dietary_option: str | None = Query(default=None, alias="dietaryOption"),
    sort: SortOrder | None = None,
    store: MemStore = Depends(get_store),
) -> list[Recipe]:
    search = RecipeSearch(
        query=query,
        cuisine=cuisine,
        meal_type=meal_type,
        dietary_option=dietary_option,
        sort=sort,
    )
    return store.search_recipes(search)


@router.get("/api/recipes/{recipe_id}", response_model=RecipeDetail)
def get_recipe(
    recipe_id: int,
    user_id: int | None = Depends(get_current_user_id),
    store: MemStore = Depends(get_store),
) -> RecipeDetail:
    recipe = store.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    is_favorite = user_id is not None and store.is_favorite(user_id, recipe_id)
    return RecipeDetail(**recipe.model_dump(by_alias=False), is_favorite=is_favorite)


@router.post("/api/recipes", response_model=Recipe, status_code=201)
def create_recipe(
    body: RecipeCreate,
    user_id: int = Depends(require_user),
    store: MemStore = Depends(get_store),
) -> Recipe:
    return store.create_recipe({**body.model_dump(by_alias=False), "created_by": user_id})


@router.put("/api/recipes/{recipe_id}", response_model=Recipe)
def update_recipe(
    recipe_id: int,
    body: RecipeUpdate,
    user_id: int = Depends(require_user),
    store: MemStore = Depends(get_store),
) -> Recipe:
    _get_owned_recipe(store, recipe_id, user_id, "update")
    changes = body.model_dump(by_alias=False, exclude_unset=True, exclude_none=True)
    updated = store.update_recipe(recipe_id, changes)
    if updated is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return updated


@router.delete("/api/recipes/{recipe_id}", response_model=MessageResponse)
def delete_recipe(
    recipe_id: int,
    user_id: int = Depends(require_user),
    store: MemStore = Depends(get_store),
) -> MessageResponse:
    _get_owned_recipe(store, recipe_id, user_id, "delete")
    store.delete_recipe(recipe_id)
    return MessageResponse(message="Recipe deleted successfully")


# ── Favorite endpoints ───────────────────────────────────────────────────


@router.post("/api/favorites/{recipe_id}", response_model=MessageResponse)
def add_favorite(
    recipe_id: int,
    user_id: int = Depends(require_user),
    store: MemStore = Depends(get_store),
) -> MessageResponse:
    if store.get_recipe(recipe_id) is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    store.add_to_favorites(user_id, recipe_id)
    return MessageResponse(message="Recipe added to favorites")


@router.delete("/api/favorites/{recipe_id}", response_model=MessageResponse)
def remove_favorite(
    recipe_id: int,
    user_id: int = Depends(require_user),
    store: MemStore = Depends(get_store),
) -> MessageResponse:
    store.remove_from_favorites(user_id, recipe_id)
    return MessageResponse(message="Recipe removed from favorites")


@router.get("/api/favorites", response_model=list[Recipe])
def list_favorites(
    user_id: int = Depends(require_user),
    store: MemStore = Depends(get_store),
) -> list[Recipe]:
    return store.get_favorites(user_id)


# ── Application factory ──────────────────────────────────────────────────


def create_app(store: MemStore | None = None, config: AppConfig = DEFAULT_APP_CONFIG) -> FastAPI:
    """Build the API around ``store`` (a fresh store when omitted)."""
    if store is None:
        store = MemStore.seeded() if config.seed_data else MemStore()

    application = FastAPI(title=config.title, version=config.version)
    application.state.store = store
    application.add_middleware(
        SessionMiddleware,
        secret_key=config.session_secret,
        max_age=config.session_max_age,
    )
    install_exception_handlers(application)
    application.include_router(router)
    return application


app = create_app()
