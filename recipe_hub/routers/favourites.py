# recipe_hub/routers/favourites.py
from __future__ import annotations

from fastapi import APIRouter

from recipe_hub.models.recipe import FavouritesResponse, FavouriteToggleResponse, RecipeListResponse
from recipe_hub.services import favourites, recipes_search

router = APIRouter(prefix="/favourites", tags=["favourites"])


@router.get("", response_model=FavouritesResponse)
def list_ids() -> FavouritesResponse:
    return FavouritesResponse(ids=favourites.list_favourites())


# Favourites whose source can no longer be reached are left out, not removed.
@router.get("/recipes", response_model=RecipeListResponse)
async def list_recipes() -> RecipeListResponse:
    ids = favourites.list_favourites()
    return RecipeListResponse(items=await recipes_search.resolve_many(ids))


# API-Ninjas ids are built from titles and may contain "/", hence :path.
@router.put("/{recipe_id:path}", response_model=FavouriteToggleResponse)
def add(recipe_id: str) -> FavouriteToggleResponse:
    favourites.add_favourite(recipe_id)
    return FavouriteToggleResponse(id=recipe_id.strip(), favourite=True)


@router.delete("/{recipe_id:path}", response_model=FavouriteToggleResponse)
def remove(recipe_id: str) -> FavouriteToggleResponse:
    favourites.remove_favourite(recipe_id)
    return FavouriteToggleResponse(id=recipe_id.strip(), favourite=False)


@router.post("/{recipe_id:path}/toggle", response_model=FavouriteToggleResponse)
def toggle(recipe_id: str) -> FavouriteToggleResponse:
    state = favourites.toggle_favourite(recipe_id)
    return FavouriteToggleResponse(id=recipe_id.strip(), favourite=state)
