# recipe_hub/routers/recipes.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query

from recipe_hub.models.recipe import (
    CategoryListResponse,
    InstructionsParseRequest,
    InstructionsParseResponse,
    NormalizedRecipe,
    RecipeDetailResponse,
    RecipeListResponse,
    RecipeSearchResponse,
    RecipeSource,
)
from recipe_hub.services import favourites, recipes_search
from recipe_hub.services.instructions import parse_instructions

router = APIRouter(tags=["recipe"])


@router.get("/recipes/search", response_model=RecipeSearchResponse)
async def search(
    q: str = Query(..., description="Recipe name or ingredient"),
    sources: Optional[List[RecipeSource]] = Query(default=None),
) -> RecipeSearchResponse:
    items, failed = await recipes_search.search_recipes(q, sources)
    return RecipeSearchResponse(query=q.strip(), items=items, failed_sources=failed)


@router.get("/recipes/random", response_model=NormalizedRecipe)
async def random_recipe() -> NormalizedRecipe:
    return await recipes_search.random_recipe()


@router.get("/recipes/letter/{letter}", response_model=RecipeListResponse)
async def by_letter(letter: str) -> RecipeListResponse:
    return RecipeListResponse(items=await recipes_search.recipes_by_letter(letter))


@router.get("/recipes/categories", response_model=CategoryListResponse)
async def categories() -> CategoryListResponse:
    return CategoryListResponse(categories=await recipes_search.list_categories())


@router.get("/recipes/category/{name}", response_model=RecipeListResponse)
async def by_category(name: str) -> RecipeListResponse:
    return RecipeListResponse(items=await recipes_search.recipes_by_category(name))


@router.post("/recipe/instructions/parse", response_model=InstructionsParseResponse)
def instructions_parse(req: InstructionsParseRequest) -> InstructionsParseResponse:
    return InstructionsParseResponse(steps=parse_instructions(req.instructions))


@router.get("/recipe/{source}/{recipe_id:path}", response_model=RecipeDetailResponse)
async def recipe_detail(source: RecipeSource, recipe_id: str) -> RecipeDetailResponse:
    recipe = await recipes_search.get_recipe(source, recipe_id)
    return RecipeDetailResponse(
        recipe=recipe,
        steps=parse_instructions(recipe.instructions),
        favourite=favourites.is_favourite(recipe.id),
    )
