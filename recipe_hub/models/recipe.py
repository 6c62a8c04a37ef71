# recipe_hub/models/recipe.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class RecipeSource(str, Enum):
    THEMEALDB = "TheMealDB"
    SPOONACULAR = "Spoonacular"
    API_NINJAS = "API-Ninjas"


class NormalizedRecipe(BaseModel):
    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    image: Optional[str] = None
    area: str = Field(min_length=1)
    category: str = Field(min_length=1)
    instructions: str = ""
    youtube_url: Optional[str] = Field(default=None, alias="youtubeUrl")
    ingredients_list: List[str] = Field(default_factory=list, alias="ingredientsList")
    source: RecipeSource
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")
    has_full_detail: bool = Field(default=True, alias="hasFullDetail")

    model_config = {"populate_by_name": True, "frozen": True}


class RecipeSearchResponse(BaseModel):
    query: str
    items: List[NormalizedRecipe]
    failed_sources: List[RecipeSource] = Field(default_factory=list)


class RecipeListResponse(BaseModel):
    items: List[NormalizedRecipe]


class RecipeDetailResponse(BaseModel):
    recipe: NormalizedRecipe
    steps: List[str]
    favourite: bool = False


class CategoryListResponse(BaseModel):
    categories: List[str]


class InstructionsParseRequest(BaseModel):
    instructions: Optional[str] = None


class InstructionsParseResponse(BaseModel):
    steps: List[str]


class FavouritesResponse(BaseModel):
    ids: List[str]


class FavouriteToggleResponse(BaseModel):
    ok: bool = True
    id: str
    favourite: bool
