# recipe_hub/services/recipes_search.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import httpx
from fastapi import HTTPException

from recipe_hub.clients.api_ninjas import api_ninjas
from recipe_hub.clients.errors import SourceNotConfigured
from recipe_hub.clients.mealdb import mealdb
from recipe_hub.clients.spoonacular import spoonacular
from recipe_hub.core.request_context import get_request_id
from recipe_hub.models.recipe import NormalizedRecipe, RecipeSource
from recipe_hub.services.adapters import adapt, ninjas_title_from_id

log = logging.getLogger("recipe_hub.search")

# Transport failures and non-JSON bodies (json.JSONDecodeError is a ValueError)
UPSTREAM_ERRORS = (httpx.HTTPError, ValueError)

# complexSearch rows lack instructions; the other sources return full records
SUMMARY_SOURCES = (RecipeSource.SPOONACULAR,)

ALL_SOURCES: Tuple[RecipeSource, ...] = (
    RecipeSource.THEMEALDB,
    RecipeSource.SPOONACULAR,
    RecipeSource.API_NINJAS,
)


def _log_source_failure(source: RecipeSource, error: BaseException) -> None:
    log.warning(
        "source_failed",
        extra={"source": source.value, "error": repr(error), "request_id": get_request_id()},
    )


async def _fetch_source(source: RecipeSource, query: str) -> List[Dict[str, Any]]:
    if source is RecipeSource.THEMEALDB:
        return await mealdb.search(query)
    if source is RecipeSource.SPOONACULAR:
        return await spoonacular.search(query)
    return await api_ninjas.search(query)


def _adapt_all(
    source: RecipeSource, payloads: List[Dict[str, Any]], summary: bool = False
) -> List[NormalizedRecipe]:
    return [adapt(source, p, summary=summary) for p in payloads if isinstance(p, dict)]


async def search_recipes(
    query: str, sources: Optional[Sequence[RecipeSource]] = None
) -> Tuple[List[NormalizedRecipe], List[RecipeSource]]:
    """
    Search every requested source concurrently.
    Returns (recipes, failed_sources). Results are concatenated in source
    order, no ranking or dedup. Raises 502 only if every source failed.
    """
    query = (query or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="Please enter a recipe name or ingredient to search.")

    chosen = list(dict.fromkeys(sources or ALL_SOURCES))
    results = await asyncio.gather(*(_fetch_source(s, query) for s in chosen), return_exceptions=True)

    recipes: List[NormalizedRecipe] = []
    failed: List[RecipeSource] = []
    for source, result in zip(chosen, results):
        if isinstance(result, BaseException):
            _log_source_failure(source, result)
            failed.append(source)
            continue
        recipes.extend(_adapt_all(source, result, summary=source in SUMMARY_SOURCES))

    if chosen and len(failed) == len(chosen):
        raise HTTPException(status_code=502, detail="An error occurred while searching for recipes.")

    return recipes, failed


async def recipes_by_letter(letter: str) -> List[NormalizedRecipe]:
    letter = (letter or "").strip()
    if len(letter) != 1 or not letter.isalpha():
        raise HTTPException(status_code=400, detail="Browse expects a single letter A-Z")

    try:
        meals = await mealdb.search_by_letter(letter.lower())
    except UPSTREAM_ERRORS as e:
        _log_source_failure(RecipeSource.THEMEALDB, e)
        raise HTTPException(status_code=502, detail="Could not load recipes.")
    return _adapt_all(RecipeSource.THEMEALDB, meals)


async def list_categories() -> List[str]:
    try:
        rows = await mealdb.categories()
    except UPSTREAM_ERRORS as e:
        _log_source_failure(RecipeSource.THEMEALDB, e)
        raise HTTPException(status_code=502, detail="Could not load categories.")
    names = [(r.get("strCategory") or "").strip() for r in rows]
    return [n for n in names if n]


async def recipes_by_category(category: str) -> List[NormalizedRecipe]:
    """Filter rows are summaries, so each one is looked up for full detail."""
    try:
        summaries = await mealdb.filter_by_category(category)
        details = await asyncio.gather(
            *(mealdb.lookup(str(s.get("idMeal"))) for s in summaries if s.get("idMeal"))
        )
    except UPSTREAM_ERRORS as e:
        _log_source_failure(RecipeSource.THEMEALDB, e)
        raise HTTPException(status_code=502, detail="Could not load recipes for this category.")
    return _adapt_all(RecipeSource.THEMEALDB, [d for d in details if d])


async def random_recipe() -> NormalizedRecipe:
    try:
        meal = await mealdb.random()
    except UPSTREAM_ERRORS as e:
        _log_source_failure(RecipeSource.THEMEALDB, e)
        raise HTTPException(status_code=502, detail="Could not fetch a random recipe.")
    if not meal:
        raise HTTPException(status_code=502, detail="Could not fetch a random recipe.")
    return adapt(RecipeSource.THEMEALDB, meal)


async def _lookup(source: RecipeSource, recipe_id: str) -> Optional[NormalizedRecipe]:
    if source is RecipeSource.THEMEALDB:
        meal = await mealdb.lookup(recipe_id)
        return adapt(source, meal, summary=False) if meal else None

    if source is RecipeSource.SPOONACULAR:
        try:
            data = await spoonacular.information(recipe_id)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise
        # error bodies look like {"status": "failure", "message": ...}
        if not isinstance(data, dict) or data.get("status"):
            return None
        return adapt(source, data, summary=False)

    title = ninjas_title_from_id(recipe_id)
    if not title:
        return None
    for row in await api_ninjas.search(title):
        recipe = adapt(source, row, summary=False)
        if recipe.id == recipe_id:
            return recipe
    return None


async def get_recipe(source: RecipeSource, recipe_id: str) -> NormalizedRecipe:
    try:
        recipe = await _lookup(source, recipe_id.strip())
    except SourceNotConfigured as e:
        raise HTTPException(status_code=503, detail=str(e))
    except UPSTREAM_ERRORS as e:
        _log_source_failure(source, e)
        raise HTTPException(status_code=502, detail=f"Failed to fetch recipe from {source.value}")

    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


async def resolve_recipe_id(recipe_id: str) -> Optional[NormalizedRecipe]:
    """
    Find a recipe from a bare favourite id.
    Numeric ids are tried on TheMealDB first, then Spoonacular.
    """
    rid = (recipe_id or "").strip()
    if ninjas_title_from_id(rid):
        candidates = [RecipeSource.API_NINJAS]
    elif rid.isdigit():
        candidates = [RecipeSource.THEMEALDB, RecipeSource.SPOONACULAR]
    else:
        return None

    for source in candidates:
        try:
            recipe = await _lookup(source, rid)
        except UPSTREAM_ERRORS + (SourceNotConfigured,) as e:
            _log_source_failure(source, e)
            continue
        if recipe:
            return recipe
    return None


async def resolve_many(recipe_ids: Sequence[str]) -> List[NormalizedRecipe]:
    found = await asyncio.gather(*(resolve_recipe_id(rid) for rid in recipe_ids))
    return [r for r in found if r]
