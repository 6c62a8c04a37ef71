# recipe_hub/services/adapters.py
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from recipe_hub.core.text import clean_text, hyphenate
from recipe_hub.models.recipe import NormalizedRecipe, RecipeSource

RawPayload = Dict[str, Any]

UNTITLED = "Untitled Recipe"

MEALDB_MAX_INGREDIENTS = 20
MEALDB_AREA_FALLBACK = "International"
MEALDB_CATEGORY_FALLBACK = "General"

SPOONACULAR_AREA_FALLBACK = "Various"
SPOONACULAR_CATEGORY_FALLBACK = "General"
# complexSearch rows carry no instructions; only /information does.
SPOONACULAR_SUMMARY_INSTRUCTIONS = "Instructions are not included in search results. Open the full recipe to load them."

NINJAS_FALLBACK = "N/A"
NINJAS_ID_PREFIX = "ninjas-"


def _optional(value: Any) -> Optional[str]:
    s = clean_text(value)
    return s or None


def _joined(values: Any, fallback: str) -> str:
    if not isinstance(values, list):
        return fallback
    parts = [clean_text(v) for v in values]
    return ", ".join(p for p in parts if p) or fallback


def _title_id(prefix: str, title: str) -> str:
    return prefix + hyphenate(title)


def _native_id(value: Any, prefix: str, title: str) -> str:
    rid = clean_text(value)
    return rid or _title_id(prefix, title)


def adapt_themealdb(meal: RawPayload, *, summary: Optional[bool] = None) -> NormalizedRecipe:
    title = clean_text(meal.get("strMeal")) or UNTITLED

    ingredients: List[str] = []
    # No explicit count: always probe the full range and skip empty slots.
    for i in range(1, MEALDB_MAX_INGREDIENTS + 1):
        name = clean_text(meal.get(f"strIngredient{i}"))
        if not name:
            continue
        measure = clean_text(meal.get(f"strMeasure{i}"))
        ingredients.append(f"{measure} {name}".strip())

    return NormalizedRecipe(
        id=_native_id(meal.get("idMeal"), "mealdb-", title),
        title=title,
        image=_optional(meal.get("strMealThumb")),
        area=clean_text(meal.get("strArea")) or MEALDB_AREA_FALLBACK,
        category=clean_text(meal.get("strCategory")) or MEALDB_CATEGORY_FALLBACK,
        instructions=clean_text(meal.get("strInstructions")),
        youtube_url=_optional(meal.get("strYoutube")),
        ingredients_list=ingredients,
        source=RecipeSource.THEMEALDB,
        source_url=_optional(meal.get("strSource")),
        has_full_detail=not summary,
    )


def adapt_spoonacular(recipe: RawPayload, *, summary: Optional[bool] = None) -> NormalizedRecipe:
    title = clean_text(recipe.get("title")) or UNTITLED

    ingredients: List[str] = []
    for ing in recipe.get("extendedIngredients") or []:
        if isinstance(ing, dict):
            line = clean_text(ing.get("original") or ing.get("originalName") or ing.get("name"))
        else:
            line = clean_text(ing)
        if line:
            ingredients.append(line)

    instructions = clean_text(recipe.get("instructions"))
    if summary is None:
        # caller did not say which endpoint this came from
        summary = not instructions
    if summary and not instructions:
        instructions = SPOONACULAR_SUMMARY_INSTRUCTIONS

    return NormalizedRecipe(
        id=_native_id(recipe.get("id"), "spoonacular-", title),
        title=title,
        image=_optional(recipe.get("image")),
        area=_joined(recipe.get("cuisines"), SPOONACULAR_AREA_FALLBACK),
        category=_joined(recipe.get("dishTypes"), SPOONACULAR_CATEGORY_FALLBACK),
        instructions=instructions,
        youtube_url=None,
        ingredients_list=ingredients,
        source=RecipeSource.SPOONACULAR,
        source_url=_optional(recipe.get("sourceUrl")),
        has_full_detail=not summary,
    )


def adapt_api_ninjas(recipe: RawPayload, *, summary: Optional[bool] = None) -> NormalizedRecipe:
    title = clean_text(recipe.get("title")) or UNTITLED

    raw_ingredients = clean_text(recipe.get("ingredients"))
    ingredients = [p.strip() for p in raw_ingredients.split("|") if p.strip()]

    return NormalizedRecipe(
        id=_title_id(NINJAS_ID_PREFIX, title),
        title=title,
        image=None,
        area=NINJAS_FALLBACK,
        category=clean_text(recipe.get("servings")) or NINJAS_FALLBACK,
        instructions=clean_text(recipe.get("instructions")),
        youtube_url=None,
        ingredients_list=ingredients,
        source=RecipeSource.API_NINJAS,
        has_full_detail=not summary,
    )


def ninjas_title_from_id(recipe_id: str) -> Optional[str]:
    """Turn an API-Ninjas id back into a title query, or None for other ids."""
    if not recipe_id.startswith(NINJAS_ID_PREFIX):
        return None
    title = recipe_id[len(NINJAS_ID_PREFIX):].replace("-", " ").strip()
    return title or None


ADAPTERS: Dict[RecipeSource, Callable[..., NormalizedRecipe]] = {
    RecipeSource.THEMEALDB: adapt_themealdb,
    RecipeSource.SPOONACULAR: adapt_spoonacular,
    RecipeSource.API_NINJAS: adapt_api_ninjas,
}


def adapt(source: RecipeSource | str, payload: RawPayload, *, summary: Optional[bool] = None) -> NormalizedRecipe:
    """
    Normalize one raw payload from `source`.
    The adapter is picked by the explicit tag, never by the payload's shape.
    `summary` marks search-result payloads (True) or full detail lookups
    (False); None leaves it to the adapter.
    """
    try:
        adapter = ADAPTERS[RecipeSource(source)]
    except ValueError:
        raise ValueError(f"Unknown recipe source: {source!r}") from None
    return adapter(payload, summary=summary)
