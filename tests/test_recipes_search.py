from __future__ import annotations

import asyncio

import httpx
import pytest
from fastapi import HTTPException

import recipe_hub.services.recipes_search as rs
from recipe_hub.clients.errors import SourceNotConfigured
from recipe_hub.models.recipe import RecipeSource

MEAL = {"idMeal": "52772", "strMeal": "Teriyaki Chicken", "strArea": "Japanese", "strCategory": "Chicken"}
SPOON = {"id": 716429, "title": "Pasta", "cuisines": ["Italian"], "instructions": ""}
NINJA = {"title": "Beef Stew", "ingredients": "beef|carrots", "servings": "4 Servings"}


def _boom(*_args, **_kwargs):
    raise httpx.ConnectError("down")


class FakeMealDB:
    def __init__(self, meals=None, fail=False):
        self.meals = {m["idMeal"]: m for m in (meals or [MEAL])}
        self.fail = fail

    async def search(self, name):
        if self.fail:
            _boom()
        return list(self.meals.values())

    async def search_by_letter(self, letter):
        return [m for m in self.meals.values() if m["strMeal"].lower().startswith(letter)]

    async def lookup(self, meal_id):
        if self.fail:
            _boom()
        return self.meals.get(meal_id)

    async def random(self):
        return next(iter(self.meals.values()), None)

    async def categories(self):
        return [{"strCategory": "Beef"}, {"strCategory": ""}, {"strCategory": "Chicken"}]

    async def filter_by_category(self, category):
        return [{"idMeal": k, "strMeal": m["strMeal"]} for k, m in self.meals.items()]


class FakeSpoonacular:
    def __init__(self, configured=True, detail=None):
        self.configured = configured
        self.detail = detail

    async def search(self, query, number=10):
        if not self.configured:
            raise SourceNotConfigured("SPOONACULAR_API_KEY is not set")
        return [SPOON]

    async def information(self, recipe_id):
        if self.detail is None:
            request = httpx.Request("GET", "https://api.spoonacular.com")
            raise httpx.HTTPStatusError("404", request=request, response=httpx.Response(404, request=request))
        return self.detail


class FakeNinjas:
    def __init__(self, fail=False):
        self.fail = fail

    async def search(self, query):
        if self.fail:
            _boom()
        return [NINJA]


def _patch(monkeypatch: pytest.MonkeyPatch, mealdb=None, spoonacular=None, ninjas=None) -> None:
    monkeypatch.setattr(rs, "mealdb", mealdb or FakeMealDB())
    monkeypatch.setattr(rs, "spoonacular", spoonacular or FakeSpoonacular())
    monkeypatch.setattr(rs, "api_ninjas", ninjas or FakeNinjas())


def test_search_merges_all_sources_in_order(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)

    recipes, failed = asyncio.run(rs.search_recipes("chicken"))

    assert [r.source for r in recipes] == list(rs.ALL_SOURCES)
    assert failed == []
    assert recipes[1].has_full_detail is False


def test_search_tolerates_partial_failure(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch, spoonacular=FakeSpoonacular(configured=False), ninjas=FakeNinjas(fail=True))

    recipes, failed = asyncio.run(rs.search_recipes("chicken"))

    assert [r.id for r in recipes] == ["52772"]
    assert failed == [RecipeSource.SPOONACULAR, RecipeSource.API_NINJAS]


def test_search_fails_when_every_source_fails(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch, mealdb=FakeMealDB(fail=True), ninjas=FakeNinjas(fail=True))

    with pytest.raises(HTTPException) as exc:
        asyncio.run(rs.search_recipes("chicken", [RecipeSource.THEMEALDB, RecipeSource.API_NINJAS]))
    assert exc.value.status_code == 502


def test_search_rejects_blank_query(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)
    with pytest.raises(HTTPException) as exc:
        asyncio.run(rs.search_recipes("   "))
    assert exc.value.status_code == 400


def test_browse_by_letter(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)
    assert [r.title for r in asyncio.run(rs.recipes_by_letter("T"))] == ["Teriyaki Chicken"]

    with pytest.raises(HTTPException) as exc:
        asyncio.run(rs.recipes_by_letter("7"))
    assert exc.value.status_code == 400


def test_categories_skip_blank_names(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)
    assert asyncio.run(rs.list_categories()) == ["Beef", "Chicken"]


def test_category_rows_are_looked_up_in_full(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)
    recipes = asyncio.run(rs.recipes_by_category("Chicken"))
    assert [r.area for r in recipes] == ["Japanese"]


def test_get_recipe_not_found(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)
    with pytest.raises(HTTPException) as exc:
        asyncio.run(rs.get_recipe(RecipeSource.THEMEALDB, "999"))
    assert exc.value.status_code == 404


def test_get_recipe_upstream_failure(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch, mealdb=FakeMealDB(fail=True))
    with pytest.raises(HTTPException) as exc:
        asyncio.run(rs.get_recipe(RecipeSource.THEMEALDB, "52772"))
    assert exc.value.status_code == 502


def test_get_recipe_api_ninjas_by_synthesized_id(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)
    r = asyncio.run(rs.get_recipe(RecipeSource.API_NINJAS, "ninjas-Beef-Stew"))
    assert r.title == "Beef Stew"


def test_resolve_numeric_id_falls_back_to_spoonacular(monkeypatch: pytest.MonkeyPatch):
    detail = {**SPOON, "instructions": "Boil. Serve."}
    _patch(monkeypatch, spoonacular=FakeSpoonacular(detail=detail))

    r = asyncio.run(rs.resolve_recipe_id("716429"))

    assert r.source == RecipeSource.SPOONACULAR
    assert r.has_full_detail is True


def test_resolve_unknown_ids(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)
    assert asyncio.run(rs.resolve_recipe_id("123")) is None
    assert asyncio.run(rs.resolve_recipe_id("not-an-id")) is None
    assert [r.id for r in asyncio.run(rs.resolve_many(["52772", "123", "ninjas-Beef-Stew"]))] == [
        "52772",
        "ninjas-Beef-Stew",
    ]


class NotJSONMealDB(FakeMealDB):
    # what httpx's Response.json() raises on an HTML error page
    async def lookup(self, meal_id):
        raise ValueError("Expecting value: line 1 column 1 (char 0)")

    async def categories(self):
        raise ValueError("Expecting value: line 1 column 1 (char 0)")

    async def random(self):
        raise ValueError("Expecting value: line 1 column 1 (char 0)")


def test_non_json_upstream_body_maps_to_502(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch, mealdb=NotJSONMealDB())

    for call in (
        lambda: rs.get_recipe(RecipeSource.THEMEALDB, "52772"),
        rs.list_categories,
        rs.random_recipe,
    ):
        with pytest.raises(HTTPException) as exc:
            asyncio.run(call())
        assert exc.value.status_code == 502


def test_spoonacular_detail_without_instructions_is_full_detail(monkeypatch: pytest.MonkeyPatch):
    detail = {**SPOON, "instructions": None}
    _patch(monkeypatch, spoonacular=FakeSpoonacular(detail=detail))

    r = asyncio.run(rs.get_recipe(RecipeSource.SPOONACULAR, "716429"))

    assert r.has_full_detail is True
    assert r.instructions == ""


def test_search_marks_only_spoonacular_rows_as_summaries(monkeypatch: pytest.MonkeyPatch):
    _patch(monkeypatch)

    recipes, _failed = asyncio.run(rs.search_recipes("chicken"))

    assert [r.has_full_detail for r in recipes] == [True, False, True]
    assert recipes[1].instructions == "Instructions are not included in search results. Open the full recipe to load them."
