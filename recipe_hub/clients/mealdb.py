# recipe_hub/clients/mealdb.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from recipe_hub.core import config


class TheMealDBClient:
    def __init__(self, base_url: str = config.MEALDB_BASE_URL, timeout_s: float = config.HTTP_TIMEOUT_S):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout_s, headers={"User-Agent": config.USER_AGENT}) as client:
            r = await client.get(f"{self.base_url}/{path}", params=params)
            r.raise_for_status()
            return r.json() or {}

    async def _meals(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        # TheMealDB returns {"meals": null} when nothing matches
        data = await self._get(path, params)
        return data.get("meals") or []

    async def search(self, name: str) -> List[Dict[str, Any]]:
        return await self._meals("search.php", {"s": name})

    async def search_by_letter(self, letter: str) -> List[Dict[str, Any]]:
        return await self._meals("search.php", {"f": letter})

    async def lookup(self, meal_id: str) -> Optional[Dict[str, Any]]:
        meals = await self._meals("lookup.php", {"i": meal_id})
        return meals[0] if meals else None

    async def random(self) -> Optional[Dict[str, Any]]:
        meals = await self._meals("random.php")
        return meals[0] if meals else None

    async def categories(self) -> List[Dict[str, Any]]:
        data = await self._get("categories.php")
        return data.get("categories") or []

    async def filter_by_category(self, category: str) -> List[Dict[str, Any]]:
        # summary rows only: idMeal, strMeal, strMealThumb
        return await self._meals("filter.php", {"c": category})


mealdb = TheMealDBClient()
