# recipe_hub/clients/spoonacular.py
from __future__ import annotations

from typing import Any, Dict, List

import httpx

from recipe_hub.clients.errors import SourceNotConfigured
from recipe_hub.core import config


class SpoonacularClient:
    def __init__(
        self,
        base_url: str = config.SPOONACULAR_BASE_URL,
        api_key: str = config.SPOONACULAR_API_KEY,
        timeout_s: float = config.HTTP_TIMEOUT_S,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout_s = timeout_s

    async def _get(self, path: str, params: Dict[str, Any]) -> Any:
        if not self.api_key:
            raise SourceNotConfigured("SPOONACULAR_API_KEY is not set")

        async with httpx.AsyncClient(timeout=self.timeout_s, headers={"User-Agent": config.USER_AGENT}) as client:
            r = await client.get(f"{self.base_url}{path}", params={**params, "apiKey": self.api_key})
            r.raise_for_status()
            return r.json()

    async def search(self, query: str, number: int = config.SEARCH_LIMIT) -> List[Dict[str, Any]]:
        # Summary payloads: addRecipeInformation adds cuisines/dishTypes but not instructions
        data = await self._get(
            "/recipes/complexSearch",
            {"query": query, "number": number, "addRecipeInformation": "true", "fillIngredients": "true"},
        )
        return (data or {}).get("results") or []

    async def information(self, recipe_id: str) -> Dict[str, Any]:
        return await self._get(f"/recipes/{recipe_id}/information", {"includeNutrition": "false"})


spoonacular = SpoonacularClient()
