# recipe_hub/clients/api_ninjas.py
from __future__ import annotations

from typing import Any, Dict, List

import httpx

from recipe_hub.clients.errors import SourceNotConfigured
from recipe_hub.core import config


class APINinjasClient:
    def __init__(
        self,
        base_url: str = config.API_NINJAS_BASE_URL,
        api_key: str = config.API_NINJAS_API_KEY,
        timeout_s: float = config.HTTP_TIMEOUT_S,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout_s = timeout_s

    async def search(self, query: str) -> List[Dict[str, Any]]:
        if not self.api_key:
            raise SourceNotConfigured("API_NINJAS_API_KEY is not set")

        headers = {"X-Api-Key": self.api_key, "User-Agent": config.USER_AGENT}
        async with httpx.AsyncClient(timeout=self.timeout_s, headers=headers) as client:
            r = await client.get(f"{self.base_url}/v1/recipe", params={"query": query})
            r.raise_for_status()
            data = r.json()

        # API-Ninjas returns a bare JSON array
        return data if isinstance(data, list) else []


api_ninjas = APINinjasClient()
