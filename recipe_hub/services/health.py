# recipe_hub/services/health.py
from __future__ import annotations

import sqlite3
import time
from typing import Any, Dict, Optional

from recipe_hub.clients.mealdb import TheMealDBClient
from recipe_hub.core import config


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_result(status: str, latency_ms: int, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status, "latency_ms": latency_ms}
    if error:
        out["error"] = error
    return out


def check_db() -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        conn = sqlite3.connect(str(config.FAVOURITES_DB), timeout=2)
        try:
            conn.execute("SELECT 1;")
        finally:
            conn.close()
        return _check_result("ok", _ms_since(start))
    except Exception as e:
        return _check_result("fail", _ms_since(start), str(e))


async def check_mealdb() -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        # categories.php is small and needs no key
        await TheMealDBClient(timeout_s=2.0).categories()
        return _check_result("ok", _ms_since(start))
    except Exception as e:
        # degraded: search falls back to the keyed sources, favourites still work
        return _check_result("degraded", _ms_since(start), str(e))


def sources_configured() -> Dict[str, bool]:
    return {
        "TheMealDB": True,
        "Spoonacular": bool(config.SPOONACULAR_API_KEY),
        "API-Ninjas": bool(config.API_NINJAS_API_KEY),
    }


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
