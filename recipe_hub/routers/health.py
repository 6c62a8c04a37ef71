# recipe_hub/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Response, status

from recipe_hub.services.health import check_db, check_mealdb, sources_configured, version_payload

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: if the process is serving requests, it's up
    return {"status": "ok", **version_payload()}


@router.get("/health/ready")
async def ready(response: Response):
    db = check_db()
    mealdb = await check_mealdb()

    overall = "ok"
    http_status = status.HTTP_200_OK

    # Favourites DB is required
    if db["status"] != "ok":
        overall = "fail"
        http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    elif mealdb["status"] != "ok":
        overall = "degraded"

    response.status_code = http_status
    return {
        "status": overall,
        "checks": {"db": db, "themealdb": mealdb},
        "sources": sources_configured(),
        **version_payload(),
    }


@router.get("/version")
def version():
    return version_payload()
