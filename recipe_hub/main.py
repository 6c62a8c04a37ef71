from fastapi import FastAPI
from recipe_hub.routers import recipes, favourites
from recipe_hub.routers import health
from recipe_hub.core.logging import setup_logging
from recipe_hub.core.middleware import RequestLoggingMiddleware


def create_app() -> FastAPI:
    app = FastAPI(title="Recipe Hub")
    app.include_router(recipes.router)
    app.include_router(favourites.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    return app

app = create_app()
