import os
from pathlib import Path

# Project root = repo checkout
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DATA_DIR = Path(os.getenv("DATA_DIR", str(PROJECT_ROOT / "data")))
FAVOURITES_DB = Path(os.getenv("FAVOURITES_DB", str(DATA_DIR / "favourites.sqlite3")))

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

# --- Upstream recipe sources ---
MEALDB_BASE_URL = os.getenv("MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1")

SPOONACULAR_BASE_URL = os.getenv("SPOONACULAR_BASE_URL", "https://api.spoonacular.com")
SPOONACULAR_API_KEY = os.getenv("SPOONACULAR_API_KEY", "")

API_NINJAS_BASE_URL = os.getenv("API_NINJAS_BASE_URL", "https://api.api-ninjas.com")
API_NINJAS_API_KEY = os.getenv("API_NINJAS_API_KEY", "")

HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "15"))
SEARCH_LIMIT = int(os.getenv("SEARCH_LIMIT", "10"))

USER_AGENT = "RecipeHub/1.0"
