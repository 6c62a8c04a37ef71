import sqlite3

from recipe_hub.core import config

FAVOURITES_SCHEMA = """
CREATE TABLE IF NOT EXISTS favourites (
  recipe_id TEXT PRIMARY KEY,
  created_at TEXT NOT NULL
)
"""


def favourites_db() -> sqlite3.Connection:
    path = config.FAVOURITES_DB
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute(FAVOURITES_SCHEMA)
    return conn


def normalize_recipe_id(recipe_id) -> str:
    return str(recipe_id).strip()
