# recipe_hub/services/favourites.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from recipe_hub.services import common


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def list_favourites() -> List[str]:
    with common.favourites_db() as conn:
        rows = conn.execute("SELECT recipe_id FROM favourites ORDER BY created_at, rowid").fetchall()
    return [r[0] for r in rows]


def is_favourite(recipe_id: str) -> bool:
    rid = common.normalize_recipe_id(recipe_id)
    with common.favourites_db() as conn:
        row = conn.execute("SELECT 1 FROM favourites WHERE recipe_id = ?", (rid,)).fetchone()
    return row is not None


def add_favourite(recipe_id: str) -> bool:
    """Returns True if the id was newly added."""
    rid = common.normalize_recipe_id(recipe_id)
    with common.favourites_db() as conn:
        cur = conn.execute(
            "INSERT OR IGNORE INTO favourites (recipe_id, created_at) VALUES (?, ?)",
            (rid, _now_iso()),
        )
        conn.commit()
    return cur.rowcount > 0


def remove_favourite(recipe_id: str) -> bool:
    """Returns True if the id was present."""
    rid = common.normalize_recipe_id(recipe_id)
    with common.favourites_db() as conn:
        cur = conn.execute("DELETE FROM favourites WHERE recipe_id = ?", (rid,))
        conn.commit()
    return cur.rowcount > 0


def toggle_favourite(recipe_id: str) -> bool:
    """Flip the favourite flag; returns the new state."""
    if remove_favourite(recipe_id):
        return False
    add_favourite(recipe_id)
    return True
