from __future__ import annotations

import pytest

from recipe_hub.core import config


@pytest.fixture(autouse=True)
def _favourites_db(tmp_path, monkeypatch: pytest.MonkeyPatch):
    # Every test gets its own throwaway favourites store
    monkeypatch.setattr(config, "FAVOURITES_DB", tmp_path / "favourites.sqlite3")
