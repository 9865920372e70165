"""Test configuration."""
import json
import os
import random
import tempfile
from pathlib import Path

import pytest

# Point the app at throwaway storage and a generated catalog before any imports
_TMP_DIR = Path(tempfile.mkdtemp(prefix="memoark-tests-"))
TEST_CATALOG_PATH = _TMP_DIR / "catalog.json"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'app.db'}"
os.environ["CATALOG_PATH"] = str(TEST_CATALOG_PATH)


def make_item(word: str, level: int = 1, core_meaning: str = "", definitions=None, examples=None) -> dict:
    return {
        "word": word,
        "pos": "n.",
        "level": level,
        "content": {
            "core_meaning": core_meaning or f"meaning of {word}",
            "ipa": f"/{word}/",
            "definitions": definitions or [{"en": f"definition of {word}", "cn": "释义"}],
            "examples": examples,
        },
    }


CATALOG_RECORDS = [
    make_item("pineapple", level=2, core_meaning="菠萝"),
    make_item("apple", level=1, core_meaning="苹果"),
    make_item("apply", level=2, core_meaning="申请"),
    make_item(
        "banana",
        level=1,
        core_meaning="香蕉",
        definitions=[{"en": "a long curved fruit", "cn": "一种弯曲的长形水果"}],
        examples=[
            {"en": "one banana", "cn": "一根香蕉"},
            {"en": "two bananas", "cn": "两根香蕉"},
            {"en": "three bananas", "cn": "三根香蕉"},
        ],
    ),
] + [make_item(f"filler{i:02d}", level=3) for i in range(21)]

TEST_CATALOG_PATH.write_text(json.dumps(CATALOG_RECORDS, ensure_ascii=False), encoding="utf-8")

from services.catalog import Catalog, load_catalog  # noqa: E402
from services.progress import ProgressStore  # noqa: E402
from services.study import StudySessionRegistry  # noqa: E402


class MemoryStorage:
    """In-memory stand-in for LocalStorage that survives store "restarts"."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(initial or {})
        self.writes = 0

    async def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes += 1


STORAGE_KEY = "memoark_progress_v1"


@pytest.fixture
def catalog() -> Catalog:
    return load_catalog(TEST_CATALOG_PATH)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage: MemoryStorage) -> ProgressStore:
    return ProgressStore(storage, STORAGE_KEY)


@pytest.fixture
def client(store: ProgressStore):
    """TestClient with a fresh in-memory progress store and seeded study RNG."""
    from fastapi.testclient import TestClient

    from main import app

    with TestClient(app) as test_client:
        app.state.progress_store = store
        app.state.study_sessions = StudySessionRegistry(10, rng=random.Random(7))
        yield test_client
