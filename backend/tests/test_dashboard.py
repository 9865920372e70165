"""Tests for dashboard aggregates."""
import pytest

from services.catalog import Catalog
from services.dashboard import build_dashboard, mastery_percent


def test_mastery_percent_rounds_half_up():
    assert mastery_percent(0, 0) == 0
    assert mastery_percent(1, 8) == 13
    assert mastery_percent(1, 3) == 33
    assert mastery_percent(25, 25) == 100


@pytest.mark.asyncio
async def test_dashboard_counts_catalog_words_only(catalog, store):
    await store.set_status("apple", "mastered")
    await store.set_status("banana", "learning")
    await store.set_status("apply", "learning")
    await store.set_status("not-in-catalog", "mastered")

    stats = build_dashboard(catalog, store)
    assert stats.total == 25
    assert stats.learning == 2
    assert stats.mastered == 1
    assert stats.percent == 4


def test_empty_catalog(store):
    stats = build_dashboard(Catalog([]), store)
    assert (stats.total, stats.learning, stats.mastered, stats.percent) == (0, 0, 0, 0)
