"""Tests for flashcard study sessions."""
import random

import pytest

from services.catalog import Catalog
from services.study import (
    NoWordsAvailable,
    SessionFinished,
    StudySessionRegistry,
    build_card,
    draw_queue,
    session_view,
)


def test_draw_queue_is_distinct_and_sized():
    words = [f"w{i}" for i in range(30)]
    queue = draw_queue(words, 10, random.Random(1))
    assert len(queue) == 10
    assert len(set(queue)) == 10
    assert set(queue) <= set(words)
    assert words == [f"w{i}" for i in range(30)]


def test_draw_queue_smaller_catalog():
    assert sorted(draw_queue(["a", "b", "c"], 10, random.Random(1))) == ["a", "b", "c"]
    assert draw_queue([], 10, random.Random(1)) == []


def test_draw_queue_is_reproducible_with_seed():
    words = [f"w{i}" for i in range(30)]
    assert draw_queue(words, 10, random.Random(42)) == draw_queue(words, 10, random.Random(42))


@pytest.mark.asyncio
async def test_card_limits_examples_and_tracks_mastery(catalog, store):
    card = build_card(catalog.get("banana"), store)
    assert card.front.word == "banana"
    assert card.back.core_meaning == "香蕉"
    assert [e.en for e in card.back.examples] == ["one banana", "two bananas"]
    assert card.status == "unseen"
    assert card.can_mark_mastered

    await store.set_status("banana", "mastered")
    card = build_card(catalog.get("banana"), store)
    assert card.status == "mastered"
    assert not card.can_mark_mastered


@pytest.mark.asyncio
async def test_answering_records_status_and_advances(catalog, store):
    registry = StudySessionRegistry(3, rng=random.Random(3))
    session = registry.start(catalog)
    first, second, third = session.queue

    await registry.answer(session.id, "learning", store)
    await registry.answer(session.id, "mastered", store)
    view = session_view(session, catalog, store)
    assert (view.position, view.total, view.finished) == (3, 3, False)
    assert view.card.front.word == third

    await registry.answer(session.id, "learning", store)
    view = session_view(session, catalog, store)
    assert view.finished
    assert view.card is None

    assert store.get_status(first) == "learning"
    assert store.get_status(second) == "mastered"
    assert store.get_status(third) == "learning"

    with pytest.raises(SessionFinished):
        await registry.answer(session.id, "mastered", store)


@pytest.mark.asyncio
async def test_restart_draws_new_queue(catalog, store):
    registry = StudySessionRegistry(10, rng=random.Random(5))
    session = registry.start(catalog)
    await registry.answer(session.id, "learning", store)

    restarted = registry.restart(session.id, catalog)
    assert restarted.id == session.id
    assert restarted.current_index == 0
    assert len(restarted.queue) == 10


def test_empty_catalog_has_nothing_to_study():
    registry = StudySessionRegistry(10)
    with pytest.raises(NoWordsAvailable):
        registry.start(Catalog([]))


def test_unknown_and_discarded_sessions(catalog):
    registry = StudySessionRegistry(10)
    with pytest.raises(LookupError):
        registry.get("missing")

    session = registry.start(catalog)
    registry.discard(session.id)
    with pytest.raises(LookupError):
        registry.get(session.id)


@pytest.mark.asyncio
async def test_registry_keeps_at_most_max_sessions(catalog, store):
    registry = StudySessionRegistry(2, rng=random.Random(9), max_sessions=3)
    first = registry.start(catalog)
    for _ in range(10):
        session = registry.start(catalog)
        await registry.answer(session.id, "learning", store)
        await registry.answer(session.id, "learning", store)
        assert session.finished
        assert len(registry) <= 3

    assert len(registry) == 3
    with pytest.raises(LookupError):
        registry.get(first.id)
    assert registry.restart(session.id, catalog).current_index == 0


def test_registry_evicts_least_recently_used(catalog):
    registry = StudySessionRegistry(2, rng=random.Random(9), max_sessions=2)
    kept = registry.start(catalog)
    dropped = registry.start(catalog)
    registry.get(kept.id)

    registry.start(catalog)

    assert registry.get(kept.id) is kept
    with pytest.raises(LookupError):
        registry.get(dropped.id)
