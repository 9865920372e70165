"""Dictionary browsing: status/level filters, ranked search and pagination."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from schemas.vocab import VocabItem
from services.progress import ProgressStore

StatusFilter = Literal["all", "learning", "mastered"]


@dataclass
class Listing:
    items: list[VocabItem]
    page: int
    total_pages: int
    total_matches: int
    search_mode: bool


def filter_items(
    items: list[VocabItem],
    store: ProgressStore,
    status: StatusFilter = "all",
    level: int | None = None,
) -> list[VocabItem]:
    result = items
    if status != "all":
        result = [v for v in result if store.get_status(v.word) == status]
    if level is not None:
        result = [v for v in result if v.level == level]
    return result


def _matches(item: VocabItem, q: str) -> bool:
    if q in item.word.lower():
        return True
    if q in item.content.core_meaning.lower():
        return True
    return any(q in d.en.lower() or q in d.cn.lower() for d in item.content.definitions)


def _rank(item: VocabItem, q: str) -> int:
    word = item.word.lower()
    if word == q:
        return 0
    if word.startswith(q):
        return 1
    return 2


def search_items(items: list[VocabItem], query: str, limit: int) -> list[VocabItem]:
    """Exact word match first, then prefix matches, then everything else.

    ``sorted`` is stable, so items of equal rank keep their catalog order.
    """
    q = query.strip().lower()
    if not q:
        return []
    results = [v for v in items if _matches(v, q)]
    results = sorted(results, key=lambda v: _rank(v, q))
    return results[:limit]


def paginate(items: list[VocabItem], page: int, page_size: int) -> tuple[list[VocabItem], int, int]:
    """Return (page_items, clamped_page, total_pages); there is always at least one page."""
    total_pages = max(1, math.ceil(len(items) / page_size))
    page = min(max(1, page), total_pages)
    start = (page - 1) * page_size
    return items[start:start + page_size], page, total_pages


def browse(
    items: list[VocabItem],
    store: ProgressStore,
    *,
    query: str = "",
    status: StatusFilter = "all",
    level: int | None = None,
    page: int = 1,
    page_size: int = 20,
    search_limit: int = 5,
) -> Listing:
    filtered = filter_items(items, store, status, level)
    if query.strip():
        results = search_items(filtered, query, search_limit)
        return Listing(items=results, page=1, total_pages=1, total_matches=len(results), search_mode=True)
    page_items, page, total_pages = paginate(filtered, page, page_size)
    return Listing(
        items=page_items,
        page=page,
        total_pages=total_pages,
        total_matches=len(filtered),
        search_mode=False,
    )


def neighbours(listing: Listing, word: str) -> tuple[str | None, str | None]:
    """Previous and next word around ``word`` within the displayed listing."""
    words = [v.word for v in listing.items]
    if word not in words:
        return None, None
    idx = words.index(word)
    previous_word = words[idx - 1] if idx > 0 else None
    next_word = words[idx + 1] if idx < len(words) - 1 else None
    return previous_word, next_word
