"""Vocabulary catalog loaded once from a static JSON file."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from schemas.vocab import VocabItem

logger = logging.getLogger(__name__)

CATALOG_LOAD_ERROR = (
    "Failed to load vocabulary data. Please ensure data/full_vocab_content.json exists."
)


class CatalogLoadError(Exception):
    pass


class Catalog:
    """Read-only, ordered collection of vocabulary items keyed by word."""

    def __init__(self, items: list[VocabItem]):
        self._by_word: dict[str, VocabItem] = {}
        for item in items:
            if item.word in self._by_word:
                logger.warning("Duplicate catalog word %r; keeping the first entry", item.word)
                continue
            self._by_word[item.word] = item
        self.items: list[VocabItem] = list(self._by_word.values())

    def __len__(self) -> int:
        return len(self.items)

    @property
    def words(self) -> list[str]:
        return [item.word for item in self.items]

    def get(self, word: str) -> VocabItem | None:
        return self._by_word.get(word)

    def levels(self) -> list[int]:
        return sorted({item.level for item in self.items})


def load_catalog(path: Path | str) -> Catalog:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CatalogLoadError(f"Could not read catalog {path}: {exc}") from exc
    if not isinstance(data, list):
        raise CatalogLoadError(f"Catalog {path} must contain a JSON array")
    try:
        items = [VocabItem.model_validate(record) for record in data]
    except ValidationError as exc:
        raise CatalogLoadError(f"Catalog {path} has an invalid entry: {exc}") from exc
    return Catalog(items)
