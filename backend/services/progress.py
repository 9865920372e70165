"""ProgressStore: per-word mastery state with write-through persistence."""
from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Literal, Protocol

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

BaseStatus = Literal["learning", "mastered"]
DisplayStatus = Literal["unseen", "learning", "mastered"]

BASE_STATUSES: tuple[str, ...] = ("learning", "mastered")
UNSEEN = "unseen"

WRITE_FAILED_MESSAGE = "Failed to save progress. Your last change was not stored."

# {"apple": {"status": "learning", "updatedAt": "2026-01-01T00:00:00+00:00"}}
ProgressMap = dict[str, dict[str, Any]]


class KeyValueStorage(Protocol):
    async def get_item(self, key: str) -> str | None: ...

    async def set_item(self, key: str, value: str) -> None: ...


class ProgressWriteError(Exception):
    """Raised when a mutation could not be made durable."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProgressStore:
    """Single owner of the word -> progress entry mapping.

    Only ``learning`` and ``mastered`` are ever stored; ``unseen`` is the
    absence of an entry. Mutations persist the whole map before the in-memory
    copy is replaced, so a failed write leaves the store exactly as it was.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._storage = storage
        self._key = key
        self._clock = clock
        self._progress: ProgressMap = {}
        # Held across build, persist and swap of every mutation.
        self._write_lock = asyncio.Lock()

    @property
    def progress(self) -> ProgressMap:
        return self._progress

    async def load(self) -> ProgressMap:
        """Read persisted progress, falling back to an empty map on any failure."""
        try:
            raw = await self._storage.get_item(self._key)
        except SQLAlchemyError:
            logger.warning("Could not read progress slot %s; starting empty", self._key, exc_info=True)
            raw = None

        progress: ProgressMap = {}
        if raw:
            try:
                parsed = json.loads(raw)
            except ValueError:
                logger.warning("Progress slot %s holds malformed JSON; starting empty", self._key)
            else:
                if isinstance(parsed, dict):
                    progress = parsed
                else:
                    logger.warning("Progress slot %s is not a JSON object; starting empty", self._key)

        self._progress = progress
        return self._progress

    def get_status(self, word: str) -> DisplayStatus:
        entry = self._progress.get(word)
        status = entry.get("status") if isinstance(entry, dict) else None
        if status in BASE_STATUSES:
            return status
        return UNSEEN

    async def set_status(self, word: str, status: BaseStatus) -> ProgressMap:
        if status not in BASE_STATUSES:
            raise ValueError(f"Cannot persist status {status!r}; expected one of {BASE_STATUSES}")
        async with self._write_lock:
            next_progress = {
                **self._progress,
                word: {"status": status, "updatedAt": self._clock().isoformat()},
            }
            await self._persist(next_progress)
            self._progress = next_progress
            return self._progress

    def export_snapshot(self) -> ProgressMap:
        return dict(self._progress)

    async def import_snapshot(self, progress: ProgressMap) -> None:
        """Overwrite all progress with ``progress``. No merge, no validation."""
        progress = dict(progress)
        async with self._write_lock:
            await self._persist(progress)
            self._progress = progress
        logger.info("Imported progress snapshot with %d entries", len(progress))

    def counts(self, words: Iterable[str]) -> dict[str, int]:
        """Learning/mastered totals over ``words``; stale keys are ignored."""
        totals = {status: 0 for status in BASE_STATUSES}
        for word in words:
            status = self.get_status(word)
            if status in totals:
                totals[status] += 1
        return totals

    async def _persist(self, progress: ProgressMap) -> None:
        try:
            await self._storage.set_item(self._key, json.dumps(progress, ensure_ascii=False))
        except SQLAlchemyError as exc:
            logger.exception("Failed to persist progress to slot %s", self._key)
            raise ProgressWriteError("Failed to save progress") from exc
