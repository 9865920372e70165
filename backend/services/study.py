"""Randomized flashcard study sessions."""
from __future__ import annotations

import logging
import random
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field

from schemas.study import CardBack, CardFront, FlashcardRead, StudySessionRead
from schemas.vocab import VocabItem
from services.catalog import Catalog
from services.progress import BaseStatus, ProgressStore

logger = logging.getLogger(__name__)

FLASHCARD_EXAMPLE_LIMIT = 2


class NoWordsAvailable(Exception):
    pass


class SessionFinished(Exception):
    pass


def draw_queue(words: list[str], size: int, rng: random.Random) -> list[str]:
    """Fisher-Yates shuffle a copy of ``words`` and keep the first ``size``."""
    shuffled = list(words)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled[:size]


def build_card(item: VocabItem, store: ProgressStore) -> FlashcardRead:
    status = store.get_status(item.word)
    return FlashcardRead(
        front=CardFront(word=item.word, pos=item.pos, level=item.level),
        back=CardBack(
            word=item.word,
            ipa=item.content.ipa,
            core_meaning=item.content.core_meaning,
            definitions=item.content.definitions,
            examples=(item.content.examples or [])[:FLASHCARD_EXAMPLE_LIMIT],
        ),
        status=status,
        can_mark_mastered=status != "mastered",
    )


@dataclass
class StudySession:
    queue: list[str]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    current_index: int = 0

    @property
    def finished(self) -> bool:
        return self.current_index >= len(self.queue)

    @property
    def current_word(self) -> str | None:
        if self.finished:
            return None
        return self.queue[self.current_index]


class StudySessionRegistry:
    """Holds the open sessions of this process; nothing here is persisted.

    At most ``max_sessions`` are kept. Starting one more drops the session
    that was least recently used.
    """

    def __init__(self, session_size: int, rng: random.Random | None = None, max_sessions: int = 100):
        self.session_size = session_size
        self.max_sessions = max_sessions
        self._rng = rng or random.Random()
        self._sessions: OrderedDict[str, StudySession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def start(self, catalog: Catalog) -> StudySession:
        queue = draw_queue(catalog.words, self.session_size, self._rng)
        if not queue:
            raise NoWordsAvailable("No words available to study.")
        session = StudySession(queue=queue)
        self._sessions[session.id] = session
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted study session %s", evicted)
        logger.info("Started study session %s with %d cards", session.id, len(queue))
        return session

    def get(self, session_id: str) -> StudySession:
        session = self._sessions.get(session_id)
        if session is None:
            raise LookupError("Study session not found")
        self._sessions.move_to_end(session_id)
        return session

    def restart(self, session_id: str, catalog: Catalog) -> StudySession:
        session = self.get(session_id)
        queue = draw_queue(catalog.words, self.session_size, self._rng)
        if not queue:
            raise NoWordsAvailable("No words available to study.")
        session.queue = queue
        session.current_index = 0
        return session

    def discard(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise LookupError("Study session not found")

    async def answer(self, session_id: str, status: BaseStatus, store: ProgressStore) -> StudySession:
        """Record the answer for the current card and always advance."""
        session = self.get(session_id)
        word = session.current_word
        if word is None:
            raise SessionFinished("This study session is already finished.")
        await store.set_status(word, status)
        session.current_index += 1
        return session


def session_view(session: StudySession, catalog: Catalog, store: ProgressStore) -> StudySessionRead:
    card = None
    word = session.current_word
    if word is not None:
        item = catalog.get(word)
        if item is not None:
            card = build_card(item, store)
    return StudySessionRead(
        id=session.id,
        position=min(session.current_index + 1, len(session.queue)),
        total=len(session.queue),
        finished=session.finished,
        card=card,
    )
