from pydantic import BaseModel

from schemas.progress import DisplayStatus
from schemas.vocab import Definition, Example


class CardFront(BaseModel):
    word: str
    pos: str
    level: int


class CardBack(BaseModel):
    word: str
    ipa: str
    core_meaning: str
    definitions: list[Definition]
    examples: list[Example]


class FlashcardRead(BaseModel):
    front: CardFront
    back: CardBack
    status: DisplayStatus
    can_mark_mastered: bool


class StudySessionRead(BaseModel):
    id: str
    position: int
    total: int
    finished: bool
    card: FlashcardRead | None = None
