from pydantic import BaseModel

from schemas.progress import DisplayStatus
from schemas.vocab import VocabItem


class DictionaryRow(BaseModel):
    word: str
    level: int
    core_meaning: str
    status: DisplayStatus


class DictionaryPage(BaseModel):
    items: list[DictionaryRow]
    page: int
    total_pages: int
    total_matches: int
    search_mode: bool


class DictionaryEntry(BaseModel):
    item: VocabItem
    status: DisplayStatus
    previous_word: str | None = None
    next_word: str | None = None


class LevelList(BaseModel):
    levels: list[int]
