from schemas.vocab import VocabItem, VocabContent, Definition, Example, Collocation, Task
from schemas.progress import StatusUpdate, WordStatus, ImportResult
from schemas.dashboard import DashboardStats
from schemas.dictionary import DictionaryRow, DictionaryPage, DictionaryEntry, LevelList
from schemas.study import CardFront, CardBack, FlashcardRead, StudySessionRead

__all__ = [
    "VocabItem", "VocabContent", "Definition", "Example", "Collocation", "Task",
    "StatusUpdate", "WordStatus", "ImportResult",
    "DashboardStats",
    "DictionaryRow", "DictionaryPage", "DictionaryEntry", "LevelList",
    "CardFront", "CardBack", "FlashcardRead", "StudySessionRead",
]
