from pydantic import BaseModel

from services.progress import BaseStatus, DisplayStatus


class StatusUpdate(BaseModel):
    status: BaseStatus


class WordStatus(BaseModel):
    word: str
    status: DisplayStatus


class ImportResult(BaseModel):
    entries: int
    message: str
    requires_confirmation: bool = False
    restored: bool = False
