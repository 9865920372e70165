"""Raw progress endpoints; these work for any word, catalog or not."""
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_progress_store
from schemas.progress import StatusUpdate, WordStatus
from services.progress import WRITE_FAILED_MESSAGE, ProgressStore, ProgressWriteError

router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.get("", response_model=dict[str, Any])
async def get_progress(store: ProgressStore = Depends(get_progress_store)):
    return store.export_snapshot()


@router.get("/{word}", response_model=WordStatus)
async def get_word_status(word: str, store: ProgressStore = Depends(get_progress_store)):
    return WordStatus(word=word, status=store.get_status(word))


@router.put("/{word}", response_model=WordStatus)
async def set_word_status(
    word: str,
    data: StatusUpdate,
    store: ProgressStore = Depends(get_progress_store),
):
    try:
        await store.set_status(word, data.status)
    except ProgressWriteError as exc:
        raise HTTPException(status_code=503, detail=WRITE_FAILED_MESSAGE) from exc
    return WordStatus(word=word, status=store.get_status(word))
