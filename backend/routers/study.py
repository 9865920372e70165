"""Flashcard study session endpoints."""
from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_catalog, get_progress_store, get_study_registry
from schemas.progress import StatusUpdate
from schemas.study import StudySessionRead
from services.catalog import Catalog
from services.progress import WRITE_FAILED_MESSAGE, ProgressStore, ProgressWriteError
from services.study import NoWordsAvailable, SessionFinished, StudySessionRegistry, session_view

router = APIRouter(prefix="/api/study", tags=["study"])


@router.post("", response_model=StudySessionRead, status_code=201)
async def start_study_session(
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
    registry: StudySessionRegistry = Depends(get_study_registry),
):
    try:
        session = registry.start(catalog)
    except NoWordsAvailable as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return session_view(session, catalog, store)


@router.get("/{session_id}", response_model=StudySessionRead)
async def get_study_session(
    session_id: str,
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
    registry: StudySessionRegistry = Depends(get_study_registry),
):
    try:
        session = registry.get(session_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return session_view(session, catalog, store)


@router.post("/{session_id}/answer", response_model=StudySessionRead)
async def answer_card(
    session_id: str,
    data: StatusUpdate,
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
    registry: StudySessionRegistry = Depends(get_study_registry),
):
    try:
        session = await registry.answer(session_id, data.status, store)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except SessionFinished as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ProgressWriteError as exc:
        raise HTTPException(status_code=503, detail=WRITE_FAILED_MESSAGE) from exc
    return session_view(session, catalog, store)


@router.post("/{session_id}/restart", response_model=StudySessionRead)
async def restart_study_session(
    session_id: str,
    catalog: Catalog = Depends(get_catalog),
    store: ProgressStore = Depends(get_progress_store),
    registry: StudySessionRegistry = Depends(get_study_registry),
):
    try:
        session = registry.restart(session_id, catalog)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except NoWordsAvailable as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return session_view(session, catalog, store)


@router.delete("/{session_id}", status_code=204)
async def end_study_session(
    session_id: str,
    registry: StudySessionRegistry = Depends(get_study_registry),
):
    try:
        registry.discard(session_id)
    except LookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
