"""Request-scoped access to the process-wide catalog, progress store and study sessions."""
from fastapi import HTTPException, Request

from services.catalog import CATALOG_LOAD_ERROR, Catalog
from services.progress import ProgressStore
from services.study import StudySessionRegistry


def get_catalog(request: Request) -> Catalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=503, detail=CATALOG_LOAD_ERROR)
    return catalog


def get_progress_store(request: Request) -> ProgressStore:
    return request.app.state.progress_store


def get_study_registry(request: Request) -> StudySessionRegistry:
    return request.app.state.study_sessions
