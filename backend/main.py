import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import models  # noqa: F401  registers tables on Base.metadata
from config import settings
from database import engine, init_db, async_session
from routers import dashboard, dictionary, study, progress, backup
from services.catalog import CatalogLoadError, load_catalog
from services.progress import ProgressStore
from services.storage import LocalStorage
from services.study import StudySessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()

    app.state.catalog = None
    try:
        app.state.catalog = load_catalog(settings.CATALOG_PATH)
    except CatalogLoadError:
        logger.warning("Vocabulary catalog unavailable", exc_info=True)

    store = ProgressStore(LocalStorage(async_session), settings.PROGRESS_STORAGE_KEY)
    await store.load()
    app.state.progress_store = store
    app.state.study_sessions = StudySessionRegistry(settings.SESSION_SIZE, max_sessions=settings.STUDY_SESSION_LIMIT)
    yield
    await engine.dispose()


app = FastAPI(title="MemoArk", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dashboard.router)
app.include_router(dictionary.router)
app.include_router(study.router)
app.include_router(progress.router)
app.include_router(backup.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
