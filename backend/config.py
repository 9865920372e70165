import logging
from pathlib import Path

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/app.db"
    CATALOG_PATH: str = "data/full_vocab_content.json"
    # Bump the suffix if the persisted format ever changes.
    PROGRESS_STORAGE_KEY: str = "memoark_progress_v1"
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    SESSION_SIZE: int = 10
    DICTIONARY_PAGE_SIZE: int = 20
    SEARCH_RESULT_LIMIT: int = 5
    STUDY_SESSION_LIMIT: int = 100

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

if not Path(settings.CATALOG_PATH).exists():
    logger.warning(
        "Vocabulary catalog not found at %s. Dashboard, dictionary and study endpoints will fail.",
        settings.CATALOG_PATH,
    )
