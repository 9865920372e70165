"""Tests for settings and database wiring."""
import database
from config import Settings


def test_defaults():
    defaults = Settings(_env_file=None)
    assert defaults.PROGRESS_STORAGE_KEY == "memoark_progress_v1"
    assert defaults.SESSION_SIZE == 10
    assert defaults.DICTIONARY_PAGE_SIZE == 20
    assert defaults.SEARCH_RESULT_LIMIT == 5
    assert defaults.STUDY_SESSION_LIMIT == 100


def test_only_used_settings_are_declared():
    assert "ENVIRONMENT" not in Settings.model_fields


def test_database_exposes_session_factory_not_request_dependency():
    assert callable(database.async_session)
    assert not hasattr(database, "get_db")
