"""Versioned backup container for exported progress."""
from __future__ import annotations

import json
from datetime import date, datetime, timezone
from typing import Any

from services.progress import ProgressMap

BACKUP_VERSION = "memoark-progress-v1"

PARSE_ERROR_MESSAGE = "Failed to parse backup file."
FORMAT_ERROR_MESSAGE = "Invalid backup file format."


class BackupError(Exception):
    """A backup file was rejected; the current progress must stay untouched."""


class BackupParseError(BackupError):
    pass


class BackupFormatError(BackupError):
    pass


def build_backup(progress: ProgressMap, exported_at: datetime | None = None) -> dict[str, Any]:
    if exported_at is None:
        exported_at = datetime.now(timezone.utc)
    return {
        "version": BACKUP_VERSION,
        "exportedAt": exported_at.isoformat(),
        "progress": progress,
    }


def dump_backup(container: dict[str, Any]) -> str:
    return json.dumps(container, indent=2, ensure_ascii=False)


def backup_filename(today: date | None = None) -> str:
    if today is None:
        today = datetime.now(timezone.utc).date()
    return f"memoark-backup-{today.isoformat()}.json"


def parse_backup(raw: str | bytes) -> ProgressMap:
    """Return the progress payload of a backup file.

    Only the container is checked: the version tag must match and
    ``progress`` must be a JSON object. Individual entries pass through as-is.
    """
    try:
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8-sig")
        payload = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as exc:
        raise BackupParseError(PARSE_ERROR_MESSAGE) from exc

    if not isinstance(payload, dict):
        raise BackupFormatError(FORMAT_ERROR_MESSAGE)
    if payload.get("version") != BACKUP_VERSION:
        raise BackupFormatError(FORMAT_ERROR_MESSAGE)
    progress = payload.get("progress")
    if not isinstance(progress, dict):
        raise BackupFormatError(FORMAT_ERROR_MESSAGE)
    return progress
