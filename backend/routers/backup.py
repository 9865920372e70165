"""Backup endpoints: download progress as JSON and restore it from a file."""
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response

from dependencies import get_progress_store
from schemas.progress import ImportResult
from services.backup import BackupError, backup_filename, build_backup, dump_backup, parse_backup
from services.progress import WRITE_FAILED_MESSAGE, ProgressStore, ProgressWriteError

CONFIRM_MESSAGE = "This will overwrite your current progress. Are you sure?"
RESTORED_MESSAGE = "Backup restored successfully!"

router = APIRouter(prefix="/api/backup", tags=["backup"])


@router.get("")
async def export_backup(store: ProgressStore = Depends(get_progress_store)):
    container = build_backup(store.export_snapshot())
    filename = backup_filename()
    return Response(
        content=dump_backup(container).encode(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResult)
async def import_backup(
    request: Request,
    confirm: bool = Query(default=False),
    store: ProgressStore = Depends(get_progress_store),
):
    """Validate an uploaded backup; overwrite progress only when ``confirm`` is set.

    Without confirmation nothing changes, so a dismissed prompt has no effect.
    """
    raw = await request.body()
    try:
        progress = parse_backup(raw)
    except BackupError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    if not confirm:
        return ImportResult(entries=len(progress), message=CONFIRM_MESSAGE, requires_confirmation=True)

    try:
        await store.import_snapshot(progress)
    except ProgressWriteError as exc:
        raise HTTPException(status_code=503, detail=WRITE_FAILED_MESSAGE) from exc
    return ImportResult(entries=len(progress), message=RESTORED_MESSAGE, restored=True)
