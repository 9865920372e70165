"""Export or restore learning progress from the command line.

Importing overwrites all stored progress and asks for confirmation unless
``--yes`` is given.
"""
import argparse
import asyncio
import sys
from pathlib import Path

import models  # noqa: F401
from config import settings
from database import engine, init_db, async_session
from services.backup import BackupError, backup_filename, build_backup, dump_backup, parse_backup
from services.progress import ProgressStore, ProgressWriteError
from services.storage import LocalStorage


async def _open_store() -> ProgressStore:
    await init_db()
    store = ProgressStore(LocalStorage(async_session), settings.PROGRESS_STORAGE_KEY)
    await store.load()
    return store


async def export_progress(out: Path | None = None) -> Path:
    try:
        store = await _open_store()
        progress = store.export_snapshot()
    finally:
        await engine.dispose()
    path = out or Path(backup_filename())
    path.write_text(dump_backup(build_backup(progress)), encoding="utf-8")
    print(f"Exported {len(progress)} entries to {path}")
    return path


async def import_progress(path: Path, assume_yes: bool = False) -> int:
    try:
        progress = parse_backup(path.read_bytes())
    except OSError as exc:
        print(f"Could not read {path}: {exc}")
        return 1
    except BackupError as exc:
        print(exc)
        return 1

    if not assume_yes:
        answer = input("Overwrite current progress? [y/N] ").strip().lower()
        if answer not in ("y", "yes"):
            print("Import cancelled.")
            return 0

    try:
        store = await _open_store()
        await store.import_snapshot(progress)
    except ProgressWriteError as exc:
        print(f"Import failed: {exc}")
        return 1
    finally:
        await engine.dispose()
    print(f"Backup restored successfully! ({len(progress)} entries)")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Back up or restore vocabulary progress.")
    sub = parser.add_subparsers(dest="command", required=True)

    export_cmd = sub.add_parser("export", help="Write progress to a backup file.")
    export_cmd.add_argument("--out", type=Path, help="Output path (default: memoark-backup-<date>.json).")

    import_cmd = sub.add_parser("import", help="Replace progress with a backup file. Destructive.")
    import_cmd.add_argument("path", type=Path)
    import_cmd.add_argument("--yes", action="store_true", help="Skip the confirmation prompt.")

    args = parser.parse_args(argv)
    if args.command == "export":
        asyncio.run(export_progress(args.out))
        return 0
    return asyncio.run(import_progress(args.path, assume_yes=args.yes))


if __name__ == "__main__":
    sys.exit(main())
