"""Reading the bang file and writing the cleaned result back."""

from __future__ import annotations
from pathlib import Path

from .log import get_logger

log = get_logger(__name__)


class FileOperationError(Exception):
    """A read, backup or write on the bang file failed."""


class SourceNotFoundError(FileOperationError):
    pass


class BackupError(FileOperationError):
    pass


class WriteError(FileOperationError):
    pass


def resolve_path(file_path: str | Path, cwd: Path | None = None) -> Path:
    return ((cwd or Path.cwd()) / file_path).resolve()


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + ".backup")


def read_source(path: Path) -> str:
    """Read the file as UTF-8."""
    if not path.is_file():
        raise SourceNotFoundError(f"File not found: {path}")
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"File read error: {e}") from e


def write_changes(
    path: Path,
    original: str,
    modified: str,
    *,
    create_backup: bool = False,
) -> Path | None:
    """Write modified text to path, optionally saving the original first.

    Returns the backup path when one was written.  A failed backup
    leaves the target untouched.
    """
    backup: Path | None = None
    if create_backup:
        backup = backup_path(path)
        try:
            _write(backup, original)
        except OSError as e:
            raise BackupError(f"Backup creation error: {e}") from e
        log.info("backup_created", path=str(backup))

    try:
        _write(path, modified)
    except OSError as e:
        raise WriteError(f"File write error: {e}") from e
    log.info("file_written", path=str(path), size=len(modified))
    return backup


def _write(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
