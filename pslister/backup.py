"""Opening files for writing while keeping a backup of their old content."""

from __future__ import annotations

import enum
import errno
import os
import re
import stat
from typing import IO, Any

from .textutil import FileError


class BackupType(enum.Enum):
    """How to name the backup of a file about to be overwritten."""

    NO_BACKUPS = "none"
    SIMPLE = "simple"
    NUMBERED_EXISTING = "existing"
    NUMBERED = "numbered"


class BackupError(FileError):
    """Raised when a file cannot be backed up or created."""


def _default_suffix() -> str:
    suffix = os.environ.get("SIMPLE_BACKUP_SUFFIX", "")
    if not suffix or "/" in suffix:
        return "~"
    return suffix


def _highest_version(filename: str) -> int:
    """Return the highest N among the existing FILENAME.~N~ backups, or 0."""
    directory, base = os.path.split(filename)
    pattern = re.compile(re.escape(base) + r"\.~([1-9][0-9]*)~\Z")
    try:
        names = os.listdir(directory or ".")
    except OSError:
        return 0
    versions = (int(m.group(1)) for m in map(pattern.match, names) if m)
    return max(versions, default=0)


def find_backup_file_name(filename: str, backup_type: BackupType,
                          suffix: str | None = None) -> str:
    """Return the name the backup of FILENAME should have."""
    if backup_type is BackupType.NO_BACKUPS:
        raise ValueError("no backup name without a backup type")
    simple = filename + (suffix if suffix is not None else _default_suffix())
    if backup_type is BackupType.SIMPLE:
        return simple
    highest = _highest_version(filename)
    if backup_type is BackupType.NUMBERED_EXISTING and highest == 0:
        return simple
    return f"{filename}.~{highest + 1}~"


def open_backup(filename: str,
                backup_type: BackupType = BackupType.NO_BACKUPS) -> IO[Any]:
    """Open FILENAME for writing, first backing it up per BACKUP_TYPE.

    Only regular files the user may write are backed up.  If the file
    cannot be created, the backup is put back in place.
    """
    try:
        info = os.stat(filename)
    except (FileNotFoundError, NotADirectoryError):
        backup_type = BackupType.NO_BACKUPS
    except OSError as exc:
        raise BackupError(
            exc.errno, f"cannot get informations on file `{filename}'",
            filename) from exc
    else:
        if not stat.S_ISREG(info.st_mode) or not os.access(filename, os.W_OK):
            backup_type = BackupType.NO_BACKUPS

    backup_name = None
    if backup_type is not BackupType.NO_BACKUPS:
        backup_name = find_backup_file_name(filename, backup_type)
        try:
            os.rename(filename, backup_name)
        except OSError as exc:
            raise BackupError(
                exc.errno,
                f"cannot rename file `{filename}' as `{backup_name}'",
                filename) from exc

    try:
        return open(filename, "w")
    except OSError as exc:
        message = f"cannot create file `{filename}'"
        if backup_name is not None:
            try:
                os.rename(backup_name, filename)
            except OSError:
                message += f"; cannot rename file `{backup_name}' " \
                           f"as `{filename}'"
            else:
                message += f"; restored file `{filename}'"
        raise BackupError(exc.errno or errno.EIO, message, filename) from exc