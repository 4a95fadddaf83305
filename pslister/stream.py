"""Streams opened on files or on pipes to shell commands."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import IO, Any

from .backup import BackupType, open_backup
from .textutil import open_file, open_pipe

logger = logging.getLogger(__name__)


@dataclass
class Stream:
    """An open file or pipe, remembering which of the two it is."""

    is_file: bool
    fp: Any

    def close(self) -> int | None:
        """Close the stream; for a pipe, return the command's exit status."""
        if not self.is_file:
            return self.fp.close()
        if self.fp not in (sys.stdin, sys.stdout):
            self.fp.close()
        return None

    def __enter__(self) -> "Stream":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def open_read(command: str, is_file: bool) -> Stream:
    """Open for reading a file, a pipe from COMMAND, or stdin if empty."""
    if not is_file:
        return Stream(False, open_pipe(command, "r"))
    if command:
        return Stream(True, open_file(command, "r"))
    return Stream(True, sys.stdin)


def open_write(command: str, is_file: bool,
               backup_type: BackupType = BackupType.NO_BACKUPS) -> Stream:
    """Open for writing a file (with backup), a pipe, or stdout if empty."""
    if not is_file:
        return Stream(False, open_pipe(command, "w"))
    if command:
        fp: IO[Any] = open_backup(command, backup_type)
        return Stream(True, fp)
    return Stream(True, sys.stdout)


def perl_open(perl_command: str,
              backup_type: BackupType = BackupType.NO_BACKUPS
              ) -> tuple[Stream, str]:
    """Open a stream following the perl conventions.

    `> file' writes FILE with backups, `| cmd' writes to CMD,
    `cmd |' reads from CMD, anything else is a file to read.
    Returns the stream and the name of the file or command.
    """
    if not perl_command:
        raise ValueError("empty command")
    logger.debug("perl-open (%s)", perl_command)

    name = perl_command.lstrip("\t >|")
    first = perl_command[0]
    if first == "|":
        return open_write(name, False), name
    if first == ">":
        return open_write(name, True, backup_type), name
    if perl_command.endswith("|"):
        return open_read(name[:-1], False), name
    return open_read(name, True), name