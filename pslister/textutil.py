"""General string and file helpers used throughout the package."""

from __future__ import annotations

import io
import logging
import os
import shutil
import subprocess
from collections.abc import Iterable, Sequence
from typing import IO, Any

logger = logging.getLogger(__name__)

_COPY_CHUNK = 8192


class FileError(OSError):
    """Raised when a file or a pipe cannot be opened."""


def is_strlower(string: str) -> bool:
    """Return True iff STRING holds no upper case character."""
    return not any(ch.isupper() for ch in string)


def count_char(string: str, char: str) -> int:
    """Count the occurrences of CHAR in STRING."""
    return string.count(char)


def substring(string: str, start: int, length: int) -> str:
    """Return the LENGTH characters of STRING starting at START."""
    return string[start:start + length]


def replace_substrings(string: str,
                       substitutions: Iterable[Sequence[str]]) -> str:
    """Perform the (old, new) substitutions on STRING.

    At each position the first pattern that matches wins; the text it
    produces is not scanned again.
    """
    pairs = [(old, new) for old, new in substitutions]
    if any(not old for old, _ in pairs):
        raise ValueError("substitution patterns must not be empty")

    pieces: list[str] = []
    pos = 0
    length = len(string)
    while pos < length:
        for old, new in pairs:
            if string.startswith(old, pos):
                pieces.append(new)
                pos += len(old)
                break
        else:
            pieces.append(string[pos])
            pos += 1
    return "".join(pieces)


def replace_pairs(string: str, *args: str) -> str:
    """Like replace_substrings, with the pairs given flat: old, new, ..."""
    if len(args) % 2:
        raise ValueError("substitutions must come in (old, new) pairs")
    return replace_substrings(string, zip(args[::2], args[1::2]))


def copy_stream(source: IO[Any], target: IO[Any]) -> None:
    """Copy everything readable from SOURCE into TARGET."""
    shutil.copyfileobj(source, target, _COPY_CHUNK)


def dump_file(stream: IO[Any], filename: str | os.PathLike[str]) -> None:
    """Write the content of FILENAME onto STREAM."""
    logger.debug("Dumping file `%s'", filename)
    mode = "r" if isinstance(stream, io.TextIOBase) else "rb"
    with open_file(filename, mode) as source:
        copy_stream(source, stream)


def unlink_quietly(filename: str | os.PathLike[str]) -> None:
    """Remove FILENAME, ignoring any failure."""
    logger.debug("Unlinking file `%s'", filename)
    try:
        os.unlink(filename)
    except OSError:
        pass


def open_file(filename: str | os.PathLike[str], mode: str = "r") -> IO[Any]:
    """Open FILENAME, raising FileError on failure."""
    logger.debug("%s-fopen (%s)", mode, filename)
    try:
        return open(filename, mode)
    except OSError as exc:
        if mode.startswith("r"):
            message = f"cannot open file `{filename}'"
        else:
            message = f"cannot create file `{filename}'"
        raise FileError(exc.errno, message, str(filename)) from exc


class _PipeFile:
    """A file-like end of a pipe to a shell command."""

    def __init__(self, command: str, mode: str) -> None:
        self.command = command
        self.reading = mode.startswith("r")
        text = "b" not in mode
        if self.reading:
            self.process = subprocess.Popen(
                command, shell=True, stdout=subprocess.PIPE, text=text)
            self._file = self.process.stdout
        else:
            self.process = subprocess.Popen(
                command, shell=True, stdin=subprocess.PIPE, text=text)
            self._file = self.process.stdin

    def read(self, size: int = -1) -> Any:
        return self._file.read(size)

    def readline(self) -> Any:
        return self._file.readline()

    def write(self, data: Any) -> int:
        return self._file.write(data)

    def flush(self) -> None:
        self._file.flush()

    def __iter__(self):
        return iter(self._file)

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> int:
        """Close the pipe and return the exit status of the command."""
        if not self._file.closed:
            self._file.close()
        return self.process.wait()

    def __enter__(self) -> "_PipeFile":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def open_pipe(command: str, mode: str = "r") -> _PipeFile:
    """Start COMMAND through the shell, reading from or writing to it."""
    logger.debug("%s-popen (%s)", mode, command)
    try:
        return _PipeFile(command, mode)
    except OSError as exc:
        raise FileError(exc.errno, f"cannot open a pipe on `{command}'",
                        command) from exc