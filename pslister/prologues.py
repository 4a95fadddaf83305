"""Finding PostScript prologue files and reporting their documentation."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

PROLOGUE_SUFFIX = ".pro"
_DOC_TAG = "Documentation"
_END_DOC_TAG = "EndDocumentation"


class PrologueError(ValueError):
    """Raised when a prologue file is malformed or cannot be found."""


def _find_prologue(directories: Iterable[str | os.PathLike[str]],
                   name: str) -> Path:
    """Return the first prologue file called NAME in DIRECTORIES."""
    for directory in directories:
        candidate = Path(directory) / f"{name}{PROLOGUE_SUFFIX}"
        if candidate.is_file():
            return candidate
    raise PrologueError(f"cannot find prologue `{name}'")


def read_prologue_documentation(path: str | os.PathLike[str]) -> str:
    """Return the text between `Documentation' and `EndDocumentation'.

    A prologue without documentation gives an empty string; one whose
    documentation is never closed raises PrologueError.
    """
    with open(path, encoding="latin-1") as fp:
        lines = iter(fp)
        for line in lines:
            if not line.startswith(_DOC_TAG):
                continue
            body = []
            for doc_line in lines:
                if doc_line.startswith(_END_DOC_TAG):
                    return "".join(body)
                body.append(doc_line)
            raise PrologueError(
                f"{path}: missing argument for `Documentation'")
    return ""


def list_prologues(directories: Iterable[str | os.PathLike[str]]) -> list[str]:
    """Return the sorted names of the prologues found in DIRECTORIES."""
    names = {
        entry.name[:-len(PROLOGUE_SUFFIX)]
        for directory in directories
        if Path(directory).is_dir()
        for entry in Path(directory).iterdir()
        if entry.name.endswith(PROLOGUE_SUFFIX) and entry.is_file()
    }
    return sorted(names)


def _texinfo_escape(text: str) -> str:
    return text.replace("@", "@@").replace("{", "@{").replace("}", "@}")


def _list_long(directories: list[str | os.PathLike[str]], stream: TextIO,
               name_format: str, texinfo: bool) -> None:
    for name in list_prologues(directories):
        stream.write(name_format.format(name))
        doc = read_prologue_documentation(_find_prologue(directories, name))
        stream.write(_texinfo_escape(doc) if texinfo else doc)
        stream.write("\n")


def list_prologues_long(directories: Iterable[str | os.PathLike[str]],
                        stream: TextIO) -> None:
    """Write every known prologue with its documentation."""
    stream.write("Known Prologues\n")
    _list_long(list(directories), stream, 'Prologue "{}":\n', False)


def list_prologues_texinfo(directories: Iterable[str | os.PathLike[str]],
                           stream: TextIO) -> None:
    """Write the known prologues as a Texinfo table."""
    stream.write("@table @samp\n")
    _list_long(list(directories), stream, "@item {}\n", True)
    stream.write("@end table\n")