"""Escaping characters for PostScript strings."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from typing import NamedTuple

CharExists = Callable[[int], bool]

_SPECIAL = "()\\"


class UnprintableFormat(enum.Enum):
    """How characters the font cannot show are written."""

    OCTAL = "octal"
    HEXA = "hexa"
    QUESTION_MARK = "question-mark"
    SPACE = "space"
    CARET = "caret"
    EMACS = "emacs"


class BinaryFileError(ValueError):
    """Raised when a file looks binary and binaries are not printed."""


class Escaped(NamedTuple):
    """Escaped text, the columns it takes, and how many chars were unprintable."""

    text: str
    columns: int
    nonprinting: int


def _protect(ch: str) -> str:
    return "\\" + ch if ch in _SPECIAL else ch


def _code(c: int | str) -> int:
    code = ord(c) if isinstance(c, str) else c
    if not 0 <= code <= 255:
        raise ValueError(f"not a byte: {c!r}")
    return code


def _prefixed(c: int, meta: str, control: str) -> tuple[str, int]:
    """Write C as META/CONTROL sequences, e.g. M-^A or M-C-A."""
    text = ""
    columns = 0
    if c > 0o177:
        text += "M-"
        columns += 2
        c &= 0o177
    if c < 0o40:
        text += control + _protect(chr(c + ord("@")))
        columns += len(control) + 1
    elif c == 0o177:
        text += control + "?"
        columns += len(control) + 1
    else:
        text += _protect(chr(c))
        columns += 1
    return text, columns


def escape_char(c: int | str,
                unprintable_format: UnprintableFormat = UnprintableFormat.CARET,
                char_exists: CharExists | None = None) -> Escaped:
    """Escape the byte C for use inside a PostScript string.

    CHAR_EXISTS tells whether the current font can show a non-ASCII
    code; without it no such code is considered printable.
    """
    code = _code(c)

    if 0o40 <= code < 0o177:
        return Escaped(_protect(chr(code)), 1, 0)

    if (code > 0o177 or code < 0o40) and char_exists is not None \
            and char_exists(code):
        return Escaped(f"\\{code:o}", 1, 0)

    if unprintable_format is UnprintableFormat.OCTAL:
        return Escaped(f"\\\\{code:03o}", 4, 1)
    if unprintable_format is UnprintableFormat.HEXA:
        return Escaped(f"\\\\x{code:02x}", 4, 1)
    if unprintable_format is UnprintableFormat.QUESTION_MARK:
        return Escaped("?", 1, 1)
    if unprintable_format is UnprintableFormat.SPACE:
        return Escaped(" ", 1, 1)
    if unprintable_format is UnprintableFormat.CARET:
        text, columns = _prefixed(code, "M-", "^")
        return Escaped(text, columns, 1)
    text, columns = _prefixed(code, "M-", "C-")
    return Escaped(text, columns, 1)


def escape_string(string: str | bytes | Iterable[int],
                  unprintable_format: UnprintableFormat = UnprintableFormat.CARET,
                  char_exists: CharExists | None = None) -> Escaped:
    """Escape every character of STRING; columns and counts are summed."""
    parts = [escape_char(c, unprintable_format, char_exists) for c in string]
    return Escaped("".join(p.text for p in parts),
                   sum(p.columns for p in parts),
                   sum(p.nonprinting for p in parts))


def check_binary_file(name: str, chars: int, nonprinting_chars: int,
                      print_binaries: bool = False) -> bool:
    """Return True if the file looks binary (40% unprintable, over 120 chars).

    Raise BinaryFileError for such a file unless PRINT_BINARIES is set.
    """
    if chars <= 120:
        return False
    if nonprinting_chars * 100 // chars < 40:
        return False
    if not print_binaries:
        raise BinaryFileError(f"`{name}' is a binary file, printing aborted")
    return True