"""Minimal information on the terminal: line width and tab size."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import IO, Any

_INT_MAX = 2**31 - 1

_NUMBER = re.compile(
    r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))")


def _parse_long(text: str) -> int | None:
    """Parse TEXT as strtol with base 0 would; None if no number starts it."""
    match = _NUMBER.match(text)
    if not match:
        return None
    sign, hexa, octal, decimal = match.groups()
    if hexa is not None:
        value = int(hexa, 16)
    elif octal is not None:
        value = int(octal, 8)
    else:
        value = int(decimal, 10)
    return -value if sign == "-" else value


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


@dataclass
class Terminal:
    """Line width and hardware tab size of an output terminal."""

    tabsize: int = 8
    width: int = 80

    def initialize(self, stream: IO[Any] | None = None,
                   environ: Mapping[str, str] | None = None) -> None:
        """Take COLUMNS, the terminal size of STREAM and TABSIZE into account."""
        env = os.environ if environ is None else environ

        columns = env.get("COLUMNS")
        if columns:
            value = _parse_long(columns)
            if value is not None and 0 < value <= _INT_MAX:
                self.width = value
            else:
                _warn("ignoring invalid width in environment variable "
                      f"COLUMNS: {columns}")

        if stream is not None:
            try:
                size = os.get_terminal_size(stream.fileno())
            except (OSError, ValueError, AttributeError):
                pass
            else:
                if size.columns != 0:
                    self.width = size.columns

        # TABSIZE is not POSIX-approved: ignore it when POSIXLY_CORRECT is set.
        tabsize = env.get("TABSIZE")
        if "POSIXLY_CORRECT" not in env and tabsize:
            value = _parse_long(tabsize)
            if value is not None and 0 <= value <= _INT_MAX:
                self.tabsize = value
            else:
                _warn("ignoring invalid tab size in environment variable "
                      f"TABSIZE: {tabsize}")