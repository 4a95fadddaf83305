"""Estimate the width of printf-style output and print underlined titles."""

from __future__ import annotations

from typing import Any, TextIO

_FLAGS = "-+ #0"
_LENGTH_MODIFIERS = "hlL"
_INT_CONVERSIONS = "dioxXuc"
_FLOAT_CONVERSIONS = "feEgG"
_POINTER_CONVERSIONS = "pn"
_TITLE_WIDTH = 79


def printf_length(format: str, *args: Any) -> int:
    """Return the number of characters FORMAT takes once filled with ARGS.

    Only literal characters and %s arguments are counted; numeric
    conversions take their argument but add nothing to the total.
    """
    values = iter(args)
    total = 0
    chars = iter(format)
    for ch in chars:
        if ch != "%":
            total += 1
            continue

        ch = next(chars, None)
        while ch is not None and ch in _FLAGS:
            ch = next(chars, None)
        if ch == "*":
            next(values, None)
            ch = next(chars, None)
        if ch == ".":
            ch = next(chars, None)
            if ch == "*":
                next(values, None)
                ch = next(chars, None)
        while ch is not None and ch in _LENGTH_MODIFIERS:
            ch = next(chars, None)
        if ch is None:
            break

        if ch == "s":
            total += len(str(next(values, "")))
        elif ch in _INT_CONVERSIONS or ch in _FLOAT_CONVERSIONS \
                or ch in _POINTER_CONVERSIONS:
            next(values, None)
    return total


def title(stream: TextIO, char: str, center: bool, format: str,
          *args: Any) -> None:
    """Write the formatted text on STREAM, underlined with CHAR.

    When CENTER is true, both the text and the underline are indented
    so as to appear centred on a 79 column line.
    """
    length = printf_length(format, *args)
    ends_with_newline = format.endswith("\n")
    if ends_with_newline:
        length -= 1

    indent = ""
    if center:
        indent = " " * len(range(0, _TITLE_WIDTH - length, 2))

    stream.write(indent)
    stream.write(format % args)
    if not ends_with_newline:
        stream.write("\n")

    stream.write(indent)
    stream.write(char * max(length, 0))
    stream.write("\n")
    stream.flush()