"""Selection of the pages to print: lists of page intervals."""

from __future__ import annotations

from dataclasses import dataclass, field

_SEPARATORS = ", \t"


class PageRangeError(ValueError):
    """Raised when a page range specification cannot be understood."""


@dataclass(frozen=True)
class Interval:
    """Pages MIN to MAX; a zero bound means that side is open."""

    min: int = 0
    max: int = 0

    def contains(self, num: int) -> bool:
        """Return True if page NUM lies in the interval."""
        if self.min and self.max:
            return self.min <= num <= self.max
        if self.min:
            return self.min <= num
        return num <= self.max

    def to_text(self, offset: int = 0) -> str:
        """Return the written form of the interval, shifted back by OFFSET.

        An interval that ends before OFFSET gives an empty string.
        """
        if self.max and self.max < offset:
            return ""

        if self.min and self.min <= offset:
            low = 1
        else:
            low = self.min - offset

        if low == self.max:
            return f"{low}"
        if low and self.max:
            return f"{low}-{self.max - offset}"
        if low:
            return f"{low}-"
        # Always give the `1': some tools choke on an open lower bound.
        return f"1-{self.max - offset}"

    def applies_above(self, offset: int) -> bool:
        """Does the interval restrict the pages printed above OFFSET?"""
        return not (self.min <= offset and self.max == 0)

    def __str__(self) -> str:
        if self.min and self.max:
            return f"{self.min}-{self.max}"
        if self.min:
            return f"{self.min}-"
        return f"-{self.max}"


def _leading_number(token: str) -> tuple[int, str]:
    """Split TOKEN into the value of its leading digits and the rest."""
    digits = len(token) - len(token.lstrip("0123456789"))
    value = int(token[:digits]) if digits else 0
    return value, token[digits:]


@dataclass
class PageRange:
    """The intervals of pages to print, and whether to print the toc."""

    intervals: list[Interval] = field(default_factory=list)
    toc: bool = False

    def reset(self) -> None:
        """Forget every interval and the toc request."""
        self.intervals.clear()
        self.toc = False

    def _add(self, low: int, high: int) -> bool:
        if high and high < low:
            return False
        self.intervals.append(Interval(low, high))
        return True

    def set_string(self, string: str | None) -> None:
        """Parse a specification such as `-2, 4, 10-15, 20-, toc'.

        None just resets the range.  Raise PageRangeError on bad input.
        """
        self.reset()
        if string is None:
            return

        def failed() -> PageRangeError:
            return PageRangeError(f"invalid interval `{string}'")

        tokens = string.replace(",", " ").replace("\t", " ").split(" ")
        for token in filter(None, tokens):
            low = 0
            if token[0].isdigit():
                low, rest = _leading_number(token)
            else:
                rest = token

            if not rest:
                self._add(low, low)
            elif rest[0] in ":-":
                high, tail = _leading_number(rest[1:])
                if tail:
                    raise failed()
                if not self._add(low, high):
                    raise failed()
            elif rest == "toc":
                self.toc = True
            else:
                raise failed()

    def to_buffer(self, offset: int = 0) -> str:
        """Return the written form of the range, shifted back by OFFSET."""
        return ",".join(interval.to_text(offset)
                        for interval in self.intervals
                        if interval.applies_above(offset))

    def applies_above(self, offset: int) -> bool:
        """Does the range restrict the pages printed above OFFSET?"""
        if not self.intervals:
            return False
        return not any(interval.min < offset and interval.max == 0
                       for interval in self.intervals)

    def should_print(self, page_num: int, is_toc: bool = False) -> bool:
        """Return True if page PAGE_NUM is to be printed."""
        if self.toc and is_toc:
            return True
        if not self.intervals and not self.toc:
            return True
        return any(interval.contains(page_num) for interval in self.intervals)

    def __str__(self) -> str:
        return ",".join(str(interval) for interval in self.intervals)