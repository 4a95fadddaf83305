"""Geometry of the printed sheets: font size, lines and columns per page."""

from __future__ import annotations

import enum
from dataclasses import dataclass

PORTRAIT_HEADER = 20
LANDSCAPE_HEADER = 15
PAGE_MARGIN = 12
"""Space between virtual pages."""
HEADERS_H = 12
"""Space for the header and for the footer."""
SIDE_MARGIN_RATIO = 0.7
BOTTOM_MARGIN_RATIO = 0.7
CHAR_WIDTH_RATIO = 0.6
"""Width of a fixed-pitch character relative to the font size."""


class Orientation(enum.Enum):
    """Orientation of the sheet."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class Madir(enum.Enum):
    """Order in which the virtual pages fill a sheet."""

    ROWS = "rows"
    COLUMNS = "columns"


class FontTooBigError(ValueError):
    """Raised when not even one line or one column fits on a page."""


@dataclass(frozen=True)
class Medium:
    """A paper size and its printable bounding box, in points."""

    name: str
    w: int
    h: int
    llx: int
    lly: int
    urx: int
    ury: int


@dataclass(frozen=True)
class PageLayout:
    """Everything computed about a virtual page before printing starts."""

    fontsize: float
    linesperpage: int
    columnsperline: int
    prefix_size: int
    title_font_size: int
    title_bar_height: float
    printing_w: float
    printing_h: float
    sheet_width: int
    sheet_height: int
    llx: int
    lly: int
    urx: int
    ury: int

    @property
    def text_columns(self) -> int:
        """Columns left for the text once the line number prefix is taken."""
        return self.columnsperline - self.prefix_size

    def wxperline(self, char_wx: int) -> int:
        """Width of a line of text, for characters CHAR_WX wide."""
        return self.text_columns * char_wx


def _sheet_box(medium: Medium, orientation: Orientation,
               margin: int) -> tuple[int, int, int, int, int, int]:
    """Return (sheet width, sheet height, llx, lly, urx, ury) once rotated."""
    if orientation is Orientation.PORTRAIT:
        return (medium.w, medium.h, medium.llx, medium.lly,
                medium.urx - margin, medium.ury)
    return (medium.h, medium.w, medium.lly, medium.w - medium.urx + margin,
            medium.ury, medium.w - medium.llx)


def compute_layout(medium: Medium,
                   orientation: Orientation = Orientation.PORTRAIT,
                   margin: int = 0,
                   columns: int = 1,
                   rows: int = 1,
                   print_header: bool = True,
                   print_footer: bool = True,
                   print_title: bool = True,
                   numbering: int = 0,
                   columns_requested: int = 0,
                   lines_requested: int = 0,
                   fontsize: float = 0.0) -> PageLayout:
    """Compute the font size and the number of lines and columns per page.

    The font size comes, by decreasing priority, from COLUMNS_REQUESTED,
    LINES_REQUESTED, FONTSIZE, and finally a default that depends on the
    orientation and the number of virtual pages per sheet.
    """
    if columns < 1 or rows < 1:
        raise ValueError("there must be at least one column and one row")

    prefix_size = 5 if numbering else 0
    header_room = (int(bool(print_header)) + int(bool(print_footer))) \
        * HEADERS_H

    if orientation is Orientation.PORTRAIT:
        area_h = medium.ury - medium.lly - header_room
        area_w = medium.urx - medium.llx - margin
    else:
        area_w = medium.ury - medium.lly
        area_h = medium.urx - medium.llx - header_room - margin

    virtuals = columns * rows
    if not print_title:
        title_font_size, title_bar_height = 11, 0.0
    elif virtuals > 1:
        title_font_size, title_bar_height = 11, float(LANDSCAPE_HEADER)
    else:
        title_font_size, title_bar_height = 15, float(PORTRAIT_HEADER)

    printing_h = (area_h - rows * title_bar_height
                  - (PAGE_MARGIN if rows > 1 else 0)) / rows
    printing_w = (area_w - (PAGE_MARGIN if columns > 1 else 0)) / columns

    if columns_requested != 0:
        fontsize = (printing_w / (columns_requested + prefix_size
                                  + 2 * SIDE_MARGIN_RATIO)) / CHAR_WIDTH_RATIO
    elif lines_requested != 0:
        fontsize = printing_h / (lines_requested + BOTTOM_MARGIN_RATIO)
    elif fontsize == 0.0:
        if orientation is Orientation.LANDSCAPE:
            fontsize = 6.8
        elif virtuals > 1:
            fontsize = 6.4
        else:
            fontsize = 9.0

    if fontsize <= 0:
        raise FontTooBigError(f"font {fontsize:f} too big")

    linesperpage = int(printing_h / fontsize - BOTTOM_MARGIN_RATIO)
    columnsperline = int(printing_w / (fontsize * CHAR_WIDTH_RATIO)
                         - 2 * SIDE_MARGIN_RATIO)

    if columns_requested > 0:
        columnsperline = columns_requested + prefix_size
    elif lines_requested > 0:
        linesperpage = lines_requested

    if linesperpage <= 0 or columnsperline <= 0:
        raise FontTooBigError(f"font {fontsize:f} too big")

    sheet_w, sheet_h, llx, lly, urx, ury = _sheet_box(medium, orientation,
                                                      margin)
    return PageLayout(
        fontsize=fontsize,
        linesperpage=linesperpage,
        columnsperline=columnsperline,
        prefix_size=prefix_size,
        title_font_size=title_font_size,
        title_bar_height=title_bar_height,
        printing_w=printing_w,
        printing_h=printing_h,
        sheet_width=sheet_w,
        sheet_height=sheet_h,
        llx=llx,
        lly=lly,
        urx=urx,
        ury=ury,
    )


def grid_lines(columns: int, rows: int, madir: Madir = Madir.ROWS) -> str:
    """Return the PostScript arrays /x and /y of the virtual page origins."""
    if columns < 1 or rows < 1:
        raise ValueError("there must be at least one column and one row")

    def y_entry(j: int) -> str:
        return f"  pmh ph add {j - 1} mul ph add\n"

    if madir is Madir.ROWS:
        xs = []
        for _ in range(rows):
            xs.append("  0\n")
            xs.extend(["  dup pmw add pw add\n"] * (columns - 1))
        ys = []
        for j in range(rows, 0, -1):
            ys.append(y_entry(j))
            ys.extend(["  dup\n"] * (columns - 1))
    elif madir is Madir.COLUMNS:
        xs = []
        for i in range(1, columns + 1):
            xs.append(f"  pmw pw add {i - 1} mul\n")
            xs.extend(["  dup\n"] * (rows - 1))
        ys = [y_entry(j)
              for _ in range(columns)
              for j in range(rows, 0, -1)]
    else:
        raise ValueError(f"unknown page direction: {madir!r}")

    return "/x [\n" + "".join(xs) + "] def\n/y [\n" + "".join(ys) + "] def\n"