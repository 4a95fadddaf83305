"""Building blocks for PostScript text listings: page ranges, escaping, layout, prologues and streams."""

__version__ = "0.1.0"