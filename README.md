# pslister

Pieces for turning plain text into paged PostScript listings: choosing
which pages to print, escaping text for PostScript strings, working out
the page geometry, reading prologue documentation, and opening output
files or pipes.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `pslister.prange` — `PageRange.set_string` parses selections such as
  `-2, 4, 10-15, 20-, toc` and raises `PageRangeError` on bad input.
  `PageRange.should_print(page_num, is_toc)` tells whether a page is
  selected, `PageRange.to_buffer(offset)` writes the selection shifted back
  by an offset, and `PageRange.applies_above(offset)` says whether it still
  restricts pages above it. Each part is an `Interval`.
- `pslister.psescape` — `escape_char` and `escape_string` escape bytes for
  a PostScript string and return an `Escaped(text, columns, nonprinting)`;
  `UnprintableFormat` picks how unprintable characters are shown (octal,
  hexa, question mark, space, caret, Emacs). `check_binary_file` raises
  `BinaryFileError` for input of more than 120 characters of which at least
  40% are unprintable, unless binaries are allowed.
- `pslister.layout` — `compute_layout` returns a `PageLayout` (font size,
  lines per page, columns per line, title sizes, bounding box) for a
  `Medium`, an `Orientation` and a grid of virtual pages, and raises
  `FontTooBigError` when nothing fits. `grid_lines` returns the PostScript
  `/x` and `/y` arrays placing the virtual pages in `Madir` order.
- `pslister.prologues` — `read_prologue_documentation` returns the text
  between `Documentation` and `EndDocumentation` in a `.pro` file;
  `list_prologues`, `list_prologues_long` and `list_prologues_texinfo` list
  the prologues found in a set of directories.
- `pslister.stream` — `open_read`, `open_write` and `perl_open` give a
  `Stream` on a file, a shell pipe, or stdin/stdout. `perl_open` follows the
  `> file`, `| cmd`, `cmd |` convention and returns the stream and the name.
- `pslister.backup` — `open_backup` opens a file for writing after renaming
  the old one according to a `BackupType`; `find_backup_file_name` gives the
  backup's name (`file~` or `file.~N~`).
- `pslister.textutil` — string helpers (`replace_substrings`,
  `replace_pairs`, `is_strlower`, `count_char`, `substring`) and file
  helpers (`open_file`, `open_pipe`, `copy_stream`, `dump_file`,
  `unlink_quietly`) that raise `FileError`.
- `pslister.strtable` — `StringTable`, a set of strings listed in sorted
  order.
- `pslister.tterm` — `Terminal` holds a line width and tab size, and
  `Terminal.initialize` reads `COLUMNS`, the terminal size and `TABSIZE`.
- `pslister.printlen` — `printf_length` counts the characters of a
  printf-style format (literal text and `%s` arguments), and `title` prints
  a line underlined with a character, optionally centred on 79 columns.

## Example

    from pslister.prange import PageRange
    from pslister.psescape import escape_char

    pages = PageRange()
    pages.set_string("1-3,10-")
    pages.should_print(2)    # True
    pages.should_print(5)    # False
    pages.to_buffer(2)       # "1-1,8-"

    escape_char("(")         # Escaped(text='\\(', columns=1, nonprinting=0)
    escape_char(1)           # Escaped(text='^A', columns=2, nonprinting=1)

## What it does not do

The package provides the building blocks only. It does not assemble a
complete PostScript document: there is no prologue or setup writer, no
setpagedevice or statusdict output, no formatter that lays characters and
faces out into pages, and no command-line program.