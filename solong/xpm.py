"""Reading XPM images into 32-bit pixel grids."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .colors import text_to_rgb

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour ``None``; the alpha byte marks transparency."""

_PIXEL_MASK = 0xFFFFFFFF
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
# Colour keys of at most this many characters are kept in a direct table,
# where a later entry for the same key replaces an earlier one.
_DIRECT_CPP = 2


class XpmError(ValueError):
    """The XPM data is missing, truncated or malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds one 32-bit value per pixel, row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split ``text`` into the words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    pieces: list[str] = []
    quoted = False
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        if ch == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, pos):
            end = text.find(closer, pos + len(opener))
            stop = length if end < 0 else end + len(closer)
            pieces.append(" " * (stop - pos))
            pos = stop
            continue
        pieces.append(ch)
        pos += 1
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Blank out block and line comments that lie outside double quotes.

    Comments are replaced by spaces, so the text keeps its length. A line
    comment is blanked up to and including its newline.
    """
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of each complete pair of double quotes in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and characters per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("XPM header values must be positive numbers")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        after = words.index("c") + 1
    except ValueError:
        raise XpmError("XPM colour entry has no 'c' key") from None
    if after >= len(words):
        raise XpmError("XPM colour entry has no colour after 'c'")
    end = words[after + 1] if after + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[after], end)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color(_next_line(source, "colour table"), cpp)
        if cpp <= _DIRECT_CPP:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    pixels: list[int] = []
    for _ in range(height):
        row = _next_line(source, "pixel rows")
        for x in range(width):
            color = palette.get(row[cpp * x : cpp * (x + 1)], 0)
            pixels.append(TRANSPARENT if color == -1 else color & _PIXEL_MASK)
    return XpmImage(width, height, tuple(pixels))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            text = stream.read()
    except OSError as exc:
        raise XpmError(f"cannot read XPM file {os.fspath(path)!r}") from exc
    return parse_xpm(quoted_strings(strip_comments(text)))