"""Reading text streams line by line in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TextIO

from .errors import InvalidFileError

BUFFER_SIZE = 1024


def iter_lines(stream: TextIO, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield the lines of ``stream``, each keeping its trailing newline.

    The stream is read ``buffer_size`` characters at a time. The last line is
    yielded without a newline when the stream does not end with one.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = ""
    while True:
        end = pending.find("\n")
        if end >= 0:
            yield pending[: end + 1]
            pending = pending[end + 1 :]
            continue
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending += chunk
    if pending:
        yield pending


def read_file_lines(path: str | os.PathLike[str]) -> list[str]:
    """Return every line of the file at ``path``; newlines are kept as they are."""
    try:
        stream = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise InvalidFileError() from exc
    with stream:
        return list(iter_lines(stream))