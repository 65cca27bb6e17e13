"""Errors raised while checking arguments and maps."""

from __future__ import annotations

from collections.abc import Sequence

MAP_EXTENSION = ".ber"


class SoLongError(Exception):
    """Base class for every error the game reports."""

    message = "Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidCharError(SoLongError):
    """The map holds a tile that is not allowed, or the wrong number of some tile."""

    message = "Error, invalid characteres"


class InvalidMapError(SoLongError):
    """The map is empty, not closed by walls, not rectangular or not solvable."""

    message = "Error, invalid map"


class InvalidFileError(SoLongError):
    """The map file could not be opened."""

    message = "Error, invalid fd"


class InvalidArgumentError(SoLongError):
    """The command line does not name exactly one ``.ber`` file."""

    message = "Error, invalid argument"


def check_arg(argv: Sequence[str]) -> str:
    """Check a full argument vector and return the map path it names."""
    if len(argv) != 2 or not argv[1]:
        raise InvalidArgumentError()
    path = argv[1]
    if not path.endswith(MAP_EXTENSION):
        raise InvalidArgumentError()
    return path