"""Loading and validating game maps."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import InvalidCharError, InvalidMapError
from .lines import read_file_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
VALID_TILES = WALL + FLOOR + PLAYER + EXIT + COLLECTIBLE

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class MapInfo:
    """A map grid together with the tiles counted in it."""

    grid: tuple[str, ...]
    players: int = 0
    collectibles: int = 0
    exits: int = 0
    player: tuple[int, int] | None = None

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[-1]) if self.grid else 0


def _char(row: str, index: int) -> str:
    return row[index] if 0 <= index < len(row) else ""


def _tile(grid: Sequence[str], row: int, col: int) -> str:
    if 0 <= row < len(grid):
        return _char(grid[row], col)
    return ""


def _interior(grid: Sequence[str]) -> Iterable[tuple[int, int, str]]:
    for r, row in enumerate(grid[1:], start=1):
        for c, ch in enumerate(row[1:], start=1):
            yield r, c, ch


def check_limits(grid: Sequence[str]) -> None:
    """Raise unless the grid is rectangular and closed by walls."""
    if not grid:
        raise InvalidMapError()
    cols = len(grid[-1])
    if cols == 0:
        raise InvalidMapError()
    top, bottom = grid[0], grid[-1]
    for i in range(cols - 1):
        if _char(top, i) != WALL or _char(bottom, i) != WALL:
            raise InvalidMapError()
    for row in grid:
        if _char(row, 0) != WALL or _char(row, cols - 1) != WALL:
            raise InvalidMapError()
    for row in grid[:-1]:
        if len(row) != cols:
            raise InvalidMapError()


def check_characters(grid: Sequence[str]) -> MapInfo:
    """Count players, collectibles and exits, rejecting unknown tiles."""
    grid = tuple(grid)
    players = collectibles = exits = 0
    player = None
    for r, c, ch in _interior(grid):
        if ch not in VALID_TILES:
            raise InvalidCharError()
        if ch == PLAYER:
            players += 1
            player = (r, c)
        elif ch == COLLECTIBLE:
            collectibles += 1
        elif ch == EXIT:
            exits += 1
    return MapInfo(grid, players, collectibles, exits, player)


def check_complete(grid: Sequence[str], start: tuple[int, int]) -> frozenset[tuple[int, int]]:
    """Return every cell reachable from ``start``.

    Exits stop movement: an exit next to a reachable cell counts as reached,
    but nothing beyond it does.
    """
    reached: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        cell = stack.pop()
        if cell in reached:
            continue
        reached.add(cell)
        r, c = cell
        for dr, dc in _NEIGHBOURS:
            nxt = (r + dr, c + dc)
            tile = _tile(grid, *nxt)
            if tile == EXIT:
                reached.add(nxt)
            elif tile and tile != WALL and nxt not in reached:
                stack.append(nxt)
    return frozenset(reached)


def validate_map(lines: Iterable[str]) -> MapInfo:
    """Validate map lines as read from a file, newlines included."""
    lines = list(lines)
    if not lines:
        raise InvalidMapError()
    if lines[-1].endswith("\n") or any(not line.endswith("\n") for line in lines[:-1]):
        raise InvalidMapError()
    grid = [line[:-1] for line in lines[:-1]] + [lines[-1]]
    check_limits(grid)
    info = check_characters(grid)
    if info.players != 1 or info.exits != 1 or info.collectibles < 1:
        raise InvalidCharError()
    reached = check_complete(info.grid, info.player)
    for r, c, ch in _interior(info.grid):
        if ch in (COLLECTIBLE, EXIT) and (r, c) not in reached:
            raise InvalidMapError()
    return info


def load_map(path: str | os.PathLike[str]) -> MapInfo:
    """Read and validate the map file at ``path``."""
    return validate_map(read_file_lines(path))


def find_player(grid: Sequence[str]) -> tuple[int, int] | None:
    """Return the (row, column) of the last player tile, or None."""
    found = None
    for r, c, ch in _interior(grid):
        if ch == PLAYER:
            found = (r, c)
    return found