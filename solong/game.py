"""Game state, movement rules and the window that shows them."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from .errors import InvalidMapError, SoLongError, check_arg
from .mapcheck import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    find_player,
    load_map,
)
from .printf import ft_printf
from .xpm import XpmError, XpmImage, load_xpm

TILE_SIZE = 128
WINDOW_TITLE = "."

ESCAPE_KEY = 53

PLAYER_TEXTURES = (
    "textures/Charizard-front.xpm",
    "textures/Charizard-back.xpm",
    "textures/Charizard-right.xpm",
    "textures/Charizard-left.xpm",
)
WALL_TEXTURE = "textures/Waterfall-1.xpm"
FLOOR_TEXTURE = "textures/Grass.xpm"
COLLECTIBLE_TEXTURE = "textures/Poké_Ball_EP.xpm"
EXIT_TEXTURE = "textures/CentroPokemon.xpm"

_DRAWN_TILES = (WALL, FLOOR, PLAYER, COLLECTIBLE, EXIT)


class Direction(enum.Enum):
    """A direction of movement; the value is the index of the player sprite."""

    DOWN = 0
    UP = 1
    RIGHT = 2
    LEFT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """The (row, column) step taken in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.DOWN: (1, 0),
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
}

_KEY_DIRECTIONS = {
    0: Direction.LEFT,
    123: Direction.LEFT,
    1: Direction.DOWN,
    125: Direction.DOWN,
    2: Direction.RIGHT,
    124: Direction.RIGHT,
    13: Direction.UP,
    126: Direction.UP,
}


class MoveResult(enum.Enum):
    """What came of a key press or a move."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    QUIT = "quit"


class Game:
    """A map being played: the grid, the player and the moves made so far."""

    def __init__(self, grid: Sequence[str], stream: TextIO | None = None) -> None:
        self.grid = [list(row) for row in grid]
        position = find_player(grid)
        if position is None:
            raise InvalidMapError()
        self.player = position
        self.collectibles = sum(row.count(COLLECTIBLE) for row in self.grid)
        self.moves = 0
        self.facing = Direction.DOWN
        self.stream = stream

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Game:
        """Load, validate and start the map stored at ``path``."""
        return cls(load_map(path).grid)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[-1]) if self.grid else 0

    def _tile(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return WALL

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one step in ``direction``."""
        row, col = self.player
        dr, dc = direction.delta
        target_row, target_col = row + dr, col + dc
        target = self._tile(target_row, target_col)
        if target == WALL:
            return MoveResult.BLOCKED
        if target == EXIT:
            # Stepping down onto the exit never finishes the game.
            if direction is not Direction.DOWN and self.collectibles == 0:
                return MoveResult.WON
            return MoveResult.BLOCKED
        if target == COLLECTIBLE:
            self.collectibles -= 1
        self.grid[row][col] = FLOOR
        self.grid[target_row][target_col] = PLAYER
        self.player = (target_row, target_col)
        self.facing = direction
        return MoveResult.MOVED

    def handle_key(self, keycode: int) -> MoveResult:
        """React to a key code and report the move count, as the game does on each key."""
        if keycode == ESCAPE_KEY:
            return MoveResult.QUIT
        direction = _KEY_DIRECTIONS.get(keycode)
        result = MoveResult.BLOCKED if direction is None else self.move(direction)
        if result is MoveResult.WON:
            return result
        if result is MoveResult.MOVED:
            self.moves += 1
        ft_printf("MOVEMENTS: %d\n", self.moves, stream=self.stream)
        return result

    def tiles(self) -> Iterator[tuple[int, int, str]]:
        """Yield (row, column, tile) for every tile that is drawn."""
        for r, row in enumerate(self.grid):
            for c, tile in enumerate(row):
                if tile in _DRAWN_TILES:
                    yield r, c, tile


def _surface(pygame, image: XpmImage | None):
    if image is None:
        return None
    data = bytearray()
    for value in image.pixels:
        alpha = 255 - ((value >> 24) & 0xFF)
        data += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha))
    surface = pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA")
    return surface.convert_alpha()


def _texture(pygame, path: str):
    try:
        return _surface(pygame, load_xpm(path))
    except XpmError:
        return None


def _load_textures(pygame) -> dict[str, object]:
    textures = {
        WALL: _texture(pygame, WALL_TEXTURE),
        FLOOR: _texture(pygame, FLOOR_TEXTURE),
        COLLECTIBLE: _texture(pygame, COLLECTIBLE_TEXTURE),
        EXIT: _texture(pygame, EXIT_TEXTURE),
    }
    for direction in Direction:
        textures[f"{PLAYER}{direction.value}"] = _texture(pygame, PLAYER_TEXTURES[direction.value])
    return textures


def _draw(screen, game: Game, textures: dict[str, object]) -> None:
    for row, col, tile in game.tiles():
        position = (col * TILE_SIZE, row * TILE_SIZE)
        layers = [textures[WALL]] if tile == WALL else [textures[FLOOR]]
        if tile == PLAYER:
            layers.append(textures[f"{PLAYER}{game.facing.value}"])
        elif tile in (COLLECTIBLE, EXIT):
            layers.append(textures[tile])
        for layer in layers:
            if layer is not None:
                screen.blit(layer, position)


_PYGAME_KEYS = {
    "K_ESCAPE": ESCAPE_KEY,
    "K_a": 0,
    "K_LEFT": 123,
    "K_s": 1,
    "K_DOWN": 125,
    "K_d": 2,
    "K_RIGHT": 124,
    "K_w": 13,
    "K_UP": 126,
}


def _run(game: Game) -> int:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((game.cols * TILE_SIZE, game.rows * TILE_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        keymap = {getattr(pygame, name): code for name, code in _PYGAME_KEYS.items()}
        textures = _load_textures(pygame)
        _draw(screen, game, textures)
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                result = game.handle_key(keymap.get(event.key, -1))
                if result in (MoveResult.WON, MoveResult.QUIT):
                    return 0
                if result is MoveResult.MOVED:
                    _draw(screen, game, textures)
                    pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map named on the command line."""
    argv = list(sys.argv if argv is None else argv)
    try:
        path = check_arg(argv)
        game = Game.from_file(path)
    except SoLongError as exc:
        sys.stdout.write(f"{exc}\n")
        return 1
    return _run(game)


if __name__ == "__main__":
    raise SystemExit(main())