"""Phases the game moves through."""

from enum import Enum, auto


class GameState(Enum):
    """The phase the game is in, which decides what a frame does."""

    START = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()