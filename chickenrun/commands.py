"""Commands bound to keys, and the handler that fires them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Container
from typing import Protocol

from chickenrun.player import Player
from chickenrun.state import GameState


class _StateHolder(Protocol):
    state: GameState


class Command(ABC):
    """An action triggered by input."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the action."""


class JumpCommand(Command):
    """Makes the player jump if it is on the ground."""

    def __init__(self, player: Player) -> None:
        self.player = player

    def execute(self) -> None:
        if not self.player.is_jumping:
            self.player.start_jump()


class PauseCommand(Command):
    """Toggles between playing and paused; other phases are left alone."""

    def __init__(self, manager: _StateHolder) -> None:
        self.manager = manager

    def execute(self) -> None:
        if self.manager.state is GameState.PLAYING:
            self.manager.state = GameState.PAUSED
        elif self.manager.state is GameState.PAUSED:
            self.manager.state = GameState.PLAYING


class InputHandler:
    """Maps keys to commands and runs those whose key was pressed."""

    def __init__(self) -> None:
        self._commands: dict[int, Command] = {}

    def bind_key(self, key: int, command: Command) -> None:
        """Bind ``command`` to ``key``, replacing any earlier binding."""
        self._commands[key] = command

    def handle_input(self, pressed_keys: Container[int]) -> None:
        """Execute the command of every bound key found in ``pressed_keys``."""
        for key, command in self._commands.items():
            if key in pressed_keys:
                command.execute()