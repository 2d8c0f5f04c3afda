"""The game world, its per-frame logic and the window loop that drives it."""

from __future__ import annotations

import argparse
import random
from collections.abc import Container, Sequence

import pygame

from chickenrun.commands import InputHandler, JumpCommand, PauseCommand
from chickenrun.obstacle import Obstacle, create_obstacle
from chickenrun.player import Player
from chickenrun.score import Score, ScoreDisplay
from chickenrun.state import GameState

WINDOW_SIZE = (800, 450)
WINDOW_TITLE = "Chicken Run"
TARGET_FPS = 60

BACKGROUND_PATH = "Assets/background.png"
GROUND_PATH = "Assets/tanah.png"
BACKGROUND_OFFSET = (0, -100)
GROUND_OFFSET = (0, -120)

CLEAR_COLOR = (245, 245, 245)
MESSAGE_COLOR = (80, 80, 80)
GAME_OVER_COLOR = (230, 41, 55)
MESSAGE_FONT_SIZE = 20

Rect = tuple[float, float, float, float]


def _load_image(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (OSError, pygame.error):
        return None


def _rects_overlap(first: Rect, second: Rect) -> bool:
    x1, y1, w1, h1 = first
    x2, y2, w2, h2 = second
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


class Ground:
    """The scenery behind the player: a sky backdrop and the soil strip."""

    def __init__(
        self,
        background: pygame.Surface | None = None,
        foreground: pygame.Surface | None = None,
    ) -> None:
        self.background = background if background is not None else _load_image(BACKGROUND_PATH)
        self.foreground = foreground if foreground is not None else _load_image(GROUND_PATH)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the backdrop, then the soil on top of it."""
        if self.background is not None:
            surface.blit(self.background, BACKGROUND_OFFSET)
        if self.foreground is not None:
            surface.blit(self.foreground, GROUND_OFFSET)


class Game:
    """The playing field: player, score, scenery and obstacles."""

    def __init__(
        self,
        manager: GameManager,
        *,
        player: Player | None = None,
        ground: Ground | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.manager = manager
        self.player = player if player is not None else Player()
        self.ground = ground if ground is not None else Ground()
        self.score = Score()
        self.score_display = ScoreDisplay()
        self.score.add_observer(self.score_display)
        self.obstacles: list[Obstacle] = [create_obstacle("ground")]
        self._rng = rng if rng is not None else random.Random()

        self.input_handler = InputHandler()
        self.jump_command = JumpCommand(self.player)
        self.pause_command = PauseCommand(manager)
        self.input_handler.bind_key(pygame.K_SPACE, self.jump_command)
        self.input_handler.bind_key(pygame.K_p, self.pause_command)

    def update(self, pressed_keys: Container[int]) -> None:
        """Run one frame of play with the keys pressed during it."""
        self.input_handler.handle_input(pressed_keys)
        self.player.update()
        self.score.update()

        for obstacle in self.obstacles:
            obstacle.update()
            if _rects_overlap(self.player.rect, obstacle.rect):
                self.manager.state = GameState.GAME_OVER

        if self.obstacles[-1].rect[0] < 0:
            self.obstacles.pop()
            kind = "flying" if self._rng.randint(0, 1) == 0 else "ground"
            self.obstacles.append(create_obstacle(kind))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the scenery, the player, the score and the obstacles."""
        self.ground.draw(surface)
        self.player.draw(surface)
        self.score.draw(surface)
        for obstacle in self.obstacles:
            obstacle.draw(surface)

    def reset(self) -> None:
        """Start over: player on the ground, score zero, obstacles respawned."""
        self.player.reset()
        self.score.reset()
        for obstacle in self.obstacles:
            obstacle.reset()


class GameManager:
    """Owns the game phase and drives the game one frame at a time."""

    def __init__(self, game: Game | None = None) -> None:
        self.state = GameState.START
        self.game = game if game is not None else Game(self)
        self._font: pygame.font.Font | None = None

    def handle_frame(self, pressed_keys: Container[int]) -> GameState:
        """Apply one frame of input to the current phase; return the new phase."""
        if self.state is GameState.START:
            if pygame.K_RETURN in pressed_keys:
                self.state = GameState.PLAYING
        elif self.state is GameState.PLAYING:
            self.game.update(pressed_keys)
        elif self.state is GameState.PAUSED:
            if pygame.K_p in pressed_keys:
                self.state = GameState.PLAYING
        elif self.state is GameState.GAME_OVER:
            if pygame.K_r in pressed_keys:
                self.game.reset()
                self.state = GameState.PLAYING
        return self.state

    def _message(self, surface: pygame.Surface, text: str, position: tuple[int, int], color) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, MESSAGE_FONT_SIZE)
        surface.blit(self._font.render(text, True, color), position)

    def _draw(self, surface: pygame.Surface) -> None:
        surface.fill(CLEAR_COLOR)
        if self.state is GameState.START:
            self._message(surface, "Press ENTER to Start", (250, 200), MESSAGE_COLOR)
        elif self.state is GameState.PAUSED:
            self._message(surface, "PAUSED - Press P to Resume", (200, 200), MESSAGE_COLOR)
        else:
            self.game.draw(surface)
            if self.state is GameState.GAME_OVER:
                self._message(
                    surface, "GAME OVER - Press R to Restart", (200, 150), GAME_OVER_COLOR
                )

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while True:
                pressed: set[int] = set()
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            return
                        pressed.add(event.key)
                self.handle_frame(pressed)
                self._draw(screen)
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in a window."""
    parser = argparse.ArgumentParser(prog="chickenrun", description="Run, chicken, run.")
    parser.parse_args(argv)
    GameManager().run()
    return 0