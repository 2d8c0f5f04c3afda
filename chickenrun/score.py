"""The running score and the observers that follow it."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import pygame

logger = logging.getLogger(__name__)

FRAMES_PER_POINT = 20
TEXT_POSITION = (10, 10)
FONT_SIZE = 20
TEXT_COLOR = (0, 0, 0)


class ScoreObserver(ABC):
    """Something told whenever the score changes."""

    @abstractmethod
    def on_score_changed(self, new_score: int) -> None:
        """Receive the new score."""


class Score:
    """A score that gains a point every fixed number of frames."""

    def __init__(self) -> None:
        self.value = 0
        self.frame_counter = 0
        self._observers: list[ScoreObserver] = []
        self._font: pygame.font.Font | None = None

    def update(self) -> None:
        """Advance one frame, scoring a point when enough frames have passed."""
        self.frame_counter += 1
        if self.frame_counter >= FRAMES_PER_POINT:
            self.value += 1
            self.frame_counter = 0
            self._notify()

    def reset(self) -> None:
        """Set the score back to zero and tell the observers."""
        self.value = 0
        self._notify()

    def add_observer(self, observer: ScoreObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: ScoreObserver) -> None:
        """Stop telling ``observer`` about changes; unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def _notify(self) -> None:
        for observer in self._observers:
            observer.on_score_changed(self.value)

    def draw(self, surface: pygame.Surface) -> None:
        """Write the score in the top left corner of ``surface``."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        text = self._font.render(f"Score: {self.value}", True, TEXT_COLOR)
        surface.blit(text, TEXT_POSITION)


class ScoreDisplay(ScoreObserver):
    """Keeps the last score it was told about and logs each change."""

    def __init__(self) -> None:
        self.last_score = 0

    def on_score_changed(self, new_score: int) -> None:
        self.last_score = new_score
        logger.info("Score Updated: %d", new_score)