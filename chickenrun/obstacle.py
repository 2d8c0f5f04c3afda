"""Obstacles that scroll towards the player, and the factory making them."""

from __future__ import annotations

import pygame

TEXTURE_PATH = "Assets/Obstacle.png"
SPAWN_X = 800.0
SPEED = 5.0
SOURCE_SIZE = 128
SCALE = 0.6

_HIT_OFFSET_X = 33.0
_HIT_OFFSET_Y = 16.0
_HIT_WIDTH = 40.0
_HIT_HEIGHT = 70.0


def _load_image(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (OSError, pygame.error):
        return None


class Obstacle:
    """An obstacle moving left that respawns on the right once off screen."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        texture: pygame.Surface | None = None,
    ) -> None:
        self.x = float(x)
        self.y = float(y - (SOURCE_SIZE - height))
        self.active = True
        self.texture = texture if texture is not None else _load_image(TEXTURE_PATH)

    def update(self) -> None:
        """Move left one step, or respawn if it left the screen last frame."""
        if self.active:
            self.x -= SPEED
            if self.x < -SOURCE_SIZE:
                self.active = False
        else:
            self.x = SPAWN_X
            self.active = True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the scaled texture while the obstacle is on screen."""
        if not self.active or self.texture is None:
            return
        area = self.texture.get_rect().clip(pygame.Rect(0, 0, SOURCE_SIZE, SOURCE_SIZE))
        size = round(SOURCE_SIZE * SCALE)
        image = pygame.transform.scale(self.texture.subsurface(area), (size, size))
        surface.blit(image, (self.x, self.y))

    def reset(self) -> None:
        """Send the obstacle back to its spawn point."""
        self.x = SPAWN_X
        self.active = True

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Hit box as ``(x, y, width, height)``."""
        return (
            self.x + _HIT_OFFSET_X,
            self.y + _HIT_OFFSET_Y,
            _HIT_WIDTH,
            _HIT_HEIGHT,
        )


def create_obstacle(kind: str) -> Obstacle:
    """Make a ``"ground"`` or ``"flying"`` obstacle at the spawn point."""
    if kind == "ground":
        return Obstacle(800, 360, 20, 40)
    if kind == "flying":
        return Obstacle(800, 250, 20, 20)
    raise ValueError(f"unknown obstacle kind: {kind!r}")