"""The chicken the player controls."""

from __future__ import annotations

import pygame

SPRITE_PATH = "Assets/Spritepitikjalan.png"
START_X = 100.0
GROUND_Y = 250.0
JUMP_SPEED = 14.0
GRAVITY = 0.70
FRAME_COUNT = 3
FRAME_SPEED = 8
TARGET_FPS = 60

_PADDING_X = 30.0
_PADDING_Y = 38.0
# Frame size used when the sprite sheet cannot be loaded.
_FALLBACK_FRAME = (128, 128)


def _load_image(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path)
    except (OSError, pygame.error):
        return None


class Player:
    """A running chicken that can jump and falls back to the ground."""

    def __init__(self, sprite: pygame.Surface | None = None) -> None:
        self.sprite = sprite if sprite is not None else _load_image(SPRITE_PATH)
        if self.sprite is not None:
            width, height = self.sprite.get_size()
            self.frame_width = width // FRAME_COUNT
            self.frame_height = height
        else:
            self.frame_width, self.frame_height = _FALLBACK_FRAME
        self.x = START_X
        self.y = GROUND_Y
        self.velocity_y = 0.0
        self.is_jumping = False
        self.current_frame = 0
        self.frame_counter = 0

    def update(self) -> None:
        """Advance the running animation or the jump by one frame."""
        if self.is_jumping:
            self.velocity_y += GRAVITY
            self.y += self.velocity_y
            if self.y >= GROUND_Y:
                self.y = GROUND_Y
                self.is_jumping = False
                self.velocity_y = 0.0
            return
        self.frame_counter += 1
        if self.frame_counter >= TARGET_FPS // FRAME_SPEED:
            self.frame_counter = 0
            self.current_frame = (self.current_frame + 1) % FRAME_COUNT

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current animation frame at the player's position."""
        if self.sprite is None:
            return
        area = pygame.Rect(
            self.current_frame * self.frame_width,
            0,
            self.frame_width,
            self.frame_height,
        )
        surface.blit(self.sprite, (self.x, self.y), area)

    def reset(self) -> None:
        """Put the player back on the ground, standing still."""
        self.y = GROUND_Y
        self.velocity_y = 0.0
        self.is_jumping = False
        self.current_frame = 0
        self.frame_counter = 0

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Hit box as ``(x, y, width, height)``, inset from the frame."""
        return (
            self.x + _PADDING_X,
            self.y + _PADDING_Y,
            self.frame_width - 2 * _PADDING_X,
            self.frame_height - 2 * _PADDING_Y,
        )

    def start_jump(self) -> None:
        """Leave the ground, unless already in the air."""
        if not self.is_jumping:
            self.velocity_y = -JUMP_SPEED
            self.is_jumping = True