"""The player's helicopter."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from resgate.geometry import Position  # noqa: E402

__all__ = ["HELICOPTER_WIDTH", "HELICOPTER_HEIGHT", "HELICOPTER_STEP", "Helicopter"]

HELICOPTER_WIDTH = 60
HELICOPTER_HEIGHT = 30
HELICOPTER_STEP = 5

_FALLBACK_COLOR = (255, 0, 0, 255)

_MOVES = {
    "w": (0, -HELICOPTER_STEP),
    "s": (0, HELICOPTER_STEP),
    "a": (-HELICOPTER_STEP, 0),
    "d": (HELICOPTER_STEP, 0),
}


@dataclass(eq=False)
class Helicopter:
    """The helicopter steered with the w, a, s and d keys."""

    pos: Position = field(default_factory=Position)
    active: bool = True
    texture: pygame.Surface | None = field(default=None, repr=False)

    def load_texture(self, image_path: str | os.PathLike) -> bool:
        """Load the helicopter image, falling back to a plain red block.

        Returns True if the image file was used.
        """
        try:
            self.texture = pygame.image.load(os.fspath(image_path))
            return True
        except (pygame.error, OSError) as exc:
            print(f"Could not load helicopter image: {exc}", file=sys.stderr)
        texture = pygame.Surface((HELICOPTER_WIDTH, HELICOPTER_HEIGHT), pygame.SRCALPHA)
        texture.fill(_FALLBACK_COLOR)
        self.texture = texture
        return False

    def release(self) -> None:
        """Drop the loaded texture."""
        self.texture = None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the helicopter at its position."""
        if self.texture is None:
            return
        image = self.texture
        if image.get_size() != (HELICOPTER_WIDTH, HELICOPTER_HEIGHT):
            image = pygame.transform.scale(image, (HELICOPTER_WIDTH, HELICOPTER_HEIGHT))
        surface.blit(image, (self.pos.x, self.pos.y))

    def move(self, key: str | None) -> None:
        """Move one step for a direction key; any other key is ignored."""
        dx, dy = _MOVES.get(key, (0, 0)) if key else (0, 0)
        self.pos.x += dx
        self.pos.y += dy

    def is_off_screen(self, width: int, height: int) -> bool:
        """Return True if any part of the helicopter is outside the screen."""
        return (
            self.pos.x < 0
            or self.pos.x + HELICOPTER_WIDTH > width
            or self.pos.y < 0
            or self.pos.y + HELICOPTER_HEIGHT > height
        )