"""Rocket batteries that can be recharged at a charger."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from enum import IntEnum

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from resgate.geometry import Position, overlaps  # noqa: E402

__all__ = [
    "BATTERY_WIDTH",
    "BATTERY_HEIGHT",
    "MAX_ROCKETS",
    "Difficulty",
    "Battery",
]

BATTERY_WIDTH = 40
BATTERY_HEIGHT = 30
MAX_ROCKETS = 10

_FALLBACK_COLOR = (0, 0, 255, 255)
_BAR_COLOR = (0, 255, 0, 255)
_BAR_OFFSET = 10
_BAR_HEIGHT = 5


class Difficulty(IntEnum):
    """Difficulty levels shared by batteries and chargers."""

    EASY = 0
    MEDIUM = 1
    HARD = 2


# (maximum rockets, rockets at start) per difficulty.
_CAPACITY = {
    Difficulty.EASY: (3, 1),
    Difficulty.MEDIUM: (6, 2),
    Difficulty.HARD: (10, 3),
}


@dataclass(eq=False)
class Battery:
    """A rocket battery standing on the ground."""

    pos: Position = field(default_factory=Position)
    active: bool = False
    connected: bool = False
    rockets: int = 0
    max_rockets: int = 0
    texture: pygame.Surface | None = field(default=None, repr=False)

    def reset(self, level: Difficulty | int) -> None:
        """Activate the battery with the capacity of the given difficulty."""
        level = Difficulty(level)
        self.active = True
        self.connected = False
        self.max_rockets, self.rockets = _CAPACITY[level]

    def load_texture(self, image_path: str | os.PathLike | None = None) -> bool:
        """Load the battery image, falling back to a plain blue block.

        Returns True if the image file was used.
        """
        if image_path is not None:
            try:
                self.texture = pygame.image.load(os.fspath(image_path))
                return True
            except (pygame.error, OSError) as exc:
                print(f"Could not load battery image: {exc}", file=sys.stderr)
        texture = pygame.Surface((BATTERY_WIDTH, BATTERY_HEIGHT), pygame.SRCALPHA)
        texture.fill(_FALLBACK_COLOR)
        self.texture = texture
        return False

    def release(self) -> None:
        """Drop the loaded texture."""
        self.texture = None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the battery and a green bar showing how full it is."""
        if not self.active:
            return
        if self.texture is not None:
            image = self.texture
            if image.get_size() != (BATTERY_WIDTH, BATTERY_HEIGHT):
                image = pygame.transform.scale(image, (BATTERY_WIDTH, BATTERY_HEIGHT))
            surface.blit(image, (self.pos.x, self.pos.y))
        bar_width = (self.rockets * BATTERY_WIDTH) // self.max_rockets
        bar = pygame.Rect(self.pos.x, self.pos.y - _BAR_OFFSET, bar_width, _BAR_HEIGHT)
        pygame.draw.rect(surface, _BAR_COLOR, bar)

    def touches(self, pos: Position, width: int, height: int) -> bool:
        """Return True if the battery overlaps the given rectangle."""
        return overlaps(self.pos, BATTERY_WIDTH, BATTERY_HEIGHT, pos, width, height)