"""The fixed charger that refills batteries with rockets."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from resgate.battery import Battery, Difficulty  # noqa: E402
from resgate.geometry import Position  # noqa: E402

__all__ = ["CHARGER_WIDTH", "CHARGER_HEIGHT", "TICK_MS", "RECHARGE_TIMES", "Charger"]

CHARGER_WIDTH = 80
CHARGER_HEIGHT = 50
TICK_MS = 16

RECHARGE_TIMES = {
    Difficulty.EASY: 5000,
    Difficulty.MEDIUM: 3000,
    Difficulty.HARD: 1500,
}

_RED = (255, 0, 0, 255)
_GREEN = (0, 255, 0, 255)
_YELLOW = (255, 255, 0, 255)
_BAR_OFFSET = 15
_BAR_HEIGHT = 8


@dataclass(eq=False)
class Charger:
    """A charger that adds one rocket to a connected battery per cycle."""

    pos: Position = field(default_factory=Position)
    active: bool = True
    busy: bool = False
    level: Difficulty = Difficulty.MEDIUM
    recharge_time: int = RECHARGE_TIMES[Difficulty.MEDIUM]
    elapsed: int = 0
    battery: Battery | None = None
    texture: pygame.Surface | None = field(default=None, repr=False)

    def load_texture(self, image_path: str | os.PathLike | None = None) -> bool:
        """Load the charger image, falling back to a plain red block.

        Returns True if the image file was used.
        """
        if image_path is not None:
            try:
                self.texture = pygame.image.load(os.fspath(image_path))
                return True
            except (pygame.error, OSError) as exc:
                print(f"Could not load charger image: {exc}", file=sys.stderr)
        texture = pygame.Surface((CHARGER_WIDTH, CHARGER_HEIGHT), pygame.SRCALPHA)
        texture.fill(_RED)
        self.texture = texture
        return False

    def release(self) -> None:
        """Drop the loaded texture."""
        self.texture = None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the charger, green while recharging and red while free."""
        body = pygame.Rect(self.pos.x, self.pos.y, CHARGER_WIDTH, CHARGER_HEIGHT)
        pygame.draw.rect(surface, _GREEN if self.busy else _RED, body)
        if self.busy and self.battery is not None:
            progress = (self.elapsed * CHARGER_WIDTH) // self.recharge_time
            bar = pygame.Rect(self.pos.x, self.pos.y - _BAR_OFFSET, progress, _BAR_HEIGHT)
            pygame.draw.rect(surface, _YELLOW, bar)

    def reset(self, level: Difficulty | int) -> None:
        """Free the charger and set its recharge time for a difficulty."""
        level = Difficulty(level)
        self.active = True
        self.busy = False
        self.level = level
        self.battery = None
        self.elapsed = 0
        self.recharge_time = RECHARGE_TIMES[level]

    def update(self) -> None:
        """Advance the recharge by one tick."""
        battery = self.battery
        if not self.busy or battery is None:
            return
        self.elapsed += TICK_MS
        if self.elapsed < self.recharge_time:
            return
        if battery.rockets < battery.max_rockets:
            battery.rockets += 1
            print(f"Battery recharged! Rockets: {battery.rockets}/{battery.max_rockets}")
        if battery.rockets >= battery.max_rockets:
            self.disconnect()
        else:
            self.elapsed = 0

    def connect(self, battery: Battery) -> bool:
        """Start recharging a battery; return False if either side is taken."""
        if self.busy or battery.connected:
            return False
        self.battery = battery
        self.busy = True
        battery.connected = True
        self.elapsed = 0
        print(f"Battery connected to charger! Level: {int(self.level)}")
        return True

    def disconnect(self) -> None:
        """Release the connected battery, if any, and free the charger."""
        if self.battery is not None:
            self.battery.connected = False
            self.battery = None
        self.busy = False
        self.elapsed = 0
        print("Battery disconnected from charger!")