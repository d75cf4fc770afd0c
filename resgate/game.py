"""The rescue game: world state, simulation steps and the main loop."""

from __future__ import annotations

import argparse
import os
import sys
import threading
import time
from collections.abc import Callable, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from resgate.battery import BATTERY_HEIGHT, BATTERY_WIDTH, Battery, Difficulty  # noqa: E402
from resgate.charger import CHARGER_HEIGHT, CHARGER_WIDTH, Charger  # noqa: E402
from resgate.geometry import Position, overlaps  # noqa: E402
from resgate.helicopter import HELICOPTER_HEIGHT, HELICOPTER_WIDTH, Helicopter  # noqa: E402

__all__ = [
    "WIDTH",
    "HEIGHT",
    "SOLDIERS",
    "NUM_BATTERIES",
    "TITLE",
    "LOSS_OFF_SCREEN",
    "LOSS_HIT_CHARGER",
    "LOSS_HIT_BATTERY",
    "Game",
    "main",
]

WIDTH = 800
HEIGHT = 600
SOLDIERS = 10
NUM_BATTERIES = 2
TITLE = "Soldier Rescue"

LOSS_OFF_SCREEN = "The helicopter left the screen! DEFEAT!"
LOSS_HIT_CHARGER = "The helicopter collided with the charger!"
LOSS_HIT_BATTERY = "The helicopter collided with a battery!"

_HELICOPTER_INTERVAL = 0.05
_CHARGER_INTERVAL = 0.1
_EVENT_INTERVAL = 0.01
_FPS = 60

_BACKGROUND = (0, 0, 0)
_DIRECTION_KEYS = frozenset("wasd")
_QUIT_KEY = "q"


class Game:
    """The whole game world, shared between the simulation threads."""

    def __init__(self, helicopter_image: str | os.PathLike = "helicopter.png") -> None:
        self.helicopter_image = helicopter_image
        self.helicopter = Helicopter(pos=Position(50, HEIGHT // 2))
        self.charger = Charger(pos=Position(100, 500))
        self.charger.reset(Difficulty.MEDIUM)
        self.batteries: list[Battery] = []
        for index in range(NUM_BATTERIES):
            battery = Battery(pos=Position(200 + index * 150, 520))
            battery.reset(Difficulty(index % len(Difficulty)))
            self.batteries.append(battery)
        self.active = True
        self.pending_key: str | None = None
        self.loss_reason: str | None = None
        self._lock = threading.Lock()

    def press_key(self, key: str) -> None:
        """Queue a direction key for the helicopter; 'q' ends the game."""
        if key == _QUIT_KEY:
            self.stop()
        elif key in _DIRECTION_KEYS:
            self.pending_key = key

    def _lose(self, reason: str) -> None:
        self.loss_reason = reason
        print(reason)
        self.active = False

    def helicopter_step(self) -> None:
        """Apply the queued key and end the game if the helicopter left the screen."""
        with self._lock:
            self.helicopter.move(self.pending_key)
            self.pending_key = None
            if self.helicopter.is_off_screen(WIDTH, HEIGHT):
                self._lose(LOSS_OFF_SCREEN)

    def charger_step(self) -> None:
        """Advance the charger, connect batteries and check helicopter collisions."""
        with self._lock:
            charger = self.charger
            heli = self.helicopter
            charger.update()
            if overlaps(heli.pos, HELICOPTER_WIDTH, HELICOPTER_HEIGHT,
                        charger.pos, CHARGER_WIDTH, CHARGER_HEIGHT):
                self._lose(LOSS_HIT_CHARGER)
            for battery in self.batteries:
                if not battery.active or battery.connected:
                    continue
                if battery.touches(charger.pos, CHARGER_WIDTH, CHARGER_HEIGHT) and not charger.busy:
                    charger.connect(battery)
                if overlaps(heli.pos, HELICOPTER_WIDTH, HELICOPTER_HEIGHT,
                            battery.pos, BATTERY_WIDTH, BATTERY_HEIGHT):
                    self._lose(LOSS_HIT_BATTERY)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the whole scene onto a surface."""
        with self._lock:
            surface.fill(_BACKGROUND)
            self.helicopter.draw(surface)
            self.charger.draw(surface)
            for battery in self.batteries:
                battery.draw(surface)

    def load_textures(self) -> None:
        """Load the images of every game object, using plain blocks where missing."""
        self.helicopter.load_texture(self.helicopter_image)
        self.charger.load_texture(None)
        for battery in self.batteries:
            battery.load_texture(None)

    def release(self) -> None:
        """Drop every loaded texture."""
        self.helicopter.release()
        self.charger.release()
        for battery in self.batteries:
            battery.release()

    def stop(self) -> None:
        """End the game; every loop exits on its next pass."""
        self.active = False

    def _repeat(self, step: Callable[[], None], interval: float) -> None:
        while self.active:
            step()
            time.sleep(interval)

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            name = pygame.key.name(event.key)
            if name in _DIRECTION_KEYS or name == _QUIT_KEY:
                self.press_key(name)

    def run(self) -> None:
        """Open the window and play until the game ends."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption(TITLE)
            self.load_textures()
            print("Starting threads...")
            workers = [
                threading.Thread(
                    target=self._repeat, args=(self.helicopter_step, _HELICOPTER_INTERVAL), daemon=True
                ),
                threading.Thread(
                    target=self._repeat, args=(self.charger_step, _CHARGER_INTERVAL), daemon=True
                ),
            ]
            for worker in workers:
                worker.start()
            clock = pygame.time.Clock()
            while self.active:
                for event in pygame.event.get():
                    self._handle_event(event)
                self.render(screen)
                pygame.display.flip()
                clock.tick(_FPS)
            print("Stopping threads...")
            for worker in workers:
                worker.join()
        finally:
            self.release()
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="resgate", description="Helicopter rescue game.")
    parser.add_argument(
        "--helicopter-image",
        default="helicopter.png",
        help="image file for the helicopter (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    print("Starting the game...")
    game = Game(helicopter_image=args.helicopter_image)
    try:
        game.run()
    except pygame.error as exc:
        print(f"Could not start the game: {exc}", file=sys.stderr)
        return 1
    print("Game finished!")
    return 0


if __name__ == "__main__":
    sys.exit(main())