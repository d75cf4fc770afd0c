# resgate

A small arcade game built on pygame. You fly a helicopter around an 800×600
window titled "Soldier Rescue". Stay on the screen, and do not hit the
charging station or the rocket batteries parked on the ground. While this
goes on, the game also runs the batteries: a battery that touches the
charger gets one rocket per charging cycle until it is full.

## Installing

```
pip install .
```

This needs `pygame`.

## Playing

```
resgate
```

Options:

- `--helicopter-image PATH`: the image file used for the helicopter
  (default: `helicopter.png`, relative to the current directory). If the
  file cannot be loaded, the game prints a message and draws a red
  rectangle instead.

Controls:

| Key | Action     |
|-----|------------|
| W   | move up    |
| S   | move down  |
| A   | move left  |
| D   | move right |
| Q   | quit       |

Each key press moves the helicopter 5 pixels. Closing the window also
ends the game. You lose when any of these happens, and the reason is
printed:

- the helicopter leaves the screen;
- it collides with the charger. The charger is drawn red while it is free
  and green while it charges, with a yellow progress bar above it;
- it collides with a battery. Batteries are drawn as blue boxes, each with
  a green bar that shows how full it is.

The command exits with status 1 if pygame cannot open the window.

## Difficulty

`resgate.battery.Difficulty` has three levels: `EASY`, `MEDIUM` and `HARD`.

| Level  | Battery capacity | Rockets at start | Charger cycle |
|--------|------------------|------------------|---------------|
| EASY   | 3                | 1                | 5000 ms       |
| MEDIUM | 6                | 2                | 3000 ms       |
| HARD   | 10               | 3                | 1500 ms       |

Each call to `Charger.update()` advances the cycle by 16 ms. The game puts
the charger on `MEDIUM`. Its two batteries are on `EASY` and `MEDIUM`.

## Using the pieces

The game objects also work without a window:

```python
from resgate.battery import Battery, Difficulty
from resgate.charger import CHARGER_HEIGHT, CHARGER_WIDTH, Charger
from resgate.geometry import Position

battery = Battery(pos=Position(100, 500))
battery.reset(Difficulty.EASY)

charger = Charger(pos=Position(100, 500))
charger.reset(Difficulty.HARD)
if battery.touches(charger.pos, CHARGER_WIDTH, CHARGER_HEIGHT):
    charger.connect(battery)

for _ in range(100):
    charger.update()

print(battery.rockets, battery.max_rockets)
```

- `resgate.geometry`: `Position` and `overlaps()`, the rectangle overlap
  test. Rectangles that only touch along an edge do not overlap.
- `resgate.helicopter.Helicopter`: `move(key)` for `"w"`, `"a"`, `"s"` and
  `"d"`, and `is_off_screen(width, height)`.
- `resgate.battery.Battery`: `reset(level)` and `touches(pos, width, height)`.
- `resgate.charger.Charger`: `reset(level)`, `connect(battery)`, `update()`
  and `disconnect()`. A full battery is disconnected automatically.
- `resgate.game.Game`: the whole game state. `press_key()` queues a move.
  `helicopter_step()` and `charger_step()` advance the game one tick, and
  `render(surface)` draws the scene. `run()` opens the window and plays
  until `active` becomes false. `loss_reason` holds the reason for a loss.

Each object also has `load_texture()`, `draw(surface)` and `release()`.

## What it does not do

This package has no soldiers to pick up or rescue. The helicopter cannot
fire the batteries' rockets. There is no score and no way to win. The only
way a game ends is a loss or the player quitting.

## Running the tests

```
pip install .[test]
pytest
```