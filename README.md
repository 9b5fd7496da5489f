# arenashooter

A small top-down arena shooter built on pygame.

You control a blue circle in a 1280×720 arena. A red square starts in the
top-left corner and chases you at 60% of your speed. Shoot it before it
reaches you. Your shots alternate between a yellow capsule bullet (first)
and a red round bullet.

## Installation

```
pip install .
```

## Playing

```
arenashooter
```

The command takes no options besides `--help`.

Controls:

- `W` `A` `S` `D`: move (diagonal movement is normalised, so it is no faster)
- Left mouse button: fire toward the cursor (at most one shot every 150 ms)
- Close the window to quit

Your circle is kept inside the window. A single hit kills the chaser. If the
chaser touches you, you die, all shots in flight disappear and the world
stops moving; close the window to quit.

A frame-rate counter is drawn in the top-left corner when the font file
`text/OpenSans-Regular.ttf` is found in the parent of the current working
directory. Otherwise a message is printed to standard error and the game
runs without the counter.

## Using it from code

The game logic does not need a window, so it can be driven directly:

```python
from arenashooter.game import Game

game = Game()                         # Game(width, height) for another arena size
game.move_player((1.0, 0.0), 0.016)
shot = game.fire((1000.0, 360.0), now_ms=1000)
game.update(0.016)

print(game.player_alive, game.npc.alive, len(game.projectiles))
```

`Game.fire` returns the new projectile, or `None` while the cooldown is
running or after the player has died. `Game.render(surface, font)` draws a
frame onto any pygame surface; `font` may be `None`.

`Game.run()` opens the window and runs the main loop.
`arenashooter.game.main()` does the same and is what the `arenashooter`
command calls.

The building blocks live in their own modules:

- `arenashooter.config`: screen size, frame timing and player constants
- `arenashooter.geometry`: `Rect` (with `intersects`, `union`, `outside`),
  `normalized`, `rotated_rect_bounds`
- `arenashooter.projectiles`: `Projectile`, `CirBullet`, `CapBullet`
- `arenashooter.player`: `Player`
- `arenashooter.npc`: `NPC`

## What it does not do

There is one chaser per round, and no score, lives, restart or menu.
Projectiles carry a `damage` value (20 for round bullets, 30 for capsules),
but nothing uses it: any hit kills the chaser.

## Running the tests

```
pip install ".[test]"
pytest
```