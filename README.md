# artillery

A two-player artillery duel played on one keyboard. Two tanks sit on rolling,
destructible terrain and fire shells at each other. Shells leave craters that
slowly smooth out, tanks tilt to follow the ground, and a white aiming arc
shows the path each shot will take until it meets the terrain.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
artillery
```

Options:

- `--width`, `--height`: window size in pixels (default 1280 × 720). The
  terrain is generated twice as wide as the window.
- `--seed`: seed for the random terrain effects, clouds and camera shake.
- `--frames`: stop after this many frames.

Press `Escape` or close the window to quit.

### Controls

| Action               | Player 1 | Player 2      |
|----------------------|----------|---------------|
| Move left / right    | `A` / `D`| `←` / `→`     |
| Raise / lower barrel | `S` / `W`| `↑` / `↓`     |
| Fire                 | `Space`  | `Enter`       |
| Automatic fire mode  | `U`      | `1`           |
| Single-shot mode     | `P`      | `2`           |

Press `R` to bring a destroyed tank back to full health.

Each tank survives four hits; the fifth destroys it, sets it on fire and
shows a trophy in the sky. In single-shot mode each key press fires one shell.
In automatic mode holding the fire key fires a shell at most every quarter
second; the two tanks share this shot timer.

## Using the pieces

The game logic does not depend on a display and can be driven directly:

```python
import random
from artillery.terrain import generate_height_map
from artillery.world import World

heights = generate_height_map(2560.0, 100.0)
world = World(2560.0, 100.0, heights, random.Random(1))
for tank in world.tanks.values():
    world.settle_tank(tank)   # rest on the ground and place the muzzle
world.fire(1)
for _ in range(200):
    world.update(1 / 60)
print(world.tanks[2].hits, len(world.impacts))
```

- `artillery.transforms`: 3×3 homogeneous matrices (`identity`, `translate`,
  `scale`, `rotate`, `apply`).
- `artillery.terrain`: natural cubic spline resampling
  (`cubic_spline_interpolation`), three-point smoothing
  (`smooth_height_map`) and terrain generation (`generate_height_map`).
- `artillery.meshes`: the `Mesh` record and `DrawMode`, with builders for the
  field, trapezoids, semicircles, circles, ellipses, rectangles, diamonds and
  lines.
- `artillery.world`: `World` with its `Tank`s, `Bullet`s, `ImpactPoint`s and
  `FireParticle`s; `Controls` for held keys and `Action` for single presses
  (`apply_controls`, `handle_action`, `update`).
- `artillery.scenery`: the mesh catalogue (`build_scene_meshes`), cloud
  positions, sun rays and the trophy layout.
- `artillery.app`: `Game`, the pygame window, and `main`, the `artillery`
  command.

## What it does not do

There is no computer opponent, no sound, no score keeping between rounds and
no networked play: both players share one keyboard in one window.