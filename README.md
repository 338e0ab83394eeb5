# tankcombat

The rules and geometry of a two-tank arena game. Two tanks sit on a
rectangular floor. Each tank can drive, rotate its turret and fire a shell that
bounces off the walls. Player one is steered by keys. Player two is a second
`Tank` that starts on the opposite side.

The package has no dependencies and contains no display code. It holds the game
state and the maths a renderer needs, so any frontend can drive it, and so can
tests.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `tankcombat.materials`

`Material` is a frozen dataclass with these fields:

- `name`
- `ambient`, `diffuse` and `specular`, each an RGBA tuple
- `shininess`, an integer exponent

The 18 presets are held in `MATERIALS`, in order: emerald, jade, obsidian,
pearl, ruby, turquoise, brass, bronze, chrome, copper, gold, silver, and then
the plastics. `NUM_MAT` gives their count.

- `material(index)` returns a preset by position. It raises `IndexError` when
  the index is out of range.
- `material_by_name(name)` returns a preset by name, for example `"Ruby"` or
  `"redPlastic"`. It raises `KeyError` when the name is unknown.

### `tankcombat.camera`

`Vec3` is an immutable vector. It supports `+`, `-`, scalar `*` and unary `-`,
and it has the methods `length`, `normalized`, `dot` and `cross`. A zero vector
comes back unchanged from `normalized`.

- `perspective(theta, alpha, beta, width, height)` returns a `Frustum` with
  `left`, `right`, `bottom`, `top`, `near` and `far` for a lens angle of `theta`
  degrees. The near plane sits at the distance where the screen fills the view,
  divided by `alpha`. The far plane sits at that same distance times `beta`.
- `lookat(cam, target, up)` returns a 4×4 view matrix as nested tuples, in
  column-major order.

### `tankcombat.tank`

`Rect` is an axis-aligned rectangle. `Rect.intersects` reports whether two
rectangles overlap. Rectangles that only touch at an edge do not count as
overlapping.

`Tank(player_type=1)` is one tank. Type 1 starts on the right and faces left.
Type 0 starts on the left and faces right.

- `setup(res_x, res_y, floor_width, floor_height, floor_height_pos, screen_height)`
  sizes the tank and places it at its starting side.
- `update(first_person)` advances the tank by one frame, using the
  `is_left_pressed`, `is_right_pressed`, `is_up_pressed`, `is_down_pressed`,
  `is_rotate_left` and `is_rotate_right` flags.
  - Without first-person mode, the tank moves along the axes at `speed`.
  - In first-person mode, the tank moves relative to the way its cannon points.
- `shoot()` fires a shell from the cannon tip. It does nothing while a shell is
  already in flight.
- Each frame the shell moves 12 units. When it reaches a wall it bounces, and
  the bounce is counted in `c_ball_life`. The shell disappears when a bounce
  brings that count to `c_ball_life_max`, which is 3.
- `tank_boundary_collision` clamps the tank onto the floor.
- `bullet_boundary_collision` bounces the shell off the floor's edges.
- `tank_rect()` and `bullet_rect()` give the hit boxes.
- `cannon_ends()` returns the world positions of the cannon tip and bottom.
- `game_over_animation_update()` spins the turret of a beaten tank, 3 degrees
  per call, up to 880 degrees in total.

### `tankcombat.game`

`Game(width=800, height=800)` is the state machine. The floor has the same size
as the screen.

Call `update()` once per frame:

- On the start screen, it sets up both tanks.
- During play, it moves both tanks and applies hits.
- On the end screen, it animates the beaten tank.

`GameState` lists the screens: `START`, `INFO`, `TOP_DOWN` (`"2d"`),
`PERSPECTIVE` (`"3d"`), `FIRST_PERSON` (`"fp"`) and `END`. `Difficulty` is
`EASY` or `HARD`.

Pass keys to `key_pressed(key)` and `key_released(key)` as strings. The arrow
keys are `KEY_LEFT`, `KEY_RIGHT`, `KEY_UP` and `KEY_DOWN`.

| Key | Effect |
| --- | --- |
| arrows | drive player one (during play) |
| `q` / `w` | rotate the turret (during play) |
| space | fire (during play) |
| `m` | start the game; cycle 2d → 3d → fp → 2d; return to the start screen from info or end |
| `n` | info screen (from the start screen) |
| `d` | toggle easy and hard (on the start screen) |
| `1`–`7` | toggle the entries of `game.lights` |
| `i o p k l ç , . -` | toggle the nine entries of `game.light_flags` |
| `g` / `f` | set `game.wireframe` on / off |

Hard difficulty switches off the directional light and both tank point lights
in `game.lights`.

`check_bullet_collisions(player, enemy)` applies hits between two tanks:

- A shell from `player` counts only after it has bounced off a wall at least
  once.
- A shell from `enemy` counts at once.

`check_game_over()` ends the round when either tank runs out of lives. It sets
`winner` and resets the lives to 3 for player one and 1 for player two.
`lives_text()` and `end_text()` return the strings to show on screen.

## Example

```python
from tankcombat.game import KEY_UP, Game

game = Game()
game.update()              # start screen: size and place both tanks
game.key_pressed("m")      # begin play in the top-down view
game.key_pressed(KEY_UP)
game.key_pressed(" ")      # fire
for _ in range(10):
    game.update()
print(game.player1.base_pos, game.player1.c_ball_pos)
print(game.lives_text())   # LIVES: 3
```

## What this package does not do

- It draws nothing. It opens no window, loads no textures and runs no main loop.
  It sends no light or material settings to a graphics library. The state it
  keeps (`lights`, `light_flags`, `wireframe`, `materials`, `lookat`,
  `perspective`) is for a frontend to use.
- It has no command to run.
- Player two has no behaviour of its own. During play, `Game.update` calls its
  `update(False)`, so it moves, turns or fires only when something sets its
  flags or calls its `shoot()`.