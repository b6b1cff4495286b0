# tilesprite

Tools for small 2D games. It has an animated sprite driven by a four-by-four
sprite sheet and tile maps with a staggered "slide" view. It also has 2D
point-in-triangle tests and a compact set of vector, matrix and quaternion
functions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The sprite demo

```
tilesprite
tilesprite --sheet path/to/Walk.png
```

This opens an 800×600 pygame window titled "Vampirinho" with a character
near the middle. Move it with `W`, `A`, `S` and `D` at 100 pixels per second.
Its animation advances one frame every 0.15 s while it moves, and it returns
to the first frame when it stops. The sheet is read as four columns of frames
by four rows: right, left, up and down, counted from the bottom of the image.
Each frame is drawn at 64×64 pixels.

`--sheet` defaults to `../assets/sprites/Walk.png`, relative to the current
directory. If the image cannot be loaded, the command prints
`Failed to load texture: <path>` to stderr and shows an empty window.

## Library overview

- `tilesprite.sprite`: `Sprite` and `Facing`.
  - `Sprite.update(delta_time)` advances the animation.
  - `Sprite.move(left, right, up, down, delta_time, speed)` applies the held
    keys. When several keys are held, the last one in that order sets the
    facing.
  - `tex_coords()`, `quad_vertices()` (interleaved `x, y, z, u, v`) and
    `model_matrix()` give what a renderer needs to draw the current frame.
- `tilesprite.app`: the demo command.
  - `main(argv=None)` runs the demo window.
  - `frame_rect(sheet_width, sheet_height, frame_x, frame_y)` gives a frame's
    pixel rectangle.
  - `screen_position(position, height)` converts a y-up position to window
    pixels.
- `tilesprite.tilemap`:
  - `TileMap(width, height, init_with=0)` is a grid of tile ids (0–255). It
    has `tile`, `set_tile`, a `tiles` copy, and iteration over
    `(col, row, tile)`. Coordinates outside the map raise `IndexError`.
  - `Layer` describes a parallax layer.
- `tilesprite.tilemap_view`: `Direction`, the abstract `TilemapView` and
  `SlideView`. These give the screen position of a tile, the tile under a
  mouse point, and the tile one step away in a compass direction.
- `tilesprite.geometry2d`:
  - `triangle_area_2d`.
  - Point-in-triangle tests `triangle_collide_point_2d` (compares areas
    exactly) and `collide_by_dot_product` (checks the angle at the first
    vertex only).
  - Vector helpers that work on plain sequences.
- `tilesprite.vectors`:
  - `Vec2`, `Vec3` and `Vec4`.
  - `length`, `normalise`, `dot`, `cross`, `direction_to_heading` and
    `heading_to_direction`.
- `tilesprite.matrices`:
  - Column-major `Mat3` and `Mat4`.
  - `translate`, `rotate_x_deg`, `rotate_y_deg`, `rotate_z_deg`, `scale`,
    `look_at`, `perspective`, `ortho`, `determinant`, `inverse` and
    `transpose`.
  - `inverse` returns a singular matrix unchanged with a `RuntimeWarning`.
- `tilesprite.quaternions`: `Versor`, `quat_from_axis_deg`,
  `quat_from_axis_rad`, `quat_to_mat4`, `normalise_versor` and `slerp`.
- `tilesprite.gllog`:
  - `GLLog` is an append-only log file, `gl.log` by default. It has
    `restart`, `log` and `log_err`; `log_err` also writes to stderr.
  - `FpsCounter.tick(now)` returns a title such as `opengl @ fps: 59.80`
    about four times a second.
  - `read_shader_source` reads a shader file as text.

```python
from tilesprite.tilemap_view import SlideView, Direction

view = SlideView()
print(view.compute_draw_position(2, 3, 64.0, 32.0))     # (224.0, 48.0)
print(view.compute_tile_walking(2, 3, Direction.NORTH))  # (1, 5)
```

## What it does not do

- The demo draws with pygame surfaces, not GPU shaders. `read_shader_source`
  only loads shader text; nothing in the package compiles or links shaders.
- No command draws tile maps. `TileMap`, `Layer` and `SlideView` give the data
  and the coordinate arithmetic, and the drawing is left to the caller.