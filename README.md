# orrery

This package models the solar system for a 3D viewer, independent of any renderer. It keeps
the state such a viewer needs:

- the Sun, the eight planets and the Moon, moving along their orbits and spinning on their axes
- orbit trails that fade out
- a camera that orbits, pans and zooms
- a UV sphere mesh
- the layout of text labels

It computes matrices and vertex data with numpy. It does not draw anything.

## Modules

### `orrery.transforms`

This module has 4×4 matrix helpers for column vectors:

- `identity()`
- `translate(matrix, offset)`
- `rotate(matrix, angle, axis)`, with `angle` in radians
- `scale(matrix, factors)`, where `factors` is one number or three
- `look_at(eye, target, up)`
- `perspective(fovy, aspect, near, far)`
- `ortho(left, right, bottom, top)`
- `world_to_screen(world_pos, view, projection, viewport)`, which projects a world
  position into window pixels. `viewport` is `(x, y, width, height)`.

Degenerate input raises `ValueError`. Examples are a zero-length axis, a zero aspect
ratio, or equal near and far planes.

### `orrery.sphere`

`generate_sphere(radius, sectors, stacks)` returns a frozen `SphereMesh` with these arrays:

- `vertices`, shape (n, 3)
- `normals`, the unit normals, shape (n, 3)
- `tex_coords`, shape (n, 2)
- `indices`, triangle indices, shape (m, 3)

Each pole gets a single triangle per sector. `index_count` is the total number of indices.

### `orrery.camera`

`Camera` turns mouse input into a view:

- `on_mouse_button(button, action)` records which buttons are held. It takes a
  `MouseButton` and a `ButtonAction`.
- `on_mouse_move(x, y)` orbits the camera around its target while the left button is
  held. It pans while the right button is held.
- `on_scroll(x_offset, y_offset)` changes `zoom`, the vertical field of view in degrees.
  The value is kept between 1 and 25.
- `reset()` restores the default position, target, up vector and zoom.
- `view_matrix()` and `projection_matrix(aspect)` give the matrices to render with.
  `aspect` defaults to 1280/720.

### `orrery.bodies`

`Planet` holds one body's state:

- its name, radius and distance
- its base and current speeds
- its axial tilt, in degrees
- its orbit and rotation angles, in radians
- a texture path such as `texture/earth.jpg`
- a trail of at most 200 points

Its methods:

- `advance()` moves the body one frame.
- `apply_speed(orbit_factor, rotation_factor)` scales the base speeds.
- `add_trail_point(position)` adds a point to the trail.
- `trail_colors()` returns one RGBA row per trail point. The colour is white, and alpha
  rises towards the newest point. The older half of the trail is fully transparent.
- `name_position(position)` gives the anchor point for the body's label.

`default_planets()` returns the Sun and the eight planets, innermost first.
`default_moon()` returns the Moon. Its distance is measured from the Earth.

### `orrery.system`

`SolarSystem` ties the bodies and a `Camera` together.

`step()` advances one frame. It:

- updates `planet_positions` and `moon_position`
- adds trail points; the Sun gets no trail
- stores each body's model matrix in `models`, keyed by name

`handle_key(key)` applies the keyboard controls. It takes a `Key`:

| Key | Effect |
| --- | --- |
| `UP` | raises the rotation and orbit speed factors |
| `DOWN` | lowers them, with lower limits |
| `RIGHT` | multiplies both factors by 1.2 |
| `LEFT` | multiplies both factors by 0.8, with lower limits |
| `LEFT_CONTROL` / `RIGHT_CONTROL` | show or hide planet names |
| `F` | switch between the two font paths (`font_path`) |
| `R` | reset the camera |
| `ESCAPE` | set `should_close` |

`status_lines()` returns the on-screen help text.

`label_positions(view, projection, viewport)` returns `(name, x, y)` for every body, with
each name roughly centred over its body. It returns an empty list when names are hidden.

### `orrery.text_layout`

`load_glyphs(font_path, font_size)` rasterises the first 128 characters of a font with
Pillow. It returns a dict that maps each character to a `Glyph`. A `Glyph` holds the size,
the bearing, the advance in 1/64 pixel units, and an 8-bit bitmap. Opening a missing font
raises `OSError`.

`TextLayout(glyphs, width, height)` lays out text in window pixels:

- `quads(text, x, y, scale)` returns one `(char, vertices)` pair per character.
  `vertices` is a (6, 4) array of `x, y, u, v` rows. A character with no glyph gives an
  empty quad and does not move the pen.
- `projection` is the matching orthographic matrix.

## Example

```python
from orrery.sphere import generate_sphere
from orrery.system import Key, SolarSystem

mesh = generate_sphere(1.0, 36, 18)

system = SolarSystem()
system.handle_key(Key.RIGHT)
for _ in range(100):
    system.step()

view = system.camera.view_matrix()
projection = system.camera.projection_matrix(1280 / 720)
viewport = (0, 0, 1280, 720)

for line in system.status_lines():
    print(line)

earth_model = system.models["Earth"]
earth_trail_alpha = system.planets[3].trail_colors()[:, 3]
labels = system.label_positions(view, projection, viewport)
```

Text layout needs a font file:

```python
from orrery.text_layout import TextLayout, load_glyphs

layout = TextLayout(load_glyphs("fonts/Helvetica.ttc", 24))
quads = layout.quads("Earth", 10.0, 30.0, 0.5)
```

## What it does not do

There is no window, no graphics backend, no shader and no command to run. Textures are
named by path only and are never loaded. To put the model on screen, pass the mesh, the
model matrices, the trails, the quads and the label positions to your own renderer on
every frame. Also forward its mouse and key events to `Camera` and
`SolarSystem.handle_key`.