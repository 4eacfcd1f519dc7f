# emberfield

This package holds the scene logic for a small real-time fire demo. It needs
no window, graphics context or driver. It contains:

- `emberfield.camera`: `FreeCamera` is a free-look camera. It turns yaw and
  pitch angles (in degrees) into `front`, `right` and `up` vectors.
  `view_matrix()` returns a right-handed 4x4 look-at matrix.
  `process_keyboard` moves the camera in a `CameraMovement` direction.
  `process_mouse_movement` turns the camera and, by default, keeps pitch
  within ±89°. `process_mouse_scroll` keeps `zoom` between 1 and 45.
- `emberfield.light`: `Light` holds the state of a directional, point or
  spot light. `position` and `direction` share one storage slot.
  `Light.uniforms(camera_position, directional, is_spot)` returns a dict of
  the uniform names and values a lighting shader expects, such as
  `"light.position"`, `"light.cutoff"` and `"viewPosition"`, in the order they
  are set. `Light.render` passes each of them to a `set_uniform(name, value)`
  callable that you supply.
- `emberfield.events`: `MouseInput` receives raw cursor, button and scroll
  events through `on_cursor_pos`, `on_mouse_button` (with a `ButtonAction`)
  and `on_scroll`. It reports:
  - cursor offsets, through `cursor_position()` and `mouse_moved()`;
  - one-shot button presses, through `check_mouse_button()`;
  - the pending scroll direction as a `MouseScroll`, through `scroll_state()`.
- `emberfield.particles`: `ParticleGenerator` spawns `Particle`s inside a
  unit ball around `center_position`. `update` moves, fades and ages them.
  `draw` drops dead particles and returns one `DrawCommand` for each particle
  still alive. A `DrawCommand` holds a model matrix that turns the unit quad
  (`QUAD_VERTICES`) towards the camera, the particle's colour and its
  remaining lifetime. You can pass a `numpy.random.Generator` to make runs
  repeatable.
- `emberfield.layout`: `BufferLayout`, `BufferElement` and `DataType`
  describe vertex attributes. Interleaved pushes widen the stride and compute
  offsets. A push with an explicit offset leaves the stride alone. `size_of`
  and `gl_type` map a data type to its byte size and to its GL enum value.
- `emberfield.shader_source`: `parse_shader` and `parse_shader_file` split
  shader text into a `ShaderSources` by `ShaderStage`. Marker lines select the
  stage:
  - `#SHADER VERTEX` for the vertex stage;
  - `#SHADER FRAGMENT` or `#SHADER PIXEL` for the fragment stage;
  - `#SHADER GEOMETRY` for the geometry stage, only when geometry is enabled.

  Source lines that come before any marker raise `ValueError`.
  `read_shader_file` reads a file that holds a single stage.

## Installation

```
pip install .
```

Only numpy is needed at run time. To run the tests, install the test extra
with `pip install .[test]` and then run `pytest`.

## Example

```python
import numpy as np
from emberfield.camera import FreeCamera, CameraMovement
from emberfield.particles import ParticleGenerator

camera = FreeCamera(np.array([15.0, 3.0, 45.0]), np.array([0.0, 1.0, 0.0]), -90.0, 0.0)
camera.process_keyboard(CameraMovement.FORWARD, 0.016)
view = camera.view_matrix()

fire = ParticleGenerator(10, 4.0, 5.0, np.array([0.5, 0.5, 0.5]), np.random.default_rng(1))
fire.center_position = np.array([0.0, 3.0, 0.0])
fire.spawn_particles(15, np.full(3, -3.0), np.full(3, 3.0))
fire.update(0.016, 0, np.zeros(3))
for command in fire.draw(camera.position, np.full(3, 0.2)):
    print(command.model, command.color, command.lifetime)
```

## What it does not do

The package makes no graphics API calls. It does not:

- open a window;
- compile or link shaders;
- upload buffers;
- load textures or images;
- draw anything.

It has no command-line program and no main loop. Your renderer takes the
matrices, uniform values, vertex layouts and shader sources that the package
produces and applies them.