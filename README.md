# badgl

The windowing-independent core of a small OpenGL renderer, in pure Python with
no dependencies outside the standard library.

## Modules

- `badgl.mathx`: immutable `Vec2`, `Vec3` and column-major `Mat4`.
  Vectors support `+`, `-`, `dot`, `scale`, `add_scalar` and `normalized`
  (the zero vector stays zero); `Vec3` also has `cross`. `Mat4` supports
  `@` for multiplication, `get(row, col)`, `transposed`, `scaled`,
  `scaled_scalar` (leaves the fourth column alone), `translated`,
  `rotated_x`/`rotated_y`/`rotated_z`, and the constructors `zero`,
  `identity`, `perspective_fov`, `perspective_frustum`,
  `orthographic_frustum` and `look_at`. Also `radians` and `clamp`.
- `badgl.transform`: `Transform` with position, Euler angles in degrees and
  scale; `reset()` and `model_matrix()` (scale, rotate about x, y, z, then
  translate).
- `badgl.camera`: a first-person `Camera` holding `view` and `projection`
  matrices. `update(width, height, delta_time, pressed, cursor, mouse_enabled)`
  moves it on the flat plane for the held `Key`s (`W`, `S`, `A`, `D`, `SPACE`,
  `LEFT_CONTROL`) and turns it from cursor movement, with pitch limited to
  ±89 degrees.
- `badgl.shapes`: `MeshData` (positions, indices, optional normals and UVs)
  built by `uv_sphere(res)`, `box(width, height, depth)` and
  `plane(width, height, res)`.
- `badgl.light`: point `Light` whose `packed()` gives its fields as vec4s
  with w = 1, and `DirLight` whose `uniforms()` maps `dir_light.*` uniform
  names to values.
- `badgl.glversion`: `parse_gl_version("x.y")` returning a `GLVersion`
  (3.3 up to 4.6), with `directive()` giving e.g. `#version 330 core`,
  `no_block_bindings()` and `supports_debug_output`.
- `badgl.util`: `str_find_last_of`, `find_directory_from_path` and
  `read_file`.

## Install

```
pip install .
```

## Example

```python
from badgl.mathx import Mat4, Vec3, radians
from badgl.camera import Camera, Key
from badgl.shapes import uv_sphere
from badgl.transform import Transform

cam = Camera(Vec3(0.0, 1.0, 3.0), 0.0, -90.0, 5.0, 0.1)
cam.update_projection(radians(90.0), 16 / 9, 0.01, 100.0)
cam.update(1280, 720, 0.016, pressed={Key.W})

sphere = uv_sphere(20)
print(sphere.vert_count, sphere.ind_count)  # 802 4560

transform = Transform(pos=Vec3(5.0, 0.0, -2.0), scale=Vec3(2.0, 2.0, 2.0))
mvp = cam.projection @ cam.view @ transform.model_matrix()
```

```python
from badgl.glversion import parse_gl_version

version = parse_gl_version("3.3")
print(version.directive())          # #version 330 core
print(version.no_block_bindings())  # True
```

## What it does not do

The package makes no OpenGL calls and opens no window: it does not load or
compile shaders, preprocess GLSL, upload meshes or textures, load model files,
or draw anything. It produces the matrices, vertex and index data, light values
and version strings that a rendering layer would hand to the GPU.

## Tests

```
pip install .[test]
pytest
```