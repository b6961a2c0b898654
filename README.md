# sandengine

A small real-time 3D rendering engine that runs on an OpenGL 3.3 core context
through pyglet. It has a window layer, a first-person fly camera, a Wavefront
OBJ reader and textured mesh drawing. It also ships a sandbox viewer that
shows a skybox and a model.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The sandbox

```
sandengine-sandbox
sandengine-sandbox --res path/to/resources
```

This opens a resizable 1280x720 window and hides and captures the cursor. It
then loads two meshes from the resource directory, which is `res` under the
current directory unless you pass `--res`:

- `sky.obj` with `skybox.png`, at half scale, which follows the camera;
- `backpack/backpack.obj` with `backpack/texture.jpeg`, at 1/100 scale, at
  the origin.

The camera moves at 2.5 units per second. The viewer runs until you close the
window.

| Input | Action                                                 |
|-------|--------------------------------------------------------|
| W / S | move forward / back                                    |
| A / D | strafe left / right                                    |
| E / Q | move up / down                                         |
| Mouse | look around (pitch is held between -89 and 89 degrees) |

## Using the engine

```python
from sandengine.window import Window
from sandengine.renderer import Renderer, create_gl_context, create_mesh

window = Window(1280, 720, "Demo", True)
create_gl_context(window, True)
renderer = Renderer(window)

mesh = create_mesh("model.obj", "texture.png")
mesh.scale = [1.0, 1.0, 1.0]  # meshes start with a zero scale

while not window.should_close():
    renderer.cam.fly_controller(1 / 60, window)
    window.poll_events()
    window.handle_resize()
    window.clear()
    renderer.begin()
    renderer.draw_mesh(mesh)
    renderer.end()
    window.swap_buffers()

mesh.destroy()
window.close()
```

### `sandengine.window`

`Window(width, height, title, resizable)` opens a window with a 3.3 context,
asking for 4x multisampling and falling back to none if that is not
available. It offers `should_close()`, `poll_events()`, `handle_resize()`
(reads the framebuffer size into `width` / `height` and sets the viewport),
`clear()` (grey background, colour and depth), `swap_buffers()`, `get_time()`
(seconds since creation), `show_cursor(show)`, `key_pressed(key)` for
one-letter or one-digit key names, `cursor_pos()`, `close()`, and the
`native` pyglet window.

### `sandengine.renderer`

- `create_gl_context(window, vsync)` makes the window's context current and
  sets vertical sync.
- `Shader(vs_src, fs_src)` compiles and links a program and raises
  `ShaderError` on failure. It has `use()`, `uniform_location(name)`,
  `set_vec3(loc, value)`, `set_mat4(loc, matrix)` and `delete()`.
- `Buffer(type, usage)` with `BufferType.VERTEX` / `INDEX` and
  `BufferUsage.STATIC` / `DYNAMIC`; `use()`, `data(array)`, `delete()`.
- `VertexArray()` with `use()` and
  `add_attrib(index, size, gl_type, stride, offset)`.
- `create_texture(path)` loads an image with Pillow (flipped so the bottom
  row comes first) into an sRGB, mipmapped, repeating `Texture`; `use()`,
  `delete()`.
- `create_mesh(path, tex_path)` builds a `Mesh` from an OBJ file and a
  texture. Set its `pos` and `scale` before drawing. `Mesh.destroy()`
  frees its shader and buffers.
- `Renderer(window)` holds a `Camera` in `cam` with a 60 degree field of
  view. `begin()` turns on depth testing and back-face culling and updates
  the camera; `draw_mesh(mesh)` draws one mesh; `end()` does nothing.

### Parts that need no GPU

- `sandengine.transforms`: `normalize`, `perspective(fovy, aspect, near,
  far)` (radians), `look_at(eye, center, up)`, `translate(matrix, v)` and
  `scale(matrix, v)`. Matrices are 4x4 numpy arrays in mathematical layout
  (`matrix @ point`); `Shader.set_mat4` transposes them on upload.
- `sandengine.camera`: `Camera` and `create_camera(fov, size)` (degrees,
  `(width, height)`, near plane 0.1, far plane 100). `Camera.update()`
  rebuilds the view matrix. `Camera.fly_controller(dt, controls)` moves and
  turns the camera, taking any object with `key_pressed(key)` and
  `cursor_pos()`.
- `sandengine.objmesh`: `parse_obj(text)` and `read_obj(path)` return an
  `ObjData` with `positions`, `texcoords`, `normals` and `faces`. They read
  `v`, `vt`, `vn` and `f` lines, accept negative indices, ignore other
  statements and raise `ValueError` on malformed data.
  `flatten_vertices(data)` splits polygons into triangle fans and returns a
  float32 `(n, 8)` array of position, normal and texcoord, plus indices
  `0..n-1`.

## What it does not do

There is no lighting: normals are uploaded but the shader only samples the
texture. Materials (`mtllib`, `usemtl`), groups and smoothing in OBJ files
are ignored, and each mesh takes one texture. Vertices are not shared
between triangles. `Mesh.destroy()` leaves the texture and vertex array in
place.