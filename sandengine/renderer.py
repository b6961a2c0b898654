"""OpenGL resources: shaders, buffers, vertex arrays, textures, meshes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from .camera import Camera, create_camera
from .objmesh import VERTEX_FLOATS, flatten_vertices, read_obj
from .transforms import scale, translate

GLSL_VERSION = "#version 330 core\n"
CAMERA_FOV = 60.0

MESH_VS_SRC = GLSL_VERSION + (
    "layout (location = 0) in vec3 a_pos;"
    "layout (location = 1) in vec3 a_normal;"
    "layout (location = 2) in vec2 a_texcoord;"
    "out vec3 normal;"
    "out vec2 texcoord;"
    "uniform mat4 model, view, proj;"
    "void main() {"
    "gl_Position = proj * view * model * vec4(a_pos, 1.0);"
    "texcoord = a_texcoord;"
    "normal = a_normal;"
    "}"
)
MESH_FS_SRC = GLSL_VERSION + (
    "out vec4 out_color;"
    "in vec3 normal;"
    "in vec2 texcoord;"
    "uniform sampler2D smp;"
    "void main() {"
    "out_color = texture(smp, texcoord);"
    "}"
)


def _gl():
    from pyglet import gl

    return gl


def _new_handle() -> object:
    gl = _gl()
    return (gl.GLuint * 1)()


def _handle_of(value: int) -> object:
    gl = _gl()
    return (gl.GLuint * 1)(value)


def create_gl_context(window, vsync: bool) -> bool:
    """Make the window's context current and set vertical sync."""
    native = window.native
    native.switch_to()
    native.set_vsync(bool(vsync))
    return True


class ShaderError(RuntimeError):
    """A shader failed to compile or link."""


class Shader:
    """A linked vertex + fragment shader program."""

    def __init__(self, vs_src: str, fs_src: str) -> None:
        from pyglet.graphics.shader import Shader as _Stage
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        try:
            vs = _Stage(vs_src, "vertex")
        except ShaderException as exc:
            raise ShaderError(f"vertex shader compilation failed, error: {exc}") from exc
        try:
            fs = _Stage(fs_src, "fragment")
        except ShaderException as exc:
            raise ShaderError(f"fragment shader compilation failed, error: {exc}") from exc
        try:
            program = ShaderProgram(vs, fs)
        except ShaderException as exc:
            raise ShaderError(f"shader program linking failed, error: {exc}") from exc
        vs.delete()
        fs.delete()
        self._program = program
        self.id = program.id

    def use(self) -> None:
        _gl().glUseProgram(self.id)

    def uniform_location(self, name: str) -> int:
        gl = _gl()
        encoded = name.encode()
        buf = (gl.GLchar * (len(encoded) + 1))()
        buf.value = encoded
        return gl.glGetUniformLocation(self.id, buf)

    def set_vec3(self, loc: int, value) -> None:
        gl = _gl()
        arr = (gl.GLfloat * 3)(*np.asarray(value, dtype=np.float32).reshape(3).tolist())
        gl.glUniform3fv(loc, 1, arr)

    def set_mat4(self, loc: int, matrix) -> None:
        gl = _gl()
        flat = np.asarray(matrix, dtype=np.float32).reshape(4, 4).T.ravel().tolist()
        gl.glUniformMatrix4fv(loc, 1, gl.GL_FALSE, (gl.GLfloat * 16)(*flat))

    def delete(self) -> None:
        self._program.delete()


class BufferType(enum.IntEnum):
    VERTEX = 0x8892
    INDEX = 0x8893


class BufferUsage(enum.IntEnum):
    STATIC = 0x88E4
    DYNAMIC = 0x88E8


class Buffer:
    """A GPU buffer object of a fixed type and usage."""

    def __init__(self, type: BufferType, usage: BufferUsage) -> None:
        gl = _gl()
        self.type = BufferType(type)
        self.usage = BufferUsage(usage)
        handle = _new_handle()
        gl.glGenBuffers(1, handle)
        self.id = handle[0]

    def use(self) -> None:
        _gl().glBindBuffer(self.type, self.id)

    def data(self, data) -> None:
        """Bind the buffer and upload ``data`` (any contiguous array)."""
        gl = _gl()
        arr = np.ascontiguousarray(data)
        gl.glBindBuffer(self.type, self.id)
        gl.glBufferData(self.type, arr.nbytes, arr.tobytes() if arr.nbytes else None, self.usage)

    def delete(self) -> None:
        _gl().glDeleteBuffers(1, _handle_of(self.id))


class VertexArray:
    """A vertex array object describing vertex attribute layout."""

    def __init__(self) -> None:
        gl = _gl()
        handle = _new_handle()
        gl.glGenVertexArrays(1, handle)
        self.id = handle[0]

    def use(self) -> None:
        _gl().glBindVertexArray(self.id)

    def add_attrib(self, index: int, size: int, gl_type: int, stride: int, offset: int) -> None:
        gl = _gl()
        gl.glBindVertexArray(self.id)
        gl.glVertexAttribPointer(index, size, gl_type, gl.GL_FALSE, stride, offset or None)
        gl.glEnableVertexAttribArray(index)


def _load_image(path) -> tuple[int, int, int, bytes]:
    """Load an image bottom row first: ``(width, height, channels, pixels)``."""
    with Image.open(path) as img:
        has_alpha = img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info
        img = img.convert("RGBA" if has_alpha else "RGB")
        img = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        return img.width, img.height, len(img.mode), img.tobytes()


class Texture:
    """A 2D sRGB texture with mipmaps."""

    def __init__(self, width: int, height: int, channels: int, pixels: bytes) -> None:
        gl = _gl()
        self.width = width
        self.height = height
        fmt = gl.GL_RGBA if channels > 3 else gl.GL_RGB
        handle = _new_handle()
        gl.glGenTextures(1, handle)
        self.id = handle[0]
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl.GL_SRGB, width, height, 0, fmt, gl.GL_UNSIGNED_BYTE,
            bytes(pixels),
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)

    def use(self) -> None:
        _gl().glBindTexture(_gl().GL_TEXTURE_2D, self.id)

    def delete(self) -> None:
        _gl().glDeleteTextures(1, _handle_of(self.id))


def create_texture(path) -> Texture:
    """Load an image file into a texture."""
    return Texture(*_load_image(path))


def _model_matrix(pos, scale_by) -> np.ndarray:
    return scale(translate(np.identity(4), pos), scale_by)


@dataclass(eq=False)
class Mesh:
    """A textured triangle mesh ready to draw."""

    shader: Shader
    loc_model: int
    loc_view: int
    loc_proj: int
    vbo: Buffer
    ibo: Buffer
    attrib: VertexArray
    texture: Texture
    index_count: int
    pos: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.zeros(3))
    model: np.ndarray = field(default_factory=lambda: np.identity(4))

    def destroy(self) -> None:
        self.shader.delete()
        self.vbo.delete()
        self.ibo.delete()


def create_mesh(path, tex_path) -> Mesh:
    """Load an OBJ model and its texture into GPU resources."""
    gl = _gl()
    shader = Shader(MESH_VS_SRC, MESH_FS_SRC)
    shader.use()
    locs = [shader.uniform_location(n) for n in ("model", "view", "proj")]
    texture = create_texture(tex_path)

    vertices, indices = flatten_vertices(read_obj(path))

    attrib = VertexArray()
    attrib.use()
    vbo = Buffer(BufferType.VERTEX, BufferUsage.STATIC)
    vbo.data(vertices)
    ibo = Buffer(BufferType.INDEX, BufferUsage.STATIC)
    ibo.data(indices)

    float_size = np.dtype(np.float32).itemsize
    stride = VERTEX_FLOATS * float_size
    attrib.add_attrib(0, 3, gl.GL_FLOAT, stride, 0)
    attrib.add_attrib(1, 3, gl.GL_FLOAT, stride, 3 * float_size)
    attrib.add_attrib(2, 2, gl.GL_FLOAT, stride, 6 * float_size)

    return Mesh(shader, *locs, vbo, ibo, attrib, texture, int(len(indices)))


class Renderer:
    """Draws meshes from the point of view of a camera."""

    def __init__(self, window) -> None:
        self.cam: Camera = create_camera(CAMERA_FOV, (window.width, window.height))

    def begin(self) -> None:
        gl = _gl()
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_CULL_FACE)
        gl.glCullFace(gl.GL_BACK)
        self.cam.update()

    def end(self) -> None:
        """Finish a frame; nothing is batched, so there is nothing to flush."""

    def draw_mesh(self, mesh: Mesh) -> None:
        gl = _gl()
        mesh.shader.use()
        mesh.attrib.use()
        mesh.texture.use()
        mesh.model = _model_matrix(mesh.pos, mesh.scale)
        mesh.shader.set_mat4(mesh.loc_model, mesh.model)
        mesh.shader.set_mat4(mesh.loc_view, self.cam.view)
        mesh.shader.set_mat4(mesh.loc_proj, self.cam.proj)
        gl.glDrawElements(gl.GL_TRIANGLES, mesh.index_count, gl.GL_UNSIGNED_INT, None)