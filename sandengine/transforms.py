"""Vector and 4x4 matrix helpers for a right-handed, OpenGL-style pipeline.

Matrices use the usual mathematical layout: points are column vectors and
are transformed as ``matrix @ point``. Transpose before uploading a matrix
to a shader that expects column-major storage.
"""

from __future__ import annotations

import math

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def _vec3(v) -> np.ndarray:
    return np.asarray(v, dtype=np.float64).reshape(3)


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length, or a zero vector if it is too short."""
    a = np.asarray(v, dtype=np.float64)
    length = float(np.linalg.norm(a))
    if length < _EPSILON:
        return np.zeros_like(a)
    return a / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Build a perspective projection; ``fovy`` is in radians.

    Depth is mapped to the -1..1 clip range.
    """
    f = 1.0 / math.tan(fovy * 0.5)
    fn = 1.0 / (near - far)
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (near + far) * fn
    m[2, 3] = 2.0 * near * far * fn
    m[3, 2] = -1.0
    return m


def look_at(eye, center, up) -> np.ndarray:
    """Build a view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = normalize(_vec3(center) - eye)
    side = normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    m = np.identity(4, dtype=np.float64)
    m[0, :3] = side
    m[1, :3] = upward
    m[2, :3] = -forward
    m[0, 3] = -float(np.dot(side, eye))
    m[1, 3] = -float(np.dot(upward, eye))
    m[2, 3] = float(np.dot(forward, eye))
    return m


def translate(matrix, v) -> np.ndarray:
    """Return ``matrix`` post-multiplied by a translation by ``v``."""
    t = np.identity(4, dtype=np.float64)
    t[:3, 3] = _vec3(v)
    return np.asarray(matrix, dtype=np.float64) @ t


def scale(matrix, v) -> np.ndarray:
    """Return ``matrix`` post-multiplied by a per-axis scale by ``v``."""
    s = np.diag(np.append(_vec3(v), 1.0))
    return np.asarray(matrix, dtype=np.float64) @ s