"""Wavefront OBJ reading and flattening into interleaved vertex data."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, NamedTuple, Optional

import numpy as np

VERTEX_FLOATS = 8  # position (3), normal (3), texcoord (2)


class Corner(NamedTuple):
    """One face corner: zero-based indices into the attribute lists."""

    position: int
    texcoord: Optional[int]
    normal: Optional[int]


@dataclass
class ObjData:
    """Geometry read from an OBJ file."""

    positions: list[tuple[float, float, float]] = field(default_factory=list)
    texcoords: list[tuple[float, float]] = field(default_factory=list)
    normals: list[tuple[float, float, float]] = field(default_factory=list)
    faces: list[tuple[Corner, ...]] = field(default_factory=list)


def _floats(parts: list[str], count: int, lineno: int) -> tuple[float, ...]:
    try:
        values = [float(p) for p in parts[:count]]
    except ValueError as exc:
        raise ValueError(f"line {lineno}: bad number: {exc}") from None
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def _resolve(token: str, count: int, lineno: int) -> int:
    try:
        raw = int(token)
    except ValueError:
        raise ValueError(f"line {lineno}: bad index {token!r}") from None
    if raw == 0:
        raise ValueError(f"line {lineno}: index 0 is not valid")
    index = raw - 1 if raw > 0 else count + raw
    if not 0 <= index < count:
        raise ValueError(f"line {lineno}: index {raw} out of range")
    return index


def _corner(token: str, data: ObjData, lineno: int) -> Corner:
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise ValueError(f"line {lineno}: bad face corner {token!r}")
    position = _resolve(parts[0], len(data.positions), lineno)
    texcoord = normal = None
    if len(parts) > 1 and parts[1]:
        texcoord = _resolve(parts[1], len(data.texcoords), lineno)
    if len(parts) > 2 and parts[2]:
        normal = _resolve(parts[2], len(data.normals), lineno)
    return Corner(position, texcoord, normal)


def parse_obj(text: str) -> ObjData:
    """Parse OBJ text; unknown statements are ignored."""
    data = ObjData()
    for lineno, line in enumerate(text.splitlines(), start=1):
        parts = line.split("#", 1)[0].split()
        if not parts:
            continue
        keyword, args = parts[0], parts[1:]
        if keyword == "v":
            data.positions.append(_floats(args, 3, lineno))
        elif keyword == "vt":
            data.texcoords.append(_floats(args, 2, lineno))
        elif keyword == "vn":
            data.normals.append(_floats(args, 3, lineno))
        elif keyword == "f":
            if len(args) < 3:
                raise ValueError(f"line {lineno}: face needs at least 3 corners")
            data.faces.append(tuple(_corner(tok, data, lineno) for tok in args))
    return data


def read_obj(path) -> ObjData:
    """Read and parse an OBJ file."""
    return parse_obj(Path(path).read_text(encoding="utf-8", errors="replace"))


def _triangle_corners(face: tuple[Corner, ...]) -> Iterator[Corner]:
    first = face[0]
    for a, b in zip(face[1:], face[2:]):
        yield first
        yield a
        yield b


def flatten_vertices(data: ObjData) -> tuple[np.ndarray, np.ndarray]:
    """Expand faces into one vertex per triangle corner.

    Returns ``(vertices, indices)``: a float32 array of shape ``(n, 8)``
    holding position, normal and texcoord, and uint32 indices ``0..n-1``.
    Missing normals and texcoords are zero. Polygons are split as fans.
    """
    rows = []
    for face in data.faces:
        for corner in _triangle_corners(face):
            normal = data.normals[corner.normal] if corner.normal is not None else (0.0, 0.0, 0.0)
            uv = data.texcoords[corner.texcoord] if corner.texcoord is not None else (0.0, 0.0)
            rows.append((*data.positions[corner.position], *normal, *uv))
    vertices = np.array(rows, dtype=np.float32).reshape(-1, VERTEX_FLOATS)
    indices = np.arange(len(rows), dtype=np.uint32)
    return vertices, indices