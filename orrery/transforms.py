"""4x4 homogeneous transforms for column vectors (``matrix @ vector``)."""

from __future__ import annotations

import math

import numpy as np


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def _mat4(value) -> np.ndarray:
    matrix = np.asarray(value, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {matrix.shape}")
    return matrix


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.eye(4)


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    translation = np.eye(4)
    translation[:3, 3] = _vec3(offset)
    return _mat4(matrix) @ translation


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    rotation = np.eye(4)
    rotation[:3, :3] = [
        [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
    ]
    return _mat4(matrix) @ rotation


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a per-axis scale.

    ``factors`` may be a single number or three numbers.
    """
    values = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
    scaling = np.diag([*values, 1.0])
    return _mat4(matrix) @ scaling


def look_at(eye, target, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``target``."""
    eye = _vec3(eye)
    forward = _normalize(_vec3(target) - eye)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    view = np.eye(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[0, 3] = -np.dot(side, eye)
    view[1, 3] = -np.dot(upward, eye)
    view[2, 3] = np.dot(forward, eye)
    return view


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = -(far + near) / (far - near)
    projection[3, 2] = -1.0
    projection[2, 3] = -(2.0 * far * near) / (far - near)
    return projection


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """Two-dimensional orthographic projection."""
    if right == left or top == bottom:
        raise ValueError("orthographic bounds must have non-zero extent")
    projection = np.eye(4)
    projection[0, 0] = 2.0 / (right - left)
    projection[1, 1] = 2.0 / (top - bottom)
    projection[2, 2] = -1.0
    projection[0, 3] = -(right + left) / (right - left)
    projection[1, 3] = -(top + bottom) / (top - bottom)
    return projection


def world_to_screen(world_pos, view, projection, viewport) -> np.ndarray:
    """Project a world-space point to window coordinates.

    ``viewport`` is ``(x, y, width, height)``; the result is ``(x, y)``.
    """
    point = np.append(_vec3(world_pos), 1.0)
    clip = _mat4(projection) @ _mat4(view) @ point
    with np.errstate(divide="ignore", invalid="ignore"):
        ndc = clip[:3] / clip[3]
    vx, vy, width, height = (float(v) for v in viewport)
    return np.array(
        [
            (ndc[0] + 1.0) * 0.5 * width + vx,
            (ndc[1] + 1.0) * 0.5 * height + vy,
        ]
    )