"""UV sphere mesh generation."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SphereMesh:
    """Vertex data of a UV sphere.

    ``vertices`` and ``normals`` have shape (n, 3), ``tex_coords`` (n, 2)
    and ``indices`` (m, 3), one row per triangle.
    """

    vertices: np.ndarray
    normals: np.ndarray
    tex_coords: np.ndarray
    indices: np.ndarray

    @property
    def index_count(self) -> int:
        """Number of indices drawn for the whole mesh."""
        return int(self.indices.size)


def _triangles(sectors: int, stacks: int):
    for i in range(stacks):
        row = i * (sectors + 1)
        next_row = row + sectors + 1
        for j in range(sectors):
            k1 = row + j
            k2 = next_row + j
            if i != 0:
                yield (k1, k2, k1 + 1)
            if i != stacks - 1:
                yield (k1 + 1, k2, k2 + 1)


def generate_sphere(radius: float, sectors: int, stacks: int) -> SphereMesh:
    """Build a sphere of ``radius`` split into ``sectors`` by ``stacks``."""
    if radius <= 0:
        raise ValueError("radius must be positive")
    if sectors < 1 or stacks < 1:
        raise ValueError("sectors and stacks must be at least 1")

    stack_indices = np.arange(stacks + 1)
    sector_indices = np.arange(sectors + 1)
    stack_angles = math.pi / 2 - stack_indices * (math.pi / stacks)
    sector_angles = sector_indices * (2 * math.pi / sectors)

    xy = radius * np.cos(stack_angles)[:, None]
    z = np.broadcast_to(radius * np.sin(stack_angles)[:, None], (stacks + 1, sectors + 1))
    x = xy * np.cos(sector_angles)[None, :]
    y = xy * np.sin(sector_angles)[None, :]

    vertices = np.stack([x, y, z], axis=-1).reshape(-1, 3)
    normals = vertices / radius
    s = np.broadcast_to(sector_indices[None, :] / sectors, (stacks + 1, sectors + 1))
    t = np.broadcast_to(stack_indices[:, None] / stacks, (stacks + 1, sectors + 1))
    tex_coords = np.stack([s, t], axis=-1).reshape(-1, 2)

    indices = np.array(list(_triangles(sectors, stacks)), dtype=np.uint32).reshape(-1, 3)
    return SphereMesh(vertices, normals, tex_coords, indices)