# src/hypercube/core/geometry.py

# --------------------------------------------------------------------------
# Combinatorial structure of the n-cube and the JIT-compiled kernel that
# rotates its vertices through every coordinate plane.
# --------------------------------------------------------------------------

from itertools import combinations
from typing import List, Tuple

import numpy as np
from numba import njit

from hypercube.core.logging import logger
from hypercube.core.projection import project_to_3d


def rotation_planes(dimensions: int) -> List[Tuple[int, int]]:
    """
    Return every coordinate plane (i, j) with i < j, in row-major order:
    (0, 1), (0, 2), ..., (0, n-1), (1, 2), ...

    The position of a plane in this list is its plane index k.
    """
    return list(combinations(range(dimensions), 2))


@njit(cache=True)
def rotate_vertices(
    vertices: np.ndarray, planes: np.ndarray, angles: np.ndarray, t: float
) -> None:
    """
    Rotate `vertices` in place through every plane in `planes`.

    Plane k turns by t * (k + 1) / n. Each plane acts on the coordinates
    left by the previous one, so the rotations compose within the call.
    The applied angles are written into `angles`.
    """
    n = vertices.shape[1]
    for k in range(planes.shape[0]):
        i = planes[k, 0]
        j = planes[k, 1]
        angle = t * (k + 1) / n
        angles[k] = angle

        cos_a = np.cos(angle)
        sin_a = np.sin(angle)

        for v in range(vertices.shape[0]):
            vi = vertices[v, i]
            vj = vertices[v, j]
            vertices[v, i] = vi * cos_a - vj * sin_a
            vertices[v, j] = vi * sin_a + vj * cos_a


class Hypercube:
    """
    An n-dimensional cube centred on the origin with vertices at (+-1, ..., +-1).

    Attributes:
        dimensions (int): Number of axes n (at least 1).
        vertices (np.ndarray): (2**n, n) coordinates. Bit d of the row index
            selects +1 (set) or -1 (clear) for coordinate d.
        edges (np.ndarray): (n * 2**(n-1), 2) vertex index pairs, lower index first.
        rotation_angles (np.ndarray): Most recent angle applied to each plane.
    """

    def __init__(self, dimensions: int = 5):
        n = max(1, int(dimensions))
        self.dimensions = n

        # --- Vertices from the binary expansion of the index ---
        indices = np.arange(1 << n, dtype=np.int64)
        bits = (indices[:, None] >> np.arange(n, dtype=np.int64)) & 1
        self.vertices = np.where(bits == 1, 1.0, -1.0).astype(np.float64)

        # --- Edges: flip one bit, keep the pair once ---
        edges = []
        for i in range(1 << n):
            for d in range(n):
                j = i ^ (1 << d)
                if j > i:
                    edges.append((i, j))
        self.edges = np.array(edges, dtype=np.int64).reshape(-1, 2)

        self._planes = np.array(rotation_planes(n), dtype=np.int64).reshape(-1, 2)
        self.rotation_angles = np.zeros(len(self._planes), dtype=np.float64)

        logger.debug(
            f"Constructed {n}-cube: {self.num_vertices} vertices, "
            f"{self.num_edges} edges, {self.num_planes} rotation planes"
        )

    @property
    def num_vertices(self) -> int:
        return self.vertices.shape[0]

    @property
    def num_edges(self) -> int:
        return self.edges.shape[0]

    @property
    def num_planes(self) -> int:
        return self._planes.shape[0]

    @property
    def planes(self) -> List[Tuple[int, int]]:
        return [tuple(int(a) for a in p) for p in self._planes]

    def rotate(self, t: float) -> None:
        """Apply every plane rotation for time `t`, mutating `vertices` in place."""
        rotate_vertices(self.vertices, self._planes, self.rotation_angles, float(t))

    def project_to_3d(self) -> np.ndarray:
        """Perspective-project the current vertices; see `project_to_3d`."""
        return project_to_3d(self.vertices)

    def __repr__(self) -> str:
        return (
            f"Hypercube(dimensions={self.dimensions}, "
            f"vertices={self.num_vertices}, edges={self.num_edges})"
        )
