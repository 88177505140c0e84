# src/hypercube/core/projection.py

import numpy as np

# Camera offset along the depth axis; keeps w + offset positive for |w| < 2.
CAMERA_DISTANCE = 2.0


def project_to_3d(vertices: np.ndarray) -> np.ndarray:
    """
    Fold n-dimensional vertices into 3-space with a single perspective divide.

    The last coordinate w = c[n-1] is the depth, and every output axis is
    scaled by w_factor = 1 / (w + 2):

        x = c[0] * w_factor
        y = c[1] * w_factor   (0 when n < 2)
        z = c[2] * w_factor   (0 when n < 3)

    Coordinates 3 .. n-2 do not contribute. For n = 2 the depth axis is also
    the y source.

    Args:
        vertices (np.ndarray): (m, n) array of vertex coordinates, n >= 1.

    Returns:
        np.ndarray: A new (m, 3) float64 array; `vertices` is not modified.
    """
    vertices = np.asarray(vertices, dtype=np.float64)
    m, n = vertices.shape

    # A zero denominator is only reachable once rotation pushes w to -2.
    projected = np.zeros((m, 3), dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        w_factor = 1.0 / (vertices[:, n - 1] + CAMERA_DISTANCE)
        for axis in range(min(n, 3)):
            projected[:, axis] = vertices[:, axis] * w_factor
    return projected
