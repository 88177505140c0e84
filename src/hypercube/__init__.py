"""
hypercube: rotate an n-dimensional hypercube in every coordinate plane and
project it down to 3-space.
"""

from hypercube.core.version import __version__
from hypercube.core.geometry import Hypercube, rotation_planes
from hypercube.core.projection import project_to_3d

__all__ = [
    "__version__",
    "Hypercube",
    "rotation_planes",
    "project_to_3d",
]
