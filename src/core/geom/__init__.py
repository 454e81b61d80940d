"""
Geometry kernel

Immutable 2D/3D value types for computational geometry: vectors, square
matrices, bounding boxes, line segments and oriented planes.
"""

# Errors
from src.core.geom.errors import (
    GeometryError,
    NonOrthogonalBasisError,
    SingularMatrixError,
)

# Rendering
from src.core.geom.rendering import (
    DEFAULT_PRECISION,
    DEFAULT_RENDER_CONFIG,
    RenderConfig,
)

# Value types
from src.core.geom.vector import Vector2, Vector3
from src.core.geom.matrix import Matrix2, Matrix3
from src.core.geom.bounding_box import BoundingBox2, BoundingBox3
from src.core.geom.line_segment import LineSegment2, LineSegment3
from src.core.geom.oriented_plane import OrientedPlane

__all__ = [
    # Errors
    "GeometryError",
    "NonOrthogonalBasisError",
    "SingularMatrixError",
    # Rendering
    "DEFAULT_PRECISION",
    "DEFAULT_RENDER_CONFIG",
    "RenderConfig",
    # Vectors
    "Vector2",
    "Vector3",
    # Matrices
    "Matrix2",
    "Matrix3",
    # Bounding boxes
    "BoundingBox2",
    "BoundingBox3",
    # Line segments
    "LineSegment2",
    "LineSegment3",
    # Planes
    "OrientedPlane",
]
