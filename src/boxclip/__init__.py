"""
boxclip - axis-aligned bounding boxes and slab clipping of lines against them.
"""
from boxclip.core import Vector, Vector2, Vector3, Point2, Point3, Ray
from boxclip.geometry import (
    AABB,
    AABB2,
    AABB3,
    Segment,
    ClipHit,
    Side,
    clip_aabb_line,
    PARALLEL_EPSILON,
    ClipBatch,
    clip_aabb_lines,
)

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Point2",
    "Point3",
    "Ray",
    "AABB",
    "AABB2",
    "AABB3",
    "Segment",
    "ClipHit",
    "Side",
    "clip_aabb_line",
    "PARALLEL_EPSILON",
    "ClipBatch",
    "clip_aabb_lines",
]
