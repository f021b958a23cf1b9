"""
Axis-aligned boxes in the plane and in space, and slab clipping of lines and
segments against them.
"""
from boxclip.geometry.aabb import AABB
from boxclip.geometry.plane import AABB2
from boxclip.geometry.solid import AABB3
from boxclip.geometry.segment import Segment
from boxclip.geometry.clip import ClipHit, Side, clip_aabb_line, PARALLEL_EPSILON
from boxclip.geometry.kernels import ClipBatch, clip_aabb_lines

__all__ = [
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
