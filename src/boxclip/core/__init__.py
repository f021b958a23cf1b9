from boxclip.core.vector import Vector, Vector2, Vector3, Point2, Point3
from boxclip.core.ray import Ray
from boxclip.core.utils import FLOAT_MAX, FLOAT_MIN

__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Point2",
    "Point3",
    "Ray",
    "FLOAT_MAX",
    "FLOAT_MIN",
]
