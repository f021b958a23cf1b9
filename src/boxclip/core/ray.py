# core/ray.py
from boxclip.core.vector import Vector

class Ray:
    """
    Represents a directed line with an origin and direction, in any dimension.
    """
    def __init__(self, origin: Vector, direction: Vector):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Vector:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
