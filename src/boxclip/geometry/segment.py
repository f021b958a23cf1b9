# geometry/segment.py
from boxclip.core.vector import Point2

class Segment:
    """
    A directed 2D line segment from a to b.
    """
    def __init__(self, a: Point2, b: Point2):
        self.a = a
        self.b = b

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.a, self.b))

    def __repr__(self) -> str:
        return f"Segment(a={self.a}, b={self.b})"
