# geometry/aabb.py
from typing import Optional, Tuple
import numpy as np
from boxclip.core.vector import Vector
from boxclip.core.ray import Ray
from boxclip.core.utils import FLOAT_MAX, FLOAT_MIN
from boxclip.geometry.clip import ClipHit, clip_aabb_line, PARALLEL_EPSILON

class AABB:
    """
    Axis-aligned bounding box given by its per-axis minimum and maximum
    corners. The dimension follows from the corner vectors.

    Boxes are not validated: mins <= maxs is the caller's responsibility,
    except for the sentinel returned by new_invalid().
    """
    # Set by the fixed-dimension subclasses.
    vector_type = None
    axes = None

    def __init__(self, mins: Vector, maxs: Vector):
        self.mins = mins
        self.maxs = maxs

    @classmethod
    def new_invalid(cls) -> "AABB":
        """
        Returns the sentinel box spanning the whole float32 range. It is the
        identity for intersection() and stands for "unbounded".
        """
        if cls.vector_type is None:
            raise NotImplementedError("new_invalid() must be called on a fixed-dimension box type.")
        return cls(cls.vector_type(*([FLOAT_MIN] * cls.axes)),
                   cls.vector_type(*([FLOAT_MAX] * cls.axes)))

    @property
    def dimension(self) -> int:
        return len(self.mins)

    def intersects(self, other: "AABB") -> bool:
        """
        True if the boxes overlap with positive area/volume.

        Each axis is tested as a half-open interval from both boxes
        (mins <= other.maxs and maxs > other.mins, and the same with the
        roles swapped), which reduces to strict comparisons. Boxes that only
        touch along an edge or face do not intersect. intersection() is
        looser and returns the zero-width box for them.
        """
        for i in range(self.dimension):
            if not (self.mins[i] < other.maxs[i] and self.maxs[i] > other.mins[i]):
                return False
        return True

    def intersection(self, other: "AABB") -> Optional["AABB"]:
        """
        Returns the overlap of both boxes, or None if it is empty on some
        axis. Zero-width overlaps are returned.
        """
        mins = self.mins.maximum(other.mins)
        maxs = self.maxs.minimum(other.maxs)
        for i in range(self.dimension):
            if mins[i] > maxs[i]:
                return None
        return type(self)(mins, maxs)

    def center(self) -> Vector:
        with np.errstate(over="ignore"):
            return (self.mins + self.maxs) * 0.5

    def half_extents(self) -> Vector:
        return self.extents() * 0.5

    def extents(self) -> Vector:
        # Overflows to inf on the sentinel box.
        with np.errstate(over="ignore"):
            return self.maxs - self.mins

    def contains(self, other: "AABB") -> bool:
        for i in range(self.dimension):
            if self.mins[i] > other.mins[i] or self.maxs[i] < other.maxs[i]:
                return False
        return True

    def contains_point(self, point: Vector) -> bool:
        for i in range(self.dimension):
            if point[i] < self.mins[i] or point[i] > self.maxs[i]:
                return False
        return True

    def clip_line(self, origin: Vector, direction: Vector,
                  epsilon: float = PARALLEL_EPSILON) -> Optional[Tuple[ClipHit, ClipHit]]:
        return clip_aabb_line(self, origin, direction, epsilon)

    def clip_ray(self, ray: Ray, epsilon: float = PARALLEL_EPSILON) -> Optional[Tuple[ClipHit, ClipHit]]:
        return clip_aabb_line(self, ray.origin, ray.direction, epsilon)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        """
        Smallest box enclosing both boxes.
        """
        return type(box0)(box0.mins.minimum(box1.mins), box0.maxs.maximum(box1.maxs))

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.mins == other.mins and self.maxs == other.maxs

    def __hash__(self) -> int:
        return hash((self.mins, self.maxs))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mins={self.mins}, maxs={self.maxs})"
