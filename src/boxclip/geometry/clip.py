# geometry/clip.py
from typing import Optional, Tuple
import numpy as np
from boxclip.core.vector import Vector
from boxclip.core.utils import FLOAT_MAX

# Direction components smaller than this are treated as parallel to the slab.
PARALLEL_EPSILON = 0.01

class Side:
    """
    Identifies one face of a box: the axis it is orthogonal to and whether it
    is the max face (positive) or the min face.
    """
    __slots__ = ("axis", "positive")

    def __init__(self, axis: int, positive: bool):
        self.axis = axis
        self.positive = positive

    @property
    def signed(self) -> int:
        """
        Compact encoding: magnitude axis + 1, negative for the min face and
        positive for the max face, for near and far hits alike. Encodings that
        sign the near side by travel direction instead (positive when entering
        through the min face) have the opposite sign for near hits.
        """
        return self.axis + 1 if self.positive else -(self.axis + 1)

    @staticmethod
    def from_signed(value: int) -> Optional["Side"]:
        if value == 0:
            return None
        return Side(abs(value) - 1, value > 0)

    def outward_normal(self, dimension: int, vector_type=Vector) -> Vector:
        return vector_type.unit(dimension, self.axis, 1.0 if self.positive else -1.0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Side):
            return NotImplemented
        return self.axis == other.axis and self.positive == other.positive

    def __hash__(self) -> int:
        return hash((self.axis, self.positive))

    def __repr__(self) -> str:
        return f"Side(axis={self.axis}, {'max' if self.positive else 'min'})"


class ClipHit:
    """
    Records where a line crosses a box boundary.
    """
    def __init__(self, t: float, normal: Vector, side: Optional[Side] = None,
                 diagonal: bool = False):
        self.t = t                  # Line parameter at the crossing
        self.normal = normal        # Outward normal, or -dir for diagonal hits
        self.side = side            # Controlling face, None if no axis was tested
        self.diagonal = diagonal    # Two or more axes tied for the bound

    @property
    def signed_side(self) -> int:
        return self.side.signed if self.side is not None else 0

    def __iter__(self):
        # Allows `t, normal, side = hit`, side in the Side.signed encoding.
        return iter((self.t, self.normal, self.signed_side))

    def __repr__(self) -> str:
        return (f"ClipHit(t={self.t}, normal={self.normal}, side={self.side}, "
                f"diagonal={self.diagonal})")


def _hit_normal(side: Optional[Side], diagonal: bool, direction: Vector) -> Vector:
    vector_type = type(direction)
    if diagonal:
        # No single face is defined at a corner or edge.
        return -direction.normalize()
    if side is None:
        return vector_type.zeros(len(direction))
    return side.outward_normal(len(direction), vector_type)


def clip_aabb_line(aabb, origin: Vector, direction: Vector,
                   epsilon: float = PARALLEL_EPSILON) -> Optional[Tuple[ClipHit, ClipHit]]:
    """
    Clips the line origin + t * direction against an axis-aligned box using
    the slab method.

    Works in any dimension; the axis count is taken from direction. Returns
    (near, far) hits or None if the line misses the box or the whole overlap
    lies behind the origin.

    On every axis the entry and exit parameters are computed and the running
    interval [tmin, tmax] is narrowed. The axis that last narrowed a bound
    controls the face reported for it. An exact tie with the current bound
    marks the hit diagonal: the line passes through a corner or edge and the
    normal falls back to the negated direction.

    A tie can also be against the initial bound itself. Clipping against the
    sentinel box from new_invalid() rounds the slab parameter onto -FLOAT_MAX,
    which gives a diagonal hit with no side.
    """
    tmax = FLOAT_MAX
    tmin = -tmax
    near_side = None
    far_side = None
    near_diag = False
    far_diag = False

    # Against the sentinel box the slab parameters overflow to +-inf.
    with np.errstate(over="ignore"):
        for i in range(len(direction)):
            if abs(direction[i]) < epsilon:
                # Parallel to this slab: the origin must already be inside it.
                if origin[i] < aabb.mins[i] or origin[i] > aabb.maxs[i]:
                    return None
                continue

            denom = 1.0 / direction[i]
            t_near = (aabb.mins[i] - origin[i]) * denom
            t_far = (aabb.maxs[i] - origin[i]) * denom

            # Travelling towards -axis: enter through the max face.
            flip_sides = t_near > t_far
            if flip_sides:
                t_near, t_far = t_far, t_near

            if t_near > tmin:
                tmin = t_near
                near_side = Side(i, flip_sides)
                near_diag = False
            elif t_near == tmin:
                near_diag = True

            if t_far < tmax:
                tmax = t_far
                far_side = Side(i, not flip_sides)
                far_diag = False
            elif t_far == tmax:
                far_diag = True

            if tmax < 0.0 or tmin > tmax:
                return None

    near = ClipHit(tmin, _hit_normal(near_side, near_diag, direction), near_side, near_diag)
    far = ClipHit(tmax, _hit_normal(far_side, far_diag, direction), far_side, far_diag)
    return near, far
