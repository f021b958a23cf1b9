# geometry/plane.py
from typing import Optional
from boxclip.core.vector import Vector2, Point2
from boxclip.core.ray import Ray
from boxclip.core.utils import clamp
from boxclip.geometry.aabb import AABB
from boxclip.geometry.clip import PARALLEL_EPSILON
from boxclip.geometry.segment import Segment

class AABB2(AABB):
    """
    Axis-aligned rectangle in the plane.
    """
    vector_type = Vector2
    axes = 2

    def area(self) -> float:
        d = self.extents()
        return float(d.x * d.y)

    def clip_segment(self, pa: Point2, pb: Point2,
                     epsilon: float = PARALLEL_EPSILON) -> Optional[Segment]:
        """
        Returns the part of the segment pa -> pb that lies inside the box, or
        None if there is none.

        The clipped parameters are clamped to [0, 1] so an endpoint inside the
        box is kept as is instead of being pushed out to the boundary.
        """
        ray = Ray(pa, pb - pa)
        clip = self.clip_ray(ray, epsilon)
        if clip is None:
            return None
        near, far = clip

        # The line crosses the box, but beyond either end of the segment.
        if near.t > 1.0 or far.t < 0.0:
            return None

        t0 = clamp(near.t, 0.0, 1.0)
        t1 = clamp(far.t, 0.0, 1.0)
        a = pa if t0 == 0.0 else ray.at(t0)
        b = pb if t1 == 1.0 else ray.at(t1)
        return Segment(a, b)
