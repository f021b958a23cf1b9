# geometry/solid.py
from boxclip.core.vector import Vector3
from boxclip.geometry.aabb import AABB

class AABB3(AABB):
    """
    Axis-aligned box in space.
    """
    vector_type = Vector3
    axes = 3

    def volume(self) -> float:
        d = self.extents()
        return float(d.x * d.y * d.z)

    def surface_area(self) -> float:
        d = self.extents()
        return float(2 * (d.x * d.y + d.x * d.z + d.y * d.z))
