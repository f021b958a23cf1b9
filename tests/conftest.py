"""
Shared fixtures: unit boxes centred on the origin.
"""

import pytest

from boxclip import AABB2, AABB3, Point2, Point3


@pytest.fixture
def unit_box() -> AABB2:
    return AABB2(Point2(-1.0, -1.0), Point2(1.0, 1.0))


@pytest.fixture
def unit_cube() -> AABB3:
    return AABB3(Point3(-1.0, -1.0, -1.0), Point3(1.0, 1.0, 1.0))
