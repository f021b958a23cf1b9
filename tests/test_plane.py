"""
Segment clipping tests
"""

import pytest

from boxclip import AABB2, Point2, Ray, Segment


def test_segment_outside_box(unit_box: AABB2) -> None:
    assert unit_box.clip_segment(Point2(2, 2), Point2(3, 3)) is None
    assert unit_box.clip_segment(Point2(-3, 2), Point2(3, 2)) is None


def test_segment_before_box_on_crossing_line(unit_box: AABB2) -> None:
    """The supporting line hits the box, the segment stops short of it."""
    assert unit_box.clip_segment(Point2(-5, 0), Point2(-3, 0)) is None
    assert unit_box.clip_segment(Point2(3, 0), Point2(5, 0)) is None


def test_segment_straddling_box(unit_box: AABB2) -> None:
    clipped = unit_box.clip_segment(Point2(-2, 0), Point2(2, 0))
    assert clipped == Segment(Point2(-1, 0), Point2(1, 0))


def test_segment_through_corners(unit_box: AABB2) -> None:
    clipped = unit_box.clip_segment(Point2(-2, -2), Point2(2, 2))
    assert clipped == Segment(Point2(-1, -1), Point2(1, 1))


def test_segment_starting_inside(unit_box: AABB2) -> None:
    pa = Point2(0.0, 0.5)
    pb = Point2(3.0, 0.5)
    clipped = unit_box.clip_segment(pa, pb)

    assert clipped.a == pa
    assert clipped.b.is_close(Point2(1.0, 0.5))


def test_segment_ending_inside(unit_box: AABB2) -> None:
    pa = Point2(-3.0, 0.25)
    pb = Point2(0.3, 0.1)
    clipped = unit_box.clip_segment(pa, pb)

    assert clipped.b == pb
    assert clipped.a[0] == pytest.approx(-1.0, abs=1e-6)
    assert -1.0 < clipped.a[1] < 1.0


def test_segment_inside_box_is_unchanged(unit_box: AABB2) -> None:
    pa = Point2(-0.5, -0.5)
    pb = Point2(0.5, 0.25)
    assert unit_box.clip_segment(pa, pb) == Segment(pa, pb)


def test_degenerate_segment(unit_box: AABB2) -> None:
    p = Point2(0.5, 0.5)
    assert unit_box.clip_segment(p, p) == Segment(p, p)
    assert unit_box.clip_segment(Point2(4, 4), Point2(4, 4)) is None


def test_reversed_segment_keeps_direction(unit_box: AABB2) -> None:
    clipped = unit_box.clip_segment(Point2(2, 0), Point2(-2, 0))
    assert clipped == Segment(Point2(1, 0), Point2(-1, 0))


def test_segment_repr() -> None:
    assert repr(Segment(Point2(0, 1), Point2(2, 3))) == \
        "Segment(a=Vector2(0.0, 1.0), b=Vector2(2.0, 3.0))"


def test_clipped_endpoint_lies_on_segment_ray(unit_box: AABB2) -> None:
    pa = Point2(-3.0, 0.25)
    pb = Point2(0.3, 0.1)
    ray = Ray(pa, pb - pa)
    near, _ = unit_box.clip_ray(ray)

    clipped = unit_box.clip_segment(pa, pb)
    assert clipped.a == ray.at(near.t)
