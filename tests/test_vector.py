"""
Vector primitive tests
"""

import numpy as np
import pytest

from boxclip import Vector, Vector2, Vector3


def test_arithmetic_keeps_dimension_type() -> None:
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, -1.0)

    assert a + b == Vector2(4.0, 1.0)
    assert b - a == Vector2(2.0, -3.0)
    assert a * 2 == Vector2(2.0, 4.0)
    assert 2 * a == Vector2(2.0, 4.0)
    assert a * b == Vector2(3.0, -2.0)
    assert a / 2 == Vector2(0.5, 1.0)
    assert -a == Vector2(-1.0, -2.0)
    assert isinstance(a + b, Vector2)


def test_components_are_float32() -> None:
    v = Vector3(0.1, 0.2, 0.3)
    assert v.data.dtype == np.float32
    assert v[0] == np.float32(0.1)
    assert (v.x, v.y, v.z) == (v[0], v[1], v[2])
    assert len(v) == 3


def test_vector_is_immutable() -> None:
    v = Vector2(1.0, 2.0)
    with pytest.raises(ValueError):
        v.data[0] = 5.0


def test_dimension_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        Vector2(1.0, 2.0) + Vector3(1.0, 2.0, 3.0)


def test_normalize() -> None:
    v = Vector2(3.0, 4.0)
    assert v.length() == pytest.approx(5.0)
    assert v.normalize().is_close(Vector2(0.6, 0.8))
    assert Vector2(0.0, 0.0).normalize() == Vector2(0.0, 0.0)


def test_minimum_maximum() -> None:
    a = Vector3(1.0, 5.0, -2.0)
    b = Vector3(3.0, 0.0, -4.0)
    assert a.minimum(b) == Vector3(1.0, 0.0, -4.0)
    assert a.maximum(b) == Vector3(3.0, 5.0, -2.0)


def test_dot() -> None:
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    assert x.dot(y) == 0.0
    assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, 5.0, 6.0)) == pytest.approx(32.0)


def test_unit_and_zeros() -> None:
    assert Vector2.unit(2, 1, -1.0) == Vector2(0.0, -1.0)
    assert Vector3.zeros(3) == Vector3(0.0, 0.0, 0.0)
    assert Vector.unit(4, 3).to_tuple() == (0.0, 0.0, 0.0, 1.0)


def test_equal_vectors_hash_equal() -> None:
    assert hash(Vector2(1.0, 2.0)) == hash(Vector2(1.0, 2.0))
    assert len({Vector2(1.0, 2.0), Vector2(1.0, 2.0), Vector2(2.0, 1.0)}) == 2


def test_repr() -> None:
    assert repr(Vector2(1.0, 2.5)) == "Vector2(1.0, 2.5)"
