# core/vector.py
import math
import numpy as np

class Vector:
    """
    A fixed-size single-precision vector supporting per-axis indexing,
    arithmetic, component-wise min/max and normalization.

    The components live in a read-only float32 array, so a vector behaves as
    an immutable value: every operation returns a new vector.
    """
    __slots__ = ("data",)

    def __init__(self, *components: float):
        data = np.array(components, dtype=np.float32)
        data.flags.writeable = False
        self.data = data

    @classmethod
    def from_array(cls, array) -> "Vector":
        return cls(*np.asarray(array, dtype=np.float32).ravel())

    @classmethod
    def zeros(cls, dimension: int) -> "Vector":
        return cls(*([0.0] * dimension))

    @classmethod
    def unit(cls, dimension: int, axis: int, sign: float = 1.0) -> "Vector":
        """
        Returns the axis vector e_axis scaled by sign.
        """
        components = [0.0] * dimension
        components[axis] = sign
        return cls(*components)

    def _wrap(self, array) -> "Vector":
        # Keep the fixed-size subclass when the result has our dimension.
        cls = type(self) if len(array) == len(self) else Vector
        return cls.from_array(array)

    def _check(self, other: "Vector") -> None:
        if len(other) != len(self):
            raise ValueError(f"Dimension mismatch: {len(self)} != {len(other)}")

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, axis: int) -> np.float32:
        return self.data[axis]

    def __iter__(self):
        return iter(self.data)

    @property
    def x(self) -> np.float32:
        return self.data[0]

    @property
    def y(self) -> np.float32:
        return self.data[1]

    def __add__(self, other: "Vector") -> "Vector":
        self._check(other)
        return self._wrap(self.data + other.data)

    def __sub__(self, other: "Vector") -> "Vector":
        self._check(other)
        return self._wrap(self.data - other.data)

    def __mul__(self, other):
        if isinstance(other, (int, float, np.floating)):
            return self._wrap(self.data * np.float32(other))
        # Element-wise multiplication.
        self._check(other)
        return self._wrap(self.data * other.data)

    def __rmul__(self, other: float) -> "Vector":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector":
        return self._wrap(self.data / np.float32(t))

    def __neg__(self) -> "Vector":
        return self._wrap(-self.data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    def __hash__(self) -> int:
        return hash(tuple(self.data.tolist()))

    def dot(self, other: "Vector") -> float:
        self._check(other)
        return float(np.dot(self.data, other.data))

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector":
        l = self.length()
        if l == 0:
            return self._wrap(np.zeros_like(self.data))
        return self / l

    def minimum(self, other: "Vector") -> "Vector":
        """
        Component-wise minimum.
        """
        self._check(other)
        return self._wrap(np.minimum(self.data, other.data))

    def maximum(self, other: "Vector") -> "Vector":
        """
        Component-wise maximum.
        """
        self._check(other)
        return self._wrap(np.maximum(self.data, other.data))

    def is_close(self, other: "Vector", tolerance: float = 1e-6) -> bool:
        self._check(other)
        return bool(np.allclose(self.data, other.data, rtol=0.0, atol=tolerance))

    def to_tuple(self) -> tuple:
        return tuple(self.data.tolist())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(c) for c in self.data.tolist())})"


class Vector2(Vector):
    """
    A 2D vector.
    """
    __slots__ = ()

    def __init__(self, x: float, y: float):
        super().__init__(x, y)


class Vector3(Vector):
    """
    A 3D vector.
    """
    __slots__ = ()

    def __init__(self, x: float, y: float, z: float):
        super().__init__(x, y, z)

    @property
    def z(self) -> np.float32:
        return self.data[2]


# Points share the vector representation.
Point2 = Vector2
Point3 = Vector3
