'''Three-component vectors for positions, velocities and accelerations.

Methods prefixed with an underscore mutate the receiver and return it so
they can be chained inside the integrator's inner loops without allocating.
The unprefixed forms leave the receiver untouched and return a new vector.'''

import math
import numpy as np
from typing import Iterator
from .config import config


class Vector3:
    """
    Mutable 3-component real vector.

    Parameters
    ----------
    x, y, z : float
        Cartesian components
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    # ========== CONSTRUCTION ==========
    @classmethod
    def from_array(cls, values) -> "Vector3":
        """Build a vector from any length-3 sequence or numpy array."""
        arr = np.asarray(values, dtype=float)
        if arr.shape != (3,):
            raise ValueError(f"Vector3 requires 3 components, got shape {arr.shape}")
        return cls(arr[0], arr[1], arr[2])

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    # ========== IN-PLACE OPERATIONS ==========
    def clear(self) -> "Vector3":
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0
        return self

    def _set(self, other: "Vector3") -> "Vector3":
        self.x = other.x
        self.y = other.y
        self.z = other.z
        return self

    def _add(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def _subtract(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def _scale(self, k: float) -> "Vector3":
        self.x *= k
        self.y *= k
        self.z *= k
        return self

    # ========== OUT-OF-PLACE OPERATIONS ==========
    def add(self, other: "Vector3") -> "Vector3":
        return self.copy()._add(other)

    def subtract(self, other: "Vector3") -> "Vector3":
        return self.copy()._subtract(other)

    def scale(self, k: float) -> "Vector3":
        return self.copy()._scale(k)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def squared_norm(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        return math.sqrt(self.squared_norm())

    # ========== UTILITY METHODS ==========
    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def isclose(self, other: "Vector3",
                rtol: float | None = None, atol: float | None = None) -> bool:
        """
        Component-wise closeness check.

        Tolerances default to config.EQUALITY_RTOL and config.EQUALITY_ATOL.
        """
        if rtol is None:
            rtol = config.EQUALITY_RTOL
        if atol is None:
            atol = config.EQUALITY_ATOL
        return bool(np.allclose(self.to_array(), other.to_array(),
                                rtol=rtol, atol=atol))

    # ========== SPECIAL METHODS ==========
    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.subtract(other)

    def __mul__(self, k: float) -> "Vector3":
        return self.scale(k)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return self.scale(-1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        """Exact component equality; use isclose() for tolerant checks."""
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # mutable, so not hashable
    __hash__ = None

    def __repr__(self):
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"
