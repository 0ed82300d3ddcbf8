"""
Test suite for Vector3.

Tests cover:
- In-place operations mutate and return the receiver
- Out-of-place operations leave operands untouched
- Norms, dot and cross products
- Conversions to and from numpy arrays
"""

import pytest
import numpy as np
from orrery import Vector3


class TestInPlaceOperations:
    """Underscore-prefixed methods mutate the receiver."""

    def test_add_in_place(self):
        """_add() mutates and returns self."""
        v = Vector3(1, 2, 3)
        result = v._add(Vector3(1, 1, 1))
        assert result is v
        assert v == Vector3(2, 3, 4)

    def test_subtract_in_place(self):
        """_subtract() mutates and returns self."""
        v = Vector3(1, 2, 3)
        assert v._subtract(Vector3(1, 1, 1)) is v
        assert v == Vector3(0, 1, 2)

    def test_scale_in_place(self):
        """_scale() mutates and returns self."""
        v = Vector3(1, -2, 3)
        assert v._scale(2.0) is v
        assert v == Vector3(2, -4, 6)

    def test_chaining(self):
        """In-place operations chain."""
        v = Vector3()
        v._set(Vector3(1, 0, 0))._add(Vector3(0, 1, 0))._scale(3.0)
        assert v == Vector3(3, 3, 0)

    def test_clear(self):
        """clear() zeroes in place."""
        v = Vector3(4, 5, 6)
        assert v.clear() is v
        assert v == Vector3(0, 0, 0)


class TestOutOfPlaceOperations:
    """Unprefixed methods return new vectors."""

    def test_add_returns_new(self):
        """add() leaves both operands untouched."""
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        c = a.add(b)
        assert c == Vector3(5, 7, 9)
        assert a == Vector3(1, 2, 3)
        assert b == Vector3(4, 5, 6)

    def test_subtract_returns_new(self):
        """subtract() returns the difference."""
        assert Vector3(4, 5, 6).subtract(Vector3(1, 2, 3)) == Vector3(3, 3, 3)

    def test_scale_returns_new(self):
        """scale() does not modify the receiver."""
        a = Vector3(1, 2, 3)
        assert a.scale(-1.0) == Vector3(-1, -2, -3)
        assert a == Vector3(1, 2, 3)

    def test_copy_is_independent(self):
        """copy() is a deep clone."""
        a = Vector3(1, 2, 3)
        b = a.copy()
        b._add(Vector3(1, 1, 1))
        assert a == Vector3(1, 2, 3)
        assert b is not a

    def test_operators(self):
        """Python operators delegate to the out-of-place methods."""
        a = Vector3(1, 2, 3)
        b = Vector3(1, 1, 1)
        assert a + b == Vector3(2, 3, 4)
        assert a - b == Vector3(0, 1, 2)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert -a == Vector3(-1, -2, -3)


class TestNorms:
    """Test norm, dot and cross."""

    def test_squared_norm(self):
        """squared_norm() is x^2 + y^2 + z^2."""
        assert Vector3(1, 2, 2).squared_norm() == 9.0

    def test_norm(self):
        """norm() is the Euclidean length."""
        assert Vector3(3, 4, 0).norm() == pytest.approx(5.0)

    def test_dot(self):
        """dot() of orthogonal vectors is zero."""
        assert Vector3(1, 0, 0).dot(Vector3(0, 1, 0)) == 0.0
        assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32.0

    def test_cross(self):
        """cross() follows the right-hand rule."""
        assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)
        assert Vector3(0, 1, 0).cross(Vector3(1, 0, 0)) == Vector3(0, 0, -1)


class TestConversions:
    """Test numpy conversions and comparisons."""

    def test_to_array(self):
        """to_array() returns a float array."""
        np.testing.assert_array_equal(Vector3(1, 2, 3).to_array(), [1.0, 2.0, 3.0])

    def test_from_array(self):
        """from_array() accepts sequences."""
        assert Vector3.from_array([1, 2, 3]) == Vector3(1, 2, 3)

    def test_from_array_wrong_shape(self):
        """from_array() rejects anything but 3 components."""
        with pytest.raises(ValueError, match="3 components"):
            Vector3.from_array([1, 2])

    def test_iteration(self):
        """Vectors unpack into components."""
        x, y, z = Vector3(1, 2, 3)
        assert (x, y, z) == (1.0, 2.0, 3.0)

    def test_isclose(self):
        """isclose() tolerates rounding."""
        a = Vector3(0.1 + 0.2, 0, 0)
        assert a != Vector3(0.3, 0, 0)
        assert a.isclose(Vector3(0.3, 0, 0))

    def test_unhashable(self):
        """Mutable vectors cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Vector3())

    def test_repr(self):
        """repr shows components."""
        assert repr(Vector3(1, 2, 3)) == "Vector3(1.0, 2.0, 3.0)"
