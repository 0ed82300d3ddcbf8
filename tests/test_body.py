"""
Test suite for MassiveBody.

Tests cover:
- Named constructors and the mu = m * G relation
- Round trips between the two constructors
- Validation (strict and relaxed)
- Immutability
"""

import dataclasses
import pytest
from orrery import MassiveBody, config, temp_config


class TestConstruction:
    """Test the named constructors."""

    def test_from_gravitational_parameter(self):
        """Mass is derived as mu / G."""
        body = MassiveBody.from_gravitational_parameter(6.67384e-11 * 5.0, 'Rock')
        assert body.name == 'Rock'
        assert body.mass == pytest.approx(5.0, rel=1e-15)

    def test_from_mass(self):
        """mu is derived as m * G."""
        body = MassiveBody.from_mass(1.0e24, 'Planet')
        assert body.gravitational_parameter == pytest.approx(
            1.0e24 * config.GRAVITATIONAL_CONSTANT, rel=1e-15)

    def test_round_trip(self):
        """from_mass then from_gravitational_parameter keeps the mass."""
        m = 5.9722e24
        first = MassiveBody.from_mass(m)
        second = MassiveBody.from_gravitational_parameter(first.gravitational_parameter)
        assert second.mass == pytest.approx(m, rel=1e-14)

    def test_default_name(self):
        """Name defaults to the empty string."""
        assert MassiveBody.from_mass(1.0).name == ""

    def test_mean_radius(self):
        """Mean radius is optional catalog data."""
        body = MassiveBody.from_gravitational_parameter(1.0, 'B', mean_radius=10.0)
        assert body.mean_radius == 10.0
        assert MassiveBody.from_mass(1.0).mean_radius is None

    def test_mu_alias(self):
        """mu is shorthand for gravitational_parameter."""
        body = MassiveBody.from_gravitational_parameter(42.0)
        assert body.mu == 42.0

    def test_test_particle(self):
        """A zero gravitational parameter is allowed."""
        body = MassiveBody.from_gravitational_parameter(0.0, 'Probe')
        assert body.mass == 0.0


class TestValidation:
    """Test parameter validation."""

    def test_negative_gravitational_parameter(self):
        """Negative mu is rejected."""
        with pytest.raises(ValueError, match="Gravitational parameter"):
            MassiveBody.from_gravitational_parameter(-1.0)

    def test_negative_mass(self):
        """Negative mass is rejected."""
        with pytest.raises(ValueError):
            MassiveBody.from_mass(-1.0)

    def test_non_finite(self):
        """Infinite or NaN mu is rejected."""
        with pytest.raises(ValueError):
            MassiveBody.from_gravitational_parameter(float('inf'))
        with pytest.raises(ValueError):
            MassiveBody.from_gravitational_parameter(float('nan'))

    def test_bad_radius(self):
        """Non-positive mean radius is rejected."""
        with pytest.raises(ValueError, match="Mean radius"):
            MassiveBody.from_mass(1.0, mean_radius=0.0)

    def test_relaxed_validation_warns(self):
        """With STRICT_VALIDATION off, bad values only warn."""
        with temp_config(STRICT_VALIDATION=False):
            with pytest.warns(UserWarning, match="Gravitational parameter"):
                body = MassiveBody.from_gravitational_parameter(-1.0)
        assert body.gravitational_parameter == -1.0


class TestImmutability:
    """Bodies cannot be modified after construction."""

    def test_frozen(self):
        """Assigning a field raises."""
        body = MassiveBody.from_mass(1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            body.mass = 2.0

    def test_hashable_and_equal(self):
        """Equal parameters compare equal."""
        a = MassiveBody.from_gravitational_parameter(3.0, 'X')
        b = MassiveBody.from_gravitational_parameter(3.0, 'X')
        assert a == b
        assert hash(a) == hash(b)

    def test_repr(self):
        """repr includes name and mu."""
        text = repr(MassiveBody.from_gravitational_parameter(1.0, 'Sol'))
        assert 'Sol' in text
        assert 'mu=' in text
