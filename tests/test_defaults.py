"""
Test suite for catalog bodies and initial conditions.

Tests cover:
- Catalog body parameters
- solar_system() and sun_earth_moon() assembly
- Plausibility of the J2000 states
- A one-year Sun-Earth-Moon run
"""

import pytest
from orrery import (
    Ephemeris, EARTH, SOL, SOLAR_SYSTEM_JD2451545, solar_system, sun_earth_moon,
)


class TestCatalog:
    """Test catalog body data."""

    def test_earth_parameters(self):
        """Earth's gravitational parameter is in SI units."""
        assert EARTH.name == 'Earth'
        assert EARTH.gravitational_parameter == pytest.approx(3.986004354e14, rel=1e-9)
        assert EARTH.mean_radius == pytest.approx(6.371e6, rel=1e-3)

    def test_sun_dominates(self):
        """The Sun outweighs the Earth by the known ratio."""
        assert SOL.gravitational_parameter / EARTH.gravitational_parameter == pytest.approx(
            332946, rel=1e-4)

    def test_every_body_has_a_state(self):
        """Each catalog entry carries a 3-vector position and velocity."""
        for name, (position, velocity) in SOLAR_SYSTEM_JD2451545.items():
            assert len(position) == 3, name
            assert len(velocity) == 3, name


class TestAssembly:
    """Test system factories."""

    def test_sun_earth_moon(self):
        """Three bodies in a fixed order."""
        bodies, state = sun_earth_moon()
        assert [b.name for b in bodies] == ['Sol', 'Earth', 'Luna']
        assert state.dimension == 3
        assert state.time == 0.0

    def test_start_time(self):
        """The initial time can be set."""
        _, state = sun_earth_moon(time=100.0)
        assert state.time == 100.0

    def test_subset_order(self):
        """Bodies come back in the requested order."""
        bodies, state = solar_system(['Mars', 'Sol'])
        assert [b.name for b in bodies] == ['Mars', 'Sol']
        assert state.positions[1].x == SOLAR_SYSTEM_JD2451545['Sol'][0][0]

    def test_all_bodies(self):
        """No names means the whole catalog."""
        bodies, state = solar_system()
        assert len(bodies) == len(SOLAR_SYSTEM_JD2451545)
        assert state.dimension == len(bodies)

    def test_unknown_body(self):
        """Unknown names raise KeyError."""
        with pytest.raises(KeyError, match="Pluto"):
            solar_system(['Sol', 'Pluto'])

    def test_fresh_vectors(self):
        """Each call returns independent vectors."""
        _, first = sun_earth_moon()
        _, second = sun_earth_moon()
        first.positions[0]._scale(2.0)
        assert first.positions[0] is not second.positions[0]
        assert second.positions[0] != first.positions[0]


class TestPlausibility:
    """Initial conditions look like the real Solar System."""

    def test_earth_moon_distance(self):
        """The Moon starts roughly 400 000 km from the Earth."""
        _, state = sun_earth_moon()
        distance = state.positions[2].subtract(state.positions[1]).norm()
        assert 3.5e8 < distance < 4.2e8

    def test_earth_sun_distance(self):
        """The Earth starts about 1 AU from the Sun."""
        _, state = sun_earth_moon()
        distance = state.positions[1].subtract(state.positions[0]).norm()
        assert 1.4e11 < distance < 1.6e11

    def test_one_year(self):
        """A year at the default step keeps the Earth near 1 AU."""
        bodies, state = sun_earth_moon()
        ephemeris = Ephemeris(bodies)
        integrator = ephemeris.make_integrator(state, step=2e5)
        steps = integrator.solve(365.25 * 86400.0)
        assert steps == 157

        earth = ephemeris.trajectory('Earth')
        sol = ephemeris.trajectory('Sol')
        assert len(earth) == steps + 1
        for p_earth, p_sol in zip(earth, sol):
            distance = p_earth.position.subtract(p_sol.position).norm()
            assert 1.4e11 < distance < 1.6e11
