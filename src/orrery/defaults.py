"""
Default Bodies and Initial Conditions
=====================================

Gravitational parameters and mean radii for the Sun, Earth, Moon and the
inner planets, plus their barycentric states at JD 2451545.0 (J2000), and
factory functions that assemble them into ready-to-integrate systems.

All values are SI: metres, seconds, m^3/s^2.

Examples
--------
>>> from orrery import Ephemeris, sun_earth_moon, solar_system
>>> bodies, state = sun_earth_moon()
>>> bodies, state = solar_system(['Sol', 'Earth', 'Mars'])
"""
from typing import Dict, Iterable, List, Optional, Tuple
from .body import MassiveBody
from .state import SystemState
from .vector import Vector3

KILO = 1e3
KM = KILO          # m
KM3_S2 = KM ** 3   # m^3/s^2

"""
Predefined Solar System bodies
Gravitational parameters in km^3/s^2 and mean radii in km, converted to SI
"""
SOL = MassiveBody.from_gravitational_parameter(
    1.3271244004193938e+11 * KM3_S2, 'Sol', mean_radius=696000.0 * KM)

EARTH = MassiveBody.from_gravitational_parameter(
    3.9860043543609598e+05 * KM3_S2, 'Earth', mean_radius=6371.0084 * KM)

LUNA = MassiveBody.from_gravitational_parameter(
    4.9028000661637961e+03 * KM3_S2, 'Luna', mean_radius=1737.4 * KM)

MERCURY = MassiveBody.from_gravitational_parameter(
    2.2031780000000021e+04 * KM3_S2, 'Mercury', mean_radius=2439.7 * KM)

VENUS = MassiveBody.from_gravitational_parameter(
    3.2485859200000006e+05 * KM3_S2, 'Venus', mean_radius=6051.8 * KM)

MARS = MassiveBody.from_gravitational_parameter(
    4.282837362069909e+04 * KM3_S2, 'Mars', mean_radius=3389.5 * KM)

BODIES: Dict[str, MassiveBody] = {
    body.name: body for body in (SOL, EARTH, LUNA, MERCURY, VENUS, MARS)
}

"""
Barycentric states at JD 2451545.0
Positions in km and velocities in km/s, converted to SI
"""
SOLAR_SYSTEM_JD2451545: Dict[str, Tuple[Tuple[float, float, float],
                                        Tuple[float, float, float]]] = {
    'Sol': (
        (-1.067598502264559e+06 * KM,
         -3.959890535950128e+05 * KM,
         -1.380711260212289e+05 * KM),
        (+9.312570119052345e-03 * KM,
         -1.170150735349599e-02 * KM,
         -5.251247980405208e-03 * KM),
    ),
    'Earth': (
        (-2.756663225908748e+07 * KM,
         +1.323614283011928e+08 * KM,
         +5.741864727316781e+07 * KM),
        (-2.978494749707266e+01 * KM,
         -5.029753833589443e+00 * KM,
         -2.180645051457051e+00 * KM),
    ),
    'Luna': (
        (-2.785824064408012e+07 * KM,
         +1.320947114679507e+08 * KM,
         +5.734254478723364e+07 * KM),
        (-2.914141611066932e+01 * KM,
         -5.695841519211172e+00 * KM,
         -2.481970755642522e+00 * KM),
    ),
    'Mercury': (
        (-2.052932489502387e+07 * KM,
         -6.032395676436062e+07 * KM,
         -3.013084385588142e+07 * KM),
        (+3.700430445042139e+01 * KM,
         -8.541376874560308e+00 * KM,
         -8.398372276762027e+00 * KM),
    ),
    'Venus': (
        (-1.085240925511762e+08 * KM,
         -7.318517883756028e+06 * KM,
         +3.548115911200081e+06 * KM),
        (+1.391218618039207e+00 * KM,
         -3.202951994557884e+01 * KM,
         -1.449708670519373e+01 * KM),
    ),
    'Mars': (
        (+2.069805421180782e+08 * KM,
         -1.863697276138850e+05 * KM,
         -5.667233334924674e+06 * KM),
        (+1.171984953383225e+00 * KM,
         +2.390670820059185e+01 * KM,
         +1.093392065180724e+01 * KM),
    ),
}


def solar_system(names: Optional[Iterable[str]] = None,
                 time: float = 0.0) -> Tuple[List[MassiveBody], SystemState]:
    """
    Assemble bodies and their J2000 state.

    Parameters
    ----------
    names : iterable of str, optional
        Bodies to include, in order. Default: every catalog body
        (Sol, Earth, Luna, Mercury, Venus, Mars).
    time : float, optional
        Instant assigned to the initial state [s] (default: 0)

    Returns
    -------
    bodies : list of MassiveBody
    state : SystemState
        Fresh vectors, index-aligned with ``bodies``

    Raises
    ------
    KeyError
        If a name is not in the catalog
    """
    if names is None:
        names = list(BODIES)
    bodies = []
    positions = []
    velocities = []
    for name in names:
        if name not in BODIES:
            raise KeyError(f"Unknown body '{name}'. Available: {list(BODIES)}")
        position, velocity = SOLAR_SYSTEM_JD2451545[name]
        bodies.append(BODIES[name])
        positions.append(Vector3(*position))
        velocities.append(Vector3(*velocity))
    return bodies, SystemState(positions, velocities, time)


def sun_earth_moon(time: float = 0.0) -> Tuple[List[MassiveBody], SystemState]:
    """
    Create the Sun-Earth-Moon system at J2000.

    Returns
    -------
    bodies : list of MassiveBody
        [Sol, Earth, Luna]
    state : SystemState
    """
    return solar_system(('Sol', 'Earth', 'Luna'), time)
