"""
Orrery: N-body Solar System Integration

A Python package for advancing small gravitating systems with fixed-step
explicit symplectic Runge-Kutta-Nystrom integrators and recording the
resulting trajectories.
"""

import logging

# Configuration
from .config import config, temp_config

# Core classes
from .vector import Vector3
from .body import MassiveBody
from .state import SystemState
from .trajectory import Trajectory, TrajectoryPoint
from .methods import (
    IntegrationMethod, METHODS, get_method,
    McLachlanAtela1992Order5Optimal, Leapfrog, Ruth1983, ForestRuth1990,
)
from .integrator import (
    SymplecticRungeKuttaNystromIntegrator,
    SymplecticRungeKuttaNystromIntegrator as SRKN,
    AccelerationField, StateObserver,
)
from .ephemeris import Ephemeris
from .numerics import DoublePrecision

# Catalog bodies and initial conditions
from .defaults import (
    SOL, EARTH, LUNA, MERCURY, VENUS, MARS,
    SOLAR_SYSTEM_JD2451545, solar_system, sun_earth_moon,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package metadata
__version__ = "0.1.0"

# Define what gets imported with "from orrery import *"
__all__ = [
    # Configuration
    "config",
    "temp_config",
    # Classes
    "Vector3",
    "MassiveBody",
    "SystemState",
    "Trajectory",
    "TrajectoryPoint",
    "IntegrationMethod",
    "SymplecticRungeKuttaNystromIntegrator",
    "AccelerationField",
    "StateObserver",
    "Ephemeris",
    "DoublePrecision",
    # Abbreviations
    "SRKN",
    # Methods
    "METHODS",
    "get_method",
    "McLachlanAtela1992Order5Optimal",
    "Leapfrog",
    "Ruth1983",
    "ForestRuth1990",
    # Catalog
    "SOL",
    "EARTH",
    "LUNA",
    "MERCURY",
    "VENUS",
    "MARS",
    "SOLAR_SYSTEM_JD2451545",
    "solar_system",
    "sun_earth_moon",
]
