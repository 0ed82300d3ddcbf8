'''Massive body definition.

Ephemeris catalogs publish gravitational parameters directly, and those are
known far more precisely than masses for most bodies, so the gravitational
parameter is what the force law uses. Mass is derived for display only.'''

import math
from dataclasses import dataclass
from typing import Optional
from .config import config
from .utils import validation_error


@dataclass(frozen=True)
class MassiveBody:
    """
    Immutable parameters for a gravitating body.

    Use the named constructors rather than calling the class directly, so
    that exactly one of ``gravitational_parameter`` and ``mass`` is
    authoritative and the other is derived from it.

    Attributes
    ----------
    name : str
        Body identifier (not used for lookup during integration)
    gravitational_parameter : float
        Gravitational parameter mu = G * m [m^3/s^2]
    mass : float
        Mass [kg]
    mean_radius : float, optional
        Mean radius [m]
    """
    name: str
    gravitational_parameter: float
    mass: float
    mean_radius: Optional[float] = None

    def __post_init__(self):
        # Validate parameters
        if not math.isfinite(self.gravitational_parameter) or self.gravitational_parameter < 0:
            validation_error(
                f"Gravitational parameter must be finite and non-negative, "
                f"got {self.gravitational_parameter}"
            )
        if not math.isfinite(self.mass) or self.mass < 0:
            validation_error(f"Mass must be finite and non-negative, got {self.mass}")
        if self.mean_radius is not None and not self.mean_radius > 0:
            validation_error(f"Mean radius must be positive, got {self.mean_radius}")

    @classmethod
    def from_gravitational_parameter(cls, gravitational_parameter: float,
                                     name: str = "",
                                     mean_radius: Optional[float] = None) -> "MassiveBody":
        """Build a body from its gravitational parameter; mass = mu / G."""
        mu = float(gravitational_parameter)
        return cls(name, mu, mu / config.GRAVITATIONAL_CONSTANT, mean_radius)

    @classmethod
    def from_mass(cls, mass: float, name: str = "",
                  mean_radius: Optional[float] = None) -> "MassiveBody":
        """Build a body from its mass; mu = m * G."""
        m = float(mass)
        return cls(name, m * config.GRAVITATIONAL_CONSTANT, m, mean_radius)

    @property
    def mu(self) -> float:
        """Shorthand for gravitational_parameter."""
        return self.gravitational_parameter

    def __repr__(self):
        label = self.name or "<unnamed>"
        return f"MassiveBody({label}, mu={self.gravitational_parameter:.6e} m^3/s^2)"
