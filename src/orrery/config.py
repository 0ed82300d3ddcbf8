"""
Global Configuration for Orrery Package
=======================================

This module provides package-wide configuration settings that users can modify
to control physical constants, numerical tolerances, validation behavior, and
default plotting options.

Examples
--------
View current configuration:

>>> import orrery
>>> print(orrery.config)

Modify settings:

>>> orrery.config.EQUALITY_RTOL = 1e-14  # Stricter equality checks
>>> orrery.config.DEFAULT_STEP = 3600.0   # One-hour steps by default

Reset to defaults:

>>> orrery.config.reset()

Temporarily modify settings:

>>> with orrery.temp_config(STRICT_VALIDATION=False):
...     # Validation failures only warn inside this block
...     trajectory.append(t, q, v)

Notes
-----
These settings affect package-wide behavior. Modifying them will impact
all subsequent operations until changed again or reset. The gravitational
constant is read when a MassiveBody is constructed, so bodies built before a
change keep the value they were built with.
"""

from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class OrreryConfig:
    """
    Global configuration for Orrery package.

    Attributes
    ----------
    GRAVITATIONAL_CONSTANT : float
        Newtonian constant of gravitation [m^3 kg^-1 s^-2].
        Default: 6.67384e-11 (CODATA 2010)
    EQUALITY_RTOL : float
        Relative tolerance for floating-point equality comparisons.
        Default: 1e-12
    EQUALITY_ATOL : float
        Absolute tolerance for floating-point equality comparisons.
        Default: 1e-14
    STRICT_VALIDATION : bool
        If True, validation failures raise exceptions.
        If False, validation failures issue warnings.
        Default: True
    DEFAULT_STEP : float
        Step size [s] used by Ephemeris.make_integrator when none is given.
        Default: 2e5 (a little over two days)
    DEFAULT_TRAJ_COLOR : str
        Default color for trajectory lines in plots.
        Default: 'red'
    DEFAULT_LINE_WIDTH : float
        Default width of trajectory lines in plots.
        Default: 3.0
    DEFAULT_LENGTH_UNIT : str
        Axis label unit for plotted positions.
        Default: 'm'
    """

    # Physical constants
    GRAVITATIONAL_CONSTANT: float = 6.67384e-11

    # Numerical tolerance for equality comparisons
    EQUALITY_RTOL: float = 1e-12
    EQUALITY_ATOL: float = 1e-14

    # Validation behavior
    STRICT_VALIDATION: bool = True

    # Integration defaults
    DEFAULT_STEP: float = 2e5

    # Plotting defaults
    DEFAULT_TRAJ_COLOR: str = 'red'
    DEFAULT_LINE_WIDTH: float = 3.0
    DEFAULT_LENGTH_UNIT: str = 'm'

    def reset(self):
        """
        Reset all configuration values to package defaults.

        Examples
        --------
        >>> import orrery
        >>> orrery.config.STRICT_VALIDATION = False  # Modify
        >>> orrery.config.reset()  # Back to defaults
        >>> orrery.config.STRICT_VALIDATION
        True
        """
        defaults = OrreryConfig()
        for key in self.__dataclass_fields__:
            setattr(self, key, getattr(defaults, key))

    def __repr__(self):
        """Return formatted string showing all configuration values."""
        lines = ["OrreryConfig:"]
        lines.append("  Physical Constants:")
        lines.append(f"    GRAVITATIONAL_CONSTANT = {self.GRAVITATIONAL_CONSTANT}")
        lines.append("  Numerical Tolerances:")
        lines.append(f"    EQUALITY_RTOL = {self.EQUALITY_RTOL}")
        lines.append(f"    EQUALITY_ATOL = {self.EQUALITY_ATOL}")
        lines.append("  Integration:")
        lines.append(f"    DEFAULT_STEP = {self.DEFAULT_STEP}")
        lines.append("  Behavior:")
        lines.append(f"    STRICT_VALIDATION = {self.STRICT_VALIDATION}")
        lines.append("  Plotting:")
        lines.append(f"    DEFAULT_TRAJ_COLOR = '{self.DEFAULT_TRAJ_COLOR}'")
        lines.append(f"    DEFAULT_LINE_WIDTH = {self.DEFAULT_LINE_WIDTH}")
        lines.append(f"    DEFAULT_LENGTH_UNIT = '{self.DEFAULT_LENGTH_UNIT}'")
        return "\n".join(lines)


# Global configuration instance
config = OrreryConfig()


@contextmanager
def temp_config(**kwargs):
    """
    Context manager for temporarily modifying configuration values.

    Configuration is automatically restored when the context exits,
    even if an exception occurs.

    Parameters
    ----------
    **kwargs
        Configuration attributes to temporarily modify.

    Examples
    --------
    >>> import orrery
    >>> with orrery.temp_config(GRAVITATIONAL_CONSTANT=1.0):
    ...     body = orrery.MassiveBody.from_mass(5.0)
    >>> body.gravitational_parameter
    5.0
    >>> orrery.config.GRAVITATIONAL_CONSTANT
    6.67384e-11

    Raises
    ------
    AttributeError
        If an invalid configuration attribute is specified.
    """
    old_values = {}
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise AttributeError(
                f"OrreryConfig has no attribute '{key}'. "
                f"Valid attributes: {list(config.__dataclass_fields__.keys())}"
            )
        old_values[key] = getattr(config, key)
        setattr(config, key, value)

    try:
        yield config
    finally:
        for key, value in old_values.items():
            setattr(config, key, value)
