'''System state shared between the integrator, the force law and observers.'''

import numpy as np
from typing import List
from .vector import Vector3


class SystemState:
    """
    Positions, velocities and time of every integrated body.

    Index ``k`` of ``positions`` and ``velocities`` belongs to body ``k`` of
    the owning body list. The integrator mutates the vectors and ``time`` in
    place for its whole lifetime; observers that need to keep values past the
    current step must copy them out.

    Parameters
    ----------
    positions : list of Vector3
        Position of each body [m]
    velocities : list of Vector3
        Velocity of each body [m/s]
    time : float
        Current instant [s]

    Raises
    ------
    ValueError
        If positions and velocities differ in length
    """

    def __init__(self, positions: List[Vector3], velocities: List[Vector3],
                 time: float = 0.0):
        positions = list(positions)
        velocities = list(velocities)
        if len(positions) != len(velocities):
            raise ValueError(
                f"positions and velocities must have the same length, "
                f"got {len(positions)} and {len(velocities)}"
            )
        self.positions = positions
        self.velocities = velocities
        self.time = float(time)

    @classmethod
    def from_arrays(cls, positions, velocities, time: float = 0.0) -> "SystemState":
        """
        Build a state from (n, 3) array-likes.

        Parameters
        ----------
        positions, velocities : array_like
            Arrays of shape (n, 3)
        time : float
            Initial instant [s]
        """
        q = np.asarray(positions, dtype=float).reshape(-1, 3)
        v = np.asarray(velocities, dtype=float).reshape(-1, 3)
        return cls([Vector3.from_array(row) for row in q],
                   [Vector3.from_array(row) for row in v],
                   time)

    @property
    def dimension(self) -> int:
        """Number of bodies."""
        return len(self.positions)

    def copy(self) -> "SystemState":
        """Deep copy; the result shares no vectors with this state."""
        return SystemState([q.copy() for q in self.positions],
                           [v.copy() for v in self.velocities],
                           self.time)

    def to_arrays(self):
        """Return (positions, velocities) as (n, 3) numpy arrays."""
        q = np.array([p.to_array() for p in self.positions]).reshape(-1, 3)
        v = np.array([u.to_array() for u in self.velocities]).reshape(-1, 3)
        return q, v

    def __repr__(self):
        return f"SystemState(dimension={self.dimension}, time={self.time})"
