'''Recorded time history of one body.

A Trajectory is filled by its Ephemeris once per completed integration step
and pruned from the front by whoever consumes it (for example to keep a
plotted trail at a bounded length).'''

import numpy as np
import pandas as pd
import plotly.graph_objects as go
from bisect import bisect_left
from operator import attrgetter
from typing import Iterator, NamedTuple, Optional, Tuple
from .config import config
from .utils import validation_error
from .vector import Vector3


class TrajectoryPoint(NamedTuple):
    """One recorded sample: instant [s], position [m], velocity [m/s]."""
    time: float
    position: Vector3
    velocity: Vector3


_time_of = attrgetter('time')


class Trajectory:
    """
    Append-only, time-ordered history of (time, position, velocity) records.

    Times must be strictly monotonic. The direction (increasing or
    decreasing) is fixed by the first two records, so a trajectory filled by
    a backward integration is valid too.

    Parameters
    ----------
    name : str, optional
        Label used in plots and exports (usually the body name)
    """

    # ========== CONSTRUCTION ==========
    def __init__(self, name: str = ""):
        self._name = name
        self._points: list[TrajectoryPoint] = []
        self._direction = 0  # +1 or -1 once two records exist

    # ========== PROPERTY ACCESS ==========
    @property
    def name(self) -> str:
        return self._name

    @property
    def points(self) -> Tuple[TrajectoryPoint, ...]:
        """Read-only view of the recorded points, oldest first."""
        return tuple(self._points)

    @property
    def t0(self) -> Optional[float]:
        """Time of the oldest record, or None if empty."""
        return self._points[0].time if self._points else None

    @property
    def tf(self) -> Optional[float]:
        """Time of the newest record, or None if empty."""
        return self._points[-1].time if self._points else None

    @property
    def duration(self) -> float:
        """Time spanned by the records (zero with fewer than two)."""
        if len(self._points) < 2:
            return 0.0
        return self.tf - self.t0

    # ========== RECORDING ==========
    def append(self, time: float, position: Vector3, velocity: Vector3) -> None:
        """
        Record a new sample.

        The vectors are stored as given; pass copies, not the live vectors
        of an integrator's state, since those keep changing.

        Raises
        ------
        ValueError
            If ``time`` does not continue the existing time ordering
        """
        time = float(time)
        if self._points:
            last = self._points[-1].time
            direction = 1 if time > last else -1 if time < last else 0
            if direction == 0 or (self._direction and direction != self._direction):
                validation_error(
                    f"Trajectory '{self._name}' times must be strictly monotonic: "
                    f"cannot append t={time} after t={last}"
                )
                return
            self._direction = direction
        self._points.append(TrajectoryPoint(time, position, velocity))

    def forget_before(self, time: float) -> None:
        """
        Drop every record that lies before ``time``.

        "Before" follows the trajectory's direction: for increasing times the
        records with ``t < time`` go, for a backward trajectory the records
        with ``t > time`` go. Nothing happens when the first record is already
        at or past ``time``; when no record is, the trajectory is emptied.
        """
        if not self._points:
            return
        if self._direction < 0:
            index = bisect_left(self._points, -time, key=lambda p: -p.time)
        else:
            index = bisect_left(self._points, time, key=_time_of)
        if index > 0:
            del self._points[:index]
        if not self._points:
            self._direction = 0

    # ========== UTILITY METHODS ==========
    def times(self) -> np.ndarray:
        """Recorded instants as a 1-D array."""
        return np.array([p.time for p in self._points], dtype=float)

    def positions(self) -> np.ndarray:
        """Recorded positions as an (n, 3) array."""
        return np.array([p.position.to_array() for p in self._points],
                        dtype=float).reshape(-1, 3)

    def velocities(self) -> np.ndarray:
        """Recorded velocities as an (n, 3) array."""
        return np.array([p.velocity.to_array() for p in self._points],
                        dtype=float).reshape(-1, 3)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Export trajectory to pandas DataFrame.

        Returns:
            DataFrame with columns time, x, y, z, vx, vy, vz
        """
        positions = self.positions()
        velocities = self.velocities()

        data = {
            'time': self.times(),
            'x': positions[:, 0],
            'y': positions[:, 1],
            'z': positions[:, 2],
            'vx': velocities[:, 0],
            'vy': velocities[:, 1],
            'vz': velocities[:, 2],
        }

        return pd.DataFrame(data)

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        return len(self._points)

    def __iter__(self) -> Iterator[TrajectoryPoint]:
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __repr__(self):
        return (f"Trajectory(name={self._name!r}, points={len(self._points)}, "
                f"t0={self.t0}, tf={self.tf})")

    # ========== PLOTTING ==========
    def plot_3d(self, color: Optional[str] = None,
                line_width: Optional[float] = None) -> go.Figure:
        """
        Create 3D plot of the recorded path.

        Parameters:
            color: Color of trajectory line (default: config.DEFAULT_TRAJ_COLOR)
            line_width: Width of trajectory line (default: config.DEFAULT_LINE_WIDTH)

        Returns:
            Plotly Figure object
        """
        fig = go.Figure()
        self.add_to_plot(fig, color=color,
                         line_width=line_width)

        units = config.DEFAULT_LENGTH_UNIT
        fig.update_layout(
            scene=dict(
                xaxis_title=f'X [{units}]',
                yaxis_title=f'Y [{units}]',
                zaxis_title=f'Z [{units}]',
                aspectmode='data'
            ),
            title=f'Trajectory of {self._name}' if self._name else 'Trajectory',
            showlegend=True
        )

        return fig

    def add_to_plot(self, fig: go.Figure, color: Optional[str] = None,
                    name: Optional[str] = None,
                    line_width: Optional[float] = None, **kwargs) -> go.Figure:
        """
        Add this trajectory to an existing Plotly figure.

        Parameters:
            fig: Existing Plotly Figure object
            color: Color of trajectory line (default: config.DEFAULT_TRAJ_COLOR)
            name: Legend name (default: trajectory name, else 'Trajectory N')
            line_width: Width of trajectory line (default: config.DEFAULT_LINE_WIDTH)
            **kwargs: Additional arguments passed to Scatter3d

        Returns:
            Updated Plotly Figure object (same object, modified in place)
        """
        positions = self.positions()

        if name is None:
            if self._name:
                name = self._name
            else:
                n_existing = sum(1 for trace in fig.data
                                 if isinstance(trace, go.Scatter3d))
                name = f'Trajectory {n_existing + 1}'
        if color is None:
            color = config.DEFAULT_TRAJ_COLOR
        if line_width is None:
            line_width = config.DEFAULT_LINE_WIDTH

        fig.add_trace(go.Scatter3d(
            x=positions[:, 0],
            y=positions[:, 1],
            z=positions[:, 2],
            mode='lines',
            line=dict(color=color, width=line_width),
            name=name,
            hovertemplate='x: %{x:.4e}<br>y: %{y:.4e}<br>z: %{z:.4e}<extra></extra>',
            **kwargs
        ))

        return fig
