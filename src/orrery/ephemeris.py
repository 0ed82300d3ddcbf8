'''N-body gravitational ephemeris.

Couples an ordered list of MassiveBody objects to the integrator: it supplies
the Newtonian force law as the acceleration callback and records every
completed step into one Trajectory per body. Bodies, positions and
accelerations are correlated by list index only.'''

import logging
import math
import pandas as pd
import plotly.graph_objects as go
from typing import List, Optional, Sequence, Union
from .body import MassiveBody
from .config import config
from .integrator import SymplecticRungeKuttaNystromIntegrator, StateObserver
from .methods import DEFAULT_METHOD, IntegrationMethod
from .state import SystemState
from .trajectory import Trajectory
from .utils import check_same_length
from .vector import Vector3

logger = logging.getLogger(__name__)


def _accelerate_by_body(mu1: float, b1: int, bodies2: Sequence[MassiveBody],
                        b2_begin: int, b2_end: int,
                        positions: List[Vector3],
                        accelerations: List[Vector3]) -> None:
    """
    Accumulate the mutual attraction between body ``b1`` and bodies
    ``b2_begin`` to ``b2_end - 1``.

    Each pair is visited once and both sides are updated (Newton's third
    law). Coincident positions give an infinite r^-3, so the pair's
    accelerations come out NaN instead of raising.
    """
    position_of_b1 = positions[b1]
    acceleration_on_b1 = accelerations[b1]
    for b2 in range(b2_begin, b2_end):
        mu2 = bodies2[b2].gravitational_parameter
        dq = position_of_b1.subtract(positions[b2])
        dq2 = dq.squared_norm()
        # r^-3 without a fractional power
        dq4 = dq2 * dq2
        one_over_dq3 = math.sqrt(dq2) / dq4 if dq4 else math.inf
        accelerations[b2]._add(dq.scale(mu1 * one_over_dq3))
        acceleration_on_b1._subtract(dq._scale(mu2 * one_over_dq3))


class Ephemeris:
    """
    Gravitating bodies plus their recorded trajectories.

    Parameters
    ----------
    bodies : sequence of MassiveBody
        Bodies in the order used by every SystemState handed to this
        ephemeris

    Examples
    --------
    >>> from orrery import Ephemeris, sun_earth_moon
    >>> bodies, state = sun_earth_moon()
    >>> ephemeris = Ephemeris(bodies)
    >>> integrator = ephemeris.make_integrator(state, step=2e5)
    >>> integrator.solve(4e7)
    200
    >>> len(ephemeris.trajectory('Earth'))
    201
    """

    # ========== CONSTRUCTION ==========
    def __init__(self, bodies: Sequence[MassiveBody]):
        bodies = tuple(bodies)
        for body in bodies:
            if not isinstance(body, MassiveBody):
                raise TypeError(
                    f"bodies must contain MassiveBody objects, got {type(body).__name__}"
                )
        self._bodies = bodies
        self._trajectories = [Trajectory(body.name) for body in bodies]

    # ========== PROPERTY ACCESS ==========
    @property
    def bodies(self) -> tuple:
        return self._bodies

    @property
    def trajectories(self) -> tuple:
        return tuple(self._trajectories)

    def trajectory(self, body: Union[str, int]) -> Trajectory:
        """
        Trajectory of a body, looked up by index or by name.

        Raises
        ------
        KeyError
            If no body has the given name
        """
        if isinstance(body, int):
            return self._trajectories[body]
        for index, candidate in enumerate(self._bodies):
            if candidate.name == body:
                return self._trajectories[index]
        raise KeyError(f"No body named '{body}'. "
                       f"Bodies: {[b.name for b in self._bodies]}")

    # ========== FORCE LAW ==========
    def compute_massive_bodies_gravitational_accelerations(
        self,
        t: float,
        positions: List[Vector3],
        accelerations: List[Vector3],
    ) -> None:
        """
        Overwrite ``accelerations`` with the Newtonian attraction at ``positions``.

        The force law does not depend on ``t``; it is accepted so the method
        can be used directly as an integrator callback.

        Raises
        ------
        ValueError
            If positions or accelerations do not have one entry per body
        """
        n = len(self._bodies)
        check_same_length(n, "positions", positions)
        check_same_length(n, "accelerations", accelerations)
        for acceleration in accelerations:
            acceleration.clear()
        for b1 in range(n):
            _accelerate_by_body(self._bodies[b1].gravitational_parameter, b1,
                                self._bodies, b1 + 1, n,
                                positions, accelerations)

    def accelerations(self, state: SystemState) -> List[Vector3]:
        """Accelerations at the given state, as new vectors."""
        result = [Vector3() for _ in self._bodies]
        self.compute_massive_bodies_gravitational_accelerations(
            state.time, state.positions, result)
        return result

    # ========== RECORDING ==========
    def append_state(self, state: SystemState) -> None:
        """Record copies of every body's position and velocity at ``state.time``."""
        n = len(self._bodies)
        check_same_length(n, "positions", state.positions)
        check_same_length(n, "velocities", state.velocities)
        for k, trajectory in enumerate(self._trajectories):
            trajectory.append(state.time,
                              state.positions[k].copy(),
                              state.velocities[k].copy())

    def forget_before(self, time: float) -> None:
        """Prune every trajectory; see Trajectory.forget_before."""
        for trajectory in self._trajectories:
            trajectory.forget_before(time)

    def make_integrator(
        self,
        initial_state: SystemState,
        step: Optional[float] = None,
        method: Union[IntegrationMethod, str] = DEFAULT_METHOD,
        observer: Optional[StateObserver] = None,
    ) -> SymplecticRungeKuttaNystromIntegrator:
        """
        Build an integrator that uses this ephemeris as force law and recorder.

        The initial state is recorded immediately, then every completed step
        is recorded before ``observer`` (if any) sees it.

        Parameters
        ----------
        initial_state : SystemState
            State to advance (aliased, not copied)
        step : float, optional
            Step size [s] (default: config.DEFAULT_STEP)
        method : IntegrationMethod or str, optional
            Coefficient table (default: McLachlanAtela1992Order5Optimal)
        observer : callable, optional
            Extra per-step callback, e.g. a renderer
        """
        check_same_length(len(self._bodies), "positions", initial_state.positions)
        if step is None:
            step = config.DEFAULT_STEP

        if observer is None:
            append_state = self.append_state
        else:
            def append_state(state: SystemState) -> None:
                self.append_state(state)
                observer(state)

        integrator = SymplecticRungeKuttaNystromIntegrator(
            method,
            initial_state,
            self.compute_massive_bodies_gravitational_accelerations,
            append_state,
            step,
        )
        self.append_state(initial_state)
        if observer is not None:
            observer(initial_state)
        return integrator

    # ========== DIAGNOSTICS ==========
    def total_energy(self, state: SystemState) -> float:
        """
        Total energy multiplied by G [m^5/s^4]: the sum of mu*v^2/2 minus
        the sum over pairs of mu1*mu2/r.

        Working in gravitational parameters avoids dividing by G, which is
        known far less precisely than the mu values.
        """
        n = len(self._bodies)
        check_same_length(n, "positions", state.positions)
        kinetic = 0.0
        potential = 0.0
        for b1 in range(n):
            mu1 = self._bodies[b1].gravitational_parameter
            kinetic += 0.5 * mu1 * state.velocities[b1].squared_norm()
            for b2 in range(b1 + 1, n):
                mu2 = self._bodies[b2].gravitational_parameter
                r = state.positions[b1].subtract(state.positions[b2]).norm()
                potential -= mu1 * mu2 / r
        return kinetic + potential

    def angular_momentum(self, state: SystemState) -> Vector3:
        """Total angular momentum about the origin, weighted by mu (G * L)."""
        check_same_length(len(self._bodies), "positions", state.positions)
        total = Vector3()
        for body, q, v in zip(self._bodies, state.positions, state.velocities):
            total._add(q.cross(v)._scale(body.gravitational_parameter))
        return total

    def barycentre(self, state: SystemState) -> Vector3:
        """mu-weighted mean position of all bodies."""
        check_same_length(len(self._bodies), "positions", state.positions)
        total_mu = sum(body.gravitational_parameter for body in self._bodies)
        if total_mu == 0:
            raise ValueError("Barycentre undefined: total gravitational parameter is zero")
        centre = Vector3()
        for body, q in zip(self._bodies, state.positions):
            centre._add(q.scale(body.gravitational_parameter))
        return centre._scale(1.0 / total_mu)

    # ========== EXPORT ==========
    def to_dataframe(self) -> pd.DataFrame:
        """
        Export all trajectories to one long-format DataFrame.

        Returns:
            DataFrame with columns body, time, x, y, z, vx, vy, vz
        """
        frames = []
        for body, trajectory in zip(self._bodies, self._trajectories):
            frame = trajectory.to_dataframe()
            frame.insert(0, 'body', body.name)
            frames.append(frame)
        if not frames:
            return pd.DataFrame(columns=['body', 'time', 'x', 'y', 'z',
                                         'vx', 'vy', 'vz'])
        return pd.concat(frames, ignore_index=True)

    def plot_3d(self, colors: Optional[Sequence[str]] = None) -> go.Figure:
        """
        Plot every recorded trajectory in one 3D figure.

        Parameters:
            colors: One line color per body (default: plotly's color cycle)

        Returns:
            Plotly Figure object
        """
        fig = go.Figure()
        for index, trajectory in enumerate(self._trajectories):
            if colors is not None:
                trajectory.add_to_plot(fig, color=colors[index])
            else:
                positions = trajectory.positions()
                fig.add_trace(go.Scatter3d(
                    x=positions[:, 0],
                    y=positions[:, 1],
                    z=positions[:, 2],
                    mode='lines',
                    line=dict(width=config.DEFAULT_LINE_WIDTH),
                    name=trajectory.name or f'Body {index}',
                ))

        units = config.DEFAULT_LENGTH_UNIT
        fig.update_layout(
            scene=dict(
                xaxis_title=f'X [{units}]',
                yaxis_title=f'Y [{units}]',
                zaxis_title=f'Z [{units}]',
                aspectmode='data'
            ),
            title='Ephemeris',
            showlegend=True
        )
        logger.debug("Plotted %d trajectories", len(self._trajectories))
        return fig

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        return len(self._bodies)

    def __repr__(self):
        names = ", ".join(body.name or "<unnamed>" for body in self._bodies)
        return f"Ephemeris([{names}])"
