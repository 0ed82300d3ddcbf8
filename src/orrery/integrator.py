'''Fixed-step explicit symplectic Runge-Kutta-Nystrom integrator.

The integrator owns nothing but scratch buffers: the state it advances is
the caller's SystemState, mutated in place, and the physics comes in through
two callbacks, one that fills in accelerations for a set of stage positions
and one that is told about every completed step.'''

import logging
import math
from typing import List, Protocol, Union
from .methods import IntegrationMethod, get_method
from .numerics import DoublePrecision
from .state import SystemState
from .vector import Vector3

logger = logging.getLogger(__name__)


class AccelerationField(Protocol):
    """Fills ``accelerations`` (overwriting it) for bodies at ``positions`` at time ``t``."""
    def __call__(self, t: float, positions: List[Vector3],
                 accelerations: List[Vector3]) -> None: ...


class StateObserver(Protocol):
    """Receives the live state once per completed step; copy out what you keep."""
    def __call__(self, state: SystemState) -> None: ...


class SymplecticRungeKuttaNystromIntegrator:
    """
    Advances a SystemState with an explicit symplectic RKN scheme.

    Parameters
    ----------
    method : IntegrationMethod or str
        Coefficient table, or its name in ``orrery.methods.METHODS``
    initial_state : SystemState
        State to advance. It is aliased, not copied: every holder of this
        object sees the integration progress.
    compute_acceleration : AccelerationField
        Force law, called once per stage
    append_state : StateObserver
        Called with the state after every completed step
    step : float
        Fixed step size [s]; its sign sets the integration direction

    Notes
    -----
    - No NaN or overflow checking is done. A non-finite acceleration (for
      instance from two bodies at the same position) propagates silently
      into every later state.
    - Only the integrator may write to the state while it is in use. Read it
      between calls to solve(), or from the observer.
    - Time is accumulated with compensated summation, so long runs of equal
      steps do not drift away from ``t0 + n * step``.
    """

    # ========== CONSTRUCTION ==========
    def __init__(
        self,
        method: Union[IntegrationMethod, str],
        initial_state: SystemState,
        compute_acceleration: AccelerationField,
        append_state: StateObserver,
        step: float,
    ):
        # Validate before storing
        self._method = get_method(method)
        if not isinstance(initial_state, SystemState):
            raise TypeError(
                f"initial_state must be SystemState, got {type(initial_state).__name__}"
            )
        if not callable(compute_acceleration):
            raise TypeError("compute_acceleration must be callable")
        if not callable(append_state):
            raise TypeError("append_state must be callable")
        step = float(step)
        if not math.isfinite(step) or step == 0.0:
            raise ValueError(f"Step must be finite and non-zero, got {step}")

        self._state = initial_state
        self._compute_acceleration = compute_acceleration
        self._append_state = append_state
        self._step = step

        self._a = self._method.a
        self._b = self._method.b
        self._c = self._method.stage_offsets()

        self._time = DoublePrecision(initial_state.time)

        # Scratch buffers, reused by every step
        dimension = initial_state.dimension
        self._dq = [Vector3() for _ in range(dimension)]
        self._dv = [Vector3() for _ in range(dimension)]
        self._q_stage = [Vector3() for _ in range(dimension)]
        self._g = [Vector3() for _ in range(dimension)]
        self._scratch = Vector3()

        logger.debug("Created %s integrator for %d bodies with step %g s",
                     self._method.name, dimension, step)

    # ========== PROPERTY ACCESS ==========
    @property
    def method(self) -> IntegrationMethod:
        return self._method

    @property
    def state(self) -> SystemState:
        """The live state being advanced (the object passed at construction)."""
        return self._state

    @property
    def step(self) -> float:
        return self._step

    @property
    def c(self) -> tuple:
        """Stage time offsets as fractions of a step."""
        return self._c

    @property
    def time(self) -> float:
        return self._time.value

    # ========== PROPAGATION ==========
    def solve(self, t_final: float) -> int:
        """
        Advance by whole steps towards ``t_final``.

        Steps are taken while at least one full step fits between the
        current time and ``t_final`` in the integration direction. No partial
        step is taken, so up to one step's worth of time can be left over;
        a later call with a further target picks up from there. A target
        behind the current time (relative to the step's sign) takes no steps.

        Parameters
        ----------
        t_final : float
            Target time [s]

        Returns
        -------
        int
            Number of steps taken
        """
        t_final = float(t_final)
        h = self._step
        direction = 1.0 if h > 0 else -1.0
        abs_h = direction * h

        state = self._state
        dimension = len(self._dq)
        if state.dimension != dimension or len(state.velocities) != dimension:
            raise ValueError(
                f"State dimension changed from {dimension} to {state.dimension} "
                f"since the integrator was created"
            )

        q = state.positions
        v = state.velocities
        dq = self._dq
        dv = self._dv
        q_stage = self._q_stage
        g = self._g
        scratch = self._scratch
        a = self._a
        b = self._b
        c = self._c
        time = self._time

        steps = 0
        while direction * (t_final - time.value) >= abs_h:
            for k in range(dimension):
                dq[k].clear()
                dv[k].clear()

            for i in range(self._method.evaluations):
                for k in range(dimension):
                    q_stage[k]._set(q[k])._add(dq[k])
                self._compute_acceleration(time.value + (time.error + c[i] * h),
                                           q_stage, g)
                hb = h * b[i]
                ha = h * a[i]
                for k in range(dimension):
                    # Kick first; the drift uses the updated velocity correction
                    dv[k]._add(scratch._set(g[k])._scale(hb))
                    dq[k]._add(scratch._set(v[k])._add(dv[k])._scale(ha))

            time.increment(h)
            state.time = time.value
            for k in range(dimension):
                q[k]._add(dq[k])
                v[k]._add(dv[k])
            steps += 1
            self._append_state(state)

        logger.debug("solve(%g): %d steps, t = %r", t_final, steps, time.value)
        return steps

    # ========== SPECIAL METHODS ==========
    def __repr__(self):
        return (f"SymplecticRungeKuttaNystromIntegrator(method={self._method.name}, "
                f"bodies={len(self._dq)}, step={self._step}, t={self._time.value})")
