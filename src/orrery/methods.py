'''Coefficient tables for explicit symplectic Runge-Kutta-Nystrom methods.

Every table here is applied as a "BA" (kick then drift) composition: stage
``i`` first kicks the velocity by ``b[i] * h`` times the acceleration, then
drifts the position by ``a[i] * h`` times the kicked velocity. A trailing
``a`` of zero means the last stage is a pure kick, which is how the
time-reversible schemes are written in this form.'''

from dataclasses import dataclass
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class IntegrationMethod:
    """
    Immutable coefficient table of an explicit symplectic RKN scheme.

    Attributes
    ----------
    name : str
        Registry name
    order : int
        Order of accuracy
    time_reversible : bool
        Whether the scheme is symmetric in time
    evaluations : int
        Number of force evaluations (stages) per step
    composition : str
        Kick/drift composition; only "BA" (kick then drift) is supported
        by the integrator
    a : tuple of float
        Drift (position) coefficients, one per stage
    b : tuple of float
        Kick (velocity) coefficients, one per stage
    """
    name: str
    order: int
    time_reversible: bool
    evaluations: int
    composition: str
    a: Tuple[float, ...]
    b: Tuple[float, ...]

    _VALID_COMPOSITIONS = frozenset(("BA",))

    def __post_init__(self):
        # Store coefficient sequences as tuples so the table cannot be edited
        object.__setattr__(self, 'a', tuple(float(x) for x in self.a))
        object.__setattr__(self, 'b', tuple(float(x) for x in self.b))
        if self.evaluations < 1:
            raise ValueError(f"evaluations must be at least 1, got {self.evaluations}")
        if len(self.a) != self.evaluations or len(self.b) != self.evaluations:
            raise ValueError(
                f"Method '{self.name}' declares {self.evaluations} evaluations "
                f"but has {len(self.a)} a-coefficients and "
                f"{len(self.b)} b-coefficients"
            )
        if self.composition not in IntegrationMethod._VALID_COMPOSITIONS:
            raise ValueError(
                f"Unsupported composition '{self.composition}'. "
                f"Valid options: {sorted(IntegrationMethod._VALID_COMPOSITIONS)}"
            )

    def stage_offsets(self) -> Tuple[float, ...]:
        """Exclusive prefix sums of ``a``: c[0] = 0, c[i] = c[i-1] + a[i-1]."""
        c = []
        c_i = 0.0
        for i in range(self.evaluations):
            c.append(c_i)
            c_i += self.a[i]
        return tuple(c)


# McLachlan & Atela (1992), "The accuracy of symplectic integrators",
# optimal fifth-order method.
McLachlanAtela1992Order5Optimal = IntegrationMethod(
    name='McLachlanAtela1992Order5Optimal',
    order=5,
    time_reversible=False,
    evaluations=6,
    composition='BA',
    a=(
        0.339839625839110000,
        -0.088601336903027329,
        0.5858564768259621188,
        -0.603039356536491888,
        0.3235807965546976394,
        0.4423637942197494587,
    ),
    b=(
        0.1193900292875672758,
        0.6989273703824752308,
        -0.1713123582716007754,
        0.4012695022513534480,
        0.0107050818482359840,
        -0.0589796254980311632,
    ),
)

# Stormer-Verlet in its kick-drift-kick (velocity Verlet) form.
Leapfrog = IntegrationMethod(
    name='Leapfrog',
    order=2,
    time_reversible=True,
    evaluations=2,
    composition='BA',
    a=(1.0, 0.0),
    b=(0.5, 0.5),
)

# Ruth (1983), "A canonical integration technique", written as the adjoint of
# the published drift-first form so the kick comes first.
Ruth1983 = IntegrationMethod(
    name='Ruth1983',
    order=3,
    time_reversible=False,
    evaluations=3,
    composition='BA',
    a=(2.0 / 3.0, -2.0 / 3.0, 1.0),
    b=(7.0 / 24.0, 3.0 / 4.0, -1.0 / 24.0),
)

_THETA = 1.0 / (2.0 - 2.0 ** (1.0 / 3.0))

# Forest & Ruth (1990), triple-jump composition of velocity Verlet.
ForestRuth1990 = IntegrationMethod(
    name='ForestRuth1990',
    order=4,
    time_reversible=True,
    evaluations=4,
    composition='BA',
    a=(_THETA, 1.0 - 2.0 * _THETA, _THETA, 0.0),
    b=(_THETA / 2.0, (1.0 - _THETA) / 2.0, (1.0 - _THETA) / 2.0, _THETA / 2.0),
)

METHODS: Dict[str, IntegrationMethod] = {
    method.name: method
    for method in (McLachlanAtela1992Order5Optimal, Leapfrog, Ruth1983, ForestRuth1990)
}

DEFAULT_METHOD = McLachlanAtela1992Order5Optimal


def get_method(method: Union[IntegrationMethod, str]) -> IntegrationMethod:
    """Convert a registry name or IntegrationMethod to an IntegrationMethod."""
    if isinstance(method, IntegrationMethod):
        return method
    elif isinstance(method, str):
        if method in METHODS:
            return METHODS[method]
        else:
            raise ValueError(f"Unknown integration method '{method}'. "
                             f"Use: {list(METHODS.keys())}")
    else:
        raise TypeError(
            f"method must be IntegrationMethod or str, got {type(method).__name__}"
        )
