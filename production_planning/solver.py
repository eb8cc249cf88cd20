"""
LP solver boundary.

Any object with a ``solve(model) -> Solution`` method can stand in as the
solver. Two backends wrap SciPy's HiGHS interface:

- LinprogSolver: scipy.optimize.linprog on the matrix form of the model
- MilpSolver: scipy.optimize.milp, optionally with integral variables

Failures are raised rather than returned: InfeasibleModel, UnboundedModel,
or SolverError for anything else that is not an optimal point.
"""

import logging
from dataclasses import dataclass

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, linprog, milp

from .errors import InfeasibleModel, SolverError, UnboundedModel

logger = logging.getLogger(__name__)

# Status codes shared by scipy's linprog and milp
STATUS_OPTIMAL = 0
STATUS_LIMIT = 1
STATUS_INFEASIBLE = 2
STATUS_UNBOUNDED = 3


@dataclass(frozen=True)
class Solution:
    """Optimal point of an LP model, aligned with the model's variables."""
    values: np.ndarray
    objective_value: float
    status: int = STATUS_OPTIMAL
    message: str = ''
    backend: str = ''


def check_result(result, backend):
    """Turn a scipy OptimizeResult into a Solution, or raise."""
    if result.status == STATUS_OPTIMAL:
        return Solution(values=np.asarray(result.x, dtype=float),
                        objective_value=float(result.fun),
                        status=result.status,
                        message=result.message,
                        backend=backend)

    logger.debug("%s finished with status %s: %s", backend, result.status, result.message)

    if result.status == STATUS_INFEASIBLE:
        raise InfeasibleModel(f"Production plan is infeasible: {result.message}",
                              status=result.status)
    if result.status == STATUS_UNBOUNDED:
        raise UnboundedModel(f"Production model is unbounded: {result.message}",
                             status=result.status)
    raise SolverError(f"{backend} failed with status {result.status}: {result.message}",
                      status=result.status)


class LinprogSolver:
    """Solve with scipy.optimize.linprog (HiGHS backend by default)."""

    name = 'linprog'

    def __init__(self, method='highs', time_limit=None, options=None):
        self.method = method
        self.time_limit = time_limit
        self.options = dict(options or {})

    def solver_options(self):
        options = {'disp': False}
        if self.time_limit is not None:
            options['time_limit'] = self.time_limit
        options.update(self.options)
        return options

    def solve(self, model):
        A_ub, b_ub, A_eq, b_eq = model.to_matrices()

        logger.debug("Solving %d variables with linprog(method=%s)",
                     model.num_variables, self.method)

        # The model carries its own non-negativity rows
        result = linprog(
            c=model.objective,
            A_ub=A_ub if len(b_ub) else None,
            b_ub=b_ub if len(b_ub) else None,
            A_eq=A_eq if len(b_eq) else None,
            b_eq=b_eq if len(b_eq) else None,
            bounds=(None, None),
            method=self.method,
            options=self.solver_options()
        )

        return check_result(result, self.name)


class MilpSolver:
    """
    Solve with scipy.optimize.milp.

    With integral=True every variable is integer. The production model is
    totally unimodular, so this yields the same optimum as the LP relaxation.
    """

    name = 'milp'

    def __init__(self, integral=True, time_limit=None, options=None):
        self.integral = integral
        self.time_limit = time_limit
        self.options = dict(options or {})

    def solver_options(self):
        options = {'disp': False}
        if self.time_limit is not None:
            options['time_limit'] = self.time_limit
        options.update(self.options)
        return options

    def solve(self, model):
        A_ub, b_ub, A_eq, b_eq = model.to_matrices()
        n = model.num_variables

        constraints = []
        if len(b_ub):
            constraints.append(LinearConstraint(A_ub, -np.inf, b_ub))
        if len(b_eq):
            constraints.append(LinearConstraint(A_eq, b_eq, b_eq))

        integrality = np.ones(n) if self.integral else np.zeros(n)

        logger.debug("Solving %d variables with milp(integral=%s)", n, self.integral)

        result = milp(
            c=model.objective,
            constraints=constraints,
            bounds=Bounds(lb=np.full(n, -np.inf), ub=np.full(n, np.inf)),
            integrality=integrality,
            options=self.solver_options()
        )

        return check_result(result, self.name)


SOLVERS = {
    LinprogSolver.name: LinprogSolver,
    MilpSolver.name: MilpSolver,
}


def get_solver(name='linprog', **kwargs):
    """Create a solver backend by name ('linprog' or 'milp')."""
    try:
        solver_cls = SOLVERS[name]
    except KeyError:
        raise ValueError(f"Unknown solver backend {name!r}; expected one of {sorted(SOLVERS)}") from None
    return solver_cls(**kwargs)
