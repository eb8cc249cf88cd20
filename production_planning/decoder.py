"""Map an optimal solution vector back to a per-month production plan."""

import logging
from dataclasses import dataclass

import numpy as np

from .model import variable_layout

logger = logging.getLogger(__name__)

# Distance from an integer tolerated as solver noise
ROUNDING_TOLERANCE = 1e-6


@dataclass(frozen=True)
class MonthlyProduction:
    """What to build in one period, and what to keep in stock afterwards."""
    regular_units: int = 0
    overtime_units: int = 0
    stock_produced: int = 0
    orders_fulfilled: int = 0

    @property
    def units_built(self):
        return self.regular_units + self.overtime_units


def round_units(value, name=''):
    """Round a solver value to whole units, warning when it is not near-integral."""
    rounded = int(np.rint(value))
    if abs(value - rounded) > ROUNDING_TOLERANCE:
        logger.warning("Fractional value %.6f for %s rounded to %d", value, name, rounded)
    return rounded


def decode_plan(params, solution):
    """
    Rebuild the per-period plan from the solver's optimal point.

    Parameters:
    -----------
    params : PlanningParameters
        Parameters the model was built from
    solution : Solution
        Optimal point in the model's variable ordering

    Returns:
    --------
    List of MonthlyProduction, one per period
    """
    N = params.horizon
    num_vars, regular_idx, overtime_idx, inventory_idx = variable_layout(N)

    x = np.asarray(solution.values, dtype=float)
    if x.shape != (num_vars,):
        raise ValueError(f"Expected {num_vars} solution values for a {N}-period plan, got {x.size}")

    months = []
    for t in range(N):
        stock = 0
        if t < N - 1:
            stock = round_units(x[inventory_idx(t)], f"inventory[{t}]")

        months.append(MonthlyProduction(
            regular_units=round_units(x[regular_idx(t)], f"regular[{t}]"),
            overtime_units=round_units(x[overtime_idx(t)], f"overtime[{t}]"),
            stock_produced=stock,
            orders_fulfilled=params.demand[t],
        ))

    return months
