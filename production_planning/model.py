"""
Production Planning - Multi-Period LP Model

This model plans production over a horizon of N periods with:
- Regular pace production, capped per period
- Overtime production at a higher unit cost, capped per period
- Inventory carried from one period to the next at a storage cost
- No starting stock and no stock left after the last period

Decision Variables:
- regular[t]: Units built at regular pace in period t - indices 0 to N-1
- overtime[t]: Units built using overtime in period t - indices N to 2N-1
- inventory[t]: Stock at end of period t, for t < N-1 - indices 2N to 3N-2

Objective: Minimize total cost (regular + overtime + storage)
"""

import enum
import logging
from dataclasses import dataclass, field

import numpy as np

from .errors import InfeasibleModel

logger = logging.getLogger(__name__)


class Relation(enum.Enum):
    LEQ = '<='
    GEQ = '>='
    EQ = '='


@dataclass(frozen=True)
class ConstraintRow:
    """One linear constraint: coefficients . x (relation) rhs."""
    coefficients: np.ndarray
    relation: Relation
    rhs: float
    name: str = ''


@dataclass
class LPModel:
    """
    Objective and constraint rows of a linear program to minimize.

    All coefficient vectors are aligned with `variable_names`.
    """
    objective: np.ndarray
    constraints: list
    variable_names: list
    goal: str = 'minimize'
    metadata: dict = field(default_factory=dict)

    @property
    def num_variables(self):
        return len(self.objective)

    def rows(self, relation):
        return [row for row in self.constraints if row.relation is relation]

    def to_matrices(self):
        """
        Stack the rows into the matrix form used by scipy's linprog.

        Returns:
        --------
        Tuple of (A_ub, b_ub, A_eq, b_eq). Rows with >= are negated into <=.
        """
        n = self.num_variables
        ub_rows, ub_rhs = [], []
        for row in self.constraints:
            if row.relation is Relation.LEQ:
                ub_rows.append(row.coefficients)
                ub_rhs.append(row.rhs)
            elif row.relation is Relation.GEQ:
                ub_rows.append(-row.coefficients)
                ub_rhs.append(-row.rhs)

        eq = self.rows(Relation.EQ)

        A_ub = np.array(ub_rows, dtype=float).reshape(len(ub_rows), n)
        b_ub = np.array(ub_rhs, dtype=float)
        A_eq = np.array([row.coefficients for row in eq], dtype=float).reshape(len(eq), n)
        b_eq = np.array([row.rhs for row in eq], dtype=float)
        return A_ub, b_ub, A_eq, b_eq


def variable_layout(horizon):
    """
    Index helpers for a horizon of N periods.

    Returns:
    --------
    Tuple of (num_vars, regular_idx, overtime_idx, inventory_idx)
    """
    N = horizon
    num_vars = 3 * N - 1

    regular_idx = lambda t: t  # regular[t] at index t
    overtime_idx = lambda t: N + t  # overtime[t] at index N+t
    inventory_idx = lambda t: 2*N + t  # inventory[t] at index 2N+t, t < N-1

    return num_vars, regular_idx, overtime_idx, inventory_idx


def build_production_model(params):
    """
    Build the multi-period production planning LP model.

    Variables (for each period t = 0 to N-1):
    - regular[t], overtime[t] for every period
    - inventory[t] for every period but the last

    Total variables: 3*N - 1

    Parameters:
    -----------
    params : PlanningParameters
        Demand, costs and capacities; validated before anything is built

    Returns:
    --------
    LPModel
    """
    params.validate()

    N = params.horizon
    demand = np.array(params.demand, dtype=float)
    num_vars, regular_idx, overtime_idx, inventory_idx = variable_layout(N)

    variable_names = (
        [f"regular[{t}]" for t in range(N)]
        + [f"overtime[{t}]" for t in range(N)]
        + [f"inventory[{t}]" for t in range(N - 1)]
    )

    # Objective function coefficients
    # Minimize: sum(c_reg * regular[t]) + sum(c_ot * overtime[t]) + sum(c_store * inventory[t])
    c = np.zeros(num_vars)

    for t in range(N):
        c[regular_idx(t)] = params.cost_regular
        c[overtime_idx(t)] = params.cost_overtime

    # Storage is only paid where stock can be carried
    for t in range(N - 1):
        c[inventory_idx(t)] = params.cost_storage

    constraints = []

    def unit_row(index):
        A = np.zeros(num_vars)
        A[index] = 1
        return A

    # Capacity: regular[t] <= max_regular, overtime[t] <= max_overtime
    for t in range(N):
        constraints.append(ConstraintRow(unit_row(regular_idx(t)), Relation.LEQ,
                                         params.max_regular, f"regular_capacity[{t}]"))
        constraints.append(ConstraintRow(unit_row(overtime_idx(t)), Relation.LEQ,
                                         params.max_overtime, f"overtime_capacity[{t}]"))

    # Non-negativity
    for t in range(N):
        constraints.append(ConstraintRow(unit_row(regular_idx(t)), Relation.GEQ, 0.0,
                                         f"regular_nonneg[{t}]"))
        constraints.append(ConstraintRow(unit_row(overtime_idx(t)), Relation.GEQ, 0.0,
                                         f"overtime_nonneg[{t}]"))
    for t in range(N - 1):
        constraints.append(ConstraintRow(unit_row(inventory_idx(t)), Relation.GEQ, 0.0,
                                         f"inventory_nonneg[{t}]"))

    # Inventory balance for each period t
    # inventory[t-1] + regular[t] + overtime[t] - inventory[t] = demand[t]
    for t in range(N):
        A = np.zeros(num_vars)

        A[regular_idx(t)] = 1
        A[overtime_idx(t)] = 1

        # inventory[t-1] coefficient: +1 (no starting stock)
        if t > 0:
            A[inventory_idx(t - 1)] = 1

        # inventory[t] coefficient: -1 (no variable after the last period)
        if t < N - 1:
            A[inventory_idx(t)] = -1

        constraints.append(ConstraintRow(A, Relation.EQ, demand[t], f"balance[{t}]"))

    logger.debug("Built production model: %d variables, %d constraints over %d periods",
                 num_vars, len(constraints), N)

    return LPModel(objective=c, constraints=constraints,
                   variable_names=variable_names,
                   metadata={'horizon': N})


def check_capacity(params):
    """
    Fast feasibility pre-check.

    Stock only moves forward in time, so a plan exists if and only if the
    cumulative capacity covers the cumulative demand at every period.

    Raises:
    -------
    InfeasibleModel
        Naming the first period whose cumulative demand cannot be met.
    """
    params.validate()

    per_period = params.max_regular + params.max_overtime
    cumulative_capacity = per_period * np.arange(1, params.horizon + 1)
    cumulative_demand = np.cumsum(params.demand)

    short = np.nonzero(cumulative_demand > cumulative_capacity)[0]
    if len(short):
        t = int(short[0])
        raise InfeasibleModel(
            f"Cumulative demand of {cumulative_demand[t]:.0f} units by period {t} "
            f"exceeds cumulative capacity of {cumulative_capacity[t]:.0f} units"
        )
