"""
Caller-facing planning API.

Each call runs the whole pipeline on its own: parameters -> LP model ->
solver -> decoded plan. Nothing is shared between calls.
"""

import logging
import math
from dataclasses import dataclass

import pandas as pd

from .decoder import ROUNDING_TOLERANCE, decode_plan
from .model import build_production_model, check_capacity
from .parameters import PlanningParameters
from .solver import LinprogSolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductionPlan:
    """
    Optimal production plan.

    Attributes:
    -----------
    months : tuple of MonthlyProduction
        One entry per period of the horizon
    total_cost : int
        Optimized production cost reported as whole currency units
    objective_value : float
        Raw objective value returned by the solver
    backend : str
        Name of the solver backend that produced the plan
    """
    months: tuple
    total_cost: int
    objective_value: float
    backend: str = ''

    def __iter__(self):
        return iter(self.months)

    def __len__(self):
        return len(self.months)

    def __getitem__(self, period):
        return self.months[period]

    @property
    def ending_stock(self):
        return self.months[-1].stock_produced

    def cost_breakdown(self, params):
        """Split the plan cost into regular, overtime and storage components."""
        regular = sum(m.regular_units for m in self.months) * params.cost_regular
        overtime = sum(m.overtime_units for m in self.months) * params.cost_overtime
        storage = sum(m.stock_produced for m in self.months) * params.cost_storage
        return {
            'regular': regular,
            'overtime': overtime,
            'storage': storage,
            'total': regular + overtime + storage,
        }

    def to_dataframe(self):
        """One row per period, indexed by period number."""
        df = pd.DataFrame([
            {
                'period': t,
                'orders_fulfilled': m.orders_fulfilled,
                'regular_units': m.regular_units,
                'overtime_units': m.overtime_units,
                'stock_produced': m.stock_produced,
            }
            for t, m in enumerate(self.months)
        ])
        return df.set_index('period')


def report_cost(objective_value):
    """
    Whole-unit production cost for reporting.

    The value is truncated, but a value within the rounding tolerance of an
    integer is snapped first so solver noise such as 45149.9999999 is not
    reported one unit short.
    """
    nearest = round(objective_value)
    if abs(objective_value - nearest) <= ROUNDING_TOLERANCE:
        return int(nearest)
    return math.trunc(objective_value)


def solve_plan(params, solver=None, precheck=False):
    """
    Build, solve and decode the production model for `params`.

    Parameters:
    -----------
    params : PlanningParameters
    solver : object with a solve(model) method, optional
        Defaults to a fresh LinprogSolver
    precheck : bool
        Run the cumulative capacity check before calling the solver

    Returns:
    --------
    ProductionPlan

    Raises:
    -------
    InvalidParameters, InfeasibleModel, UnboundedModel, SolverError
    """
    model = build_production_model(params)

    if precheck:
        check_capacity(params)

    if solver is None:
        solver = LinprogSolver()

    solution = solver.solve(model)
    months = decode_plan(params, solution)

    plan = ProductionPlan(months=tuple(months),
                          total_cost=report_cost(solution.objective_value),
                          objective_value=solution.objective_value,
                          backend=solution.backend)

    logger.info("Optimized %d-period plan: cost %d (%s)",
                params.horizon, plan.total_cost, plan.backend or 'custom solver')
    return plan


def optimize(demand, cost_regular, cost_storage, cost_overtime,
             max_regular, max_overtime, solver=None, precheck=False):
    """
    Plan production for the given orders at minimum cost.

    Parameters:
    -----------
    demand : sequence of int
        Units ordered in each period
    cost_regular : float
        Cost to build one unit at regular pace
    cost_storage : float
        Cost to keep one unit in stock for one period
    cost_overtime : float
        Cost to build one unit using overtime
    max_regular : float
        Maximum regular pace production per period
    max_overtime : float
        Maximum overtime production per period

    Returns:
    --------
    ProductionPlan with one MonthlyProduction per period and the total cost
    """
    params = PlanningParameters(
        demand=demand,
        cost_regular=cost_regular,
        cost_overtime=cost_overtime,
        cost_storage=cost_storage,
        max_regular=max_regular,
        max_overtime=max_overtime,
    )
    return solve_plan(params, solver=solver, precheck=precheck)
