"""
Planning Parameters

Inputs of the multi-period production planning model:
- Demand (orders) for every period of the horizon
- Unit costs for regular pace production, overtime production and storage
- Per-period capacity limits for regular pace and overtime production

Parameters can be built directly or loaded from a JSON configuration file.
"""

import json
import logging
import math
from dataclasses import dataclass
from numbers import Real

from .errors import InvalidParameters

logger = logging.getLogger(__name__)


def load_config(config_path):
    """Load configuration from JSON file."""
    with open(config_path, 'r') as f:
        config = json.load(f)
    return config


@dataclass(frozen=True)
class PlanningParameters:
    """
    Demand, cost rates and capacities for one planning run.

    Attributes:
    -----------
    demand : tuple of int
        Units ordered in each period; its length is the horizon
    cost_regular : float
        Cost per unit built at regular pace
    cost_overtime : float
        Cost per unit built using overtime
    cost_storage : float
        Cost per unit held in stock from one period to the next
    max_regular : float
        Maximum units built at regular pace in a single period
    max_overtime : float
        Maximum units built using overtime in a single period
    """
    demand: tuple
    cost_regular: float
    cost_overtime: float
    cost_storage: float
    max_regular: float
    max_overtime: float

    def __post_init__(self):
        object.__setattr__(self, 'demand', tuple(_as_units(orders) for orders in self.demand))

    @property
    def horizon(self):
        return len(self.demand)

    @property
    def total_demand(self):
        return sum(self.demand)

    def validate(self):
        """
        Reject parameters the model cannot be built from.

        Raises:
        -------
        InvalidParameters
            If the horizon is empty, a demand is negative or not a whole
            number of units, or a cost or capacity is negative.
        """
        if self.horizon < 1:
            raise InvalidParameters("Planning horizon must contain at least one period")

        for period, orders in enumerate(self.demand):
            if not _is_finite_real(orders):
                raise InvalidParameters(f"Demand for period {period} is not a number: {orders!r}")
            if orders < 0:
                raise InvalidParameters(f"Demand for period {period} is negative: {orders}")
            if not float(orders).is_integer():
                raise InvalidParameters(f"Demand for period {period} is not a whole number of units: {orders}")

        for name in ('cost_regular', 'cost_overtime', 'cost_storage',
                     'max_regular', 'max_overtime'):
            value = getattr(self, name)
            if not _is_finite_real(value):
                raise InvalidParameters(f"{name} is not a finite number: {value!r}")
            if value < 0:
                raise InvalidParameters(f"{name} is negative: {value}")

        return self

    @classmethod
    def from_config(cls, config):
        """
        Build parameters from a configuration dictionary.

        Expected layout:
            {"demand": [...],
             "costs": {"regular_per_unit", "overtime_per_unit",
                       "storage_per_unit_per_period"},
             "capacity": {"max_regular_per_period", "max_overtime_per_period"}}
        """
        try:
            costs = config['costs']
            capacity = config['capacity']
            params = cls(
                demand=config['demand'],
                cost_regular=costs['regular_per_unit'],
                cost_overtime=costs['overtime_per_unit'],
                cost_storage=costs['storage_per_unit_per_period'],
                max_regular=capacity['max_regular_per_period'],
                max_overtime=capacity['max_overtime_per_period'],
            )
        except KeyError as e:
            raise InvalidParameters(f"Missing configuration key: {e.args[0]}") from e
        except TypeError as e:
            raise InvalidParameters(f"Malformed configuration: {e}") from e

        logger.debug("Loaded %d-period plan from config", params.horizon)
        return params.validate()


def _is_finite_real(value):
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _as_units(value):
    # 80.0 read from JSON is 80 units; anything else is left for validate()
    if _is_finite_real(value) and float(value).is_integer():
        return int(value)
    return value
