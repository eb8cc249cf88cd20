"""Pytest configuration and shared fixtures."""

import matplotlib

matplotlib.use('Agg')

import pytest

from production_planning import PlanningParameters

EXAMPLE_DEMAND = [80, 180, 135, 240, 95, 139]


@pytest.fixture
def example_params():
    """Six month plan: 50/unit regular, 75/unit overtime, 5/unit storage."""
    return PlanningParameters(
        demand=EXAMPLE_DEMAND,
        cost_regular=50,
        cost_overtime=75,
        cost_storage=5,
        max_regular=150,
        max_overtime=60,
    )


@pytest.fixture
def single_period_params():
    """One period that needs overtime on top of regular capacity."""
    return PlanningParameters(
        demand=[100],
        cost_regular=50,
        cost_overtime=75,
        cost_storage=5,
        max_regular=80,
        max_overtime=60,
    )


@pytest.fixture
def example_config():
    return {
        'demand': list(EXAMPLE_DEMAND),
        'costs': {
            'regular_per_unit': 50,
            'overtime_per_unit': 75,
            'storage_per_unit_per_period': 5,
        },
        'capacity': {
            'max_regular_per_period': 150,
            'max_overtime_per_period': 60,
        },
        'solver': {'backend': 'linprog', 'time_limit': None},
    }
