"""Tests for planning parameter validation and configuration loading."""

import json
import math

import pytest

from production_planning import InvalidParameters, PlanningParameters, load_config


def make_params(**overrides):
    values = dict(demand=[10, 20], cost_regular=1, cost_overtime=2, cost_storage=0.5,
                  max_regular=15, max_overtime=10)
    values.update(overrides)
    return PlanningParameters(**values)


class TestValidation:
    def test_valid_parameters_pass(self):
        params = make_params()
        assert params.validate() is params
        assert params.horizon == 2
        assert params.total_demand == 30

    def test_empty_horizon_rejected(self):
        with pytest.raises(InvalidParameters, match="at least one period"):
            make_params(demand=[]).validate()

    def test_negative_demand_rejected(self):
        with pytest.raises(InvalidParameters, match="period 1 is negative"):
            make_params(demand=[10, -1]).validate()

    def test_fractional_demand_rejected(self):
        with pytest.raises(InvalidParameters, match="whole number"):
            make_params(demand=[10.5]).validate()

    def test_non_numeric_demand_rejected(self):
        with pytest.raises(InvalidParameters, match="not a number"):
            make_params(demand=[10, "20"]).validate()

    def test_nan_demand_rejected(self):
        with pytest.raises(InvalidParameters):
            make_params(demand=[math.nan]).validate()

    @pytest.mark.parametrize('field', ['cost_regular', 'cost_overtime', 'cost_storage',
                                       'max_regular', 'max_overtime'])
    def test_negative_cost_or_capacity_rejected(self, field):
        with pytest.raises(InvalidParameters, match=field):
            make_params(**{field: -1}).validate()

    def test_infinite_capacity_rejected(self):
        with pytest.raises(InvalidParameters, match="max_regular"):
            make_params(max_regular=math.inf).validate()

    def test_zero_costs_and_capacities_allowed(self):
        make_params(cost_regular=0, cost_overtime=0, cost_storage=0,
                    max_regular=0, max_overtime=0, demand=[0]).validate()

    def test_invalid_parameters_is_a_value_error(self):
        with pytest.raises(ValueError):
            make_params(demand=[-5]).validate()


class TestDemandNormalization:
    def test_integral_floats_become_units(self):
        params = make_params(demand=[80.0, 180.0])
        assert params.demand == (80, 180)
        assert all(isinstance(d, int) for d in params.demand)

    def test_demand_stored_as_tuple(self):
        params = make_params(demand=[1, 2, 3])
        assert params.demand == (1, 2, 3)


class TestConfig:
    def test_from_config(self, example_config):
        params = PlanningParameters.from_config(example_config)
        assert params.demand == (80, 180, 135, 240, 95, 139)
        assert params.cost_regular == 50
        assert params.cost_overtime == 75
        assert params.cost_storage == 5
        assert params.max_regular == 150
        assert params.max_overtime == 60

    def test_missing_key_rejected(self, example_config):
        del example_config['capacity']['max_overtime_per_period']
        with pytest.raises(InvalidParameters, match="max_overtime_per_period"):
            PlanningParameters.from_config(example_config)

    def test_invalid_values_rejected(self, example_config):
        example_config['costs']['storage_per_unit_per_period'] = -5
        with pytest.raises(InvalidParameters, match="cost_storage"):
            PlanningParameters.from_config(example_config)

    def test_load_config_from_file(self, tmp_path, example_config):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(example_config))
        assert load_config(path) == example_config
