"""Tests for the command-line entry point."""

import json

from production_planning.__main__ import main


def write_config(tmp_path, config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    return path


def test_bundled_example(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Optimized production cost: 45150" in out
    assert "Planning Horizon: 6 months" in out
    assert "Cost Breakdown:" in out


def test_milp_backend(tmp_path, example_config, capsys):
    path = write_config(tmp_path, example_config)
    assert main(['--config', str(path), '--solver', 'milp', '--time-limit', '30']) == 0
    out = capsys.readouterr().out
    assert "Solver: milp" in out
    assert "45150" in out


def test_infeasible_config(tmp_path, example_config, capsys):
    example_config['demand'][0] = 10000
    path = write_config(tmp_path, example_config)

    assert main(['--config', str(path)]) == 1
    assert "Optimization failed" in capsys.readouterr().out


def test_infeasible_config_with_precheck(tmp_path, example_config, capsys):
    example_config['demand'][0] = 10000
    path = write_config(tmp_path, example_config)

    assert main(['--config', str(path), '--precheck']) == 1
    assert "Cumulative demand" in capsys.readouterr().out


def test_invalid_config(tmp_path, example_config, capsys):
    example_config['demand'] = []
    path = write_config(tmp_path, example_config)

    assert main(['--config', str(path)]) == 1
    assert "at least one period" in capsys.readouterr().out
