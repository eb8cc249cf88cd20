"""
Plan production from a JSON configuration.

Usage: python -m production_planning [--config config.json] [--solver milp]

Without --config the bundled 6-month example is planned.
"""

import argparse
import logging
import sys
from pathlib import Path

from .errors import InfeasibleModel, InvalidParameters, PlanningError
from .parameters import PlanningParameters, load_config
from .planner import solve_plan
from .report import print_plan
from .solver import SOLVERS, get_solver
from .validation import validate_plan

DEFAULT_CONFIG = Path(__file__).parent / "config.json"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Minimum cost multi-period production plan")
    parser.add_argument('--config', type=Path, default=DEFAULT_CONFIG,
                        help="JSON planning configuration")
    parser.add_argument('--solver', choices=sorted(SOLVERS),
                        help="Solver backend (overrides the config)")
    parser.add_argument('--time-limit', type=float,
                        help="Solver time limit in seconds (overrides the config)")
    parser.add_argument('--precheck', action='store_true',
                        help="Check cumulative capacity before solving")
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    config = load_config(args.config)
    solver_config = config.get('solver') or {}
    backend = args.solver or solver_config.get('backend', 'linprog')
    time_limit = args.time_limit if args.time_limit is not None else solver_config.get('time_limit')

    print("=" * 80)
    print("PRODUCTION PLANNING - MULTI-PERIOD OPTIMIZATION")
    print("=" * 80)

    try:
        params = PlanningParameters.from_config(config)

        print("\nProblem Configuration:")
        print("-" * 80)
        print(f"Planning Horizon: {params.horizon} months")
        print(f"Regular pace: ${params.cost_regular}/unit, max {params.max_regular} units/month")
        print(f"Overtime: ${params.cost_overtime}/unit, max {params.max_overtime} units/month")
        print(f"Storage: ${params.cost_storage}/unit/month")
        print(f"Orders: {list(params.demand)} (total {params.total_demand})")
        print("-" * 80)

        plan = solve_plan(params, solver=get_solver(backend, time_limit=time_limit),
                          precheck=args.precheck)
    except (InvalidParameters, InfeasibleModel) as e:
        print(f"\n✗ Optimization failed: {e}")
        print("=" * 80)
        return 1
    except PlanningError as e:
        print(f"\n✗ Solver failure: {e}")
        print("=" * 80)
        return 2

    print_plan(params, plan)

    violations = validate_plan(params, plan)
    for violation in violations:
        print(f"✗ {violation.category} (month {violation.period + 1}): {violation.message}")
    return 2 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
