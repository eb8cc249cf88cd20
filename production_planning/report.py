"""Printed report of an optimized production plan."""


def print_plan(params, plan):
    """Print the per-month plan and its cost breakdown."""
    print("\n" + "=" * 80)
    print("SOLUTION RESULTS")
    print("=" * 80)

    print(f"\nOptimized production cost: {plan.total_cost}")
    if plan.backend:
        print(f"Solver: {plan.backend} (HiGHS)")

    print("\nProduction Plan (units):")
    print(f"{'Month':>6} {'Orders':>8} {'Regular':>9} {'Overtime':>9} {'Stock Out':>10}")
    print("-" * 46)
    for t, month in enumerate(plan, 1):
        print(f"{t:6d} {month.orders_fulfilled:8d} {month.regular_units:9d} "
              f"{month.overtime_units:9d} {month.stock_produced:10d}")

    total_regular = sum(m.regular_units for m in plan)
    total_overtime = sum(m.overtime_units for m in plan)
    print("-" * 46)
    print(f"{'Total':>6} {params.total_demand:8d} {total_regular:9d} {total_overtime:9d}")

    costs = plan.cost_breakdown(params)
    print("\n" + "-" * 80)
    print("Cost Breakdown:")
    print("-" * 80)
    print(f"Regular Pace Cost:        ${costs['regular']:12.2f}")
    print(f"Overtime Cost:            ${costs['overtime']:12.2f}")
    print(f"Storage Cost:             ${costs['storage']:12.2f}")
    print("-" * 80)
    print(f"Total Cost:               ${plan.objective_value:12.2f}")
    print("=" * 80)
