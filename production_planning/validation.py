"""Solution validation - checks a decoded plan against the planning rules.

Runs after decoding. An empty list of violations means the plan builds
exactly what was ordered, within capacity, and leaves nothing in stock.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlanViolation:
    """One broken planning rule."""
    category: str
    period: int
    message: str


def validate_plan(params, plan):
    """
    Check a production plan against its parameters.

    Returns:
    --------
    List of PlanViolation (empty when the plan is valid)
    """
    violations = []
    months = list(plan)

    if len(months) != params.horizon:
        return [PlanViolation('horizon', -1,
                              f"Plan covers {len(months)} periods, expected {params.horizon}")]

    violations.extend(_check_quantities(params, months))
    violations.extend(_check_balance(params, months))

    if months[-1].stock_produced != 0:
        violations.append(PlanViolation(
            'ending_stock', params.horizon - 1,
            f"{months[-1].stock_produced} units left in stock after the last period"))

    return violations


def _check_quantities(params, months):
    violations = []
    for t, month in enumerate(months):
        if not 0 <= month.regular_units <= params.max_regular:
            violations.append(PlanViolation(
                'regular_capacity', t,
                f"Regular production {month.regular_units} outside [0, {params.max_regular}]"))
        if not 0 <= month.overtime_units <= params.max_overtime:
            violations.append(PlanViolation(
                'overtime_capacity', t,
                f"Overtime production {month.overtime_units} outside [0, {params.max_overtime}]"))
        if month.stock_produced < 0:
            violations.append(PlanViolation(
                'negative_stock', t, f"Negative stock {month.stock_produced}"))
    return violations


def _check_balance(params, months):
    violations = []
    carried_in = 0
    for t, month in enumerate(months):
        available = carried_in + month.units_built - month.stock_produced
        if available != params.demand[t]:
            violations.append(PlanViolation(
                'material_balance', t,
                f"Stock in {carried_in} + built {month.units_built} - stock out "
                f"{month.stock_produced} = {available}, demand is {params.demand[t]}"))
        carried_in = month.stock_produced
    return violations
