"""
Sensitivity Analysis: Capacity Limits Impact

This module re-solves the production model over a grid of regular pace and
overtime capacities to see how the optimal cost reacts.

This helps understand:
- How much does each extra unit of capacity save?
- Where does the plan become infeasible?
- Raising a capacity limit never makes the optimal plan more expensive
"""

import dataclasses
import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from tqdm import tqdm

from .errors import InfeasibleModel
from .parameters import PlanningParameters, load_config
from .planner import solve_plan

logger = logging.getLogger(__name__)

SWEEP_COLUMNS = ['max_regular', 'max_overtime', 'feasible', 'total_cost',
                 'objective_value', 'overtime_units', 'storage_units']


def capacity_sweep(params, regular_range=None, overtime_range=None,
                   solver=None, show_progress=False):
    """
    Solve the model for every combination of capacity limits.

    Parameters:
    -----------
    params : PlanningParameters
        Base parameters; only the capacities are varied
    regular_range : iterable, optional
        Regular pace capacities to test (defaults to params.max_regular)
    overtime_range : iterable, optional
        Overtime capacities to test (defaults to params.max_overtime)
    solver : solver backend, optional
    show_progress : bool
        Show a tqdm progress bar

    Returns:
    --------
    pandas.DataFrame with one row per grid point. Infeasible points are kept
    with NaN costs.
    """
    regular_values = list(regular_range) if regular_range is not None else [params.max_regular]
    overtime_values = list(overtime_range) if overtime_range is not None else [params.max_overtime]

    grid = [(r, o) for r in regular_values for o in overtime_values]
    results = []

    for max_regular, max_overtime in tqdm(grid, desc="Capacity sweep", disable=not show_progress):
        trial = dataclasses.replace(params, max_regular=max_regular, max_overtime=max_overtime)

        try:
            plan = solve_plan(trial, solver=solver)
        except InfeasibleModel:
            results.append({
                'max_regular': max_regular,
                'max_overtime': max_overtime,
                'feasible': False,
                'total_cost': np.nan,
                'objective_value': np.nan,
                'overtime_units': np.nan,
                'storage_units': np.nan,
            })
            continue

        results.append({
            'max_regular': max_regular,
            'max_overtime': max_overtime,
            'feasible': True,
            'total_cost': plan.total_cost,
            'objective_value': plan.objective_value,
            'overtime_units': sum(m.overtime_units for m in plan),
            'storage_units': sum(m.stock_produced for m in plan),
        })

    logger.info("Capacity sweep: %d grid points, %d feasible",
                len(results), sum(r['feasible'] for r in results))

    return pd.DataFrame(results, columns=SWEEP_COLUMNS)


def is_monotone_non_increasing(df, tolerance=1e-6):
    """
    Check that raising either capacity never raises the optimal cost.

    Infeasible points count as infinitely expensive.
    """
    costs = df.assign(cost=df['objective_value'].fillna(np.inf))

    for varied, fixed in (('max_regular', 'max_overtime'), ('max_overtime', 'max_regular')):
        for _, group in costs.groupby(fixed):
            series = group.sort_values(varied)['cost'].to_numpy()
            if np.any(series[1:] > series[:-1] + tolerance):
                return False
    return True


def plot_cost_heatmap(df, output_path):
    """Create heatmap of optimal cost by (max_regular, max_overtime)."""
    pivot = df.pivot(index='max_overtime', columns='max_regular', values='objective_value')

    fig, ax = plt.subplots(figsize=(12, 8))
    sns.heatmap(pivot, annot=True, fmt='.0f', cmap='RdYlGn_r',
                cbar_kws={'label': 'Optimal Cost ($)'}, ax=ax)
    ax.set_title('Optimal Production Cost by Capacity Limits\n(blank cells are infeasible)',
                 fontsize=14, fontweight='bold')
    ax.set_xlabel('Regular Pace Capacity (units/period)', fontsize=12, fontweight='bold')
    ax.set_ylabel('Overtime Capacity (units/period)', fontsize=12, fontweight='bold')
    ax.invert_yaxis()

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    print(f"✓ Saved heatmap: {output_path}")
    plt.close(fig)
    return output_path


def plot_capacity_curve(df, output_path, capacity='max_regular'):
    """Plot optimal cost against one capacity, one line per value of the other."""
    other = 'max_overtime' if capacity == 'max_regular' else 'max_regular'

    fig, ax = plt.subplots(figsize=(12, 6))
    for value, group in df.groupby(other):
        group = group.sort_values(capacity)
        ax.plot(group[capacity], group['objective_value'], '-o', linewidth=2,
                markersize=6, label=f'{other} = {value}')

    ax.set_xlabel(capacity.replace('_', ' ').title() + ' (units/period)', fontsize=12, fontweight='bold')
    ax.set_ylabel('Optimal Cost ($)', fontsize=12, fontweight='bold')
    ax.set_title('Sensitivity Analysis: Impact of Capacity on Optimal Cost',
                 fontsize=14, fontweight='bold')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best', fontsize=10)

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    print(f"✓ Plot saved to: {output_path}")
    plt.close(fig)
    return output_path


def print_summary(df):
    """Print summary statistics."""
    feasible = df[df['feasible']]

    print("\n" + "=" * 80)
    print("SUMMARY STATISTICS")
    print("=" * 80)

    print(f"\nGrid points: {len(df)} ({len(feasible)} feasible)")
    if feasible.empty:
        print("No feasible capacity combination to summarize.")
        print("=" * 80)
        return

    best = feasible.loc[feasible['objective_value'].idxmin()]
    worst = feasible.loc[feasible['objective_value'].idxmax()]

    print(f"\nCheapest: ${best['objective_value']:.2f} "
          f"(regular = {best['max_regular']}, overtime = {best['max_overtime']})")
    print(f"Most expensive: ${worst['objective_value']:.2f} "
          f"(regular = {worst['max_regular']}, overtime = {worst['max_overtime']})")
    print(f"Monotone in capacity: {'yes' if is_monotone_non_increasing(df) else 'NO'}")
    print("=" * 80)


if __name__ == "__main__":
    config_path = Path(__file__).parent / "config.json"
    params = PlanningParameters.from_config(load_config(config_path))

    regular_range = range(130, 181, 10)
    overtime_range = range(0, 101, 20)
    df = capacity_sweep(params, regular_range, overtime_range, show_progress=True)

    print_summary(df)

    plot_cost_heatmap(df, Path.cwd() / "capacity_cost_heatmap.png")
    plot_capacity_curve(df, Path.cwd() / "regular_capacity_sensitivity.png")
