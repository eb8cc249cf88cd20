"""Multi-period production planning as a linear program."""

from .decoder import MonthlyProduction, decode_plan
from .errors import InfeasibleModel, InvalidParameters, PlanningError, SolverError, UnboundedModel
from .model import ConstraintRow, LPModel, Relation, build_production_model, check_capacity
from .parameters import PlanningParameters, load_config
from .planner import ProductionPlan, optimize, solve_plan
from .solver import LinprogSolver, MilpSolver, Solution, get_solver
from .validation import PlanViolation, validate_plan

__version__ = '0.1.0'

__all__ = [
    'ConstraintRow',
    'InfeasibleModel',
    'InvalidParameters',
    'LPModel',
    'LinprogSolver',
    'MilpSolver',
    'MonthlyProduction',
    'PlanViolation',
    'PlanningError',
    'PlanningParameters',
    'ProductionPlan',
    'Relation',
    'Solution',
    'SolverError',
    'UnboundedModel',
    'build_production_model',
    'check_capacity',
    'decode_plan',
    'get_solver',
    'load_config',
    'optimize',
    'solve_plan',
    'validate_plan',
]
