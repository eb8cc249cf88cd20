"""Exceptions raised while building, solving and decoding production plans."""


class PlanningError(Exception):
    """Base class for all production planning failures."""


class InvalidParameters(PlanningError, ValueError):
    """Planning parameters were rejected before a model was built."""


class InfeasibleModel(PlanningError):
    """No production plan satisfies demand within the available capacity."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class UnboundedModel(PlanningError):
    """The solver reported an unbounded objective.

    Production variables are capped and inventory cannot go negative, so this
    points at a broken formulation rather than bad input.
    """

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class SolverError(PlanningError):
    """The solver stopped without an optimal point (limits, numerical trouble)."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status
