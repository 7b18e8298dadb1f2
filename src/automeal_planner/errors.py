"""Errors surfaced by the planner."""


class PlannerError(Exception):
    """Base class for planner errors."""


class InvalidRequest(PlannerError, ValueError):
    """Plan request is malformed or incomplete. The only error callers see."""
