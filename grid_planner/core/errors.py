"""Exceptions raised by the planners."""

from __future__ import annotations


class PlannerError(Exception):
    """Base error for path planning."""


class InvalidInputError(PlannerError, ValueError):
    """Raised when a caller passes a malformed grid or out-of-bounds cell."""


class PathReconstructionError(PlannerError, RuntimeError):
    """Raised when a parent link cannot be resolved in the closed list.

    This signals broken expansion bookkeeping, not a missing path.
    """


__all__ = ["PlannerError", "InvalidInputError", "PathReconstructionError"]
