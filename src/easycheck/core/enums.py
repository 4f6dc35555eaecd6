"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """How a resolved failure reaches the caller.

    ERROR failures are raised, WARNING failures are issued with
    :func:`warnings.warn`.
    """

    ERROR = "error"
    WARNING = "warning"


class ExecutionMode(str, Enum):
    """What check_if_paths_exist does when some paths are missing.

    Values are strings so callers may pass ``"raise"`` or ``"return"``.
    """

    RAISE = "raise"
    RETURN = "return"


__all__ = ["FailureKind", "ExecutionMode"]
