"""easycheck: readable runtime checks with configurable failure handling.

Each check answers one question about a value and, when the answer is "no",
raises an exception, issues a warning or (for path checks in ``"return"``
mode) reports the failure, depending on the ``handle_with`` class the caller
passes.

Public API:
    check_if, check_if_not, assert_if, assert_if_not: generic conditions
    check_type, assert_type: type membership
    check_length, assert_length: length comparison
    check_if_in_limits, assert_if_in_limits: numeric range
    check_if_isclose, assert_if_isclose: approximate equality
    check_if_paths_exist, assert_paths: filesystem paths
    LimitError, LengthError, NotCloseEnoughError: default error types
    PathReport: result of path checks in ``"return"`` mode

Usage:
    >>> from easycheck import check_if_in_limits, LimitError
    >>> check_if_in_limits(0.5, 0, 1)
    >>> check_if_in_limits(2, 0, 1, handle_with=UserWarning, message="x above 1")

Set the environment variable ``EASYCHECK_RUN=0`` to turn every check into a no-op.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .checks import (
    assert_if,
    assert_if_in_limits,
    assert_if_isclose,
    assert_if_not,
    assert_length,
    assert_paths,
    assert_type,
    check_if,
    check_if_in_limits,
    check_if_isclose,
    check_if_not,
    check_if_paths_exist,
    check_length,
    check_type,
)
from .config import is_enabled
from .core.enums import ExecutionMode, FailureKind
from .core.errors import EasyCheckError, LengthError, LimitError, NotCloseEnoughError
from .models import PathReport
from .policy import ResolvedFailure

__all__ = [
    "__version__",
    # Checks
    "check_if",
    "check_if_not",
    "assert_if",
    "assert_if_not",
    "check_type",
    "assert_type",
    "check_length",
    "assert_length",
    "check_if_in_limits",
    "assert_if_in_limits",
    "check_if_isclose",
    "assert_if_isclose",
    "check_if_paths_exist",
    "assert_paths",
    # Errors
    "EasyCheckError",
    "LimitError",
    "LengthError",
    "NotCloseEnoughError",
    # Models and enums
    "PathReport",
    "ResolvedFailure",
    "ExecutionMode",
    "FailureKind",
    "is_enabled",
]
