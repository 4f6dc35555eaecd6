"""Approximate equality check, with the tolerance semantics of math.isclose."""

from __future__ import annotations

import math
from typing import Optional, Type

from ..config import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, is_enabled
from ..core.errors import NotCloseEnoughError
from ..policy import handle, resolve, resolve_assertion, validate_handler


def check_if_isclose(
    x: float,
    y: float,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL,
) -> None:
    """Check that two numbers are close to each other.

    Success means ``abs(x - y) <= max(rel_tol * max(abs(x), abs(y)), abs_tol)``.

    Args:
        x, y: Numbers to compare.
        handle_with: Exception or warning class to use on failure.
        message: Text of the exception or warning.
        rel_tol: Relative tolerance.
        abs_tol: Absolute tolerance.

    Raises:
        NotCloseEnoughError by default, or handle_with (warnings are issued instead).
        ValueError: If a tolerance is negative.

    Examples:
        >>> check_if_isclose(1.0, 1.0 + 1e-12)
        >>> check_if_isclose(1.0, 1.1, abs_tol=0.2)
        >>> check_if_isclose(1.0, 1.1)
        Traceback (most recent call last):
            ...
        easycheck.core.errors.NotCloseEnoughError
    """
    if not is_enabled():
        return
    validate_handler(handle_with)
    if not math.isclose(x, y, rel_tol=rel_tol, abs_tol=abs_tol):
        handle(resolve(handle_with, message, default=NotCloseEnoughError))


def assert_if_isclose(
    x: float,
    y: float,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL,
) -> None:
    """Assertion variant of check_if_isclose (AssertionError by default)."""
    if not is_enabled():
        return
    validate_handler(handle_with)
    if not math.isclose(x, y, rel_tol=rel_tol, abs_tol=abs_tol):
        handle(resolve_assertion(handle_with, message))


__all__ = ["check_if_isclose", "assert_if_isclose"]
