"""Numeric range check."""

from __future__ import annotations

import math
from typing import Any, Optional, Type

from ..config import is_enabled
from ..core.errors import LimitError
from ..policy import handle, resolve, resolve_assertion, validate_handler


def in_limits(
    x: Any,
    lower_limit: Optional[Any] = None,
    upper_limit: Optional[Any] = None,
    include_equal: bool = True,
) -> bool:
    """Tell whether x lies between the limits.

    Missing limits are unbounded. With include_equal the limits themselves
    are allowed.

    Examples:
        >>> in_limits(1, 1, 2)
        True
        >>> in_limits(1, 1, 2, include_equal=False)
        False
    """
    lower = -math.inf if lower_limit is None else lower_limit
    upper = math.inf if upper_limit is None else upper_limit
    if include_equal:
        return lower <= x <= upper
    return lower < x < upper


def check_if_in_limits(
    x: Any,
    lower_limit: Optional[Any] = None,
    upper_limit: Optional[Any] = None,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    include_equal: bool = True,
) -> None:
    """Check that a number lies within limits.

    Args:
        x: Number to check.
        lower_limit: Lower limit, negative infinity when None.
        upper_limit: Upper limit, positive infinity when None.
        handle_with: Exception or warning class to use on failure.
        message: Text of the exception or warning.
        include_equal: Whether x may be equal to a limit.

    Raises:
        LimitError by default, or handle_with (warnings are issued instead).

    Examples:
        >>> check_if_in_limits(0.5, 0, 1)
        >>> check_if_in_limits(1, 0, 1, include_equal=False)
        Traceback (most recent call last):
            ...
        easycheck.core.errors.LimitError
    """
    if not is_enabled():
        return
    validate_handler(handle_with)
    if not in_limits(x, lower_limit, upper_limit, include_equal):
        handle(resolve(handle_with, message, default=LimitError))


def assert_if_in_limits(
    x: Any,
    lower_limit: Optional[Any] = None,
    upper_limit: Optional[Any] = None,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    include_equal: bool = True,
) -> None:
    """Assertion variant of check_if_in_limits (AssertionError by default)."""
    if not is_enabled():
        return
    validate_handler(handle_with)
    if not in_limits(x, lower_limit, upper_limit, include_equal):
        handle(resolve_assertion(handle_with, message))


__all__ = ["in_limits", "check_if_in_limits", "assert_if_in_limits"]
