"""Generic condition checks.

check_if fails when the condition is falsy, check_if_not when it is truthy.
Both default to AssertionError, so the ``assert_*`` variants only differ in
name and exist for symmetry with the other checks.
"""

from __future__ import annotations

from typing import Any, Optional, Type

from ..config import is_enabled
from ..policy import handle, resolve, resolve_assertion, validate_handler


def check_if(
    condition: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
) -> None:
    """Check that a condition is true.

    Args:
        condition: Value evaluated with ``bool()``.
        handle_with: Exception or warning class to use on failure.
        message: Text of the exception or warning.

    Raises:
        AssertionError by default, or handle_with (warnings are issued instead).

    Examples:
        >>> check_if(2 > 1)
        >>> check_if(2 < 1, ValueError, "2 is not less than 1")
        Traceback (most recent call last):
            ...
        ValueError: 2 is not less than 1
    """
    if not is_enabled():
        return
    validate_handler(handle_with)
    if not condition:
        handle(resolve(handle_with, message, default=AssertionError))


def check_if_not(
    condition: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
) -> None:
    """Check that a condition is false (the opposite of check_if)."""
    if not is_enabled():
        return
    validate_handler(handle_with)
    if condition:
        handle(resolve(handle_with, message, default=AssertionError))


def assert_if(
    condition: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
) -> None:
    """Assertion variant of check_if."""
    if not is_enabled():
        return
    validate_handler(handle_with)
    if not condition:
        handle(resolve_assertion(handle_with, message))


def assert_if_not(
    condition: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
) -> None:
    """Assertion variant of check_if_not."""
    if not is_enabled():
        return
    validate_handler(handle_with)
    if condition:
        handle(resolve_assertion(handle_with, message))


__all__ = ["check_if", "check_if_not", "assert_if", "assert_if_not"]
