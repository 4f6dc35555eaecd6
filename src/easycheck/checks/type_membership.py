"""Type membership check.

``expected_type`` is classified once into one of three shapes:

- a list of types: ordered alternatives, the first match wins
- a set or frozenset of types: unordered alternatives
- anything else: handed to ``isinstance`` as-is (a type or a tuple of types)
"""

from __future__ import annotations

from typing import Any, Optional, Type

from ..config import is_enabled
from ..policy import ResolvedFailure, handle, resolve, resolve_assertion, validate_handler


def _matches(item: Any, expected_type: Any) -> bool:
    if isinstance(expected_type, (list, set, frozenset)):
        return any(isinstance(item, t) for t in expected_type)
    return isinstance(item, expected_type)


def _check_type(
    item: Any,
    expected_type: Any,
    handle_with: Optional[Type[BaseException]],
    message: Optional[str],
    assertion: bool,
) -> None:
    if not is_enabled():
        return
    validate_handler(handle_with)
    if _matches(item, expected_type):
        return
    failure: ResolvedFailure
    if assertion:
        failure = resolve_assertion(handle_with, message)
    else:
        failure = resolve(handle_with, message, default=TypeError)
    handle(failure, stacklevel=4)


def check_type(
    item: Any,
    expected_type: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
) -> None:
    """Check that an item is an instance of the expected type(s).

    Args:
        item: Object to check.
        expected_type: A type, a tuple of types, or a list or set of types
            (the item must match at least one of them).
        handle_with: Exception or warning class to use on failure.
        message: Text of the exception or warning.

    Raises:
        TypeError by default, or handle_with (warnings are issued instead).

    Examples:
        >>> check_type(5, int)
        >>> check_type(5, [str, int])
        >>> check_type(5, [str, float])
        Traceback (most recent call last):
            ...
        TypeError
    """
    _check_type(item, expected_type, handle_with, message, assertion=False)


def assert_type(
    item: Any,
    expected_type: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
) -> None:
    """Assertion variant of check_type (AssertionError by default)."""
    _check_type(item, expected_type, handle_with, message, assertion=True)


__all__ = ["check_type", "assert_type"]
