"""Length comparison check.

The length of an item is taken through the :class:`Measurable` capability
(anything implementing ``__len__``). Items without a length can be treated as
one-element collections by passing ``assign_length_to_others=True``, which
wraps them in a :class:`Singleton`.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Type, runtime_checkable

from ..config import is_enabled
from ..core.errors import LengthError
from ..policy import handle, resolve, resolve_assertion, validate_handler


@runtime_checkable
class Measurable(Protocol):
    """Anything with a length."""

    def __len__(self) -> int:
        ...


class Singleton:
    """Adapter giving a scalar the length of a one-element collection."""

    def __init__(self, item: Any) -> None:
        self.item = item

    def __len__(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"Singleton({self.item!r})"


def measure(item: Any, assign_length_to_others: bool = False) -> int:
    """Return the length of an item.

    Raises:
        TypeError: If the item has no length and assign_length_to_others is False.

    Examples:
        >>> measure([1, 2, 3])
        3
        >>> measure(5, assign_length_to_others=True)
        1
    """
    if not isinstance(item, Measurable):
        if not assign_length_to_others:
            raise TypeError(f"object of type '{type(item).__name__}' has no len()")
        item = Singleton(item)
    return len(item)


def _check_length(
    item: Any,
    expected_length: Any,
    handle_with: Optional[Type[BaseException]],
    message: Optional[str],
    operator: Optional[Callable[[Any, Any], Any]],
    assign_length_to_others: bool,
    assertion: bool,
) -> None:
    if not is_enabled():
        return
    validate_handler(handle_with)
    if operator is not None and not callable(operator):
        raise TypeError(f"'{type(operator).__name__}' object is not callable")

    actual_length = measure(item, assign_length_to_others)
    if operator is None:
        passed = actual_length == expected_length
    else:
        passed = bool(operator(actual_length, expected_length))
    if passed:
        return

    if assertion:
        handle(resolve_assertion(handle_with, message), stacklevel=4)
    else:
        handle(resolve(handle_with, message, default=LengthError), stacklevel=4)


def check_length(
    item: Any,
    expected_length: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    operator: Optional[Callable[[Any, Any], Any]] = None,
    assign_length_to_others: bool = False,
) -> None:
    """Check the length of an item.

    Args:
        item: Object whose length is checked.
        expected_length: Length to compare against.
        handle_with: Exception or warning class to use on failure.
        message: Text of the exception or warning.
        operator: Callable taking ``(actual_length, expected_length)``; a truthy
            result means success. Defaults to equality.
        assign_length_to_others: Treat items without ``__len__`` as having length 1.

    Raises:
        LengthError by default, or handle_with (warnings are issued instead).
        TypeError: If operator is not callable, or the item has no length and
            assign_length_to_others is False.

    Examples:
        >>> import operator
        >>> check_length([1, 2, 3], 3)
        >>> check_length("abc", 5, operator=operator.lt)
        >>> check_length(5, 1, assign_length_to_others=True)
        >>> check_length([1, 2, 3], 4)
        Traceback (most recent call last):
            ...
        easycheck.core.errors.LengthError
    """
    _check_length(
        item,
        expected_length,
        handle_with,
        message,
        operator,
        assign_length_to_others,
        assertion=False,
    )


def assert_length(
    item: Any,
    expected_length: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    operator: Optional[Callable[[Any, Any], Any]] = None,
    assign_length_to_others: bool = False,
) -> None:
    """Assertion variant of check_length (AssertionError by default)."""
    _check_length(
        item,
        expected_length,
        handle_with,
        message,
        operator,
        assign_length_to_others,
        assertion=True,
    )


__all__ = ["Measurable", "Singleton", "measure", "check_length", "assert_length"]
