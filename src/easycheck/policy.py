"""Failure resolution policy.

Every check reduces to a single question: did the predicate hold? When it
did not, the caller-supplied ``handle_with`` and ``message`` are turned into
a concrete exception or warning instance by :func:`resolve`. The check then
either surfaces it with :func:`handle` or, for checks that report instead of
raising, returns it to the caller.

Resolution rules:
    1. No ``handle_with``: instance of the check's default error type.
    2. ``handle_with`` is ``Warning`` or ``UserWarning``: instance of that exact
       class, issued as a warning instead of raised.
    3. Anything else: instance of ``handle_with``. Custom ``Warning``
       subclasses are issued as warnings too.

A missing message becomes an empty string.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Optional, Type

from .config import RECOGNIZED_WARNINGS
from .core.enums import FailureKind


@dataclass(frozen=True)
class ResolvedFailure:
    """A failure ready to be raised, issued or returned.

    Attributes:
        error: Exception or warning instance carrying the message.
        kind: FailureKind.ERROR to raise it, FailureKind.WARNING to issue it.

    Examples:
        >>> failure = resolve(None, "too long", default=ValueError)
        >>> failure.kind
        <FailureKind.ERROR: 'error'>
        >>> failure.message
        'too long'
    """

    error: BaseException
    kind: FailureKind

    @property
    def message(self) -> str:
        return str(self.error)

    @property
    def is_warning(self) -> bool:
        return self.kind == FailureKind.WARNING


def validate_handler(handle_with: Optional[type]) -> None:
    """Reject ``handle_with`` values that cannot be instantiated as errors.

    Handlers are instantiated with a single message argument, so classes whose
    constructor needs more arguments (e.g. UnicodeDecodeError) are rejected here
    rather than failing later inside :func:`resolve`.

    Raises:
        TypeError: If handle_with is neither None nor an exception or warning class
            accepting a single message argument.
    """
    if handle_with is None:
        return
    if not (isinstance(handle_with, type) and issubclass(handle_with, BaseException)):
        raise TypeError(
            f"handle_with must be an exception or warning class, got {handle_with!r}"
        )
    try:
        handle_with("")
    except TypeError as e:
        raise TypeError(
            "handle_with must accept a single message argument, "
            f"{handle_with.__name__} does not: {e}"
        ) from None


def resolve(
    handle_with: Optional[Type[BaseException]],
    message: Optional[str],
    default: Type[BaseException],
) -> ResolvedFailure:
    """Build the failure a check reports.

    Never raises for handlers accepted by :func:`validate_handler`: the caller
    decides whether to raise, issue or return the result.

    Args:
        handle_with: Exception or warning class chosen by the caller, or None.
        message: Text of the failure. None means an empty message.
        default: Error class used when handle_with is None.

    Returns:
        ResolvedFailure holding the instance and its kind.

    Examples:
        >>> resolve(UserWarning, "careful", default=ValueError).is_warning
        True
        >>> resolve(KeyError, None, default=ValueError).error
        KeyError('')
    """
    text = "" if message is None else message

    if handle_with is None:
        return ResolvedFailure(error=default(text), kind=FailureKind.ERROR)

    if any(handle_with is category for category in RECOGNIZED_WARNINGS):
        return ResolvedFailure(error=handle_with(text), kind=FailureKind.WARNING)

    kind = FailureKind.WARNING if issubclass(handle_with, Warning) else FailureKind.ERROR
    return ResolvedFailure(error=handle_with(text), kind=kind)


def resolve_assertion(
    handle_with: Optional[Type[BaseException]],
    message: Optional[str],
) -> ResolvedFailure:
    """Resolve a failure of an ``assert_*`` check (AssertionError by default)."""
    return resolve(handle_with, message, default=AssertionError)


def handle(failure: ResolvedFailure, stacklevel: int = 3) -> None:
    """Surface a resolved failure: raise errors, issue warnings.

    ``stacklevel`` counts frames from this function, as in :func:`warnings.warn`.
    The default points at the caller of a public check that calls ``handle``
    directly; checks delegating to a private helper pass 4.
    """
    if failure.is_warning:
        warnings.warn(failure.error, stacklevel=stacklevel)
        return
    raise failure.error


__all__ = [
    "ResolvedFailure",
    "validate_handler",
    "resolve",
    "resolve_assertion",
    "handle",
]
