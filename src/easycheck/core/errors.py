"""Exceptions raised by the domain-specific checks.

Each check has a default error type used when the caller does not pass
``handle_with``. Built-in checks without a dedicated class fall back to
standard exceptions:

- check_type: TypeError
- check_if_paths_exist: FileNotFoundError
- check_if, check_if_not and every ``assert_*`` function: AssertionError
"""

from __future__ import annotations


class EasyCheckError(Exception):
    """Base class for the errors defined by easycheck."""


class LimitError(EasyCheckError):
    """Value lies outside of the allowed limits."""


class LengthError(EasyCheckError):
    """Item does not have the expected length."""


class NotCloseEnoughError(EasyCheckError):
    """Two numbers are not close enough to each other."""


__all__ = ["EasyCheckError", "LimitError", "LengthError", "NotCloseEnoughError"]
