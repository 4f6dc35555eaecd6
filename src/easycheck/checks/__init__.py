"""Check implementations.

Every check in this package follows the same conventions:

1. Return immediately (``None``) when checks are disabled via ``EASYCHECK_RUN=0``,
   before looking at any argument.
2. Raise usage errors (TypeError, ValueError) for malformed arguments. These
   are never affected by ``handle_with``.
3. Evaluate the predicate and, on failure, turn ``handle_with`` and ``message``
   into a failure with :func:`easycheck.policy.resolve` (or
   :func:`easycheck.policy.resolve_assertion` for ``assert_*`` variants).
4. Surface the failure with :func:`easycheck.policy.handle`, which raises
   errors and issues warnings.

Example:
    ```python
    # checks/my_check.py
    from ..config import is_enabled
    from ..policy import handle, resolve, validate_handler

    def check_if_even(x, handle_with=None, message=None):
        if not is_enabled():
            return
        validate_handler(handle_with)
        if x % 2:
            handle(resolve(handle_with, message, default=ValueError))
    ```
"""

from __future__ import annotations

from .closeness import assert_if_isclose, check_if_isclose
from .conditions import assert_if, assert_if_not, check_if, check_if_not
from .length import assert_length, check_length
from .limits import assert_if_in_limits, check_if_in_limits
from .paths import assert_paths, check_if_paths_exist
from .type_membership import assert_type, check_type

__all__ = [
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
]
