"""Path existence check.

check_if_paths_exist validates one path or many, in one of two execution modes:

- ``"raise"``: stop at the first missing path and raise its failure (or issue
  it, when handle_with is a warning class). Returns None.
- ``"return"``: check every path and return a :class:`~easycheck.models.PathReport`
  listing all missing paths together with one failure built for the first of
  them. Nothing is raised or issued.

When handle_with is not given, the failure is a FileNotFoundError whose
default message names the missing path.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Type, Union

from ..config import is_enabled
from ..core.enums import ExecutionMode
from ..models import PathReport
from ..paths import classify, describe_path, path_exists
from ..policy import ResolvedFailure, handle, resolve, resolve_assertion, validate_handler

logger = logging.getLogger(__name__)


def _parse_execution_mode(execution_mode: Union[str, ExecutionMode]) -> ExecutionMode:
    try:
        return ExecutionMode(execution_mode)
    except (ValueError, TypeError):
        raise ValueError(
            "execution_mode can only be `raise` or `return`, "
            f"got {execution_mode!r}"
        ) from None


def _resolve_missing(
    descriptor: Any,
    handle_with: Optional[Type[BaseException]],
    message: Optional[str],
    assertion: bool,
) -> ResolvedFailure:
    if assertion:
        return resolve_assertion(handle_with, message)
    if handle_with is None and message is None:
        message = f"{describe_path(descriptor)} is not a valid path"
    return resolve(handle_with, message, default=FileNotFoundError)


def _check_paths(
    paths: Any,
    handle_with: Optional[Type[BaseException]],
    message: Optional[str],
    execution_mode: Union[str, ExecutionMode],
    assertion: bool,
) -> Optional[PathReport]:
    if not is_enabled():
        logger.debug("Path check skipped: checks are disabled")
        return None

    mode = _parse_execution_mode(execution_mode)
    validate_handler(handle_with)
    path_set = classify(paths)

    checked = 0
    missing: List[Any] = []
    for descriptor in path_set:
        checked += 1
        if path_exists(descriptor):
            continue
        if mode is ExecutionMode.RAISE:
            # Errors leave through handle(); warnings end the traversal here
            handle(_resolve_missing(descriptor, handle_with, message, assertion), stacklevel=4)
            return None
        missing.append(descriptor)

    logger.debug(
        "Path check (%s) done: %d checked, %d missing", mode.value, checked, len(missing)
    )
    if mode is ExecutionMode.RAISE:
        return None
    if not missing:
        return PathReport()
    failure = _resolve_missing(missing[0], handle_with, message, assertion)
    return PathReport(failure=failure, missing=missing)


def check_if_paths_exist(
    paths: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    *,
    execution_mode: Union[str, ExecutionMode] = ExecutionMode.RAISE,
) -> Optional[PathReport]:
    """Check that a path or paths exist.

    Args:
        paths: A path (str, bytes or path-like), a sequence of paths, or any
            iterable of paths. Iterators are consumed.
        handle_with: Exception or warning class to use on failure.
        message: Text of the exception or warning. Defaults to a message naming
            the missing path when handle_with is not given either.
        execution_mode: ``"raise"`` (default) or ``"return"``.

    Returns:
        None in ``"raise"`` mode or when checks are disabled; a PathReport in
        ``"return"`` mode.

    Raises:
        FileNotFoundError by default, or handle_with (warnings are issued instead),
        in ``"raise"`` mode only.
        ValueError: If execution_mode is not recognized.
        TypeError: If paths is neither a path nor an iterable of paths.

    Examples:
        >>> check_if_paths_exist("Q:/Op/Oop/")
        Traceback (most recent call last):
            ...
        FileNotFoundError: Q:/Op/Oop/ is not a valid path
        >>> check_if_paths_exist(".")
        >>> check_if_paths_exist(".", execution_mode="return")
        PathReport(failure=None, missing=[])
        >>> check_if_paths_exist("Q:/Op/Oop", execution_mode="return").missing
        ['Q:/Op/Oop']

        To issue a warning instead of raising:

        >>> import warnings
        >>> with warnings.catch_warnings(record=True) as w:
        ...     check_if_paths_exist("Q:/Op/Oop", handle_with=Warning)
    """
    return _check_paths(paths, handle_with, message, execution_mode, assertion=False)


def assert_paths(
    paths: Any,
    handle_with: Optional[Type[BaseException]] = None,
    message: Optional[str] = None,
    *,
    execution_mode: Union[str, ExecutionMode] = ExecutionMode.RAISE,
) -> Optional[PathReport]:
    """Assertion variant of check_if_paths_exist (AssertionError by default)."""
    return _check_paths(paths, handle_with, message, execution_mode, assertion=True)


__all__ = ["check_if_paths_exist", "assert_paths"]
