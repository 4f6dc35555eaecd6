"""Check result data models.

This module defines the structure returned by path checks run with
``execution_mode="return"``:
- PathReport: representative failure plus every missing path
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from .paths import describe_path
from .policy import ResolvedFailure


@dataclass(frozen=True)
class PathReport:
    """Outcome of check_if_paths_exist in ``"return"`` mode.

    Attributes:
        failure: Resolved failure for the first missing path, None if all paths exist.
        missing: Missing path descriptors, in the order they were checked.

    A report unpacks like a two-element tuple, so both styles work:

    Examples:
        >>> from easycheck.policy import resolve
        >>> failure = resolve(None, "a.txt is not a valid path", default=FileNotFoundError)
        >>> report = PathReport(failure=failure, missing=["a.txt", "b.txt"])
        >>> report.missing
        ['a.txt', 'b.txt']
        >>> error, missing = report
        >>> error
        FileNotFoundError('a.txt is not a valid path')
    """

    failure: Optional[ResolvedFailure] = None
    missing: List[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.failure is None and self.missing:
            raise ValueError("missing paths require a failure")
        if self.failure is not None and not self.missing:
            raise ValueError("a failure requires at least one missing path")

    @property
    def passed(self) -> bool:
        return self.failure is None

    @property
    def error(self) -> Optional[BaseException]:
        """Exception or warning instance of the failure, if any."""
        return None if self.failure is None else self.failure.error

    def __iter__(self) -> Iterator[Any]:
        yield self.error
        yield self.missing

    def summary(self) -> str:
        """Generate a concise text summary.

        Examples:
            >>> from easycheck.policy import resolve
            >>> failure = resolve(None, None, default=FileNotFoundError)
            >>> report = PathReport(failure=failure, missing=["a.txt", "b.txt"])
            >>> print(report.summary())
            Path check: 2 missing (FileNotFoundError)
              - a.txt
              - b.txt
        """
        if self.passed:
            return "Path check: all paths exist"
        lines = [f"Path check: {len(self.missing)} missing ({type(self.error).__name__})"]
        lines.extend(f"  - {describe_path(path)}" for path in self.missing)
        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a JSON representation of the report."""
        report_data = {
            "passed": self.passed,
            "failure": None
            if self.failure is None
            else {
                "type": type(self.failure.error).__name__,
                "kind": self.failure.kind.value,
                "message": self.failure.message,
            },
            "missing": [describe_path(path) for path in self.missing],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)


__all__ = ["PathReport"]
