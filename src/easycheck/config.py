"""Runtime configuration for easycheck.

This module centralizes the switch that turns checks on and off together with
the default constants shared by the individual checks.

Runtime switch:
    - ``EASYCHECK_RUN=0``: every check becomes a no-op and returns ``None``
    - any other value, or unset: checks run normally

The switch is read on every call and never cached, so changing the
environment of a long-running process takes effect on the next check.
"""

from __future__ import annotations

import os

# ============================================================================
# RUNTIME SWITCH
# ============================================================================

RUN_ENV_VAR = "EASYCHECK_RUN"
DISABLED_VALUE = "0"


# ============================================================================
# CHECK DEFAULTS
# ============================================================================

# Tolerances used by check_if_isclose (same meaning as math.isclose)
DEFAULT_REL_TOL = 1e-10
DEFAULT_ABS_TOL = 0.0

# Warning categories matched by identity when resolving handle_with
RECOGNIZED_WARNINGS = (Warning, UserWarning)


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def is_enabled() -> bool:
    """Tell whether checks should run.

    Returns:
        False only when ``EASYCHECK_RUN`` is exactly ``"0"``, True otherwise.

    Examples:
        >>> import os
        >>> os.environ["EASYCHECK_RUN"] = "0"
        >>> is_enabled()
        False
        >>> del os.environ["EASYCHECK_RUN"]
        >>> is_enabled()
        True
    """
    return os.environ.get(RUN_ENV_VAR) != DISABLED_VALUE


__all__ = [
    "RUN_ENV_VAR",
    "DISABLED_VALUE",
    "DEFAULT_REL_TOL",
    "DEFAULT_ABS_TOL",
    "RECOGNIZED_WARNINGS",
    "is_enabled",
]
