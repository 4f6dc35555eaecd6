"""Tests for the runtime switch in `easycheck.config`.

The switch is read from the environment on every call, so flipping
`EASYCHECK_RUN` between calls must take effect immediately.
"""

import pytest
from easycheck.config import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, RUN_ENV_VAR, is_enabled


def test_enabled_when_unset():
    """Checks run when EASYCHECK_RUN is not set."""
    assert is_enabled() is True


def test_disabled_only_by_zero(monkeypatch):
    """Only the exact value "0" disables checks."""
    monkeypatch.setenv(RUN_ENV_VAR, "0")
    assert is_enabled() is False


@pytest.mark.parametrize(
    "value",
    ["1", "", " 0", "00", "false", "no"],
    ids=["one", "empty", "padded_zero", "double_zero", "false", "no"],
)
def test_enabled_for_other_values(monkeypatch, value):
    """Any value other than "0" leaves checks enabled."""
    monkeypatch.setenv(RUN_ENV_VAR, value)
    assert is_enabled() is True


def test_switch_not_cached(monkeypatch):
    """Changing the environment between calls changes the result."""
    assert is_enabled() is True
    monkeypatch.setenv(RUN_ENV_VAR, "0")
    assert is_enabled() is False
    monkeypatch.setenv(RUN_ENV_VAR, "1")
    assert is_enabled() is True


def test_default_tolerances():
    """Default tolerances of check_if_isclose."""
    assert DEFAULT_REL_TOL == 1e-10
    assert DEFAULT_ABS_TOL == 0.0
