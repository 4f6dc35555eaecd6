"""Shared pytest configuration and fixtures for easycheck tests."""

from pathlib import Path
from typing import List

import pytest


@pytest.fixture(autouse=True)
def checks_enabled(monkeypatch):
    """Run every test with checks enabled unless the test disables them."""
    monkeypatch.delenv("EASYCHECK_RUN", raising=False)


@pytest.fixture
def checks_disabled(monkeypatch):
    """Disable all checks through the environment switch."""
    monkeypatch.setenv("EASYCHECK_RUN", "0")


@pytest.fixture
def existing_paths(tmp_path) -> List[Path]:
    """Two files and one directory that exist."""
    first = tmp_path / "first.csv"
    second = tmp_path / "second.json"
    first.write_text("a,b\n1,2\n", encoding="utf-8")
    second.write_text("{}", encoding="utf-8")
    subdir = tmp_path / "subdir"
    subdir.mkdir()
    return [first, second, subdir]


@pytest.fixture
def missing_paths(tmp_path) -> List[Path]:
    """Two paths that do not exist."""
    return [tmp_path / "missing_1.csv", tmp_path / "nested" / "missing_2.csv"]
