"""Tests for classification of the `paths` argument in `easycheck.paths`."""

from collections import deque
from pathlib import Path, PurePosixPath

import pytest
from easycheck.paths import (
    PathSequence,
    PathStream,
    ScalarPath,
    classify,
    describe_path,
    path_exists,
)


@pytest.mark.parametrize(
    "value",
    ["data.csv", b"data.csv", Path("data.csv"), PurePosixPath("data.csv")],
    ids=["str", "bytes", "path", "pure_path"],
)
def test_classify_scalars(value):
    """Strings and path-like values are single paths."""
    path_set = classify(value)
    assert path_set == ScalarPath(value)
    assert list(path_set) == [value]


@pytest.mark.parametrize(
    "value",
    [["a", "b"], ("a", "b"), deque(["a", "b"])],
    ids=["list", "tuple", "deque"],
)
def test_classify_fixed_collections(value):
    """Ordered collections keep their order."""
    path_set = classify(value)
    assert isinstance(path_set, PathSequence)
    assert len(path_set) == 2
    assert list(path_set) == ["a", "b"]


def test_classify_generator_is_stream():
    """Generators become single-pass streams."""
    path_set = classify(p for p in ["a", "b"])
    assert isinstance(path_set, PathStream)
    assert path_set.consumed is False
    assert list(path_set) == ["a", "b"]
    assert path_set.consumed is True


def test_stream_cannot_be_iterated_twice():
    """A second traversal of a stream is refused."""
    path_set = classify(iter(["a"]))
    list(path_set)
    with pytest.raises(RuntimeError, match="only be iterated once"):
        iter(path_set)


def test_classify_set_is_stream():
    """Sets are iterable but not sequences."""
    assert isinstance(classify({"a"}), PathStream)


@pytest.mark.parametrize("value", [42, 3.5, None, object()], ids=["int", "float", "none", "object"])
def test_classify_rejects_non_paths(value):
    """Values that are neither paths nor iterables are usage errors."""
    with pytest.raises(TypeError, match="Argument paths must be"):
        classify(value)


def test_path_exists(tmp_path):
    """Existing files and directories are found, missing ones are not."""
    existing = tmp_path / "file.txt"
    existing.write_text("x", encoding="utf-8")
    assert path_exists(existing) is True
    assert path_exists(str(existing)) is True
    assert path_exists(tmp_path) is True
    assert path_exists(tmp_path / "nope.txt") is False


def test_path_exists_treats_probe_errors_as_missing():
    """Invalid paths count as missing rather than raising."""
    assert path_exists("bad\x00path") is False


def test_path_exists_stringifies_other_descriptors(tmp_path, monkeypatch):
    """Non-path descriptors are converted with str()."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "2024").mkdir()
    assert path_exists(2024) is True
    assert path_exists(2025) is False


def test_describe_path():
    assert describe_path("a/b") == "a/b"
    assert describe_path(Path("a") / "b") == str(Path("a") / "b")
    assert describe_path(b"a") == "a"
    assert describe_path(7) == "7"
