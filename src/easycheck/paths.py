"""Normalization of the ``paths`` argument of path checks.

check_if_paths_exist accepts a single path, a sequence of paths or any other
iterable of paths. :func:`classify` sorts the argument into exactly one of
three shapes, tried in this order:

1. ``ScalarPath``: a ``str`` or ``bytes`` value
2. ``ScalarPath``: an ``os.PathLike`` value such as ``pathlib.Path``
3. ``PathSequence``: a ``collections.abc.Sequence`` (list, tuple, ...)
4. ``PathStream``: anything else accepted by ``iter()``, e.g. generators

A ``PathStream`` takes ownership of the iterator and may be traversed once.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalarPath:
    """A single path descriptor."""

    descriptor: Any

    def __iter__(self) -> Iterator[Any]:
        yield self.descriptor


@dataclass(frozen=True)
class PathSequence:
    """An ordered, indexable collection of path descriptors."""

    descriptors: Tuple[Any, ...]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)


class PathStream:
    """Single-pass stream of path descriptors.

    The stream consumes the underlying iterator; iterating it a second time
    raises RuntimeError instead of silently yielding nothing.
    """

    def __init__(self, iterator: Iterator[Any]) -> None:
        self._iterator = iterator
        self._consumed = False

    def __iter__(self) -> Iterator[Any]:
        if self._consumed:
            raise RuntimeError("PathStream can only be iterated once")
        self._consumed = True
        return self._iterator

    @property
    def consumed(self) -> bool:
        return self._consumed


PathSet = Union[ScalarPath, PathSequence, PathStream]


def classify(paths: Any) -> PathSet:
    """Sort the ``paths`` argument into one of the supported shapes.

    Args:
        paths: A path, a sequence of paths, or an iterable of paths.

    Returns:
        ScalarPath, PathSequence or PathStream.

    Raises:
        TypeError: If paths is neither a path nor an iterable.

    Examples:
        >>> classify("data.csv")
        ScalarPath(descriptor='data.csv')
        >>> classify(["a.csv", "b.csv"])
        PathSequence(descriptors=('a.csv', 'b.csv'))
        >>> type(classify(p for p in ["a.csv"])).__name__
        'PathStream'
    """
    if isinstance(paths, (str, bytes)):
        return ScalarPath(paths)
    if isinstance(paths, os.PathLike):
        return ScalarPath(paths)
    if isinstance(paths, Sequence):
        return PathSequence(tuple(paths))
    try:
        iterator = iter(paths)
    except TypeError:
        raise TypeError(
            "Argument paths must be a string, a path-like object "
            f"or an iterable of them, got {type(paths).__name__}"
        ) from None
    return PathStream(iterator)


def describe_path(descriptor: Any) -> str:
    """Render a path descriptor as text for messages and reports."""
    if isinstance(descriptor, (str, bytes, os.PathLike)):
        return os.fsdecode(descriptor)
    return str(descriptor)


def path_exists(descriptor: Any) -> bool:
    """Tell whether a path descriptor points to an existing filesystem entry.

    Descriptors that are not str, bytes or path-like are converted with
    ``str()``. Errors raised while probing the filesystem count as "missing".
    """
    if isinstance(descriptor, (str, bytes, os.PathLike)):
        target = os.fspath(descriptor)
    else:
        target = str(descriptor)
    try:
        os.stat(target)
    except (OSError, ValueError) as e:
        logger.debug("Path %r not accessible: %s", target, e)
        return False
    return True


__all__ = [
    "ScalarPath",
    "PathSequence",
    "PathStream",
    "PathSet",
    "classify",
    "describe_path",
    "path_exists",
]
