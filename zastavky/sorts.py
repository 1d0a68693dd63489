"""In-place sorting of sequences with a caller-supplied ordering."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from zastavky.implicit_sequence import ImplicitSequence

Compare = Callable[[Any, Any], bool]


def _less(a: Any, b: Any) -> bool:
    return a < b


class _Accessor:
    """Uniform positional access to an ImplicitSequence or a Python list."""

    def __init__(self, sequence: Any) -> None:
        self._sequence = sequence
        self._implicit = isinstance(sequence, ImplicitSequence)

    def __len__(self) -> int:
        return len(self._sequence)

    def get(self, index: int) -> Any:
        if self._implicit:
            return self._sequence.access(index)
        return self._sequence[index]

    def swap(self, i: int, j: int) -> None:
        if self._implicit:
            self._sequence.swap(i, j)
        else:
            self._sequence[i], self._sequence[j] = self._sequence[j], self._sequence[i]


def shell_sort(sequence: Any, compare: Compare | None = None) -> None:
    """Sort ``sequence`` in place with Shell's method.

    ``compare(a, b)`` returns True when ``a`` must come before ``b``; it
    defaults to ``a < b``. The starting gap is ``ceil(log10(len))`` and it
    shrinks by one until a final pass with gap 1.
    """
    compare = compare or _less
    items = _Accessor(sequence)
    size = len(items)
    if size < 2:
        return
    for gap in range(math.ceil(math.log10(size)), 0, -1):
        for start in range(gap):
            for i in range(start, size, gap):
                j = i
                while j - gap >= start and compare(items.get(j), items.get(j - gap)):
                    items.swap(j, j - gap)
                    j -= gap


class ShellSort:
    """Sort strategy object wrapping :func:`shell_sort`."""

    def sort(self, sequence: Any, compare: Compare | None = None) -> None:
        """Sort ``sequence`` in place using ``compare`` as the ordering."""
        shell_sort(sequence, compare)