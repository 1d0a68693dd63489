"""Array-backed sequences with positional access and neighbour lookup."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

INIT_CAPACITY = 10


class ImplicitSequence:
    """A contiguous sequence of values stored in a growable array."""

    def __init__(self, capacity: int = INIT_CAPACITY, init_blocks: bool = False) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = [None] * capacity if init_blocks else []

    @property
    def capacity(self) -> int:
        """Number of values the sequence can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ImplicitSequence):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def access_first(self) -> Any:
        """Return the first value; IndexError when empty."""
        if not self._items:
            raise IndexError("sequence is empty")
        return self._items[0]

    def access_last(self) -> Any:
        """Return the last value; IndexError when empty."""
        if not self._items:
            raise IndexError("sequence is empty")
        return self._items[-1]

    def access(self, index: int) -> Any:
        """Return the value at ``index``."""
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``."""
        self._check_index(index)
        self._items[index] = value

    def swap(self, i: int, j: int) -> None:
        """Exchange the values at positions ``i`` and ``j``."""
        self._check_index(i)
        self._check_index(j)
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity = max(1, self._capacity * 2)

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` before all others."""
        self.insert(0, value)

    def insert_last(self, value: Any) -> None:
        """Append ``value``."""
        self.insert(len(self._items), value)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._grow_if_full()
        self._items.insert(index, value)

    def remove_first(self) -> None:
        """Remove the first value."""
        self.remove(0)

    def remove_last(self) -> None:
        """Remove the last value."""
        if not self._items:
            raise IndexError("sequence is empty")
        self._items.pop()

    def remove(self, index: int) -> None:
        """Remove the value at ``index``."""
        self._check_index(index)
        del self._items[index]

    def reserve_capacity(self, capacity: int) -> None:
        """Set the capacity; it never drops below the current length."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = max(capacity, len(self._items))

    def index_of_next(self, index: int) -> int | None:
        """Index following ``index``, or None at the end."""
        return None if index >= len(self._items) - 1 else index + 1

    def index_of_previous(self, index: int) -> int | None:
        """Index preceding ``index``, or None at the start."""
        return None if index <= 0 else index - 1


class CyclicImplicitSequence(ImplicitSequence):
    """An implicit sequence whose ends wrap around to each other."""

    def index_of_next(self, index: int) -> int | None:
        size = len(self)
        if size == 0:
            return None
        return 0 if index >= size - 1 else index + 1

    def index_of_previous(self, index: int) -> int | None:
        size = len(self)
        if size == 0:
            return None
        return size - 1 if index <= 0 else index - 1