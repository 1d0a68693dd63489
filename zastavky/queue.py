"""First-in, first-out queues on a cyclic array or a linked sequence."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from zastavky.explicit_sequence import SinglyLinkedSequence
from zastavky.implicit_sequence import CyclicImplicitSequence

INIT_CAPACITY = 100


class ImplicitQueue:
    """A bounded queue held in a cyclic array of fixed capacity."""

    def __init__(self, capacity: int = INIT_CAPACITY) -> None:
        self._sequence = CyclicImplicitSequence(capacity, True)
        self._insertion_index = 0
        self._removal_index = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _values(self) -> Iterator[Any]:
        index = self._removal_index
        for _ in range(self._size):
            yield self._sequence.access(index)
            index = self._sequence.index_of_next(index)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ImplicitQueue):
            return NotImplemented
        return self._size == other._size and list(self._values()) == list(
            other._values()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values())!r})"

    def capacity(self) -> int:
        """Number of elements the queue can hold."""
        return len(self._sequence)

    def clear(self) -> None:
        """Remove every element."""
        self._insertion_index = self._removal_index
        self._size = 0

    def push(self, element: Any) -> None:
        """Append ``element`` at the back; IndexError when full."""
        if self._size >= self.capacity():
            raise IndexError("Queue is full!")
        self._sequence.set(self._insertion_index, element)
        self._insertion_index = self._sequence.index_of_next(self._insertion_index)
        self._size += 1

    def peek(self) -> Any:
        """Return the front element without removing it."""
        if self._size == 0:
            raise IndexError("Queue is empty!")
        return self._sequence.access(self._removal_index)

    def pop(self) -> Any:
        """Remove and return the front element."""
        result = self.peek()
        self._sequence.set(self._removal_index, None)
        self._removal_index = self._sequence.index_of_next(self._removal_index)
        self._size -= 1
        return result


class ExplicitQueue:
    """An unbounded queue held in a singly linked sequence."""

    def __init__(self) -> None:
        self._sequence = SinglyLinkedSequence()

    def __len__(self) -> int:
        return len(self._sequence)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._sequence)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._sequence.clear()

    def push(self, element: Any) -> None:
        """Append ``element`` at the back."""
        self._sequence.insert_last(element)

    def peek(self) -> Any:
        """Return the front element without removing it."""
        if len(self._sequence) == 0:
            raise IndexError("Queue is empty!")
        return self._sequence.access_first()

    def pop(self) -> Any:
        """Remove and return the front element."""
        result = self.peek()
        self._sequence.remove_first()
        return result