"""Lists with positional access, backed by implicit or linked sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from zastavky.explicit_sequence import DoublyLinkedSequence, SinglyLinkedSequence
from zastavky.implicit_sequence import CyclicImplicitSequence, ImplicitSequence


class GeneralList:
    """A list whose storage is chosen by the subclass."""

    _sequence_type: type = ImplicitSequence

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._sequence = self._sequence_type()
        for value in values:
            self._sequence.insert_last(value)

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._sequence)

    def __contains__(self, element: object) -> bool:
        return self.calculate_index(element) is not None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return len(self) == len(other) and all(  # type: ignore[arg-type]
            a == b for a, b in zip(self, other)  # type: ignore[call-overload]
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._sequence.clear()

    def calculate_index(self, element: Any) -> int | None:
        """Return the index of the first occurrence of ``element``, or None."""
        for index, value in enumerate(self._sequence):
            if value == element:
                return index
        return None

    def _require_not_empty(self) -> None:
        if len(self._sequence) == 0:
            raise IndexError("List is empty!")

    def _require_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise IndexError("Invalid index!")

    def access_first(self) -> Any:
        """Return the first element."""
        self._require_not_empty()
        return self._sequence.access_first()

    def access_last(self) -> Any:
        """Return the last element."""
        self._require_not_empty()
        return self._sequence.access_last()

    def access(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._require_index(index, len(self))
        return self._sequence.access(index)

    def insert_first(self, element: Any) -> None:
        """Insert ``element`` at the front."""
        self._sequence.insert_first(element)

    def insert_last(self, element: Any) -> None:
        """Append ``element``."""
        self._sequence.insert_last(element)

    def insert(self, element: Any, index: int) -> None:
        """Insert ``element`` so that it ends up at ``index``."""
        self._require_index(index, len(self) + 1)
        self._sequence.insert(index, element)

    def set(self, index: int, element: Any) -> None:
        """Replace the element at ``index``."""
        self._require_index(index, len(self))
        self._sequence.set(index, element)

    def remove_first(self) -> None:
        """Remove the first element."""
        self._require_not_empty()
        self._sequence.remove_first()

    def remove_last(self) -> None:
        """Remove the last element."""
        self._require_not_empty()
        self._sequence.remove_last()

    def remove(self, index: int) -> None:
        """Remove the element at ``index``."""
        self._require_index(index, len(self))
        self._sequence.remove(index)


class ImplicitList(GeneralList):
    """A list stored in a contiguous array."""

    _sequence_type = ImplicitSequence


class ImplicitCyclicList(GeneralList):
    """A list stored in a cyclic array."""

    _sequence_type = CyclicImplicitSequence


class SinglyLinkedList(GeneralList):
    """A list stored in singly linked nodes."""

    _sequence_type = SinglyLinkedSequence


class DoublyLinkedList(GeneralList):
    """A list stored in doubly linked nodes."""

    _sequence_type = DoublyLinkedSequence