"""Linked sequences built from explicitly connected nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None


class _DoublyNode(_Node):
    __slots__ = ("previous",)

    def __init__(self, data: Any) -> None:
        super().__init__(data)
        self.previous: _DoublyNode | None = None


class SinglyLinkedSequence:
    """A sequence of values held in nodes that link to their successor."""

    _node_type: type[_Node] = _Node

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_last(value)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node = self._first
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SinglyLinkedSequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        """Remove every value."""
        self._first = None
        self._last = None
        self._size = 0

    def calculate_index(self, value: Any) -> int | None:
        """Return the index of the first occurrence of ``value``, or None."""
        for index, data in enumerate(self):
            if data == value:
                return index
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")

    def _locate(self, index: int) -> _Node:
        self._check_index(index)
        node = self._first
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _previous(self, target: _Node) -> _Node | None:
        for node in self._nodes():
            if node.next is target:
                return node
        return None

    def _link(self, previous: _Node | None, following: _Node | None) -> None:
        if previous is not None:
            previous.next = following

    def _make_head(self, node: _Node) -> None:
        """Hook for node types that keep a back link."""

    def access_first(self) -> Any:
        """Return the first value; IndexError when empty."""
        if self._first is None:
            raise IndexError("sequence is empty")
        return self._first.data

    def access_last(self) -> Any:
        """Return the last value; IndexError when empty."""
        if self._last is None:
            raise IndexError("sequence is empty")
        return self._last.data

    def access(self, index: int) -> Any:
        """Return the value at ``index``."""
        return self._locate(index).data

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``."""
        self._locate(index).data = value

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` before all others."""
        self.insert(0, value)

    def insert_last(self, value: Any) -> None:
        """Append ``value``."""
        self.insert(self._size, value)

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        node = self._node_type(value)
        if self._size == 0:
            self._first = self._last = node
        elif index == 0:
            self._link(node, self._first)
            self._first = node
        elif index == self._size:
            self._link(self._last, node)
            self._last = node
        else:
            previous = self._locate(index - 1)
            self._link(node, previous.next)
            self._link(previous, node)
        self._size += 1

    def remove_first(self) -> None:
        """Remove the first value."""
        if self._first is None:
            raise IndexError("sequence is empty")
        new_first = self._first.next
        self._first = new_first
        if new_first is None:
            self._last = None
        else:
            self._make_head(new_first)
        self._size -= 1

    def remove_last(self) -> None:
        """Remove the last value."""
        if self._last is None:
            raise IndexError("sequence is empty")
        if self._first is self._last:
            self._first = self._last = None
        else:
            new_last = self._previous(self._last)
            new_last.next = None  # type: ignore[union-attr]
            self._last = new_last
        self._size -= 1

    def remove(self, index: int) -> None:
        """Remove the value at ``index``."""
        self._check_index(index)
        if index == 0:
            self.remove_first()
        elif index == self._size - 1:
            self.remove_last()
        else:
            previous = self._locate(index - 1)
            removed = previous.next
            self._link(previous, removed.next)  # type: ignore[union-attr]
            self._size -= 1


class DoublyLinkedSequence(SinglyLinkedSequence):
    """A linked sequence whose nodes also link to their predecessor."""

    _node_type = _DoublyNode

    def _locate(self, index: int) -> _Node:
        self._check_index(index)
        if index < self._size // 2:
            node = self._first
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._last
            for _ in range(self._size - index - 1):
                node = node.previous  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def _previous(self, target: _Node) -> _Node | None:
        return target.previous  # type: ignore[attr-defined]

    def _link(self, previous: _Node | None, following: _Node | None) -> None:
        super()._link(previous, following)
        if following is not None:
            following.previous = previous  # type: ignore[attr-defined]

    def _make_head(self, node: _Node) -> None:
        node.previous = None  # type: ignore[attr-defined]

    def access(self, index: int) -> Any:
        """Return the value at ``index``, walking from the nearer end."""
        return self._locate(index).data

    def __reversed__(self) -> Iterator[Any]:
        node = self._last
        while node is not None:
            yield node.data
            node = node.previous  # type: ignore[attr-defined]