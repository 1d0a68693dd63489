"""Last-in, first-out stacks on array or linked storage."""

from __future__ import annotations

from typing import Any

from zastavky.explicit_sequence import SinglyLinkedSequence
from zastavky.implicit_sequence import ImplicitSequence


class ImplicitStack:
    """A stack whose top is the end of an array."""

    def __init__(self) -> None:
        self._sequence = ImplicitSequence()

    def __len__(self) -> int:
        return len(self._sequence)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._sequence)!r})"

    def clear(self) -> None:
        """Remove every element."""
        self._sequence.clear()

    def push(self, element: Any) -> None:
        """Put ``element`` on top."""
        self._sequence.insert_last(element)

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if len(self._sequence) == 0:
            raise IndexError("Stack is empty!")
        return self._sequence.access_last()

    def pop(self) -> Any:
        """Remove and return the top element."""
        result = self.peek()
        self._sequence.remove_last()
        return result


class ExplicitStack:
    """A stack whose top is the head of a linked sequence."""

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
        """Put ``element`` on top."""
        self._sequence.insert_first(element)

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if len(self._sequence) == 0:
            raise IndexError("Stack is empty!")
        return self._sequence.access_first()

    def pop(self) -> Any:
        """Remove and return the top element."""
        result = self.peek()
        self._sequence.remove_first()
        return result