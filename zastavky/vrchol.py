"""Nodes of the carrier / town / stop hierarchy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator
from typing import Any

from zastavky.zastavka import Zastavka


class Vrchol(ABC):
    """Payload of a hierarchy node."""

    @abstractmethod
    def __str__(self) -> str:
        """Label shown for the node."""

    @property
    def has_zastavka(self) -> bool:
        """True when the node carries a stop."""
        return False


class KorenVrchol(Vrchol):
    """The root of the hierarchy."""

    def __str__(self) -> str:
        return "koren"


class DopravcaVrchol(Vrchol):
    """A carrier."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name


class ObecVrchol(Vrchol):
    """A town served by a carrier."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name


class ZastavkaVrchol(Vrchol):
    """A single stop in a town."""

    def __init__(self, zastavka: Zastavka) -> None:
        self.zastavka = zastavka

    @property
    def has_zastavka(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.zastavka.name


class HierarchyNode:
    """A node of a multi-way hierarchy with ordered sons."""

    def __init__(self, data: Any = None, parent: HierarchyNode | None = None) -> None:
        self.data = data
        self.parent = parent
        self.sons: list[HierarchyNode] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"

    def add_son(self, data: Any = None) -> HierarchyNode:
        """Append a new last son holding ``data`` and return it."""
        son = HierarchyNode(data, self)
        self.sons.append(son)
        return son

    def degree(self) -> int:
        """Number of sons."""
        return len(self.sons)

    def pre_order(self) -> Iterator[HierarchyNode]:
        """Nodes of this subtree, each before its sons."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.sons))

    def post_order(self) -> Iterator[HierarchyNode]:
        """Nodes of this subtree, each after its sons."""
        stack: list[tuple[HierarchyNode, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
            else:
                stack.append((node, True))
                stack.extend((son, False) for son in reversed(node.sons))

    def level_order(self) -> Iterator[HierarchyNode]:
        """Nodes of this subtree, level by level."""
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.sons)