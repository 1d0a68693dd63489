"""Undirected networks of nodes reachable through a gate of all nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class NetworkNode:
    """A node holding data and the list of nodes it is related to."""

    data: Any = None
    relations: list[NetworkNode] = field(default_factory=list)

    def _index_of(self, other: NetworkNode) -> int | None:
        for index, node in enumerate(self.relations):
            if node is other:
                return index
        return None


class ExplicitNetwork:
    """A network whose nodes are kept in insertion order in a gate."""

    def __init__(self) -> None:
        self._gate: list[NetworkNode] = []

    def __len__(self) -> int:
        return len(self._gate)

    def __iter__(self) -> Iterator[NetworkNode]:
        return iter(self._gate)

    def _gate_index(self, node: NetworkNode) -> int | None:
        for index, candidate in enumerate(self._gate):
            if candidate is node:
                return index
        return None

    def _shape(self) -> list[tuple[Any, list[int]]]:
        positions = {id(node): index for index, node in enumerate(self._gate)}
        return [
            (node.data, [positions[id(rel)] for rel in node.relations])
            for node in self._gate
        ]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ExplicitNetwork):
            return NotImplemented
        return len(self) == len(other) and self._shape() == other._shape()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._shape()!r})"

    def clear(self) -> None:
        """Remove every node and relation."""
        for node in self._gate:
            node.relations.clear()
        self._gate.clear()

    def copy(self) -> ExplicitNetwork:
        """Return a network with the same data and relations in the same order."""
        result = ExplicitNetwork()
        for node in self._gate:
            result.insert(node.data)
        for data, related in self._shape():
            pass
        for source, target in zip(self._shape(), result._gate):
            target.relations.extend(result._gate[i] for i in source[1])
        return result

    def relation_count(self) -> int:
        """Sum of all node degrees; each relation is counted at both ends."""
        return sum(len(node.relations) for node in self._gate)

    def degree(self, node: NetworkNode) -> int:
        """Number of relations of ``node``."""
        return len(node.relations)

    def node_from_gate(self, order: int) -> NetworkNode:
        """Return the node at position ``order`` in the gate."""
        if not 0 <= order < len(self._gate):
            raise IndexError(f"index {order} out of range")
        return self._gate[order]

    def node_from_node(self, node: NetworkNode, order: int) -> NetworkNode:
        """Return the ``order``-th node related to ``node``."""
        if not 0 <= order < len(node.relations):
            raise IndexError(f"index {order} out of range")
        return node.relations[order]

    def relation_exists(self, node_a: NetworkNode, node_b: NetworkNode) -> bool:
        """True when ``node_a`` and ``node_b`` are related."""
        if self.degree(node_a) <= self.degree(node_b):
            return node_a._index_of(node_b) is not None
        return node_b._index_of(node_a) is not None

    def insert(self, data: Any = None) -> NetworkNode:
        """Add a new unrelated node holding ``data`` and return it."""
        node = NetworkNode(data)
        self._gate.append(node)
        return node

    def remove(self, node: NetworkNode) -> None:
        """Disconnect ``node`` from everything and remove it from the network."""
        index = self._gate_index(node)
        if index is None:
            raise ValueError("node is not in the network")
        while node.relations:
            self.disconnect(node, node.relations[-1])
        del self._gate[index]

    def connect(self, node_a: NetworkNode, node_b: NetworkNode) -> None:
        """Relate ``node_a`` and ``node_b`` to each other."""
        node_a.relations.append(node_b)
        node_b.relations.append(node_a)

    def disconnect(self, node_a: NetworkNode, node_b: NetworkNode) -> None:
        """Remove one relation between ``node_a`` and ``node_b``."""
        index_a = node_a._index_of(node_b)
        index_b = node_b._index_of(node_a)
        if index_a is None or index_b is None:
            raise ValueError("nodes are not related")
        del node_a.relations[index_a]
        if node_a is node_b:
            index_b = node_b._index_of(node_a)
            if index_b is None:
                return
        del node_b.relations[index_b]