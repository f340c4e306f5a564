"""Undirected weighted graph of named islands joined by bridges."""

from __future__ import annotations

from dataclasses import dataclass


class GraphError(Exception):
    """Raised when the graph cannot hold what is asked of it."""


@dataclass(frozen=True)
class Bridge:
    """One end of a bridge as seen from the island it leaves."""

    target: str
    weight: int


class Graph:
    """A fixed number of island slots with adjacency lists.

    Islands take the first free slot the first time they are named. Each
    adjacency list keeps the most recently added bridge first.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.names: list[str | None] = [None] * vertex_count
        self._adjacency: list[list[Bridge]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return self.vertex_count

    def __contains__(self, name: object) -> bool:
        return name is not None and name in self.names

    def index_of(self, name: str) -> int:
        """Return the slot of ``name``; raise KeyError if it has none."""
        try:
            return self.names.index(name)
        except ValueError:
            raise KeyError(name) from None

    def _claim_slot(self, name: str) -> int:
        if name in self:
            return self.index_of(name)
        try:
            slot = self.names.index(None)
        except ValueError:
            raise GraphError("unable to find space for vertices") from None
        self.names[slot] = name
        return slot

    def add_edge(self, source: str, target: str, weight: int) -> None:
        """Join ``source`` and ``target`` by a bridge of ``weight`` both ways."""
        source_index = self._claim_slot(source)
        target_index = self._claim_slot(target)
        self._adjacency[source_index].insert(0, Bridge(target, weight))
        self._adjacency[target_index].insert(0, Bridge(source, weight))

    def neighbours(self, index: int) -> tuple[Bridge, ...]:
        """Return the bridges leaving the island in slot ``index``, newest first."""
        if not 0 <= index < self.vertex_count:
            raise IndexError("vertex index out of range")
        return tuple(self._adjacency[index])

    def bridge_weight(self, source_index: int, target_index: int) -> int:
        """Return the weight of the first bridge from one slot to another."""
        for bridge in self.neighbours(source_index):
            if bridge.target in self and self.index_of(bridge.target) == target_index:
                return bridge.weight
        raise GraphError(f"no bridge between vertices {source_index} and {target_index}")