"""Binary min-heap of vertices keyed by tentative distance."""

from __future__ import annotations

from dataclasses import dataclass


class HeapOverflowError(Exception):
    """Raised when a node is pushed onto a full heap."""


@dataclass
class HeapNode:
    """A vertex with its current distance."""

    vertex: int
    distance: int
    parent: int = -1


class MinHeap:
    """Fixed-capacity min-heap ordered by ``HeapNode.distance``."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._nodes: list[HeapNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def _sift_up(self, index: int) -> None:
        nodes = self._nodes
        while index != 0:
            parent = (index - 1) // 2
            if not nodes[index].distance < nodes[parent].distance:
                break
            nodes[index], nodes[parent] = nodes[parent], nodes[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        nodes = self._nodes
        size = len(nodes)
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and nodes[left].distance < nodes[smallest].distance:
                smallest = left
            if right < size and nodes[right].distance < nodes[smallest].distance:
                smallest = right
            if smallest == index:
                return
            nodes[smallest], nodes[index] = nodes[index], nodes[smallest]
            index = smallest

    def push(self, node: HeapNode) -> None:
        """Insert ``node``; raise HeapOverflowError when the heap is full."""
        if len(self._nodes) == self.capacity:
            raise HeapOverflowError("heap overflow")
        self._nodes.append(node)
        self._sift_up(len(self._nodes) - 1)

    def pop(self) -> HeapNode:
        """Remove and return the node with the smallest distance."""
        if not self._nodes:
            raise IndexError("pop from an empty heap")
        root = self._nodes[0]
        last = self._nodes.pop()
        if self._nodes:
            self._nodes[0] = last
            self._sift_down(0)
        return root

    def decrease_key(self, vertex: int, distance: int) -> None:
        """Set the distance of ``vertex`` and move it up as needed."""
        for index, node in enumerate(self._nodes):
            if node.vertex == vertex:
                break
        else:
            raise KeyError(vertex)
        node.distance = distance
        self._sift_up(index)