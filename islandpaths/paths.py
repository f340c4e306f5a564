"""Shortest routes between every pair of islands and their report."""

from __future__ import annotations

from typing import Iterator, Sequence, TextIO

from .graph import Graph, GraphError
from .heap import HeapNode, MinHeap

SEPARATOR = "=" * 40
_UNREACHED = float("inf")


def dijkstra(graph: Graph, source: int) -> tuple[list[int | None], list[list[int]]]:
    """Run Dijkstra's algorithm from slot ``source``.

    Returns the distances (None where unreachable) and, for each vertex, the
    vertices that improved its distance, most recent first.
    """
    count = len(graph)
    if not 0 <= source < count:
        raise IndexError("source index out of range")

    distances: list[int | None] = [None] * count
    parents: list[list[int]] = [[] for _ in range(count)]
    heap = MinHeap(count)
    for vertex in range(count):
        heap.push(HeapNode(vertex, _UNREACHED))  # type: ignore[arg-type]
    queued = set(range(count))

    distances[source] = 0
    heap.decrease_key(source, 0)

    while len(heap):
        current = heap.pop().vertex
        queued.discard(current)
        reached = distances[current]
        if reached is None:
            continue
        for bridge in graph.neighbours(current):
            target = graph.index_of(bridge.target)
            candidate = reached + bridge.weight
            known = distances[target]
            if known is None or candidate < known:
                distances[target] = candidate
                if target in queued:
                    heap.decrease_key(target, candidate)
                parents[target].insert(0, current)

    return distances, parents


def iter_routes(
    graph: Graph, source: int, target: int, parents: Sequence[Sequence[int]]
) -> Iterator[tuple[int, ...]]:
    """Yield every route from ``source`` to ``target`` along the parent links."""
    count = len(graph)
    if not (0 <= source < count and 0 <= target < count):
        raise IndexError("vertex index out of range")

    def walk(vertex: int, suffix: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        route = (vertex,) + suffix
        if vertex == source:
            yield route
            return
        for parent in parents[vertex]:
            yield from walk(parent, route)

    yield from walk(target, ())


def format_route(graph: Graph, route: Sequence[int]) -> str:
    """Render one route as a framed Path/Route/Distance block."""
    if len(route) < 2:
        raise ValueError("a route needs at least two islands")
    names = [graph.names[index] for index in route]
    weights = [graph.bridge_weight(a, b) for a, b in zip(route, route[1:])]
    distance = " + ".join(str(weight) for weight in weights)
    if len(route) > 2:
        distance += f" = {sum(weights)}"
    lines = [
        SEPARATOR,
        f"Path: {names[0]} -> {names[-1]}",
        "Route: " + " -> ".join(str(name) for name in names),
        f"Distance: {distance}",
        SEPARATOR,
    ]
    return "\n".join(lines) + "\n"


def render_report(graph: Graph) -> str:
    """Return the report of routes for every connected pair of islands."""
    if None in graph.names:
        raise GraphError("graph has islands without names")
    printed: set[frozenset[int]] = set()
    blocks: list[str] = []
    for source in range(len(graph)):
        distances, parents = dijkstra(graph, source)
        for target, distance in enumerate(distances):
            if target == source or distance is None:
                continue
            pair = frozenset((source, target))
            if pair in printed:
                continue
            printed.add(pair)
            blocks.extend(
                format_route(graph, route)
                for route in iter_routes(graph, source, target, parents)
            )
    return "".join(blocks)


def write_report(graph: Graph, stream: TextIO) -> None:
    """Write the report for ``graph`` to ``stream``."""
    stream.write(render_report(graph))