import pytest

from islandpaths.graph import Bridge, Graph, GraphError


def test_add_edge_fills_slots_in_order():
    graph = Graph(3)
    graph.add_edge("Greenland", "Bananal", 8)
    graph.add_edge("Fraser", "Greenland", 10)
    assert graph.names == ["Greenland", "Bananal", "Fraser"]


def test_unused_slots_stay_empty():
    graph = Graph(4)
    graph.add_edge("A", "B", 1)
    assert graph.names[2:] == [None, None]
    assert len(graph) == 4


def test_edge_is_added_both_ways():
    graph = Graph(2)
    graph.add_edge("A", "B", 7)
    assert graph.neighbours(0) == (Bridge("B", 7),)
    assert graph.neighbours(1) == (Bridge("A", 7),)


def test_newest_bridge_comes_first():
    graph = Graph(3)
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 2)
    assert [b.target for b in graph.neighbours(0)] == ["C", "B"]


def test_index_of_known_and_unknown():
    graph = Graph(2)
    graph.add_edge("A", "B", 3)
    assert graph.index_of("B") == 1
    with pytest.raises(KeyError):
        graph.index_of("Z")


def test_contains():
    graph = Graph(2)
    graph.add_edge("A", "B", 3)
    assert "A" in graph
    assert "Z" not in graph


def test_no_space_for_new_island():
    graph = Graph(2)
    graph.add_edge("A", "B", 3)
    with pytest.raises(GraphError):
        graph.add_edge("A", "C", 4)


def test_bridge_weight_is_symmetric():
    graph = Graph(3)
    graph.add_edge("A", "B", 5)
    graph.add_edge("B", "C", 9)
    assert graph.bridge_weight(0, 1) == graph.bridge_weight(1, 0) == 5
    assert graph.bridge_weight(2, 1) == 9


def test_bridge_weight_missing():
    graph = Graph(3)
    graph.add_edge("A", "B", 5)
    graph.add_edge("B", "C", 9)
    with pytest.raises(GraphError):
        graph.bridge_weight(0, 2)


def test_neighbours_out_of_range():
    graph = Graph(1)
    with pytest.raises(IndexError):
        graph.neighbours(1)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)