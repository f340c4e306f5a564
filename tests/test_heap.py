import pytest

from islandpaths.heap import HeapNode, HeapOverflowError, MinHeap


def _drain(heap):
    out = []
    while heap:
        out.append(heap.pop())
    return out


def test_pop_returns_ascending_distances():
    distances = [40, 5, 17, 3, 99, 12, 5]
    heap = MinHeap(len(distances))
    for vertex, distance in enumerate(distances):
        heap.push(HeapNode(vertex, distance))
    popped = [node.distance for node in _drain(heap)]
    assert popped == sorted(distances)


def test_every_vertex_comes_out_once():
    heap = MinHeap(6)
    for vertex in range(6):
        heap.push(HeapNode(vertex, (vertex * 7) % 5))
    assert sorted(node.vertex for node in _drain(heap)) == list(range(6))


def test_new_node_has_no_parent():
    assert HeapNode(0, 1).parent == -1


def test_len_tracks_size():
    heap = MinHeap(3)
    heap.push(HeapNode(0, 1))
    heap.push(HeapNode(1, 2))
    assert len(heap) == 2
    heap.pop()
    assert len(heap) == 1


def test_overflow():
    heap = MinHeap(1)
    heap.push(HeapNode(0, 1))
    with pytest.raises(HeapOverflowError):
        heap.push(HeapNode(1, 2))


def test_pop_empty():
    with pytest.raises(IndexError):
        MinHeap(2).pop()


def test_decrease_key_moves_vertex_to_front():
    big = 2147483647
    heap = MinHeap(4)
    for vertex in range(4):
        heap.push(HeapNode(vertex, big))
    heap.decrease_key(2, 0)
    first = heap.pop()
    assert (first.vertex, first.distance) == (2, 0)


def test_decrease_key_unknown_vertex():
    heap = MinHeap(2)
    heap.push(HeapNode(0, 1))
    with pytest.raises(KeyError):
        heap.decrease_key(5, 0)


def test_equal_distances_keep_insertion_root():
    heap = MinHeap(3)
    for vertex in range(3):
        heap.push(HeapNode(vertex, 10))
    assert heap.pop().vertex == 0


def test_negative_capacity():
    with pytest.raises(ValueError):
        MinHeap(-1)