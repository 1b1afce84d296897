import io

import pytest

from dsakit.heap import MinHeap, main

KEYS = [9, 4, 7, 1, 8, 2, 6, 3]


def _heap_ordered(values):
    return all(values[(i - 1) // 2] <= values[i] for i in range(1, len(values)))


def test_heap_property_holds():
    heap = MinHeap()
    heap.extend(KEYS)
    values = list(heap)
    assert _heap_ordered(values)
    assert values[0] == min(KEYS)
    assert sorted(values) == sorted(KEYS)


def test_heap_property_after_each_push():
    heap = MinHeap()
    for key in KEYS:
        heap.push(key)
        assert _heap_ordered(list(heap))
    assert len(heap) == len(KEYS)


def test_render_order():
    heap = MinHeap()
    heap.extend([5, 3, 8, 1])
    assert heap.render() == "Heap Tree: 1 3 8 5 "


def test_render_empty():
    assert MinHeap().render() == "Heap is empty!"


def test_capacity_is_enforced():
    heap = MinHeap(3)
    heap.extend([1, 2, 3])
    with pytest.raises(IndexError):
        heap.push(4)
    assert len(heap) == 3


def test_default_capacity_is_ten():
    heap = MinHeap()
    heap.extend(range(10))
    with pytest.raises(IndexError):
        heap.push(10)


def test_main_accepts_and_displays(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 3 2 1 3\n2\n0\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Heap Tree: 1 2 3 " in out
    assert "Exiting program..." in out