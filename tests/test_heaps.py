import pytest

from treealgos.heaps import max_heapify, merge_heaps


def is_max_heap(values, size):
    return all(
        values[(i - 1) // 2] >= values[i] for i in range(1, size)
    )


def test_merge_source_example():
    h1 = [16, 14, 10, 8, 7, 0, 0, 0, 0, 0]
    h2 = [15, 13, 5, 6, 11]
    expected_items = sorted(h1[:5] + h2)
    merge_heaps(h1, h2)
    assert sorted(h1) == expected_items
    assert is_max_heap(h1, 10)
    assert h1[0] == 16


def test_merge_leaves_h2_untouched():
    h1 = [9, 4, 0, 0]
    h2 = [7, 3]
    merge_heaps(h1, h2)
    assert h2 == [7, 3]
    assert sorted(h1) == [3, 4, 7, 9]
    assert is_max_heap(h1, 4)


def test_merge_requires_room():
    with pytest.raises(ValueError):
        merge_heaps([5, 0, 0], [4, 1])


def test_merge_empty():
    h1 = []
    merge_heaps(h1, [])
    assert h1 == []


def test_max_heapify_sifts_root_down():
    heap = [1, 5, 3]
    max_heapify(heap, 0, 3)
    assert heap == [5, 1, 3]


def test_max_heapify_respects_heap_size():
    heap = [1, 2, 9]
    max_heapify(heap, 0, 2)
    assert heap == [2, 1, 9]


def test_max_heapify_builds_heap_bottom_up():
    heap = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    for i in range(len(heap) // 2 - 1, -1, -1):
        max_heapify(heap, i, len(heap))
    assert is_max_heap(heap, len(heap))
    assert heap[0] == max(heap)