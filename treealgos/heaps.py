"""Array-based max-heaps."""

from __future__ import annotations

from collections.abc import MutableSequence


def max_heapify(heap: MutableSequence[int], index: int, heap_size: int) -> None:
    """Sift ``heap[index]`` down within the first ``heap_size`` slots."""
    while True:
        largest = index
        left = 2 * index + 1
        right = 2 * index + 2
        if left < heap_size and heap[left] > heap[largest]:
            largest = left
        if right < heap_size and heap[right] > heap[largest]:
            largest = right
        if largest == index:
            return
        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def merge_heaps(h1: MutableSequence[int], h2: MutableSequence[int]) -> None:
    """Place ``h2`` after the first ``len(h2)`` slots of ``h1`` and rebuild a max-heap.

    ``h1`` must have room for ``2 * len(h2)`` elements; it is changed in place.
    """
    n = len(h2)
    if len(h1) < 2 * n:
        raise ValueError(f"h1 needs room for {2 * n} elements, has {len(h1)}")
    h1[n : 2 * n] = h2
    size = 2 * n
    for i in range(size // 2 - 1, -1, -1):
        max_heapify(h1, i, size)