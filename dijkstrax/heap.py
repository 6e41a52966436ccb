"""Indexed binary min-heap with decrease-key.

The heap stores ``(distance, vertex)`` entries in a 0-indexed array (children
of slot ``i`` live at ``2i+1`` and ``2i+2``) alongside a position index that
maps each vertex to its current slot, or :data:`ABSENT` once the vertex has
been extracted. Entries compare as tuples, so equal distances are ordered by
vertex id and the lowest id is extracted first.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Sequence

from .exceptions import InvariantViolation

Vertex = int
Float = float

ABSENT = -1


class HeapEntry(NamedTuple):
    """A vertex and its tentative distance."""

    distance: Float
    vertex: Vertex


class IndexedMinHeap:
    """Priority queue over vertices keyed by tentative distance.

    ``extract_min`` and ``decrease_key`` run in ``O(log V)``; ``contains``
    and ``distance_of`` are ``O(1)`` through the position index.
    """

    def __init__(self, capacity: int = 0) -> None:
        """Create an empty heap able to index vertices ``0 .. capacity-1``."""
        self._data: List[HeapEntry] = []
        self._pos: List[int] = [ABSENT] * capacity

    @classmethod
    def build(
        cls,
        distances: Sequence[Float],
        vertices: Optional[Iterable[Vertex]] = None,
    ) -> "IndexedMinHeap":
        """Build a heap in ``O(V)`` from initial distances.

        Args:
            distances: Initial distance of each vertex, indexed by vertex id.
            vertices: Vertices to insert. Defaults to every index of
                ``distances``.

        Returns:
            A heap holding every requested vertex.
        """
        heap = cls(len(distances))
        if vertices is None:
            vertices = range(len(distances))
        for v in vertices:
            if heap._pos[v] != ABSENT:
                raise InvariantViolation(f"vertex {v} inserted twice")
            heap._pos[v] = len(heap._data)
            heap._data.append(HeapEntry(distances[v], v))
        for i in reversed(range(len(heap._data) // 2)):
            heap._sift_down(i)
        return heap

    # ---- internals ----------------------------------------------------

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        data[i], data[j] = data[j], data[i]
        self._pos[data[i].vertex] = i
        self._pos[data[j].vertex] = j

    def _sift_up(self, i: int) -> None:
        data = self._data
        while i > 0:
            parent = (i - 1) // 2
            if not data[i] < data[parent]:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        data = self._data
        size = len(data)
        while True:
            smallest = i
            left = 2 * i + 1
            right = left + 1
            if left < size and data[left] < data[smallest]:
                smallest = left
            if right < size and data[right] < data[smallest]:
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _slot(self, vertex: Vertex) -> int:
        if 0 <= vertex < len(self._pos):
            return self._pos[vertex]
        return ABSENT

    # ---- public API ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, int) and self.contains(vertex)

    def contains(self, vertex: Vertex) -> bool:
        """Return ``True`` if ``vertex`` has not been extracted yet."""
        return self._slot(vertex) != ABSENT

    def peek(self) -> Optional[HeapEntry]:
        """Return the minimum entry without removing it, or ``None``."""
        return self._data[0] if self._data else None

    def distance_of(self, vertex: Vertex) -> Float:
        """Return the current key of ``vertex``.

        Raises:
            InvariantViolation: If ``vertex`` is not in the heap.
        """
        i = self._slot(vertex)
        if i == ABSENT:
            raise InvariantViolation(f"vertex {vertex} is not in the heap")
        return self._data[i].distance

    def extract_min(self) -> Optional[HeapEntry]:
        """Remove and return the entry with the smallest distance.

        Returns:
            The minimum entry, or ``None`` when the heap is empty.
        """
        data = self._data
        if not data:
            return None
        root = data[0]
        last = data.pop()
        self._pos[root.vertex] = ABSENT
        if data:
            data[0] = last
            self._pos[last.vertex] = 0
            self._sift_down(0)
        return root

    def decrease_key(self, vertex: Vertex, new_distance: Float) -> None:
        """Lower the key of ``vertex`` to ``new_distance`` and restore heap order.

        Callers must check :meth:`contains` first.

        Raises:
            InvariantViolation: If ``vertex`` is absent or ``new_distance`` is
                not strictly smaller than its current key.
        """
        i = self._slot(vertex)
        if i == ABSENT:
            raise InvariantViolation(f"decrease_key on absent vertex {vertex}")
        current = self._data[i].distance
        if not new_distance < current:
            raise InvariantViolation(
                f"decrease_key({vertex}) needs a smaller key: {new_distance} >= {current}"
            )
        self._data[i] = HeapEntry(new_distance, vertex)
        self._sift_up(i)

    def check_invariants(self) -> None:
        """Verify heap order and position-index consistency.

        Raises:
            InvariantViolation: On the first inconsistency found.
        """
        data = self._data
        for i, entry in enumerate(data):
            if self._slot(entry.vertex) != i:
                raise InvariantViolation(
                    f"position index says {entry.vertex} is at {self._slot(entry.vertex)}, found at {i}"
                )
            if i > 0 and data[i] < data[(i - 1) // 2]:
                raise InvariantViolation(f"heap order broken at slot {i}")
        present = sum(1 for p in self._pos if p != ABSENT)
        if present != len(data):
            raise InvariantViolation(f"position index tracks {present} vertices, heap holds {len(data)}")


__all__ = ["ABSENT", "HeapEntry", "IndexedMinHeap"]
