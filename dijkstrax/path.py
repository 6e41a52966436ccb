"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from .exceptions import InvariantViolation, OutOfRange

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph
    from .graph_numpy import DenseGraph

Vertex = int
Float = float


def reconstruct_path(
    distances: Sequence[Float],
    predecessors: Sequence[Optional[Vertex]],
    destination: Vertex,
) -> List[Vertex]:
    """Return the path from the source to ``destination``.

    Walks predecessor links back to the root (the vertex whose predecessor is
    ``None``) and reverses the collected chain.

    Args:
        distances: Distance of each vertex from the source (``inf`` when
            unreached).
        predecessors: Predecessor of each vertex, ``None`` for the source and
            unreached vertices.
        destination: Target vertex identifier.

    Returns:
        Vertices from source to ``destination`` (inclusive). An empty list
        means ``destination`` was never reached; a path to the source itself
        is ``[source]``.

    Raises:
        OutOfRange: If ``destination`` is not a vertex id.
        InvariantViolation: If the predecessor links contain a cycle.
    """
    n = len(predecessors)
    if not (0 <= destination < n):
        raise OutOfRange(f"destination {destination!r} is not a vertex id in [0, {n})")
    if math.isinf(distances[destination]):
        return []

    chain: List[Vertex] = []
    seen = set()
    cur: Optional[Vertex] = destination
    while cur is not None:
        if cur in seen:
            raise InvariantViolation(f"cycle in predecessor table through vertex {cur}")
        seen.add(cur)
        chain.append(cur)
        cur = predecessors[cur]
    chain.reverse()
    return chain


def path_weight(graph: Union["Graph", "DenseGraph"], path: Sequence[Vertex]) -> Float:
    """Return the sum of edge weights along ``path``.

    Raises:
        InvariantViolation: If two consecutive vertices are not joined by an
            edge.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        w = graph.weight_of(u, v)
        if w is None:
            raise InvariantViolation(f"path uses missing edge ({u}, {v})")
        total += w
    return total


__all__ = ["reconstruct_path", "path_weight"]
