"""Sparse directed graph representation used by the solver."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import InvalidArgument, InvalidWeight, OutOfRange
from .logger import Logger, NoopLogger

if TYPE_CHECKING:  # pragma: no cover
    from .graph_numpy import DenseGraph

Vertex = int
Float = float
Edge = Tuple[Vertex, Vertex, Float]


def check_vertex_count(n: object, max_vertices: Optional[int]) -> int:
    """Validate a vertex count and return it.

    Raises:
        InvalidArgument: If ``n`` is not a non-negative integer or exceeds
            ``max_vertices``.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgument(f"vertex count must be an integer, got {n!r}")
    if n < 0:
        raise InvalidArgument(f"vertex count must be non-negative, got {n}")
    if max_vertices is not None and n > max_vertices:
        raise InvalidArgument(f"vertex count {n} exceeds the configured maximum {max_vertices}")
    return int(n)


def check_vertex(n: int, u: object, name: str = "vertex") -> Vertex:
    """Return ``u`` as an ``int`` if it is a vertex id in ``[0, n)``."""
    if isinstance(u, bool) or not isinstance(u, numbers.Integral) or not (0 <= u < n):
        raise OutOfRange(f"{name} {u!r} is not a vertex id in [0, {n})")
    return int(u)


def check_weight(u: Vertex, v: Vertex, w: object) -> Float:
    """Return ``w`` as a ``float`` if it is a finite, non-negative number."""
    if isinstance(w, bool) or not isinstance(w, numbers.Real):
        raise InvalidWeight(f"non-numeric weight {w!r} on edge ({u}, {v})")
    wf = float(w)
    if math.isnan(wf) or math.isinf(wf):
        raise InvalidWeight(f"non-finite weight {wf} on edge ({u}, {v})")
    if wf < 0:
        raise InvalidWeight(f"negative weight {wf} on edge ({u}, {v})")
    return wf


@dataclass
class Graph:
    """Directed graph with non-negative edge weights.

    Each vertex keeps a dict of outgoing edges, so adding an edge that
    already exists overwrites its weight. ``weight_of(v, v)`` is always
    ``0.0``; self-loop edges are dropped.

    Attributes:
        n: Number of vertices in the range ``0`` .. ``n-1``.
        max_vertices: Optional capacity limit checked at construction.
        adj: Outgoing adjacency maps ``v -> w``.
    """

    n: int
    max_vertices: Optional[int] = None
    logger: Optional[Logger] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.n = check_vertex_count(self.n, self.max_vertices)
        self.logger = self.logger or NoopLogger()
        self.adj: List[Dict[Vertex, Float]] = [{} for _ in range(self.n)]

    def add_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Add a directed edge from ``u`` to ``v``.

        Args:
            u: Tail vertex.
            v: Head vertex.
            w: Non-negative edge weight.

        Raises:
            OutOfRange: If ``u`` or ``v`` are not vertex ids.
            InvalidWeight: If ``w`` is negative or not a finite number.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(0, 1, 1.5)
            >>> g.adj
            [{1: 1.5}, {}]
            ```
        """
        u = check_vertex(self.n, u, "u")
        v = check_vertex(self.n, v, "v")
        wf = check_weight(u, v, w)
        if u == v:
            self.logger.debug("self_loop_ignored", vertex=u, weight=wf)
            return
        old = self.adj[u].get(v)
        if old is not None:
            self.logger.debug("edge_overwritten", u=u, v=v, old=old, new=wf)
        self.adj[u][v] = wf

    def add_undirected_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Add ``u -> v`` and ``v -> u`` with the same weight."""
        self.add_edge(u, v, w)
        self.add_edge(v, u, w)

    def weight_of(self, u: Vertex, v: Vertex) -> Optional[Float]:
        """Return the weight of ``u -> v`` or ``None`` if there is no edge."""
        u = check_vertex(self.n, u, "u")
        v = check_vertex(self.n, v, "v")
        if u == v:
            return 0.0
        return self.adj[u].get(v)

    def neighbors(self, u: Vertex) -> Iterator[Tuple[Vertex, Float]]:
        """Iterate over ``(v, w)`` for every edge leaving ``u``."""
        return iter(self.adj[u].items())

    def out_degree(self, u: Vertex) -> int:
        """Return the number of edges leaving ``u``."""
        return len(self.adj[u])

    @property
    def num_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self.adj)

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(u, v, w)``."""
        for u in range(self.n):
            for v, w in self.adj[u].items():
                yield u, v, w

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Edge],
        *,
        undirected: bool = False,
        max_vertices: Optional[int] = None,
    ) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` edges.

        Args:
            n: Number of vertices.
            edges: Iterable of ``(u, v, w)`` tuples.
            undirected: Insert every edge in both directions.
            max_vertices: Optional capacity limit.

        Returns:
            A graph populated with the provided edges.
        """
        g = cls(n, max_vertices=max_vertices)
        add = g.add_undirected_edge if undirected else g.add_edge
        for u, v, w in edges:
            add(u, v, w)
        return g

    def to_dense(self) -> "DenseGraph":
        """Return a :class:`~dijkstrax.graph_numpy.DenseGraph` copy of this graph."""
        from .graph_numpy import DenseGraph

        return DenseGraph.from_edges(self.n, self.edges())


__all__ = ["Graph", "Vertex", "Float", "Edge", "check_vertex", "check_vertex_count", "check_weight"]
