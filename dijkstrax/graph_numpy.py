"""NumPy-backed dense graph representation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import InvalidArgument
from .graph import Edge, Float, Graph, Vertex, check_vertex, check_vertex_count, check_weight
from .logger import Logger, NoopLogger


@dataclass
class DenseGraph:
    """Directed graph stored as an ``n x n`` weight matrix.

    Missing edges are ``inf`` and the diagonal is ``0``, so the matrix itself
    carries the self-distance invariant. Suited to dense graphs and to the
    array-scan solver; exposes the same interface as
    :class:`~dijkstrax.graph.Graph`.
    """

    n: int
    max_vertices: Optional[int] = None
    logger: Optional[Logger] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.n = check_vertex_count(self.n, self.max_vertices)
        self.logger = self.logger or NoopLogger()
        self.weights: npt.NDArray[np.float64] = np.full((self.n, self.n), np.inf, dtype=np.float64)
        np.fill_diagonal(self.weights, 0.0)

    def add_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Set the weight of ``u -> v``, replacing any earlier weight."""
        u = check_vertex(self.n, u, "u")
        v = check_vertex(self.n, v, "v")
        wf = check_weight(u, v, w)
        if u == v:
            self.logger.debug("self_loop_ignored", vertex=u, weight=wf)
            return
        if np.isfinite(self.weights[u, v]):
            self.logger.debug("edge_overwritten", u=u, v=v, old=float(self.weights[u, v]), new=wf)
        self.weights[u, v] = wf

    def add_undirected_edge(self, u: Vertex, v: Vertex, w: Float) -> None:
        """Add ``u -> v`` and ``v -> u`` with the same weight."""
        self.add_edge(u, v, w)
        self.add_edge(v, u, w)

    def weight_of(self, u: Vertex, v: Vertex) -> Optional[Float]:
        """Return the weight of ``u -> v`` or ``None`` if there is no edge."""
        u = check_vertex(self.n, u, "u")
        v = check_vertex(self.n, v, "v")
        w = self.weights[u, v]
        return float(w) if np.isfinite(w) else None

    def neighbors(self, u: Vertex) -> Iterator[Tuple[Vertex, Float]]:
        """Iterate over ``(v, w)`` for every edge leaving ``u`` in vertex order."""
        row = self.weights[u]
        mask = np.isfinite(row)
        mask[u] = False
        for v in np.flatnonzero(mask):
            yield int(v), float(row[v])

    def out_degree(self, u: Vertex) -> int:
        """Return the number of edges leaving ``u``."""
        return int(np.count_nonzero(np.isfinite(self.weights[u]))) - 1

    @property
    def num_edges(self) -> int:
        return int(np.count_nonzero(np.isfinite(self.weights))) - self.n

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(u, v, w)`` in row-major order."""
        for u in range(self.n):
            for v, w in self.neighbors(u):
                yield u, v, w

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[Edge],
        *,
        undirected: bool = False,
        max_vertices: Optional[int] = None,
    ) -> "DenseGraph":
        """Construct a graph from an iterable of ``(u, v, w)`` edges."""
        g = cls(n, max_vertices=max_vertices)
        add = g.add_undirected_edge if undirected else g.add_edge
        for u, v, w in edges:
            add(u, v, w)
        return g

    @classmethod
    def from_matrix(cls, matrix: npt.ArrayLike) -> "DenseGraph":
        """Build a graph from a square matrix where ``inf`` marks a missing edge.

        The diagonal is ignored.
        """
        arr = np.asarray(matrix, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise InvalidArgument(f"expected a square matrix, got shape {arr.shape}")
        g = cls(int(arr.shape[0]))
        for u, v in zip(*np.nonzero(np.isfinite(arr))):
            if u != v:
                g.add_edge(int(u), int(v), float(arr[u, v]))
        return g

    def to_graph(self) -> Graph:
        """Return a sparse :class:`~dijkstrax.graph.Graph` copy of this graph."""
        return Graph.from_edges(self.n, self.edges())


__all__ = ["DenseGraph"]
