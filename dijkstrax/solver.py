"""Dijkstra single-source shortest paths: heap and dense engines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

from .exceptions import ConfigError
from .graph import Float, Graph, Vertex, check_vertex
from .graph_numpy import DenseGraph
from .heap import IndexedMinHeap
from .logger import Logger, NoopLogger
from .path import reconstruct_path

GraphLike = Union[Graph, DenseGraph]

VARIANTS = ("heap", "dense")


@dataclass(frozen=True)
class ShortestPathResult:
    """Distances and predecessors produced by the solver.

    Attributes:
        source: Source vertex of the run.
        distances: Distance of every vertex, ``inf`` when unreachable.
        predecessors: Predecessor on the shortest path, ``None`` for the
            source and for unreachable vertices.
        settled: Vertices in the order their distance was finalised.
        complete: ``False`` if the run stopped early (destination reached or
            cancelled); only settled vertices are then guaranteed exact.
    """

    source: Vertex
    distances: List[Float]
    predecessors: List[Optional[Vertex]]
    settled: List[Vertex] = field(default_factory=list)
    complete: bool = True

    def reachable(self, v: Vertex) -> bool:
        """Return ``True`` if ``v`` has a finite distance."""
        return not math.isinf(self.distances[v])

    def path(self, target: Vertex) -> List[Vertex]:
        """Return the path from the source to ``target`` (empty if unreachable)."""
        return reconstruct_path(self.distances, self.predecessors, target)


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    n: int
    m: int
    variant: str
    counters: Dict[str, int]
    wall_ms: float
    peak_mib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        variant: ``"heap"`` (indexed min-heap, ``O((V+E) log V)``) or
            ``"dense"`` (array scan, ``O(V^2)``).
        check_invariants: Verify the heap after every settled vertex. Slow;
            meant for debugging.
        should_stop: Optional callable polled at the top of each iteration.
            Returning ``True`` ends the run with a partial result.
    """

    variant: str = "heap"
    check_invariants: bool = False
    should_stop: Optional[Callable[[], bool]] = None

    def __post_init__(self) -> None:
        if self.variant not in VARIANTS:
            raise ConfigError(f"unknown variant '{self.variant}', expected one of {VARIANTS}")


class DijkstraSolver:
    """Dijkstra's algorithm over a graph with non-negative weights.

    Both engines settle vertices in the same order: smallest tentative
    distance first, lowest vertex id on ties. When an edge from a settled
    vertex offers a candidate equal to the current distance, the lower-id
    predecessor is kept. Given the same input, the two engines therefore
    return identical distance and predecessor tables.
    """

    def __init__(
        self,
        G: GraphLike,
        source: Vertex,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Input graph. It must not be modified while the solver runs.
            source: Source vertex identifier.
            config: Optional solver configuration.
            logger: Optional event logger.

        Raises:
            OutOfRange: If ``source`` is not a vertex id of a non-empty graph.
        """
        if G.n > 0:
            source = check_vertex(G.n, source, "source")
        self.G = G
        self.source = source
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "edges_relaxed": 0,
            "relaxations": 0,
            "tie_breaks": 0,
            "extractions": 0,
            "decrease_keys": 0,
            "scans": 0,
        }
        self._result: Optional[ShortestPathResult] = None

    # ---------- utilities -------------------------------------------------

    def _relax(
        self,
        u: Vertex,
        v: Vertex,
        w: Float,
        dist: List[Float],
        pred: List[Optional[Vertex]],
    ) -> bool:
        """Relax edge ``(u, v)``.

        Returns:
            ``True`` if ``dist[v]`` decreased.
        """
        self.counters["edges_relaxed"] += 1
        cand = dist[u] + w
        if cand < dist[v]:
            self.logger.debug("relax", vertex=v, old=dist[v], new=cand, via=u)
            dist[v] = cand
            pred[v] = u
            self.counters["relaxations"] += 1
            return True
        p = pred[v]
        if cand == dist[v] and p is not None and u < p:
            pred[v] = u
            self.counters["tie_breaks"] += 1
        return False

    def _stop_requested(self) -> bool:
        return self.cfg.should_stop is not None and self.cfg.should_stop()

    def _min_distance(self, dist: List[Float], settled: List[bool]) -> Optional[Vertex]:
        """Return the unsettled vertex with the smallest finite distance."""
        best = math.inf
        best_v: Optional[Vertex] = None
        for v in range(len(dist)):
            if not settled[v] and dist[v] < best:
                best = dist[v]
                best_v = v
        self.counters["scans"] += len(dist)
        return best_v

    # ---------- engines ---------------------------------------------------

    def _run_heap(
        self,
        dist: List[Float],
        pred: List[Optional[Vertex]],
        order: List[Vertex],
        stop_at: Optional[Vertex],
    ) -> bool:
        heap = IndexedMinHeap.build(dist)
        while heap:
            if self._stop_requested():
                self.logger.warning("solve_cancelled", settled=len(order))
                return False
            entry = heap.extract_min()
            if entry is None or math.isinf(entry.distance):
                # everything left is unreachable
                break
            u = entry.vertex
            self.counters["extractions"] += 1
            order.append(u)
            self.logger.debug("settle", vertex=u, distance=entry.distance)
            if u == stop_at:
                return False
            for v, w in self.G.neighbors(u):
                if heap.contains(v) and self._relax(u, v, w, dist, pred):
                    heap.decrease_key(v, dist[v])
                    self.counters["decrease_keys"] += 1
            if self.cfg.check_invariants:
                heap.check_invariants()
        return True

    def _run_dense(
        self,
        dist: List[Float],
        pred: List[Optional[Vertex]],
        order: List[Vertex],
        stop_at: Optional[Vertex],
    ) -> bool:
        settled = [False] * len(dist)
        while True:
            if self._stop_requested():
                self.logger.warning("solve_cancelled", settled=len(order))
                return False
            u = self._min_distance(dist, settled)
            if u is None:
                return True
            settled[u] = True
            order.append(u)
            self.logger.debug("settle", vertex=u, distance=dist[u])
            if u == stop_at:
                return False
            for v, w in self.G.neighbors(u):
                if not settled[v]:
                    self._relax(u, v, w, dist, pred)

    # ---------- public API ------------------------------------------------

    def solve(self, stop_at: Optional[Vertex] = None) -> ShortestPathResult:
        """Run Dijkstra's algorithm and return distances and predecessors.

        Args:
            stop_at: Optional destination. The run ends as soon as this vertex
                is settled; its distance and path are final at that point.

        Raises:
            OutOfRange: If ``stop_at`` is not a vertex id.
        """
        n = self.G.n
        if stop_at is not None and n > 0:
            stop_at = check_vertex(n, stop_at, "destination")
        dist: List[Float] = [math.inf] * n
        pred: List[Optional[Vertex]] = [None] * n
        order: List[Vertex] = []
        if n == 0:
            self._result = ShortestPathResult(self.source, dist, pred, order)
            return self._result

        self.logger.debug("solve_start", n=n, source=self.source, variant=self.cfg.variant)
        dist[self.source] = 0.0
        if self.cfg.variant == "heap":
            complete = self._run_heap(dist, pred, order, stop_at)
        else:
            complete = self._run_dense(dist, pred, order, stop_at)

        self.logger.info(
            "solve_done",
            variant=self.cfg.variant,
            source=self.source,
            settled=len(order),
            complete=complete,
            **self.counters,
        )
        self._result = ShortestPathResult(self.source, dist, pred, order, complete)
        return self._result

    def path(self, target: Vertex) -> List[Vertex]:
        """Return a path from the source to ``target``.

        Runs :meth:`solve` first if it has not been called yet.

        Returns:
            List of vertex ids from source to target (inclusive). Returns an
            empty list if no path exists.
        """
        result = self._result if self._result is not None else self.solve()
        return result.path(target)

    # ---------- counters --------------------------------------------------

    def summary(self) -> Dict[str, int]:
        """Return a copy of internal counter values."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        """Return performance metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`solve` in milliseconds.
            peak_mib: Optional peak memory usage in MiB.
        """
        return SolverMetrics(
            n=self.G.n,
            m=self.G.num_edges,
            variant=self.cfg.variant,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


def compute_shortest_paths(
    G: GraphLike,
    source: Vertex,
    variant: str = "heap",
    logger: Logger | None = None,
) -> ShortestPathResult:
    """Compute distances and predecessors from ``source``.

    Args:
        G: Input graph with non-negative edge weights.
        source: Source vertex identifier.
        variant: ``"heap"`` (default) or ``"dense"``.
        logger: Optional event logger.

    Returns:
        Distance and predecessor tables for every vertex.
    """
    return DijkstraSolver(G, source, SolverConfig(variant=variant), logger).solve()


def compute_shortest_paths_dense(
    G: GraphLike, source: Vertex, logger: Logger | None = None
) -> ShortestPathResult:
    """Array-scan reference engine; same result as :func:`compute_shortest_paths`."""
    return compute_shortest_paths(G, source, variant="dense", logger=logger)


def find_path(
    G: GraphLike,
    source: Vertex,
    destination: Vertex,
    variant: str = "dense",
    logger: Logger | None = None,
) -> List[Vertex]:
    """Return the shortest path from ``source`` to ``destination``.

    The search stops as soon as ``destination`` is settled.

    Returns:
        Vertices from ``source`` to ``destination`` inclusive, or an empty
        list if ``destination`` is unreachable or the graph has no vertices.

    Raises:
        OutOfRange: If ``source`` or ``destination`` is not a vertex id.
    """
    solver = DijkstraSolver(G, source, SolverConfig(variant=variant), logger)
    if G.n == 0:
        return []
    result = solver.solve(stop_at=destination)
    return result.path(destination)


__all__ = [
    "VARIANTS",
    "GraphLike",
    "ShortestPathResult",
    "SolverMetrics",
    "SolverConfig",
    "DijkstraSolver",
    "compute_shortest_paths",
    "compute_shortest_paths_dense",
    "find_path",
]
