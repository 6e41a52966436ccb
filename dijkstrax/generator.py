"""Random directed weighted graphs for testing and benchmarking.

GRAPH FAMILIES
--------------
1. erdos_renyi
   Uniformly sampled directed edges. Baseline / average case.

2. dag
   Edges only from lower to higher vertex ids, so paths have bounded depth.

3. grid
   Near-square 2D grid with edges between neighbours in both directions.
   Many equal-length shortest paths, which exercises tie-breaking.

WEIGHT DISTRIBUTIONS
--------------------
- uniform: evenly distributed integer weights in ``[w_min, w_max]``
- small_int: weights squeezed into ``[w_min, w_min + 10]`` (many ties)
- log_uniform / exp: heavy-tailed weights

All weights are non-negative, so every generated graph is safe for Dijkstra.
"""

from __future__ import annotations

import math
import random
from typing import List, Literal, Optional, Set, Tuple

from .exceptions import ConfigError, InvalidArgument
from .graph import Edge, Graph

WeightDist = Literal["uniform", "small_int", "log_uniform", "exp"]
GraphType = Literal["erdos_renyi", "dag", "grid"]

GRAPH_TYPES: Tuple[str, ...] = ("erdos_renyi", "dag", "grid")
WEIGHT_DISTS: Tuple[str, ...] = ("uniform", "small_int", "log_uniform", "exp")


def _sample_weight(rng: random.Random, dist: str, w_min: int, w_max: int) -> int:
    if dist == "uniform":
        return rng.randint(w_min, w_max)

    if dist == "small_int":
        return rng.randint(w_min, min(w_max, w_min + 10))

    if dist == "log_uniform":
        # shift by one to avoid log(0)
        a = max(1, w_min + 1)
        b = max(a, w_max + 1)
        x = math.exp(rng.uniform(math.log(a), math.log(b)))
        return max(w_min, min(w_max, int(round(x - 1))))

    if dist == "exp":
        if w_max == w_min:
            return w_min
        lam = 1.0 / max(1.0, (w_max - w_min) / 4.0)
        return int(w_min + min(w_max - w_min, round(rng.expovariate(lam))))

    raise ConfigError(f"unknown weight distribution: {dist}")


def generate_graph(
    n: int,
    m: Optional[int] = None,
    *,
    graph_type: GraphType = "erdos_renyi",
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    ensure_weakly_connected: bool = False,
) -> Graph:
    """Generate a directed weighted graph.

    Args:
        n: Number of vertices.
        m: Target number of edges. Defaults to ``4n`` (capped at ``n(n-1)``)
            for random families; for grids, extra random edges on top of the
            grid up to ``m``.
        graph_type: One of :data:`GRAPH_TYPES`.
        weight_dist: One of :data:`WEIGHT_DISTS`.
        w_min: Smallest weight (must be ``>= 0``).
        w_max: Largest weight.
        seed: Seed for :class:`random.Random`.
        ensure_weakly_connected: Add a backbone chain ``i -> i+1`` first.

    Returns:
        A :class:`Graph` with distinct ordered pairs and no self-loops.

    Raises:
        InvalidArgument: For negative sizes or an invalid weight range.
        ConfigError: For an unknown family or weight distribution.
    """
    if n < 0:
        raise InvalidArgument("n must be >= 0.")
    if w_min < 0:
        raise InvalidArgument("w_min must be >= 0 for Dijkstra-safe graphs.")
    if w_max < w_min:
        raise InvalidArgument("w_max must be >= w_min.")
    if weight_dist not in WEIGHT_DISTS:
        raise ConfigError(f"unknown weight distribution: {weight_dist}")
    if m is not None and m < 0:
        raise InvalidArgument("m must be >= 0.")

    rng = random.Random(seed)
    max_pairs = n * (n - 1)
    seen: Set[Tuple[int, int]] = set()
    edges: List[Edge] = []

    def add_edge(u: int, v: int) -> None:
        if u == v or (u, v) in seen:
            return
        seen.add((u, v))
        edges.append((u, v, _sample_weight(rng, weight_dist, w_min, w_max)))

    if ensure_weakly_connected and graph_type != "grid":
        for i in range(n - 1):
            add_edge(i, i + 1)

    if graph_type == "erdos_renyi":
        target = min(n * 4 if m is None else m, max_pairs)
        while len(edges) < target:
            add_edge(rng.randrange(n), rng.randrange(n))

    elif graph_type == "dag":
        target = min(n * 4 if m is None else m, max_pairs // 2)
        while len(edges) < target:
            u, v = rng.randrange(n), rng.randrange(n)
            add_edge(min(u, v), max(u, v))

    elif graph_type == "grid":
        rows = max(1, math.isqrt(n))
        cols = max(1, (n + rows - 1) // rows)
        for r in range(rows):
            for c in range(cols):
                u = r * cols + c
                if u >= n:
                    continue
                right, down = u + 1, u + cols
                if c + 1 < cols and right < n:
                    add_edge(u, right)
                    add_edge(right, u)
                if down < n:
                    add_edge(u, down)
                    add_edge(down, u)
        if m is not None:
            target = min(m, max_pairs)
            while len(edges) < target:
                add_edge(rng.randrange(n), rng.randrange(n))

    else:
        raise ConfigError(f"unknown graph_type: {graph_type}")

    return Graph.from_edges(n, edges)


__all__ = ["GRAPH_TYPES", "WEIGHT_DISTS", "generate_graph"]
