"""Micro-benchmark comparing the heap and dense engines.

Run this module as a script to time both engines on random graphs and check
that they agree.

Example:
```bash
python -m dijkstrax.bench --trials 5 --sizes 1000,5000 2000,10000 --out-csv out.csv
```

Use ``--mem`` to record peak memory usage during solver runs.
"""

from __future__ import annotations

import argparse
import csv
import statistics
import time
import tracemalloc
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from .generator import GRAPH_TYPES, generate_graph
from .graph import Graph
from .solver import VARIANTS, DijkstraSolver, ShortestPathResult, SolverConfig, SolverMetrics


@dataclass
class BenchResult:
    """Result of running both engines on one graph."""

    heap: SolverMetrics
    dense: SolverMetrics
    agree: bool


def _timed_solve(G: Graph, source: int, variant: str, track_mem: bool) -> Tuple[ShortestPathResult, SolverMetrics]:
    solver = DijkstraSolver(G, source, SolverConfig(variant=variant))
    if track_mem:
        tracemalloc.start()
    t0 = time.perf_counter()
    res = solver.solve()
    wall_ms = (time.perf_counter() - t0) * 1000.0
    peak_mib = None
    if track_mem:
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        peak_mib = peak / (1024 * 1024)
    return res, solver.metrics(wall_ms=wall_ms, peak_mib=peak_mib)


def run_once(
    n: int,
    m: int,
    seed: int = 0,
    graph_type: str = "erdos_renyi",
    track_mem: bool = False,
) -> BenchResult:
    """Run both engines on one random graph from vertex ``0``.

    Args:
        n: Number of vertices.
        m: Number of edges.
        seed: Seed for the random graph generator.
        graph_type: Graph family passed to :func:`generate_graph`.
        track_mem: Record peak memory with :mod:`tracemalloc`.

    Returns:
        Metrics of both runs and whether their tables matched.
    """
    G = generate_graph(n, m, graph_type=graph_type, seed=seed)  # type: ignore[arg-type]
    heap_res, heap_metrics = _timed_solve(G, 0, "heap", track_mem)
    dense_res, dense_metrics = _timed_solve(G, 0, "dense", track_mem)
    agree = (
        heap_res.distances == dense_res.distances
        and heap_res.predecessors == dense_res.predecessors
    )
    return BenchResult(heap=heap_metrics, dense=dense_metrics, agree=agree)


def _p95(values: List[float]) -> float:
    if len(values) < 2:
        return values[0]
    return statistics.quantiles(values, n=100, method="inclusive")[94]


def main(argv: List[str] | None = None) -> int:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.

    Returns:
        ``0`` if both engines agreed on every graph, ``1`` otherwise.
    """
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per size")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["50,200", "200,800"],
        help="Size pairs as n,m (e.g. 1000,5000). Defaults to a small demo.",
    )
    parser.add_argument("--graph-type", choices=GRAPH_TYPES, default="erdos_renyi")
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    parser.add_argument("--mem", action="store_true", help="Record peak memory (MiB) with tracemalloc")
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for spec in args.sizes:
        try:
            n_str, m_str = spec.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size specification '{spec}'")

    rows: List[List[object]] = []
    times: Dict[Tuple[int, int, str], List[float]] = {}
    all_agree = True
    for n, m in sizes:
        for trial in range(args.trials):
            res = run_once(n, m, seed=args.seed_base + trial, graph_type=args.graph_type, track_mem=args.mem)
            all_agree = all_agree and res.agree
            for mtx in (res.heap, res.dense):
                times.setdefault((n, m, mtx.variant), []).append(mtx.wall_ms)
                row: List[object] = [
                    mtx.n,
                    mtx.m,
                    mtx.variant,
                    trial,
                    f"{mtx.wall_ms:.6f}",
                    mtx.counters["edges_relaxed"],
                    mtx.counters["relaxations"],
                    mtx.counters["scans"],
                    int(res.agree),
                ]
                if args.mem:
                    row.append(f"{(mtx.peak_mib or 0.0):.6f}")
                rows.append(row)

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            header = ["n", "m", "variant", "trial", "wall_ms", "edges_relaxed", "relaxations", "scans", "agree"]
            if args.mem:
                header.append("peak_mib")
            writer.writerow(header)
            writer.writerows(rows)

    print(f"{'n':>6} {'m':>7} {'variant':>7} {'median_ms':>11} {'p95_ms':>11}")
    for (n, m, variant), samples in sorted(times.items(), key=lambda kv: (kv[0][0], kv[0][1], VARIANTS.index(kv[0][2]))):
        print(f"{n:6d} {m:7d} {variant:>7} {statistics.median(samples):11.3f} {_p95(samples):11.3f}")
    if not all_agree:
        print("MISMATCH: heap and dense engines disagreed on at least one graph")
    return 0 if all_agree else 1


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
