"""Command-line interface for running the solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Tuple

from .demo import EXAMPLES, run_demo
from .exceptions import ConfigError, DijkstraxError, InvalidArgument, InvariantViolation
from .export import export_tree_graphml, export_tree_json
from .generator import GRAPH_TYPES, generate_graph
from .graph import Graph
from .io import FORMATS, read_edge_list_txt, read_graph
from .logger import StdLogger
from .report import format_path, format_table, result_to_dict
from .solver import VARIANTS, DijkstraSolver, SolverConfig

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_INTERNAL = 70

EXAMPLE_CSV = """# u,v,w
0,1,4
0,2,2
1,2,1
1,3,5
2,3,8
2,4,10
3,4,2
3,5,6
4,5,3
"""


def _load_graph(args: argparse.Namespace) -> Tuple[Graph, Optional[int]]:
    """Return the graph selected on the command line and a source from the file, if any."""
    if args.random:
        G = generate_graph(args.n, args.m, graph_type=args.graph_type, seed=args.seed)
        return G, None
    if args.builtin:
        return EXAMPLES[args.builtin](), None
    p = Path(args.edges)
    if not p.exists():
        raise InvalidArgument(f"edges file not found: {args.edges}")
    if args.format == "txt" or (args.format is None and p.suffix.lower() == ".txt"):
        return read_edge_list_txt(args.edges, undirected=args.undirected, max_vertices=args.max_vertices)
    G = read_graph(args.edges, args.format, undirected=args.undirected, max_vertices=args.max_vertices)
    return G, None


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  dijkstrax --edges graph.csv --source 0 --target 5\n"
        "  dijkstrax --random --n 100 --m 500 --variant dense\n"
        "  dijkstrax --builtin undirected --output table\n"
        "  dijkstrax --demo\n"
    )
    p = argparse.ArgumentParser(
        prog="dijkstrax",
        description="Single-source shortest paths (Dijkstra, heap or dense engine)",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines as JSON")
    p.add_argument("--log-level", choices=["debug", "info", "warning"], default="warning", help="Log verbosity")

    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument("--random", action="store_true", help="Use a random graph")
    src.add_argument("--builtin", choices=sorted(EXAMPLES), help="Use a built-in example graph")
    src.add_argument("--demo", action="store_true", help="Run the worked examples and exit")
    src.add_argument("--example", action="store_true", help="Print a sample edges CSV to stdout and exit")

    p.add_argument("--format", choices=FORMATS, default=None, help="Edge file format (auto-detected from extension)")
    p.add_argument("--undirected", action="store_true", help="Read every edge in both directions")
    p.add_argument("--max-vertices", type=int, default=None, help="Reject graphs with more vertices than this")

    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random graph generation")
    p.add_argument("--graph-type", choices=GRAPH_TYPES, default="erdos_renyi", help="Random graph family")

    p.add_argument("--source", type=int, default=None, help="Source vertex id (default 0, or the file's source)")
    p.add_argument("--target", type=int, default=None, help="Target vertex id for path output")
    p.add_argument("--variant", choices=VARIANTS, default="heap", help="Shortest-path engine")
    p.add_argument("--output", choices=["json", "table"], default="json", help="Result format on stdout")

    p.add_argument("--export-json", type=str, default=None, help="Write shortest-path tree as JSON")
    p.add_argument("--export-graphml", type=str, default=None, help="Write shortest-path tree as GraphML")
    p.add_argument("--metrics-out", type=str, default=None, help="Write run metrics to this JSON file")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``dijkstrax`` command-line tool."""
    p = _build_parser()
    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return EXIT_OK

    stream = sys.stdout if args.log_json else sys.stderr
    level = "info" if args.log_json and args.log_level == "warning" else args.log_level
    logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)

    try:
        if args.demo:
            run_demo(sys.stdout, logger=logger)
            return EXIT_OK

        G, file_source = _load_graph(args)
        if args.source is not None:
            source = args.source
        elif file_source is not None:
            source = file_source
        else:
            source = 0

        if args.verbose:
            sys.stderr.write(
                f"config: n={G.n} m={G.num_edges} variant={args.variant} source={source} seed={args.seed}\n"
            )

        solver = DijkstraSolver(G, source, config=SolverConfig(variant=args.variant), logger=logger)
        t0 = time.perf_counter()
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0

        out = {"variant": args.variant, **result_to_dict(res)}
        path: Optional[List[int]] = None
        if args.target is not None:
            path = res.path(args.target) if G.n > 0 else []
            out["target"] = args.target
            out["path"] = path

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_tree_json(res))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_tree_graphml(res))
        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(solver.metrics(wall_ms=wall_ms)), fh)

        if args.output == "table":
            print(format_table(res))
            if path is not None:
                print(f"\nShortest path from {source} to {args.target}: {format_path(path)}")
        elif not args.log_json:
            print(json.dumps(out))
        return EXIT_OK

    except (InvalidArgument, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except (InvariantViolation, DijkstraxError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except OSError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
