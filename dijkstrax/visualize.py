"""Draw a graph with its shortest-path tree highlighted.

Example usage:

```
python -m dijkstrax.visualize graph.csv --source 0 --target 5 --show-weights
```
"""

from __future__ import annotations

import argparse
from typing import Any, List, Optional, Sequence, Union

import matplotlib.pyplot as plt
import networkx as nx

from .exceptions import ConfigError
from .export import shortest_path_tree, to_networkx
from .graph import Graph
from .graph_numpy import DenseGraph
from .io import read_graph
from .report import format_distance
from .solver import ShortestPathResult, compute_shortest_paths

LAYOUTS = ("spring", "kamada_kawai", "shell")


def _layout(H: "nx.DiGraph", layout: str) -> Any:
    if layout == "spring":
        return nx.spring_layout(H, seed=42)
    if layout == "kamada_kawai":
        return nx.kamada_kawai_layout(H)
    if layout == "shell":
        return nx.shell_layout(H)
    raise ConfigError(f"unknown layout: {layout}")


def draw_shortest_path_tree(
    G: Union[Graph, DenseGraph],
    result: ShortestPathResult,
    path: Optional[Sequence[int]] = None,
    *,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 400,
    out_path: Optional[str] = None,
    show: bool = False,
) -> Any:
    """Render ``G`` with the tree from ``result`` and an optional ``path``.

    The source is red, unreachable vertices grey, tree edges thick and
    ``path`` edges orange. Each vertex is labelled ``id`` and its distance.

    Returns:
        The matplotlib figure.
    """
    H = to_networkx(G)
    pos = _layout(H, layout)
    fig, ax = plt.subplots(figsize=(10, 8))

    node_colors: List[str] = []
    for v in H.nodes:
        if v == result.source:
            node_colors.append("tab:red")
        elif result.reachable(v):
            node_colors.append("tab:blue")
        else:
            node_colors.append("lightgrey")
    nx.draw_networkx_nodes(H, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)

    tree = set(shortest_path_tree(result))
    on_path = set(zip(path, path[1:])) if path else set()
    other = [e for e in H.edges if e not in tree]
    nx.draw_networkx_edges(H, pos, ax=ax, edgelist=other, arrowstyle="->", arrowsize=10, width=0.8, alpha=0.3)
    nx.draw_networkx_edges(
        H,
        pos,
        ax=ax,
        edgelist=[e for e in tree if e not in on_path],
        arrowstyle="->",
        arrowsize=12,
        width=2.0,
        edge_color="tab:blue",
    )
    if on_path:
        nx.draw_networkx_edges(
            H, pos, ax=ax, edgelist=list(on_path), arrowstyle="->", arrowsize=14, width=3.0, edge_color="tab:orange"
        )

    labels = {v: f"{v}\n{format_distance(result.distances[v])}" for v in H.nodes}
    nx.draw_networkx_labels(H, pos, ax=ax, labels=labels, font_size=8)
    if show_weights:
        edge_labels = {(u, v): f"{w:g}" for u, v, w in G.edges()}
        nx.draw_networkx_edge_labels(H, pos, ax=ax, edge_labels=edge_labels, font_size=7)

    ax.set_title(f"Shortest-path tree from vertex {result.source}", fontsize=14)
    ax.set_axis_off()
    fig.tight_layout()
    if out_path:
        fig.savefig(out_path)
    if show:  # pragma: no cover - interactive
        plt.show()
    return fig


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Visualize a shortest-path tree")
    parser.add_argument("path", help="Graph file (csv, jsonl, mtx, graphml, txt)")
    parser.add_argument("--source", type=int, default=0)
    parser.add_argument("--target", type=int, default=None)
    parser.add_argument("--layout", choices=LAYOUTS, default="spring")
    parser.add_argument("--show-weights", action="store_true", help="Render edge weights (small graphs only)")
    parser.add_argument("--out", default=None, help="Save the figure instead of opening a window")
    args = parser.parse_args(argv)

    G = read_graph(args.path)
    result = compute_shortest_paths(G, args.source)
    path = result.path(args.target) if args.target is not None else None
    draw_shortest_path_tree(
        G,
        result,
        path,
        layout=args.layout,
        show_weights=args.show_weights,
        out_path=args.out,
        show=args.out is None,
    )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
