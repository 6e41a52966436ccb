"""Export utilities for shortest-path trees."""

from __future__ import annotations

import json
import math
from typing import List, Tuple, Union

import networkx as nx

from .graph import Graph
from .graph_numpy import DenseGraph
from .solver import ShortestPathResult


def shortest_path_tree(result: ShortestPathResult) -> List[Tuple[int, int]]:
    """Return the tree edges ``(predecessor, v)`` of a solver result.

    Every reachable vertex other than the source contributes exactly one
    edge, so the tree has ``reachable - 1`` edges.
    """
    return [(p, v) for v, p in enumerate(result.predecessors) if p is not None]


def export_tree_json(result: ShortestPathResult) -> str:
    """Return a JSON string with nodes (and their distances) and tree edges."""
    data = {
        "source": result.source,
        "nodes": [
            {"id": v, "distance": None if math.isinf(d) else d}
            for v, d in enumerate(result.distances)
        ],
        "edges": [{"source": u, "target": v} for u, v in shortest_path_tree(result)],
    }
    return json.dumps(data)


def export_tree_graphml(result: ShortestPathResult) -> str:
    """Return a minimal GraphML string for the shortest-path tree."""
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="d" for="node" attr.name="distance" attr.type="double"/>')
    lines.append('  <graph id="T" edgedefault="directed">')
    for v, d in enumerate(result.distances):
        if math.isinf(d):
            lines.append(f'    <node id="n{v}"/>')
        else:
            lines.append(f'    <node id="n{v}"><data key="d">{d}</data></node>')
    for u, v in shortest_path_tree(result):
        lines.append(f'    <edge source="n{u}" target="n{v}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


def to_networkx(G: Union[Graph, DenseGraph]) -> "nx.DiGraph":
    """Return ``G`` as a :class:`networkx.DiGraph` with ``weight`` edge attributes."""
    H = nx.DiGraph()
    H.add_nodes_from(range(G.n))
    H.add_weighted_edges_from(G.edges())
    return H


__all__ = ["shortest_path_tree", "export_tree_json", "export_tree_graphml", "to_networkx"]
