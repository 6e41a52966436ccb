"""Graph input/output helpers."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .exceptions import GraphFormatError
from .graph import Edge, Graph

EdgeList = List[Edge]

_GRAPHML_NS = "{http://graphml.graphdrawing.org/xmlns}"


def _parse_edge(parts: List[str], path: Path, lineno: int, one_based: bool = False) -> Edge:
    """Convert three text fields into ``(u, v, w)``."""
    try:
        u = int(parts[0].strip())
        v = int(parts[1].strip())
        w = float(parts[2].strip())
    except (ValueError, IndexError) as exc:
        raise GraphFormatError(f"{path}:{lineno}: cannot parse edge from {parts!r}") from exc
    if one_based:
        u -= 1
        v -= 1
    return u, v, w


def _vertex_count(edges: EdgeList, path: Path, declared: Optional[int] = None) -> int:
    if declared is not None:
        return declared
    if not edges:
        raise GraphFormatError(f"{path}: no edges parsed from file")
    return max(max(u, v) for u, v, _ in edges) + 1


def _parse_declared_n(text: str, path: Path, lineno: int) -> int:
    try:
        return int(text.strip())
    except ValueError as exc:
        raise GraphFormatError(f"{path}:{lineno}: bad vertex count {text!r}") from exc


def _read_csv(path: Path) -> Tuple[int, EdgeList]:
    """Read ``u,v,w`` rows (comma or tab separated, ``#`` comments).

    A ``# n=<N>`` comment declares the vertex count, which keeps trailing
    isolated vertices.

    Returns:
        The vertex count (declared, else max id + 1) and the edge list.

    Raises:
        GraphFormatError: If a row is malformed or the file holds no edges
            and no declared vertex count.
    """
    edges: EdgeList = []
    declared: Optional[int] = None
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if row.startswith("#"):
                comment = row[1:].strip()
                if comment.startswith("n="):
                    declared = _parse_declared_n(comment[2:], path, lineno)
                continue
            if not row:
                continue
            parts = row.replace("\t", ",").split(",")
            if len(parts) < 3:
                raise GraphFormatError(f"{path}:{lineno}: expected 'u,v,w', got {row!r}")
            edges.append(_parse_edge(parts, path, lineno))
    return _vertex_count(edges, path, declared), edges


def _write_csv(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write(f"# n={G.n}\n")
        fh.write("# u,v,w\n")
        for u, v, w in G.edges():
            fh.write(f"{u},{v},{w}\n")


def _read_jsonl(path: Path) -> Tuple[int, EdgeList]:
    """Read one ``{"u": .., "v": .., "w": ..}`` object per line.

    A ``{"n": N}`` record declares the vertex count.
    """
    edges: EdgeList = []
    declared: Optional[int] = None
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                if "n" in obj and "u" not in obj:
                    declared = int(obj["n"])
                    continue
                edges.append((int(obj["u"]), int(obj["v"]), float(obj["w"])))
            except (ValueError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"{path}:{lineno}: bad edge record {row!r}") from exc
    return _vertex_count(edges, path, declared), edges


def _write_jsonl(path: Path, G: Graph) -> None:
    with path.open("w", encoding="utf-8") as fh:
        fh.write(json.dumps({"n": G.n}) + "\n")
        for u, v, w in G.edges():
            fh.write(json.dumps({"u": u, "v": v, "w": w}) + "\n")


def _read_mtx(path: Path) -> Tuple[int, EdgeList]:
    """Read a Matrix Market coordinate file.

    Lines starting with ``%`` are comments. Vertex ids in the file are
    1-based and converted to 0-based.
    """
    edges: EdgeList = []
    n: Optional[int] = None
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            line = raw.strip()
            if not line or line.startswith("%"):
                continue
            parts = line.split()
            if n is None:
                try:
                    nrows, ncols = int(parts[0]), int(parts[1])
                except (ValueError, IndexError) as exc:
                    raise GraphFormatError(f"{path}:{lineno}: bad size line {line!r}") from exc
                n = max(nrows, ncols)
                continue
            if len(parts) < 3:
                raise GraphFormatError(f"{path}:{lineno}: expected 'u v w', got {line!r}")
            edges.append(_parse_edge(parts, path, lineno, one_based=True))
    if n is None:
        raise GraphFormatError(f"{path}: missing Matrix Market size line")
    return n, edges


def _write_mtx(path: Path, G: Graph) -> None:
    edges = list(G.edges())
    with path.open("w", encoding="utf-8") as fh:
        fh.write("%%MatrixMarket matrix coordinate real general\n")
        fh.write(f"{G.n} {G.n} {len(edges)}\n")
        for u, v, w in edges:
            fh.write(f"{u + 1} {v + 1} {w}\n")


def _graphml_id(raw: str, path: Path) -> int:
    try:
        return int(raw[1:]) if raw.startswith("n") else int(raw)
    except ValueError as exc:
        raise GraphFormatError(f"{path}: unsupported node id {raw!r}") from exc


def _read_graphml(path: Path) -> Tuple[int, EdgeList]:
    """Parse ``<node>`` and ``<edge>`` elements of a GraphML file.

    Node ids may be plain integers or ``n<int>``. The weight is read from a
    ``weight`` attribute or a ``<data key="w">`` child and defaults to ``1``.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise GraphFormatError(f"{path}: invalid GraphML: {exc}") from exc
    max_id = -1
    for node in root.iter(f"{_GRAPHML_NS}node"):
        max_id = max(max_id, _graphml_id(node.attrib.get("id", ""), path))
    edges: EdgeList = []
    for edge in root.iter(f"{_GRAPHML_NS}edge"):
        u = _graphml_id(edge.attrib.get("source", ""), path)
        v = _graphml_id(edge.attrib.get("target", ""), path)
        w_attr = edge.attrib.get("weight")
        if w_attr is None:
            data = edge.find(f"{_GRAPHML_NS}data[@key='w']")
            w_attr = data.text if data is not None and data.text is not None else "1"
        try:
            w = float(w_attr)
        except ValueError as exc:
            raise GraphFormatError(f"{path}: bad weight {w_attr!r} on edge ({u}, {v})") from exc
        edges.append((u, v, w))
        max_id = max(max_id, u, v)
    if max_id < 0:
        raise GraphFormatError(f"{path}: no nodes parsed from file")
    return max_id + 1, edges


def _write_graphml(path: Path, G: Graph) -> None:
    lines: List[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<graphml xmlns="http://graphml.graphdrawing.org/xmlns">',
        '  <graph id="G" edgedefault="directed">',
    ]
    lines.extend(f'    <node id="n{i}"/>' for i in range(G.n))
    lines.extend(f'    <edge source="n{u}" target="n{v}" weight="{w}"/>' for u, v, w in G.edges())
    lines.append("  </graph>")
    lines.append("</graphml>")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _read_txt_with_source(path: Path) -> Tuple[int, EdgeList, int]:
    """Read the ``n m source`` header format followed by ``u v w`` lines."""
    with path.open("r", encoding="utf-8") as fh:
        header = fh.readline().split()
        try:
            n, m, source = int(header[0]), int(header[1]), int(header[2])
        except (ValueError, IndexError) as exc:
            raise GraphFormatError(f"{path}:1: expected header 'n m source'") from exc
        edges: EdgeList = []
        for lineno, raw in enumerate(fh, start=2):
            if not raw.strip():
                continue
            edges.append(_parse_edge(raw.split(), path, lineno))
    if len(edges) != m:
        raise GraphFormatError(f"{path}: header announces {m} edges, found {len(edges)}")
    return n, edges, source


def _read_txt(path: Path) -> Tuple[int, EdgeList]:
    n, edges, _ = _read_txt_with_source(path)
    return n, edges


def _write_txt(path: Path, G: Graph, source: int = 0) -> None:
    edges = list(G.edges())
    with path.open("w", encoding="utf-8") as fh:
        fh.write(f"{G.n} {len(edges)} {source}\n")
        for u, v, w in edges:
            fh.write(f"{u} {v} {w}\n")


_FMT_READERS: Dict[str, Callable[[Path], Tuple[int, EdgeList]]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
    "mtx": _read_mtx,
    "graphml": _read_graphml,
    "txt": _read_txt,
}

_FMT_WRITERS: Dict[str, Callable[[Path, Graph], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
    "mtx": _write_mtx,
    "graphml": _write_graphml,
    "txt": _write_txt,
}

FORMATS = tuple(_FMT_READERS)


def _detect_format(path: Path) -> Optional[str]:
    """Guess the file format from the extension, or ``None``."""
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    if ext == ".mtx":
        return "mtx"
    if ext in {".graphml", ".xml"}:
        return "graphml"
    if ext == ".txt":
        return "txt"
    return None


def _resolve_format(p: Path, fmt: Optional[str], table: Iterable[str]) -> str:
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in table:
        raise GraphFormatError(f"unknown graph format for {p} (choose from {', '.join(FORMATS)})")
    return fmt


def read_graph(
    path: str,
    fmt: Optional[str] = None,
    *,
    undirected: bool = False,
    n: Optional[int] = None,
    max_vertices: Optional[int] = None,
) -> Graph:
    """Read a graph from a file.

    Args:
        path: The path to the graph file.
        fmt: One of :data:`FORMATS`. If ``None``, detected from the extension.
        undirected: Insert each edge in both directions.
        n: Vertex count to use instead of the one inferred from the file
            (useful for trailing isolated vertices).
        max_vertices: Optional capacity limit passed to :class:`Graph`.

    Raises:
        GraphFormatError: If the format is unknown or the content malformed.
        OutOfRange: If an edge mentions a vertex outside ``[0, n)``.
        InvalidWeight: If an edge weight is negative.
    """
    p = Path(path)
    fmt = _resolve_format(p, fmt, _FMT_READERS)
    inferred, edges = _FMT_READERS[fmt](p)
    return Graph.from_edges(
        inferred if n is None else n, edges, undirected=undirected, max_vertices=max_vertices
    )


def read_edge_list_txt(
    path: str, *, undirected: bool = False, max_vertices: Optional[int] = None
) -> Tuple[Graph, int]:
    """Read the ``n m source`` text format and return the graph and its source."""
    n, edges, source = _read_txt_with_source(Path(path))
    return Graph.from_edges(n, edges, undirected=undirected, max_vertices=max_vertices), source


def write_graph(G: Graph, path: str, fmt: Optional[str] = None) -> None:
    """Write a graph to a file.

    Args:
        G: The graph to write.
        path: Destination path.
        fmt: One of :data:`FORMATS`. If ``None``, detected from the extension.

    Raises:
        GraphFormatError: If the format is unknown.
    """
    p = Path(path)
    fmt = _resolve_format(p, fmt, _FMT_WRITERS)
    _FMT_WRITERS[fmt](p, G)


__all__ = ["FORMATS", "read_graph", "read_edge_list_txt", "write_graph"]
