"""Public package exports for :mod:`dijkstrax`."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    DijkstraxError,
    GraphFormatError,
    InvalidArgument,
    InvalidWeight,
    InvariantViolation,
    OutOfRange,
)
from .graph import Graph
from .graph_numpy import DenseGraph
from .heap import HeapEntry, IndexedMinHeap
from .io import read_edge_list_txt, read_graph, write_graph
from .logger import Logger, NoopLogger, RecordingLogger, StdLogger
from .path import path_weight, reconstruct_path
from .solver import (
    DijkstraSolver,
    ShortestPathResult,
    SolverConfig,
    SolverMetrics,
    compute_shortest_paths,
    compute_shortest_paths_dense,
    find_path,
)

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "DenseGraph",
    "IndexedMinHeap",
    "HeapEntry",
    "DijkstraSolver",
    "ShortestPathResult",
    "SolverConfig",
    "SolverMetrics",
    "compute_shortest_paths",
    "compute_shortest_paths_dense",
    "find_path",
    "reconstruct_path",
    "path_weight",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "RecordingLogger",
    "read_graph",
    "read_edge_list_txt",
    "write_graph",
    "DijkstraxError",
    "InvalidArgument",
    "OutOfRange",
    "InvalidWeight",
    "GraphFormatError",
    "ConfigError",
    "InvariantViolation",
]
