import math

import numpy as np
import pytest

from dijkstrax import DenseGraph, Graph, InvalidArgument, InvalidWeight, OutOfRange


def test_matrix_layout():
    g = DenseGraph(3)
    g.add_edge(0, 1, 2.5)
    assert g.weights.shape == (3, 3)
    assert np.all(np.diag(g.weights) == 0.0)
    assert g.weights[0, 1] == 2.5
    assert math.isinf(g.weights[1, 0])


def test_weight_of_and_missing_edges():
    g = DenseGraph(2)
    assert g.weight_of(0, 0) == 0.0
    assert g.weight_of(0, 1) is None
    g.add_edge(0, 1, 0)
    assert g.weight_of(0, 1) == 0.0


def test_validation_matches_sparse_graph():
    with pytest.raises(InvalidArgument):
        DenseGraph(-1)
    with pytest.raises(InvalidArgument):
        DenseGraph(3, max_vertices=2)
    g = DenseGraph(2)
    with pytest.raises(OutOfRange):
        g.add_edge(0, 2, 1)
    with pytest.raises(InvalidWeight):
        g.add_edge(0, 1, -1)


def test_neighbors_in_vertex_order():
    g = DenseGraph.from_edges(4, [(0, 3, 1), (0, 1, 2), (0, 2, 3)])
    assert list(g.neighbors(0)) == [(1, 2.0), (2, 3.0), (3, 1.0)]
    assert g.out_degree(0) == 3
    assert g.out_degree(3) == 0
    assert g.num_edges == 3


def test_self_loop_keeps_zero_diagonal():
    g = DenseGraph(2)
    g.add_edge(1, 1, 9)
    assert g.weight_of(1, 1) == 0.0
    assert g.num_edges == 0


def test_last_write_wins_and_undirected():
    g = DenseGraph(3)
    g.add_undirected_edge(0, 2, 4)
    g.add_edge(0, 2, 1)
    assert g.weight_of(0, 2) == 1.0
    assert g.weight_of(2, 0) == 4.0


def test_from_matrix_ignores_diagonal():
    inf = math.inf
    g = DenseGraph.from_matrix([[5, 1, inf], [inf, 0, 2], [3, inf, 7]])
    assert sorted(g.edges()) == [(0, 1, 1.0), (1, 2, 2.0), (2, 0, 3.0)]
    assert g.weight_of(0, 0) == 0.0


def test_from_matrix_rejects_non_square():
    with pytest.raises(InvalidArgument):
        DenseGraph.from_matrix([[0, 1, 2]])


def test_from_matrix_rejects_negative_entries():
    with pytest.raises(InvalidWeight):
        DenseGraph.from_matrix([[0, -1], [1, 0]])


def test_to_graph_round_trip(directed):
    dense = directed.to_dense()
    back = dense.to_graph()
    assert isinstance(back, Graph)
    assert sorted(back.edges()) == sorted(directed.edges())
