import math

import pytest

from dijkstrax import Graph, InvalidArgument, InvalidWeight, OutOfRange, RecordingLogger


def test_new_graph_has_only_self_distances():
    g = Graph(3)
    assert g.n == 3
    assert g.num_edges == 0
    for u in range(3):
        assert g.weight_of(u, u) == 0.0
        for v in range(3):
            if u != v:
                assert g.weight_of(u, v) is None


def test_empty_graph_is_allowed():
    g = Graph(0)
    assert g.n == 0
    assert list(g.edges()) == []


@pytest.mark.parametrize("n", [-1, 2.5, "3", None, True])
def test_bad_vertex_count(n):
    with pytest.raises(InvalidArgument):
        Graph(n)


def test_vertex_count_above_configured_maximum():
    Graph(4, max_vertices=4)
    with pytest.raises(InvalidArgument, match="maximum"):
        Graph(5, max_vertices=4)


def test_add_edge_out_of_range():
    g = Graph(2)
    with pytest.raises(OutOfRange):
        g.add_edge(0, 2, 1.0)
    with pytest.raises(OutOfRange):
        g.add_edge(-1, 0, 1.0)
    with pytest.raises(OutOfRange):
        g.weight_of(0, 5)


def test_out_of_range_is_a_value_and_index_error():
    g = Graph(1)
    with pytest.raises(IndexError):
        g.add_edge(0, 1, 1.0)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, 1.0)


@pytest.mark.parametrize("w", [-1, -0.5, math.nan, math.inf, "1", None, True])
def test_add_edge_rejects_bad_weights(w):
    g = Graph(2)
    with pytest.raises(InvalidWeight):
        g.add_edge(0, 1, w)
    assert g.weight_of(0, 1) is None


def test_negative_weight_message_names_the_edge():
    g = Graph(3)
    with pytest.raises(InvalidWeight, match=r"\(1, 2\)"):
        g.add_edge(1, 2, -3)


def test_zero_weight_edge_is_distinct_from_no_edge():
    g = Graph(3)
    g.add_edge(0, 1, 0)
    assert g.weight_of(0, 1) == 0.0
    assert g.weight_of(0, 2) is None


def test_last_write_wins():
    log = RecordingLogger()
    g = Graph(2, logger=log)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 1, 3)
    assert g.weight_of(0, 1) == 3.0
    assert g.num_edges == 1
    assert log.events("edge_overwritten") == [{"u": 0, "v": 1, "old": 5.0, "new": 3.0}]


def test_self_loop_is_dropped():
    log = RecordingLogger()
    g = Graph(2, logger=log)
    g.add_edge(1, 1, 7)
    assert g.weight_of(1, 1) == 0.0
    assert g.num_edges == 0
    assert log.events("self_loop_ignored") == [{"vertex": 1, "weight": 7.0}]


def test_undirected_edge_sets_both_directions():
    g = Graph(3)
    g.add_undirected_edge(0, 2, 4)
    assert g.weight_of(0, 2) == 4.0
    assert g.weight_of(2, 0) == 4.0
    assert g.out_degree(0) == 1
    assert g.out_degree(1) == 0


def test_from_edges_and_neighbors(directed):
    assert directed.n == 6
    assert directed.num_edges == 9
    assert sorted(directed.neighbors(1)) == [(2, 1.0), (3, 5.0)]
    assert (3, 5, 6.0) in set(directed.edges())


def test_from_edges_undirected(undirected):
    assert undirected.num_edges == 14
    assert undirected.weight_of(4, 3) == 9.0


def test_to_dense_keeps_every_edge(directed):
    dense = directed.to_dense()
    assert dense.n == directed.n
    assert sorted(dense.edges()) == sorted(directed.edges())
