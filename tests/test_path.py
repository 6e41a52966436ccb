import math

import pytest

from dijkstrax import Graph, InvariantViolation, OutOfRange, path_weight, reconstruct_path

INF = math.inf


def test_walks_back_to_source():
    dist = [0, 4, 2, 9, 11, 14]
    pred = [None, 0, 0, 1, 3, 4]
    assert reconstruct_path(dist, pred, 5) == [0, 1, 3, 4, 5]
    assert reconstruct_path(dist, pred, 2) == [0, 2]


def test_source_path_has_one_vertex():
    assert reconstruct_path([INF, 0], [None, None], 1) == [1]


def test_unreached_destination_has_no_path():
    assert reconstruct_path([0, INF], [None, None], 1) == []


def test_destination_out_of_range():
    with pytest.raises(OutOfRange):
        reconstruct_path([0], [None], 1)
    with pytest.raises(OutOfRange):
        reconstruct_path([0], [None], -1)


def test_cycle_in_predecessors_is_an_invariant_violation():
    with pytest.raises(InvariantViolation, match="cycle"):
        reconstruct_path([0, 1, 1], [None, 2, 1], 1)


def test_long_chain_does_not_recurse():
    n = 50_000
    pred = [None] + list(range(n - 1))
    dist = [float(i) for i in range(n)]
    path = reconstruct_path(dist, pred, n - 1)
    assert len(path) == n
    assert path[0] == 0 and path[-1] == n - 1


def test_path_weight(directed):
    assert path_weight(directed, [0, 1, 3, 4, 5]) == 14
    assert path_weight(directed, [3]) == 0
    assert path_weight(directed, []) == 0


def test_path_weight_missing_edge():
    g = Graph.from_edges(3, [(0, 1, 1)])
    with pytest.raises(InvariantViolation):
        path_weight(g, [0, 1, 2])
