import pytest

from dijkstrax import ConfigError, InvalidArgument
from dijkstrax.generator import generate_graph


def test_same_seed_same_graph():
    a = generate_graph(30, 100, seed=4)
    b = generate_graph(30, 100, seed=4)
    assert list(a.edges()) == list(b.edges())


def test_erdos_renyi_edge_count_and_weights():
    g = generate_graph(20, 50, w_min=3, w_max=9, seed=1)
    assert g.num_edges == 50
    for u, v, w in g.edges():
        assert u != v
        assert 3 <= w <= 9


def test_edge_count_is_capped():
    g = generate_graph(4, 1000, seed=0)
    assert g.num_edges == 12


def test_dag_edges_point_forward():
    g = generate_graph(15, 40, graph_type="dag", seed=2)
    assert g.num_edges == 40
    assert all(u < v for u, v, _ in g.edges())


def test_grid_is_symmetric():
    g = generate_graph(9, graph_type="grid", seed=0)
    # 3x3 grid: 12 neighbour pairs, both directions
    assert g.num_edges == 24
    for u, v, _ in g.edges():
        assert g.weight_of(v, u) is not None


def test_backbone_chain():
    g = generate_graph(10, 0, ensure_weakly_connected=True, seed=0)
    assert sorted((u, v) for u, v, _ in g.edges()) == [(i, i + 1) for i in range(9)]


@pytest.mark.parametrize("dist", ["uniform", "small_int", "log_uniform", "exp"])
def test_weight_distributions_stay_in_range(dist):
    g = generate_graph(30, 120, weight_dist=dist, w_min=2, w_max=40, seed=3)
    assert all(2 <= w <= 40 for _, _, w in g.edges())


def test_empty_graph():
    assert generate_graph(0).n == 0


def test_bad_arguments():
    with pytest.raises(InvalidArgument):
        generate_graph(-1)
    with pytest.raises(InvalidArgument):
        generate_graph(5, w_min=-1)
    with pytest.raises(InvalidArgument):
        generate_graph(5, w_min=5, w_max=4)
    with pytest.raises(ConfigError):
        generate_graph(5, graph_type="torus")
    with pytest.raises(ConfigError):
        generate_graph(5, weight_dist="pareto")
