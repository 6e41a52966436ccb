import pytest

from dijkstrax import (
    Graph,
    GraphFormatError,
    InvalidWeight,
    OutOfRange,
    read_edge_list_txt,
    read_graph,
    write_graph,
)


def test_csv_with_comments_and_tabs(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("# u,v,w\n0,1,4\n\n1\t2\t1.5\n", encoding="utf-8")
    g = read_graph(str(p))
    assert g.n == 3
    assert g.weight_of(0, 1) == 4.0
    assert g.weight_of(1, 2) == 1.5


def test_csv_malformed_row_reports_line(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("0,1,4\n1,x,2\n", encoding="utf-8")
    with pytest.raises(GraphFormatError, match=":2:"):
        read_graph(str(p))


def test_csv_short_row(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("0,1\n", encoding="utf-8")
    with pytest.raises(GraphFormatError):
        read_graph(str(p))


def test_empty_file(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(GraphFormatError, match="no edges"):
        read_graph(str(p))


def test_negative_weight_in_file(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("0,1,-2\n", encoding="utf-8")
    with pytest.raises(InvalidWeight):
        read_graph(str(p))


def test_vertex_count_override(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("0,1,1\n", encoding="utf-8")
    assert read_graph(str(p), n=5).n == 5
    with pytest.raises(OutOfRange):
        read_graph(str(p), n=1)


def test_undirected_read(tmp_path):
    p = tmp_path / "g.jsonl"
    p.write_text('{"u": 0, "v": 2, "w": 3}\n', encoding="utf-8")
    g = read_graph(str(p), undirected=True)
    assert g.weight_of(2, 0) == 3.0


def test_jsonl_bad_record(tmp_path):
    p = tmp_path / "g.jsonl"
    p.write_text('{"u": 0, "v": 1}\n', encoding="utf-8")
    with pytest.raises(GraphFormatError):
        read_graph(str(p))


def test_mtx_is_one_based(tmp_path):
    p = tmp_path / "g.mtx"
    p.write_text("%%MatrixMarket matrix coordinate real general\n% comment\n4 4 1\n1 4 2.5\n", encoding="utf-8")
    g = read_graph(str(p))
    assert g.n == 4
    assert g.weight_of(0, 3) == 2.5


def test_graphml_weight_sources(tmp_path):
    p = tmp_path / "g.graphml"
    p.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<graphml xmlns="http://graphml.graphdrawing.org/xmlns">\n'
        '  <graph edgedefault="directed">\n'
        '    <node id="n0"/><node id="n1"/><node id="n2"/><node id="n3"/>\n'
        '    <edge source="n0" target="n1" weight="2"/>\n'
        '    <edge source="1" target="2"><data key="w">3.5</data></edge>\n'
        '    <edge source="n2" target="n0"/>\n'
        "  </graph>\n"
        "</graphml>\n",
        encoding="utf-8",
    )
    g = read_graph(str(p))
    assert g.n == 4
    assert g.weight_of(0, 1) == 2.0
    assert g.weight_of(1, 2) == 3.5
    assert g.weight_of(2, 0) == 1.0


def test_txt_header_format(tmp_path):
    p = tmp_path / "g.txt"
    p.write_text("4 2 3\n3 0 7\n0 1 1\n", encoding="utf-8")
    g, source = read_edge_list_txt(str(p))
    assert (g.n, g.num_edges, source) == (4, 2, 3)
    assert g.weight_of(3, 0) == 7.0


def test_txt_edge_count_mismatch(tmp_path):
    p = tmp_path / "g.txt"
    p.write_text("4 3 0\n0 1 1\n", encoding="utf-8")
    with pytest.raises(GraphFormatError, match="announces 3"):
        read_edge_list_txt(str(p))


@pytest.mark.parametrize("ext", ["csv", "jsonl", "mtx", "graphml", "txt"])
def test_written_graph_reads_back(tmp_path, directed, ext):
    p = tmp_path / f"g.{ext}"
    write_graph(directed, str(p))
    g = read_graph(str(p))
    assert sorted(g.edges()) == sorted(directed.edges())


def test_unknown_format(tmp_path, directed):
    with pytest.raises(GraphFormatError, match="unknown graph format"):
        write_graph(directed, str(tmp_path / "g.bin"))
    with pytest.raises(GraphFormatError):
        read_graph(str(tmp_path / "g.bin"))


def test_explicit_format_overrides_extension(tmp_path, directed):
    p = tmp_path / "edges.dat"
    write_graph(directed, str(p), fmt="jsonl")
    assert read_graph(str(p), fmt="jsonl").num_edges == 9


@pytest.mark.parametrize("ext", ["csv", "jsonl", "mtx", "graphml", "txt"])
def test_written_weights_keep_full_precision(tmp_path, ext):
    g = Graph.from_edges(3, [(0, 1, 1234567.0), (1, 2, 0.1 + 0.2)])
    p = tmp_path / f"g.{ext}"
    write_graph(g, str(p))
    back = read_graph(str(p))
    assert back.weight_of(0, 1) == 1234567.0
    assert back.weight_of(1, 2) == 0.1 + 0.2


@pytest.mark.parametrize("ext", ["csv", "jsonl", "mtx", "graphml", "txt"])
def test_written_graph_keeps_isolated_vertices(tmp_path, ext):
    g = Graph.from_edges(4, [(0, 1, 1.0)])
    p = tmp_path / f"g.{ext}"
    write_graph(g, str(p))
    assert read_graph(str(p)).n == 4


@pytest.mark.parametrize("ext", ["csv", "jsonl"])
def test_edgeless_graph_reads_back(tmp_path, ext):
    p = tmp_path / f"g.{ext}"
    write_graph(Graph(3), str(p))
    g = read_graph(str(p))
    assert g.n == 3
    assert g.num_edges == 0


def test_declared_vertex_count_is_validated(tmp_path):
    p = tmp_path / "g.csv"
    p.write_text("# n=abc\n0,1,1\n", encoding="utf-8")
    with pytest.raises(GraphFormatError, match=":1:"):
        read_graph(str(p))
    p.write_text("# n=2\n0,3,1\n", encoding="utf-8")
    with pytest.raises(OutOfRange):
        read_graph(str(p))
