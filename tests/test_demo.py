import io

from dijkstrax.demo import COMPLEXITY_NOTES, EXAMPLES, run_demo


def test_examples_are_registered():
    assert set(EXAMPLES) == {"directed", "undirected"}
    assert EXAMPLES["undirected"]().num_edges == 14


def test_demo_prints_every_section():
    buf = io.StringIO()
    run_demo(buf)
    text = buf.getvalue()
    assert text.count("Shortest distances from vertex 0:") == 3
    assert "Shortest path from 0 to 5: 0 -> 1 -> 3 -> 4 -> 5" in text
    assert text.endswith(COMPLEXITY_NOTES)
