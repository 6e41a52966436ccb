import pytest

from dijkstrax.demo import directed_example, undirected_example


@pytest.fixture
def directed():
    return directed_example()


@pytest.fixture
def undirected():
    return undirected_example()
