"""Shared fixtures for the route graph tests."""

from pathlib import Path

import pytest

from routegraph.config import reset_config
from routegraph.domain.models import Junction, Road
from routegraph.graph import DirectedGraph


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test read configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def data_dir() -> Path:
    """Return the sample network directory."""
    return Path(__file__).resolve().parents[1] / "data"


@pytest.fixture
def abcd_graph() -> DirectedGraph[Junction, Road]:
    """A->B(1), B->C(1), A->C(5), C->D(1)."""
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    a, b, c, d = (Junction(name) for name in "ABCD")
    graph.add_edge(a, b, Road(1.0))
    graph.add_edge(b, c, Road(1.0))
    graph.add_edge(a, c, Road(5.0))
    graph.add_edge(c, d, Road(1.0))
    return graph


@pytest.fixture
def cycle_graph() -> DirectedGraph[Junction, Road]:
    """A->B->C->A with an isolated D."""
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    graph.add_edge(Junction("A"), Junction("B"), Road(1.0))
    graph.add_edge(Junction("B"), Junction("C"), Road(1.0))
    graph.add_edge(Junction("C"), Junction("A"), Road(1.0))
    graph.add_or_get_vertex(Junction("D"))
    return graph


def assert_valid_path(graph, path, start_id, target_id):
    """Check that consecutive path vertices are joined by graph edges."""
    assert path is not None
    assert path.ids[0] == start_id
    assert path.ids[-1] == target_id
    for from_id, to_id in zip(path.ids, path.ids[1:]):
        assert graph.get_edge(from_id, to_id) is not None
