"""Integration tests for route planning on the sample network."""

import pytest

from routegraph.config import reset_config
from routegraph.pipeline import plan_route, run_pipeline


@pytest.fixture(autouse=True)
def sample_data(monkeypatch, data_dir):
    monkeypatch.setenv("RG_GRAPH_DATA_DIR", str(data_dir))
    reset_config()


def test_plan_route_dijkstra():
    result = plan_route("Amsterdam", "Maastricht", "dijkstra", "length")

    assert result == (
        "Shortest path: Amsterdam -> Utrecht -> Eindhoven -> Maastricht\n"
        "Hops: 3\n"
        "Total weight: 220"
    )


def test_plan_route_bfs_has_no_weight():
    result = plan_route("Amsterdam", "Maastricht", "bfs")

    assert result == (
        "Shortest path: Amsterdam -> Utrecht -> Eindhoven -> Maastricht\nHops: 3"
    )


def test_plan_route_uses_configured_defaults(monkeypatch):
    monkeypatch.setenv("RG_SEARCH_DEFAULT_ALGORITHM", "bfs")
    reset_config()

    assert "Total weight" not in plan_route("Amsterdam", "Utrecht")


def test_plan_route_travel_time():
    result = plan_route("Amsterdam", "Maastricht", "dijkstra", "travel_time")

    assert result.endswith("Total weight: 1.69231")


def test_plan_route_no_path():
    assert plan_route("Amsterdam", "Texel") == (
        "No path found between Amsterdam and Texel."
    )


def test_plan_route_unknown_junction():
    assert plan_route("Amsterdam", "Atlantis") == "Error: Unknown junction 'Atlantis'"


def test_plan_route_unknown_algorithm():
    assert plan_route("Amsterdam", "Utrecht", "astar") == (
        "Error: Unknown search algorithm: 'astar'"
    )


def test_plan_route_unknown_weight():
    assert plan_route("Amsterdam", "Utrecht", weight="scenic") == (
        "Unknown weight: 'scenic'"
    )


def test_plan_route_load_error(monkeypatch, tmp_path):
    monkeypatch.setenv("RG_GRAPH_DATA_DIR", str(tmp_path))
    reset_config()

    assert plan_route("Amsterdam", "Utrecht").startswith(
        "Error: Failed to load junctions"
    )


def test_run_pipeline_prints_every_algorithm(capsys, monkeypatch):
    monkeypatch.setattr("routegraph.pipeline.configure_logging", lambda: None)

    run_pipeline()

    out = capsys.readouterr().out
    assert "Route: Amsterdam -> Maastricht" in out
    for algorithm in ("dfs", "bfs", "dijkstra"):
        assert f"[{algorithm}]" in out
    assert "Total weight: 220" in out
