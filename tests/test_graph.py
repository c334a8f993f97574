from routegraph.domain.models import Junction, Road
from routegraph.graph import DirectedGraph, breadth_first_search


def test_add_or_get_vertex_keeps_original():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    original = Junction("Utrecht", 136.0, 456.0, 361000)
    duplicate = Junction("Utrecht", 0.0, 0.0, 1)

    assert graph.add_or_get_vertex(original) is original
    assert graph.add_or_get_vertex(duplicate) is original
    assert graph.get_vertex("Utrecht") is original
    assert graph.num_vertices() == 1


def test_add_or_get_vertex_none():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    assert graph.add_or_get_vertex(None) is None
    assert len(graph) == 0


def test_add_edge_rejects_duplicate_pair():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    a, b = Junction("A"), Junction("B")
    first, second = Road(10.0), Road(99.0)

    assert graph.add_edge(a, b, first)
    assert graph.get_edge(a, b) is first

    assert not graph.add_edge(a, b, second)
    assert graph.get_edge("A", "B") is first
    assert graph.num_edges() == 1


def test_add_edge_admits_unknown_vertex_objects():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    assert graph.add_edge(Junction("A"), Junction("B"), Road(1.0))
    assert "A" in graph
    assert "B" in graph
    assert graph.num_vertices() == 2


def test_add_edge_by_unknown_id_changes_nothing():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    graph.add_or_get_vertex(Junction("A"))

    assert not graph.add_edge("A", "Nowhere", Road(1.0))
    assert not graph.add_edge(Junction("B"), "Nowhere", Road(1.0))
    assert "B" not in graph
    assert graph.num_vertices() == 1
    assert graph.num_edges() == 0


def test_add_edge_between_ids():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    graph.add_or_get_vertex(Junction("A"))
    graph.add_or_get_vertex(Junction("B"))

    assert graph.add_edge("A", "B", Road(3.0))
    assert graph.get_edge("A", "B") == Road(3.0)
    assert graph.get_edge("B", "A") is None


def test_add_connection_adds_both_directions():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    road = Road(20.0)

    assert graph.add_connection(Junction("Amsterdam"), Junction("Haarlem"), road)
    assert graph.get_edge("Amsterdam", "Haarlem") is road
    assert graph.get_edge("Haarlem", "Amsterdam") is road
    assert graph.num_edges() == 2


def test_add_connection_keeps_first_direction_when_second_fails():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    existing = Road(7.0)
    graph.add_edge(Junction("B"), Junction("A"), existing)

    assert not graph.add_connection("A", "B", Road(1.0))
    assert graph.get_edge("A", "B") == Road(1.0)
    assert graph.get_edge("B", "A") is existing


def test_add_connection_stops_when_first_direction_fails():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    graph.add_edge(Junction("A"), Junction("B"), Road(7.0))

    assert not graph.add_connection("A", "B", Road(1.0))
    assert graph.get_edge("B", "A") is None


def test_neighbours_distinguish_missing_vertex_from_no_neighbours(abcd_graph):
    assert abcd_graph.get_neighbours("Nowhere") is None
    assert abcd_graph.get_neighbours("D") == []
    assert [v.id for v in abcd_graph.get_neighbours("A")] == ["B", "C"]


def test_queries_resolve_foreign_objects_by_identity(abcd_graph):
    stored = abcd_graph.get_vertex("A")
    lookalike = Junction("A", 1.0, 2.0)

    assert lookalike in abcd_graph
    assert abcd_graph.resolve(lookalike) is stored
    assert [v.id for v in abcd_graph.get_neighbours(lookalike)] == ["B", "C"]
    assert abcd_graph.get_neighbours(Junction("Z")) is None


def test_get_edges(abcd_graph):
    assert abcd_graph.get_edges("A") == [Road(1.0), Road(5.0)]
    assert abcd_graph.get_edges("D") == []
    assert abcd_graph.get_edges("Nowhere") is None


def test_get_edge_missing(abcd_graph):
    assert abcd_graph.get_edge("D", "A") is None
    assert abcd_graph.get_edge("A", "Nowhere") is None
    assert abcd_graph.get_edge(None, "A") is None


def test_counts(abcd_graph):
    assert abcd_graph.num_vertices() == 4
    assert len(abcd_graph) == 4
    assert abcd_graph.num_edges() == 4


def test_remove_edge_prunes_empty_adjacency(abcd_graph):
    removed = abcd_graph.remove_edge("C", "D")

    assert removed == Road(1.0)
    assert abcd_graph.get_edge("C", "D") is None
    assert abcd_graph.get_neighbours("C") == []
    assert abcd_graph.remove_edge("C", "D") is None
    assert abcd_graph.num_edges() == 3


def test_remove_unconnected_vertices_after_removing_incident_edges():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    graph.add_connection(Junction("A"), Junction("B"), Road(1.0))
    graph.add_connection(Junction("X"), Junction("A"), Road(2.0))

    graph.remove_edge("X", "A")
    graph.remove_edge("A", "X")

    assert graph.remove_unconnected_vertices() == 1
    assert "X" not in graph
    assert graph.get_neighbours("X") is None
    assert graph.num_vertices() == 2
    assert graph.num_edges() == 2


def test_remove_unconnected_vertices_drops_edges_into_removed_vertex():
    graph: DirectedGraph[Junction, Road] = DirectedGraph()
    graph.add_edge(Junction("A"), Junction("B"), Road(1.0))

    assert graph.remove_unconnected_vertices() == 1
    assert "B" not in graph
    # A lost its only edge but a single pass keeps it
    assert "A" in graph
    assert graph.get_neighbours("A") == []
    assert graph.num_edges() == 0


def test_str_lists_vertices_with_outgoing_edges():
    graph: DirectedGraph[Junction, str] = DirectedGraph()
    graph.add_edge(Junction("A"), Junction("B"), "ab")
    graph.add_edge(Junction("A"), Junction("C"), "ac")

    assert str(graph) == "{ A: [B(ab),C(ac)],\n  B: [],\n  C: []\n}"


def test_vertices_snapshot_in_insertion_order(abcd_graph):
    vertices = abcd_graph.vertices
    abcd_graph.add_or_get_vertex(Junction("E"))

    assert [v.id for v in vertices] == ["A", "B", "C", "D"]
    assert [v.id for v in abcd_graph.vertices] == ["A", "B", "C", "D", "E"]


def test_path_survives_later_graph_mutation(abcd_graph):
    path = breadth_first_search(abcd_graph, "A", "D")
    abcd_graph.remove_edge("C", "D")
    abcd_graph.remove_unconnected_vertices()

    assert path is not None
    assert path.ids == ("A", "C", "D")
    assert breadth_first_search(abcd_graph, "A", "D") is None
