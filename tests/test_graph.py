import numpy as np
import pytest

from spatialgraph.graph import Graph
from spatialgraph.models import Edge, Node

# Unit tests for the 'graph' module.


@pytest.fixture
def triangle():
    return [Node((0, 0)), Node((0, 1)), Node((1, 0))]


@pytest.fixture
def graph(triangle):
    return Graph().add_nodes(triangle)


def test_new_graph_is_empty():
    graph = Graph()
    assert graph.nodes == ()
    assert graph.edges == ()
    assert graph.bounding_box() is None


def test_mutations_return_the_graph(graph):
    assert graph.add_nodes([]) is graph
    assert graph.add_edges_sisg(1) is graph
    assert graph.add_edges_gilbert(0.5, np.random.default_rng(0)) is graph
    assert graph.dedupe_nodes() is graph
    assert graph.dedupe_edges() is graph
    assert graph.clear_edges() is graph
    assert graph.clear_graph() is graph


def test_add_nodes_appends_in_order(graph):
    graph.add_nodes([Node((5, 5), "five")])
    assert [n.coordinates for n in graph.nodes] == [(0, 0), (0, 1), (1, 0), (5, 5)]


def test_add_nodes_removes_duplicates(graph):
    graph.add_nodes([Node((0, 1)), Node((0.0, 0.0), None), Node((7, 7))])
    assert [n.coordinates for n in graph.nodes] == [(0, 0), (0, 1), (1, 0), (7, 7)]


def test_same_coordinates_with_different_names_are_kept():
    graph = Graph().add_nodes([Node((52, 8), "a"), Node((52, 8), "b"), Node((52, 8))])
    assert len(graph.nodes) == 3


def test_dedupe_is_idempotent(graph):
    graph.add_nodes([Node((0, 0)), Node((9, 9))]).add_edges_sisg(2)

    nodes, edges = graph.nodes, graph.edges
    graph.dedupe_nodes().dedupe_edges()
    assert graph.nodes == nodes
    assert graph.edges == edges


def test_accessors_return_copies(graph):
    nodes = graph.nodes
    graph.add_nodes([Node((3, 3))])
    assert len(nodes) == 3
    assert len(graph.nodes) == 4


def test_bounding_box():
    graph = Graph().add_nodes([Node((51, 8)), Node((52, 0)), Node((50, 4))])
    assert graph.bounding_box() == ((50, 0), (52, 8))


def test_bounding_box_ignores_nodes_without_coordinates():
    graph = Graph().add_nodes([Node(None, "nowhere"), Node((1, 2))])
    assert graph.bounding_box() == ((1, 2), (1, 2))


def test_bounding_box_ignores_malformed_coordinates():
    graph = Graph().add_nodes([Node((1,)), Node((1, 2, 3)), Node((4, 5))])
    assert graph.bounding_box() == ((4, 5), (4, 5))


def test_add_nodes_accepts_numpy_coordinates():
    points = np.array([[52.5, 8.25], [52.5, 8.25], [51.0, 7.0]], dtype=np.float32)
    graph = Graph().add_nodes([Node((np.int64(52), np.int64(8)))])
    graph.add_nodes(Node(tuple(p)) for p in points)
    assert len(graph.nodes) == 3
    assert graph.bounding_box() == ((51.0, 7.0), (52.5, 8.25))


def test_clear_edges_keeps_nodes(graph):
    graph.add_edges_sisg(1).clear_edges()
    assert len(graph.nodes) == 3
    assert graph.edges == ()


def test_clear_graph(graph):
    graph.add_edges_sisg(1).clear_graph()
    assert graph.nodes == ()
    assert graph.edges == ()


def test_sisg_edges_are_not_duplicated(graph):
    graph.add_edges_sisg(1)
    edges = graph.edges
    graph.add_edges_sisg(1)
    assert graph.edges == edges


def test_sisg_round_trip(graph):
    graph.add_edges_sisg(1)

    sources = {e.source for e in graph.edges}
    assert sources == {(0, 0), (0, 1), (1, 0)}
    assert Edge((0, 1), (0, 0)) in graph.edges
    assert Edge((1, 0), (0, 0)) in graph.edges

    rows = graph.csv().split("\n")
    assert rows[0] == "from, to"
    assert "1, 0" in rows[1:]
    assert "2, 0" in rows[1:]
    assert len(rows) - 1 == len(graph.edges)


def test_gilbert_with_certain_edges(graph):
    graph.add_edges_gilbert(1)
    assert graph.edges == (
        Edge((0, 1), (0, 0)),
        Edge((1, 0), (0, 0)),
        Edge((1, 0), (0, 1)),
    )


def test_add_nodes_random_with_seed():
    first = Graph().add_nodes_random(20, (50, 52), (6, 9), np.random.default_rng(3))
    second = Graph().add_nodes_random(20, (50, 52), (6, 9), np.random.default_rng(3))

    assert first.nodes == second.nodes
    lo, hi = first.bounding_box()
    assert 50 <= lo[0] and hi[0] <= 52
    assert 6 <= lo[1] and hi[1] <= 9


def test_add_nodes_geojson():
    document = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [8, 52]}, "properties": {"name": "Osnabrück"}},
        ],
    }
    graph = Graph().add_nodes_geojson(document).add_nodes_geojson(document)
    assert graph.nodes == (Node((52, 8), "Osnabrück"),)


def test_add_nodes_csv():
    graph = Graph().add_nodes_csv("52,8,Osnabrück\n51.5 7.25\nnot,a,node\n")
    assert graph.nodes == (Node((52, 8), "Osnabrück"), Node((51.5, 7.25)))


def test_tgf(graph):
    graph.add_edges_gilbert(1)
    assert graph.tgf().split("\n") == ["0 0,0", "1 0,1", "2 1,0", "#", "1 0", "2 0", "2 1"]
