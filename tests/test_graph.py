import math

import pytest

from fightnet.domain.errors import InvalidWeightError, UnknownNodeError
from fightnet.domain.models import Edge
from fightnet.graph import Graph, build_graph
from fightnet.graph.shortest import (
    all_pairs_distances,
    shortest_distance,
    shortest_path,
    single_source_distances,
)

LABELS = ["A", "B", "C", "D", "E"]
EDGES = [("A", "B"), ("B", "D"), ("D", "A"), ("D", "C"), ("D", "E"), ("A", "E"), ("C", "E")]


@pytest.fixture
def graph() -> Graph:
    return build_graph(LABELS, EDGES)


def ids(graph: Graph) -> dict:
    return {graph.label(n): n for n in graph.node_ids()}


def edge_pairs(graph: Graph) -> set:
    return {frozenset((graph.label(e.a), graph.label(e.b))) for e in graph.edges()}


def test_edge_endpoint_helpers():
    edge = Edge(id=0, a=1, b=2, weight=2.0)
    loop = Edge(id=1, a=3, b=3)

    assert edge.connects(2, 1) and edge.connects(1, 2)
    assert not edge.connects(1, 3)
    assert edge.other(1) == 2 and edge.other(2) == 1
    assert not hasattr(edge, "touches")
    assert loop.is_self_loop and loop.other(3) == 3


def test_add_node_returns_fresh_ids():
    graph = Graph()
    first = graph.add_node("A")
    second = graph.add_node("A")

    assert first != second
    assert graph.node_count == 2
    # Labels are not unique; lookup returns the first match.
    assert graph.find_by_label("A") == first


def test_find_by_label_missing_returns_none(graph):
    assert graph.find_by_label("Z") is None
    assert graph.find_by_label("a") is None


def test_node_attributes_are_inert_payload():
    graph = Graph()
    node_id = graph.add_node("Nate Diaz", {"reach_cm": 193, "organization": "UFC"})

    node = graph.node(node_id)
    assert node.label == "Nate Diaz"
    assert node.attributes["reach_cm"] == 193
    assert node.attribute("height_cm", "N/A") == "N/A"


def test_remove_node_cascades_to_incident_edges_only(graph):
    before = ids(graph)
    removed = graph.remove_node(before["A"])

    assert removed is True
    assert graph.node_count == 4
    assert edge_pairs(graph) == {
        frozenset(("B", "D")),
        frozenset(("D", "C")),
        frozenset(("D", "E")),
        frozenset(("C", "E")),
    }
    # Surviving nodes keep their ids and labels.
    after = ids(graph)
    for label in ("B", "C", "D", "E"):
        assert after[label] == before[label]


def test_removed_ids_are_retired_and_never_reissued(graph):
    a = graph.find_by_label("A")
    graph.remove_node(a)
    new_id = graph.add_node("F")

    assert new_id != a
    assert graph.is_retired(a)
    assert a not in graph
    with pytest.raises(UnknownNodeError) as excinfo:
        graph.degree(a)
    assert excinfo.value.retired is True


def test_remove_node_missing_is_noop(graph):
    assert graph.remove_node(999) is False
    assert graph.node_count == 5
    assert graph.edge_count == 7


def test_add_edge_unknown_endpoint_raises(graph):
    a = graph.find_by_label("A")
    with pytest.raises(UnknownNodeError) as excinfo:
        graph.add_edge(a, 42)
    assert excinfo.value.node == 42
    assert excinfo.value.retired is False
    assert graph.edge_count == 7


@pytest.mark.parametrize("weight", [-1.0, float("nan"), float("inf")])
def test_add_edge_rejects_invalid_weights(graph, weight):
    a, b = graph.find_by_label("A"), graph.find_by_label("B")
    with pytest.raises(InvalidWeightError):
        graph.add_edge(a, b, weight)
    assert graph.edge_count == 7


def test_duplicate_edge_is_kept_separately(graph):
    a, b = graph.find_by_label("A"), graph.find_by_label("B")
    degree_before = graph.degree(a)

    graph.add_edge(a, b, 5.0)

    assert graph.degree(a) == degree_before + 1
    assert [e.weight for e in graph.edges_between(a, b)] == [1.0, 5.0]


def test_remove_edge_removes_only_first_parallel_edge(graph):
    a, b = graph.find_by_label("A"), graph.find_by_label("B")
    graph.add_edge(b, a, 5.0)

    assert graph.remove_edge(a, b) is True
    assert [e.weight for e in graph.edges_between(a, b)] == [5.0]
    assert graph.remove_edge(b, a) is True
    assert graph.remove_edge(a, b) is False


def test_remove_edge_without_match_is_noop(graph):
    b, c = graph.find_by_label("B"), graph.find_by_label("C")
    assert graph.remove_edge(b, c) is False
    assert graph.edge_count == 7


def test_self_loop_counts_once_towards_degree(graph):
    c = graph.find_by_label("C")
    degree_before = graph.degree(c)

    graph.add_edge(c, c)

    assert graph.degree(c) == degree_before + 1
    assert graph.neighbors(c).count((c, 1.0)) == 1
    assert graph.remove_edge(c, c) is True
    assert graph.degree(c) == degree_before


def test_remove_node_with_self_loop():
    graph = Graph()
    a = graph.add_node("A")
    b = graph.add_node("B")
    graph.add_edge(a, a)
    graph.add_edge(a, b)

    assert graph.remove_node(a) is True
    assert graph.edge_count == 0
    assert graph.degree(b) == 0


def test_neighbors_one_entry_per_edge(graph):
    a, b = graph.find_by_label("A"), graph.find_by_label("B")
    graph.add_edge(a, b, 2.5)

    assert graph.neighbors(b).count((a, 1.0)) == 1
    assert graph.neighbors(b).count((a, 2.5)) == 1


def test_snapshot_is_independent_of_later_mutation(graph):
    snapshot = graph.snapshot()
    graph.remove_node(graph.find_by_label("D"))

    assert len(snapshot.nodes) == 5
    assert len(snapshot.edges) == 7
    assert snapshot.label_of(snapshot.nodes[3].id) == "D"


def test_build_graph_unknown_label_raises():
    with pytest.raises(UnknownNodeError):
        build_graph(["A"], [("A", "B")])


def test_build_graph_accepts_attribute_mappings():
    graph = build_graph(
        [{"name": "A", "weight_class": "Lightweight"}, {"label": "B"}],
        [("A", "B", 3.0)],
    )
    a = graph.find_by_label("A")
    assert graph.node(a).attributes == {"weight_class": "Lightweight"}
    assert graph.edges()[0].weight == 3.0


def test_shortest_distance_to_self_is_zero(graph):
    for node_id in graph.node_ids():
        assert shortest_distance(graph, node_id, node_id) == 0.0


def test_shortest_distance_direct_edge(graph):
    a, e = graph.find_by_label("A"), graph.find_by_label("E")
    assert shortest_distance(graph, a, e) == 1.0


def test_shortest_distance_chooses_shortest_path():
    # A -> C directly costs 10, A -> B -> C costs 7
    graph = build_graph(["A", "B", "C"], [("A", "B", 3.0), ("A", "C", 10.0), ("B", "C", 4.0)])
    a, b, c = graph.node_ids()

    result = shortest_path(graph, a, c)

    assert result is not None
    assert result.path == (a, b, c)
    assert result.distance == 7.0
    assert result.num_hops == 2


def test_parallel_edges_relax_independently():
    graph = build_graph(["A", "B"], [("A", "B", 5.0), ("A", "B", 2.0)])
    a, b = graph.node_ids()
    assert shortest_distance(graph, a, b) == 2.0


def test_no_path_returns_none():
    graph = build_graph(["A", "B", "C"], [("A", "B")])
    a, _, c = graph.node_ids()

    assert shortest_distance(graph, a, c) is None
    assert shortest_path(graph, a, c) is None
    assert c not in single_source_distances(graph, a)


def test_shortest_path_unknown_node_raises(graph):
    a = graph.find_by_label("A")
    with pytest.raises(UnknownNodeError):
        shortest_path(graph, a, 99)
    with pytest.raises(UnknownNodeError):
        shortest_distance(graph, 99, a)


def test_shortest_path_to_self():
    graph = build_graph(["A"])
    (a,) = graph.node_ids()
    result = shortest_path(graph, a, a)
    assert result is not None
    assert result.path == (a,)
    assert result.distance == 0.0


def test_shortest_path_distance_matches_path_weights():
    graph = build_graph(
        ["A", "B", "C", "D"],
        [("A", "B", 0.1), ("B", "C", 0.2), ("A", "C", 0.5), ("C", "D", 1.5)],
    )
    a, _, _, d = graph.node_ids()

    result = shortest_path(graph, a, d)

    assert result is not None
    assert math.isclose(result.distance, shortest_distance(graph, a, d))
    hops = zip(result.path, result.path[1:])
    total = sum(min(e.weight for e in graph.edges_between(x, y)) for x, y in hops)
    assert math.isclose(total, result.distance)


def test_all_pairs_agrees_with_dijkstra(graph):
    graph.add_edge(graph.find_by_label("B"), graph.find_by_label("C"), 0.5)
    graph.add_node("Isolated")
    table = all_pairs_distances(graph)

    for x in graph.node_ids():
        for y in graph.node_ids():
            expected = shortest_distance(graph, x, y)
            if expected is None:
                assert (x, y) not in table
            else:
                assert math.isclose(table[(x, y)], expected)


def test_all_pairs_omits_unreachable_and_is_symmetric():
    graph = build_graph(["A", "B", "C"], [("A", "B", 2.0)])
    a, b, c = graph.node_ids()
    table = all_pairs_distances(graph)

    assert table[(a, b)] == table[(b, a)] == 2.0
    assert table[(c, c)] == 0.0
    assert (a, c) not in table
    assert (c, b) not in table


def test_all_pairs_empty_graph():
    assert all_pairs_distances(Graph()) == {}
