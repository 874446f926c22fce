import math

import pytest

from ppinet.errors import ParseError
from ppinet.graph.graph_store import Graph
from ppinet.graph.graph_view import induce
from ppinet.query.ranking import RankedQuery, edges_by_attribute, nodes_by_attribute


def _scored_graph(values):
    graph = Graph()
    for i, value in enumerate(values):
        node = graph.add_node(name=f"P{i}")
        if value is not None:
            node.attributes.set("score", value)
    return graph


def test_nodes_rank_descending():
    graph = _scored_graph(["3.0", "1.0", "2.0"])
    ranked = nodes_by_attribute("score", graph)
    assert [float(n.attributes.get("score")) for n in ranked] == [3.0, 2.0, 1.0]


def test_missing_attribute_ranks_as_zero():
    graph = _scored_graph(["-1.0", None, "0.5"])
    items = RankedQuery("score").run(graph)

    assert [i.value for i in items] == [0.5, 0.0, -1.0]
    assert items[1].entity.name == "P1"


def test_non_numeric_value_raises_parse_error():
    graph = _scored_graph(["1.0", "high"])
    with pytest.raises(ParseError) as info:
        nodes_by_attribute("score", graph)
    assert info.value.key == "score"
    assert info.value.value == "high"


def test_strict_query_rejects_missing_attribute():
    graph = _scored_graph(["1.0", None])
    with pytest.raises(ParseError):
        RankedQuery("score", strict=True).run(graph)


@pytest.mark.parametrize("raw", ["1_000", " 2.5 ", "2.5\n"])
def test_loose_float_literals_raise_parse_error(raw):
    graph = _scored_graph(["1.0", raw])
    with pytest.raises(ParseError) as info:
        nodes_by_attribute("score", graph)
    assert info.value.value == raw


def test_infinite_first_nan_last():
    graph = _scored_graph(["nan", "1.0", "inf"])
    values = [i.value for i in RankedQuery("score").run(graph)]

    assert values[0] == math.inf
    assert values[1] == 1.0
    assert math.isnan(values[2])


def test_ranking_an_empty_graph():
    assert nodes_by_attribute("score", Graph()) == []
    assert RankedQuery("score").to_frame(Graph()).empty


def test_edges_rank_descending(path):
    graph, n = path
    for edge, value in zip(graph.edges(), ["2", "7", "5"]):
        edge.attributes.set("edge_betweenness", value)

    ranked = edges_by_attribute("edge_betweenness", graph)
    assert [e.attributes.get("edge_betweenness") for e in ranked] == ["7", "5", "2"]


def test_ranking_respects_induced_subgraph(path):
    graph, n = path
    for name, value in zip("ABCD", ["4", "3", "2", "1"]):
        n[name].attributes.set("score", value)

    sub = induce(graph, [n["C"], n["D"]])
    assert [x.name for x in nodes_by_attribute("score", sub)] == ["C", "D"]
    assert edges_by_attribute("score", sub) == [graph.edge_between(n["C"].id, n["D"].id)]


def test_top_and_frame(path):
    graph, n = path
    for name, value in zip("ABCD", ["0.1", "0.4", "0.3", "0.2"]):
        n[name].attributes.set("rank", value)
    n["B"].attributes.set("community", "0")

    query = RankedQuery("rank")
    assert [i.entity.name for i in query.top(graph, 2)] == ["B", "C"]

    frame = query.to_frame(graph, "community")
    assert list(frame.columns) == ["position", "id", "name", "rank", "community"]
    assert frame["name"].tolist() == ["B", "C", "D", "A"]
    assert frame["position"].tolist() == [1, 2, 3, 4]
    assert frame.iloc[0]["community"] == "0"
    assert frame.iloc[1]["community"] == ""


def test_edge_frame_columns(path):
    graph, _ = path
    frame = RankedQuery("edge_betweenness", kind="edge").to_frame(graph)
    assert list(frame.columns) == ["position", "source", "target", "edge_betweenness"]
    assert len(frame) == 3


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        RankedQuery("score", kind="graph")
