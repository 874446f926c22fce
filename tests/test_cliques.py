import pytest

from ppinet.errors import InvalidEndpointError
from ppinet.graph.graph_view import induce
from ppinet.query.cliques import CliqueAggregator, clique_members


def _ids(n, names):
    return {n[x].id for x in names}


def test_overlapping_cliques_are_labelled_in_order(diamond):
    graph, n = diamond
    raw = [_ids(n, "ABC"), _ids(n, "BCD")]

    kept = CliqueAggregator(3).aggregate(graph, raw)

    assert kept == [frozenset(raw[0]), frozenset(raw[1])]
    assert n["B"].attributes.get("clique") == "0,1"
    assert n["B"].attributes.get("clique_count") == "2"
    assert n["A"].attributes.get("clique") == "0"
    assert n["A"].attributes.get("clique_count") == "1"
    assert n["D"].attributes.get("clique") == "1"


def test_small_cliques_are_dropped(diamond):
    graph, n = diamond
    raw = [_ids(n, "AB"), _ids(n, "BCD")]

    kept = CliqueAggregator(3).aggregate(graph, raw)

    assert len(kept) == 1
    assert n["A"].attributes.get("clique") == ""
    assert n["A"].attributes.get("clique_count") == ""
    assert n["B"].attributes.get("clique") == "0"


def test_rerun_resets_by_default(diamond):
    graph, n = diamond
    raw = [_ids(n, "ABC"), _ids(n, "BCD")]
    aggregator = CliqueAggregator(3)

    aggregator.aggregate(graph, raw)
    aggregator.aggregate(graph, raw[1:])

    assert n["A"].attributes.get("clique") == ""
    assert n["B"].attributes.get("clique") == "0"
    assert n["B"].attributes.get("clique_count") == "1"


def test_rerun_without_reset_accumulates(diamond):
    graph, n = diamond
    raw = [_ids(n, "ABC"), _ids(n, "BCD")]
    aggregator = CliqueAggregator(3, reset=False)

    aggregator.aggregate(graph, raw)
    aggregator.aggregate(graph, raw)

    assert n["B"].attributes.get("clique") == "0,1,0,1"
    assert n["B"].attributes.get("clique_count") == "4"
    assert n["A"].attributes.get("clique_count") == "2"


def test_unknown_member_is_rejected(diamond):
    graph, n = diamond
    with pytest.raises(InvalidEndpointError):
        CliqueAggregator(2).aggregate(graph, [{n["A"].id, 999}])


def test_aggregate_over_induced_subgraph(diamond):
    graph, n = diamond
    sub = induce(graph, [n["A"], n["B"], n["C"]])

    CliqueAggregator(3).aggregate(sub, [_ids(n, "ABC")])
    assert n["C"].attributes.get("clique") == "0"

    with pytest.raises(InvalidEndpointError):
        CliqueAggregator(3).aggregate(sub, [_ids(n, "BCD")])


def test_clique_members(diamond):
    graph, n = diamond
    CliqueAggregator(3).aggregate(graph, [_ids(n, "ABC"), _ids(n, "BCD")])

    assert set(clique_members(graph, 1)) == _ids(n, "BCD")
    assert clique_members(graph, 2) == []
