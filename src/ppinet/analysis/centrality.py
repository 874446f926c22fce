from __future__ import annotations

import math
from typing import Dict, Mapping, Optional, Tuple

import networkx as nx

from ppinet.graph.graph_view import DirectedView, GraphLike

PathLengths = Dict[int, Dict[int, int]]


def _write_node_scores(graph: GraphLike, key: str, scores: Mapping[int, float]) -> None:
    for node_id, value in scores.items():
        graph.node(node_id).attributes.set(key, str(float(value)))


# ---------------------------------------------------------------------
# Betweenness
# ---------------------------------------------------------------------


def betweenness(graph: GraphLike) -> Dict[int, float]:
    """
    Betweenness centrality of every node, written to "betweenness".

    Values are unnormalised pair counts; nodes on no shortest path get 0.
    """
    raw = nx.betweenness_centrality(graph.as_networkx(), normalized=False)
    scores = {n.id: float(raw.get(n.id, 0.0)) for n in graph.nodes()}
    _write_node_scores(graph, "betweenness", scores)
    return scores


def edge_betweenness(graph: GraphLike) -> Dict[Tuple[int, int], float]:
    """
    Edge betweenness centrality, written to "edge_betweenness" on each edge.
    """
    raw = nx.edge_betweenness_centrality(graph.as_networkx(), normalized=False)
    scores: Dict[Tuple[int, int], float] = {}
    for (u, v), value in raw.items():
        edge = graph.edge_between(u, v)
        edge.attributes.set("edge_betweenness", str(float(value)))
        scores[edge.ids] = float(value)
    return scores


# ---------------------------------------------------------------------
# PageRank
# ---------------------------------------------------------------------


def page_rank(graph: GraphLike, damping: float = 0.85, tolerance: float = 1e-6) -> Dict[int, float]:
    """
    PageRank of every node, written to "rank".

    The graph is presented through DirectedView, so each interaction
    counts as a link in both directions.
    """
    if graph.node_count() == 0:
        return {}
    directed = DirectedView(graph).as_networkx()
    raw = nx.pagerank(directed, alpha=damping, tol=tolerance)
    scores = {int(n): float(v) for n, v in raw.items()}
    _write_node_scores(graph, "rank", scores)
    return scores


# ---------------------------------------------------------------------
# Distance based
# ---------------------------------------------------------------------


def shortest_path_lengths(graph: GraphLike) -> PathLengths:
    """
    Hop distances between all reachable node pairs.
    """
    return {u: dict(d) for u, d in nx.all_pairs_shortest_path_length(graph.as_networkx())}


def _farness_scores(graph: GraphLike, lengths: PathLengths) -> Dict[int, float]:
    n = graph.node_count()
    scores: Dict[int, float] = {}
    for node in graph.nodes():
        dists = lengths.get(node.id, {})
        if len(dists) < n:
            scores[node.id] = math.inf
        else:
            scores[node.id] = float(sum(dists.values()))
    return scores


def farness(graph: GraphLike, lengths: Optional[PathLengths] = None) -> Dict[int, float]:
    """
    Sum of distances from each node to all others, written to "farness".

    A node that cannot reach every other node has infinite farness.
    """
    if lengths is None:
        lengths = shortest_path_lengths(graph)
    scores = _farness_scores(graph, lengths)
    _write_node_scores(graph, "farness", scores)
    return scores


def closeness(graph: GraphLike, lengths: Optional[PathLengths] = None) -> Dict[int, float]:
    """
    Reciprocal farness, written to "closeness".

    Isolated or disconnected nodes get 0.
    """
    if lengths is None:
        lengths = shortest_path_lengths(graph)
    scores = {}
    for node_id, far in _farness_scores(graph, lengths).items():
        scores[node_id] = 0.0 if far == 0.0 or math.isinf(far) else 1.0 / far
    _write_node_scores(graph, "closeness", scores)
    return scores
