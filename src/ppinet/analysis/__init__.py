"""
Analysis passes.

Each pass hands the graph to a networkx routine and writes the result
back into node or edge attributes:
- betweenness, page_rank, closeness, farness, communities on nodes
- edge_betweenness on edges
- cliques as "clique" / "clique_count" membership
"""

from ppinet.analysis.centrality import (
    betweenness,
    edge_betweenness,
    page_rank,
    closeness,
    farness,
    shortest_path_lengths,
)
from ppinet.analysis.community import communities, cliques
from ppinet.analysis.runner import AnalysisRunner, PASSES

__all__ = [
    "betweenness",
    "edge_betweenness",
    "page_rank",
    "closeness",
    "farness",
    "shortest_path_lengths",
    "communities",
    "cliques",
    "AnalysisRunner",
    "PASSES",
]
