"""
ppinet
======

An attributed, undirected graph store for protein-interaction network
analysis.

Core idea:
- Analyses write their results into node and edge attributes;
  queries read them back as rankings and groupings.

Public API:
- Graph
- InducedSubgraph
- RankedQuery
- CliqueAggregator
- AnalysisRunner
"""

from ppinet.graph.graph_store import Graph
from ppinet.graph.graph_view import InducedSubgraph, induce
from ppinet.query.ranking import RankedQuery, nodes_by_attribute, edges_by_attribute
from ppinet.query.cliques import CliqueAggregator
from ppinet.analysis.runner import AnalysisRunner

__all__ = [
    "Graph",
    "InducedSubgraph",
    "induce",
    "RankedQuery",
    "nodes_by_attribute",
    "edges_by_attribute",
    "CliqueAggregator",
    "AnalysisRunner",
]

__version__ = "0.1.0"
