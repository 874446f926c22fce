"""
Graph subsystem for ppinet.

Defines the attributed interaction graph used for:
- storing proteins and interactions with string metadata
- scoping analyses to node subsets through induced views
- presenting the graph to external algorithm collaborators
"""

from ppinet.graph.attributes import AttributeBag
from ppinet.graph.graph_schema import Node, Edge
from ppinet.graph.graph_store import Graph
from ppinet.graph.graph_builder import GraphBuilder
from ppinet.graph.graph_view import InducedSubgraph, DirectedView, GraphLike, induce

__all__ = [
    "AttributeBag",
    "Node",
    "Edge",
    "Graph",
    "GraphBuilder",
    "InducedSubgraph",
    "DirectedView",
    "GraphLike",
    "induce",
]
