from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

import networkx as nx

from ppinet.graph.attributes import AttributeBag
from ppinet.graph.graph_schema import Node, Edge
from ppinet.graph.graph_store import Graph


class InducedSubgraph:
    """
    Read-only view of a Graph restricted to a selection of nodes.

    Only the selected nodes and the edges with both ends in the selection
    are visible. Nothing is copied: handles are the parent graph's own,
    so attribute writes through them update the parent.
    """

    def __init__(self, graph: Graph, node_ids: Iterable[int]) -> None:
        self.graph = graph
        self.selection: FrozenSet[int] = frozenset(
            n for n in node_ids if graph.has_node(n)
        )

    # -------------------- Nodes --------------------

    def node(self, node_id: int) -> Optional[Node]:
        if node_id not in self.selection:
            return None
        return self.graph.node(node_id)

    def has_node(self, node_id: int) -> bool:
        return node_id in self.selection

    def nodes(self) -> List[Node]:
        return [n for n in self.graph.nodes() if n.id in self.selection]

    def node_map(self) -> Dict[int, Node]:
        return {n.id: n for n in self.nodes()}

    # -------------------- Edges --------------------

    def edge_between(self, a: int, b: int) -> Optional[Edge]:
        if a not in self.selection or b not in self.selection:
            return None
        return self.graph.edge_between(a, b)

    def has_edge_between(self, a: int, b: int) -> bool:
        return self.edge_between(a, b) is not None

    def edges(self) -> List[Edge]:
        return [e for e in self.graph.edges() if self._contains(e)]

    # -------------------- Traversal --------------------

    def neighbors(self, node_id: int) -> List[Node]:
        if node_id not in self.selection:
            return []
        return [n for n in self.graph.neighbors(node_id) if n.id in self.selection]

    def incident_edges(self, node_id: int) -> List[Edge]:
        if node_id not in self.selection:
            return []
        return [e for e in self.graph.incident_edges(node_id) if self._contains(e)]

    def degree(self, node_id: int) -> int:
        return len(self.neighbors(node_id))

    def as_networkx(self) -> nx.Graph:
        return self.graph.as_networkx().subgraph(self.selection)

    def default_attributes(self) -> Tuple[AttributeBag, AttributeBag, AttributeBag]:
        return self.graph.default_attributes()

    def node_count(self) -> int:
        return len(self.selection)

    def edge_count(self) -> int:
        return len(self.edges())

    def _contains(self, edge: Edge) -> bool:
        return edge.source.id in self.selection and edge.target.id in self.selection

    def __repr__(self) -> str:
        return f"InducedSubgraph(nodes={self.node_count()}, parent={self.graph!r})"


GraphLike = Union[Graph, InducedSubgraph]


def induce(graph: Graph, by: Iterable[Union[Node, int]]) -> InducedSubgraph:
    """
    Build the subgraph of graph induced by the given nodes or node IDs.
    """
    ids = [n.id if isinstance(n, Node) else n for n in by]
    return InducedSubgraph(graph, ids)


class DirectedView:
    """
    Directed traversal adapter over an undirected graph.

    Every undirected edge is presented in both directions, so incoming
    and outgoing neighbors coincide. Used to feed PageRank.
    """

    def __init__(self, graph: GraphLike) -> None:
        self.graph = graph

    def successors(self, node_id: int) -> List[Node]:
        return self.graph.neighbors(node_id)

    def predecessors(self, node_id: int) -> List[Node]:
        return self.graph.neighbors(node_id)

    def has_edge_from_to(self, u: int, v: int) -> bool:
        return self.graph.has_edge_between(u, v)

    def nodes(self) -> List[Node]:
        return self.graph.nodes()

    def as_networkx(self) -> nx.DiGraph:
        return self.graph.as_networkx().to_directed(as_view=True)
