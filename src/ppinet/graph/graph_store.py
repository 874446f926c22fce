from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Union

import networkx as nx

from ppinet.errors import DuplicateNodeError, InvalidEndpointError, SelfLoopError
from ppinet.graph.attributes import AttributeBag
from ppinet.graph.graph_schema import Node, Edge

NodeRef = Union[Node, int]

logger = logging.getLogger("ppinet.graph")


class Graph:
    """
    Authoritative in-memory undirected interaction graph.

    Node and Edge handles live in the data dicts of a networkx graph,
    which doubles as the adjacency index. Handles are never copied, so
    attribute writes through any returned handle land in the graph.
    """

    def __init__(self) -> None:
        self._graph = nx.Graph()
        self._next_id = 0

        # Defaults emitted as graph/node/edge statements by a codec.
        self.graph_attrs = AttributeBag()
        self.node_attrs = AttributeBag()
        self.edge_attrs = AttributeBag()

    # -------------------- Nodes --------------------

    def add_node(self, node_id: Optional[int] = None, name: str = "") -> Node:
        """
        Register a new node.

        Without node_id a fresh, unused ID is allocated.
        """
        if node_id is None:
            node_id = self._allocate_id()
        elif isinstance(node_id, bool) or not isinstance(node_id, int):
            raise TypeError(f"node IDs must be int, got {type(node_id).__name__}")
        elif node_id in self._graph:
            raise DuplicateNodeError(node_id)

        node = Node(id=node_id, name=name or str(node_id))
        self._graph.add_node(node_id, data=node)
        return node

    def node(self, node_id: int) -> Optional[Node]:
        if node_id not in self._graph:
            return None
        return self._graph.nodes[node_id]["data"]

    def node_by_name(self, name: str) -> Optional[Node]:
        for node in self.nodes():
            if node.name == name:
                return node
        return None

    def has_node(self, node_id: int) -> bool:
        return node_id in self._graph

    def nodes(self) -> List[Node]:
        """
        All nodes. The order is not meaningful.
        """
        return [data["data"] for _, data in self._graph.nodes(data=True)]

    def node_map(self) -> Dict[int, Node]:
        return {n: data["data"] for n, data in self._graph.nodes(data=True)}

    # -------------------- Edges --------------------

    def add_edge(self, a: NodeRef, b: NodeRef) -> Edge:
        """
        Connect a and b, or return the edge that already connects them.
        """
        source = self._resolve(a)
        target = self._resolve(b)
        if source is target:
            raise SelfLoopError(source.id)

        existing = self.edge_between(source.id, target.id)
        if existing is not None:
            logger.debug("edge %s--%s already present", source.id, target.id)
            return existing

        edge = Edge(source=source, target=target)
        self._graph.add_edge(source.id, target.id, data=edge)
        return edge

    def edge_between(self, a: int, b: int) -> Optional[Edge]:
        if not self._graph.has_edge(a, b):
            return None
        return self._graph.edges[a, b]["data"]

    def has_edge_between(self, a: int, b: int) -> bool:
        return self._graph.has_edge(a, b)

    def edges(self) -> List[Edge]:
        """
        All edges. The order is not meaningful.
        """
        return [data["data"] for _, _, data in self._graph.edges(data=True)]

    # -------------------- Traversal --------------------

    def neighbors(self, node_id: int) -> List[Node]:
        if node_id not in self._graph:
            return []
        return [self._graph.nodes[n]["data"] for n in self._graph.neighbors(node_id)]

    def incident_edges(self, node_id: int) -> List[Edge]:
        if node_id not in self._graph:
            return []
        return [data["data"] for _, _, data in self._graph.edges(node_id, data=True)]

    def degree(self, node_id: int) -> int:
        if node_id not in self._graph:
            return 0
        return self._graph.degree(node_id)

    def as_networkx(self) -> nx.Graph:
        """
        Read-only networkx view used by algorithm collaborators.
        """
        return self._graph.copy(as_view=True)

    def default_attributes(self) -> Tuple[AttributeBag, AttributeBag, AttributeBag]:
        return self.graph_attrs, self.node_attrs, self.edge_attrs

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    # -------------------- Internals --------------------

    def _allocate_id(self) -> int:
        while self._next_id in self._graph:
            self._next_id += 1
        node_id = self._next_id
        self._next_id += 1
        return node_id

    def _resolve(self, ref: NodeRef) -> Node:
        if isinstance(ref, Node):
            node = self.node(ref.id)
            if node is not ref:
                raise InvalidEndpointError(ref)
            return node

        if isinstance(ref, bool) or not isinstance(ref, int):
            raise InvalidEndpointError(ref)

        node = self.node(ref)
        if node is None:
            raise InvalidEndpointError(ref)
        return node

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
