from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from ppinet.graph.graph_schema import Node, Edge
from ppinet.graph.graph_store import Graph


class GraphBuilder:
    """
    Constructs a Graph from named nodes and name pairs.

    Names are resolved through the builder's own index, so the first node
    registered under a name wins even though Graph does not require names
    to be unique.
    """

    def __init__(self, store: Graph) -> None:
        self.store = store
        self._by_name: Dict[str, Node] = {n.name: n for n in store.nodes()}

    def add_nodes(self, names: Iterable[str]) -> List[Node]:
        return [self._node(name) for name in names]

    def add_edges(self, pairs: Iterable[Tuple[str, str]]) -> List[Edge]:
        return [self.store.add_edge(self._node(a), self._node(b)) for a, b in pairs]

    def _node(self, name: str) -> Node:
        node = self._by_name.get(name)
        if node is None:
            node = self.store.add_node(name=name)
            self._by_name[name] = node
        return node
