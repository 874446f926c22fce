from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ppinet.graph.attributes import AttributeBag


@dataclass(frozen=True, eq=False)
class Node:
    """
    Protein (or other entity) in an interaction network.

    Nodes are created by a Graph and compared by identity: the handle
    returned by the graph is the one stored in it. Only the attribute bag
    changes after creation.
    """

    id: int
    name: str
    attributes: AttributeBag = field(default_factory=AttributeBag)

    def __repr__(self) -> str:
        return f"Node(id={self.id}, name={self.name!r})"


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected interaction between two distinct nodes.

    source and target only record the order the edge was added in;
    they do not imply a direction.
    """

    source: Node
    target: Node
    attributes: AttributeBag = field(default_factory=AttributeBag)

    @property
    def ids(self) -> Tuple[int, int]:
        return self.source.id, self.target.id

    def joins(self, a: int, b: int) -> bool:
        return {a, b} == {self.source.id, self.target.id}

    def other(self, node_id: int) -> Node:
        """
        Return the endpoint opposite node_id.
        """
        if node_id == self.source.id:
            return self.target
        if node_id == self.target.id:
            return self.source
        raise KeyError(node_id)

    def __repr__(self) -> str:
        return f"Edge({self.source.name!r} -- {self.target.name!r})"
