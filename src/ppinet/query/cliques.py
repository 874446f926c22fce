from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List

from ppinet.errors import InvalidEndpointError
from ppinet.graph.graph_view import GraphLike

CLIQUE_KEY = "clique"
CLIQUE_COUNT_KEY = "clique_count"

logger = logging.getLogger("ppinet.query")


class CliqueAggregator:
    """
    Turns a maximal-clique enumeration into per-node membership attributes.

    Cliques smaller than min_size are dropped. The survivors are labelled
    0, 1, 2, ... in the order given; each member node records its labels as
    a comma-separated "clique" attribute and their number as
    "clique_count".

    With reset (the default) earlier clique attributes are cleared on every
    node first. Without it labels from a previous run are kept and new
    ones appended after them.
    """

    def __init__(self, min_size: int, *, reset: bool = True) -> None:
        self.min_size = min_size
        self.reset = reset

    def aggregate(
        self,
        graph: GraphLike,
        cliques: Iterable[Iterable[int]],
    ) -> List[FrozenSet[int]]:
        """
        Label the cliques of graph and return the surviving ones.

        The position of a clique in the returned list is its label.
        """
        kept = [frozenset(c) for c in cliques]
        kept = [c for c in kept if len(c) >= self.min_size]

        for clique in kept:
            for node_id in clique:
                if graph.node(node_id) is None:
                    raise InvalidEndpointError(node_id)

        if self.reset:
            for node in graph.nodes():
                node.attributes.set(CLIQUE_KEY, "")
                node.attributes.set(CLIQUE_COUNT_KEY, "")

        labels: Dict[int, List[str]] = {}
        for label, clique in enumerate(kept):
            for node_id in clique:
                labels.setdefault(node_id, []).append(str(label))

        for node_id, new in labels.items():
            attrs = graph.node(node_id).attributes
            previous = attrs.get(CLIQUE_KEY)
            joined = ",".join(([previous] if previous else []) + new)
            attrs.set(CLIQUE_KEY, joined)
            attrs.set(CLIQUE_COUNT_KEY, str(len(joined.split(","))))

        logger.info(
            "labelled cliques=%s (min_size=%s) over nodes=%s",
            len(kept),
            self.min_size,
            len(labels),
        )
        return kept


def clique_members(graph: GraphLike, label: int) -> List[int]:
    """
    IDs of the nodes whose "clique" attribute lists label.
    """
    wanted = str(label)
    return [
        n.id
        for n in graph.nodes()
        if wanted in n.attributes.get(CLIQUE_KEY).split(",")
    ]
