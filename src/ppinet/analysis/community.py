from __future__ import annotations

import logging
from typing import FrozenSet, List, Optional

import networkx as nx

from ppinet.config.settings import CliqueConfig
from ppinet.graph.graph_view import GraphLike
from ppinet.query.cliques import CliqueAggregator

logger = logging.getLogger("ppinet.analysis")


def communities(
    graph: GraphLike,
    resolution: float = 1.0,
    seed: Optional[int] = None,
) -> List[FrozenSet[int]]:
    """
    Louvain modularisation of graph at the given resolution.

    Each node's community index is written to "community". Indexes
    follow the order the communities are returned in.
    """
    if graph.node_count() == 0:
        return []
    found = nx.community.louvain_communities(
        graph.as_networkx(),
        resolution=resolution,
        seed=seed,
    )
    result = [frozenset(c) for c in found]
    for i, members in enumerate(result):
        for node_id in members:
            graph.node(node_id).attributes.set("community", str(i))

    logger.info("communities=%s (resolution=%s)", len(result), resolution)
    return result


def cliques(
    graph: GraphLike,
    min_size: int = 3,
    *,
    reset: bool = True,
) -> List[FrozenSet[int]]:
    """
    Maximal clique analysis keeping cliques of at least min_size nodes.

    Membership is written to "clique" and "clique_count" by
    CliqueAggregator.
    """
    config = CliqueConfig(min_size=min_size, reset=reset)
    found = nx.find_cliques(graph.as_networkx())
    return CliqueAggregator(config.min_size, reset=config.reset).aggregate(graph, found)
