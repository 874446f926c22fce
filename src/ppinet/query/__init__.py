"""
Attribute-driven queries over analysed graphs.
"""

from ppinet.query.ranking import (
    RankedItem,
    RankedQuery,
    nodes_by_attribute,
    edges_by_attribute,
)
from ppinet.query.cliques import CliqueAggregator, clique_members

__all__ = [
    "RankedItem",
    "RankedQuery",
    "nodes_by_attribute",
    "edges_by_attribute",
    "CliqueAggregator",
    "clique_members",
]
