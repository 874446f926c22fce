from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Optional

from ppinet.analysis.centrality import (
    betweenness,
    closeness,
    edge_betweenness,
    farness,
    page_rank,
)
from ppinet.analysis.community import cliques, communities
from ppinet.config.settings import AnalysisConfig
from ppinet.errors import ConfigurationError
from ppinet.graph.graph_view import GraphLike

Pass = Callable[[GraphLike, AnalysisConfig], Any]

logger = logging.getLogger("ppinet.analysis")


PASSES: Dict[str, Pass] = {
    "betweenness": lambda g, c: betweenness(g),
    "edge_betweenness": lambda g, c: edge_betweenness(g),
    "page_rank": lambda g, c: page_rank(
        g,
        damping=c.page_rank.damping,
        tolerance=c.page_rank.tolerance,
    ),
    "closeness": lambda g, c: closeness(g),
    "farness": lambda g, c: farness(g),
    "communities": lambda g, c: communities(
        g,
        resolution=c.community.resolution,
        seed=c.community.seed,
    ),
    "cliques": lambda g, c: cliques(
        g,
        c.clique.min_size,
        reset=c.clique.reset,
    ),
}


class AnalysisRunner:
    """
    Runs a sequence of analysis passes over one graph.

    Passes run to completion one after another. The first failure stops
    the run; attributes written by earlier passes stay in place.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or AnalysisConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        graph: GraphLike,
        passes: Optional[Iterable[str]] = None,
    ) -> Dict[str, Any]:
        """
        Run the named passes (default: config.passes) and return each
        pass's raw result keyed by name.
        """
        names = self._validate(self.config.passes if passes is None else passes)

        results: Dict[str, Any] = {}
        for name in names:
            t0 = time.perf_counter()
            results[name] = PASSES[name](graph, self.config)
            logger.info(
                "pass %s over nodes=%s edges=%s in %.3fs",
                name,
                graph.node_count(),
                graph.edge_count(),
                time.perf_counter() - t0,
            )
        return results

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate(self, passes: Iterable[str]) -> List[str]:
        names = list(passes)
        unknown = [n for n in names if n not in PASSES]
        if unknown:
            raise ConfigurationError(
                f"unknown analysis passes: {unknown} (expected any of {sorted(PASSES)})"
            )
        return names
