from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Sequence, Union

import numpy as np
import pandas as pd

from ppinet.errors import ParseError
from ppinet.graph.graph_schema import Node, Edge
from ppinet.graph.graph_view import GraphLike

Entity = Union[Node, Edge]

logger = logging.getLogger("ppinet.query")


@dataclass(frozen=True)
class RankedItem:
    """
    One ranked entity together with the value it was ranked by.
    """

    entity: Entity
    value: float


class RankedQuery:
    """
    Orders the nodes or edges of a graph descending by a numeric attribute.

    A missing attribute counts as 0.0 unless strict is set, in which case
    it raises ParseError like a non-numeric value does. Entities with equal
    values come back in no particular order.
    """

    def __init__(
        self,
        key: str,
        *,
        kind: Literal["node", "edge"] = "node",
        strict: bool = False,
    ) -> None:
        if kind not in ("node", "edge"):
            raise ValueError(f"kind must be 'node' or 'edge', got {kind!r}")
        self.key = key
        self.kind = kind
        self.strict = strict

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, graph: GraphLike) -> List[RankedItem]:
        entities: Sequence[Entity] = graph.nodes() if self.kind == "node" else graph.edges()
        if len(entities) == 0:
            return []

        values = np.array([self._value(e) for e in entities], dtype=float)

        # Primary key: NaN last. Secondary: value descending.
        finite = np.nan_to_num(values, nan=0.0, posinf=np.inf, neginf=-np.inf)
        order = np.lexsort((-finite, np.isnan(values)))

        logger.debug("ranked %s %ss by %r", len(entities), self.kind, self.key)
        return [RankedItem(entity=entities[i], value=float(values[i])) for i in order]

    def top(self, graph: GraphLike, n: int) -> List[RankedItem]:
        return self.run(graph)[:n]

    def to_frame(self, graph: GraphLike, *extra_keys: str) -> pd.DataFrame:
        """
        Tabulate the ranking for presentation.

        Node rankings carry id and name columns, edge rankings carry the
        names of both endpoints. Extra keys are copied as raw strings.
        """
        rows = []
        for position, item in enumerate(self.run(graph), start=1):
            if isinstance(item.entity, Node):
                row = {"position": position, "id": item.entity.id, "name": item.entity.name}
            else:
                row = {
                    "position": position,
                    "source": item.entity.source.name,
                    "target": item.entity.target.name,
                }
            row[self.key] = item.value
            for key in extra_keys:
                row[key] = item.entity.attributes.get(key)
            rows.append(row)

        if self.kind == "node":
            columns = ["position", "id", "name", self.key, *extra_keys]
        else:
            columns = ["position", "source", "target", self.key, *extra_keys]
        return pd.DataFrame(rows, columns=columns)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _value(self, entity: Entity) -> float:
        raw = entity.attributes.get(self.key)
        if raw == "":
            if self.strict:
                raise ParseError(self.key, raw, entity)
            return 0.0
        # Plain decimal literals only: float() also takes "1_000" and padding.
        if "_" in raw or raw != raw.strip():
            raise ParseError(self.key, raw, entity)
        try:
            return float(raw)
        except ValueError as exc:
            raise ParseError(self.key, raw, entity) from exc


def nodes_by_attribute(key: str, graph: GraphLike) -> List[Node]:
    """
    Return the nodes of graph sorted descending by the given attribute.
    """
    return [item.entity for item in RankedQuery(key, kind="node").run(graph)]


def edges_by_attribute(key: str, graph: GraphLike) -> List[Edge]:
    """
    Return the edges of graph sorted descending by the given attribute.
    """
    return [item.entity for item in RankedQuery(key, kind="edge").run(graph)]
