from __future__ import annotations

from typing import Dict

import pytest

from ppinet.graph.graph_builder import GraphBuilder
from ppinet.graph.graph_schema import Node
from ppinet.graph.graph_store import Graph


def _build(pairs) -> tuple[Graph, Dict[str, Node]]:
    graph = Graph()
    builder = GraphBuilder(graph)
    builder.add_edges(pairs)
    return graph, {n.name: n for n in graph.nodes()}


@pytest.fixture()
def graph() -> Graph:
    return Graph()


@pytest.fixture()
def path():
    """A - B - C - D"""
    return _build([("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture()
def two_triangles():
    """Triangles A-B-C and D-E-F joined by the bridge C - D."""
    return _build(
        [
            ("A", "B"),
            ("B", "C"),
            ("A", "C"),
            ("D", "E"),
            ("E", "F"),
            ("D", "F"),
            ("C", "D"),
        ]
    )


@pytest.fixture()
def diamond():
    """Triangles A-B-C and B-C-D sharing the edge B - C."""
    return _build([("A", "B"), ("A", "C"), ("B", "C"), ("B", "D"), ("C", "D")])
