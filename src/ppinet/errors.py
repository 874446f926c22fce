from __future__ import annotations

from typing import Any, Optional


class GraphError(Exception):
    """Base exception for ppinet."""


# ---------------------------------------------------------------------
# Structural violations
# ---------------------------------------------------------------------


class StructuralError(GraphError, ValueError):
    """Raised when an operation would break a graph invariant."""


class InvalidEndpointError(StructuralError):
    """Raised when an edge endpoint is not registered in the graph."""

    def __init__(self, endpoint: Any) -> None:
        self.endpoint = endpoint
        super().__init__(f"Node is not part of this graph: {endpoint!r}")


class SelfLoopError(StructuralError):
    """Raised when both edge endpoints are the same node."""

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"Self-loop on node {node_id} is not allowed")


class DuplicateNodeError(StructuralError):
    """Raised when attempting to add a node with an existing ID."""

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"Node already exists: {node_id}")


# ---------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------


class ParseError(GraphError, ValueError):
    """
    Raised when an attribute value cannot be read as a number.
    """

    def __init__(self, key: str, value: str, entity: Optional[Any] = None) -> None:
        self.key = key
        self.value = value
        self.entity = entity
        if value == "":
            message = f"Attribute {key!r} is not set on {entity!r}"
        else:
            message = f"Attribute {key!r} has non-numeric value {value!r}"
            if entity is not None:
                message += f" on {entity!r}"
        super().__init__(message)


# ---------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------


class ConfigurationError(GraphError, ValueError):
    """Raised for invalid settings, such as an unknown renderer engine."""
