"""Exceptions raised by reuntangle."""

from __future__ import annotations


class ReuntangleError(Exception):
    """Base class for errors surfaced to callers."""


class NodeNotFoundError(ReuntangleError, LookupError):
    """A node id passed by the caller does not exist in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node with id {node_id} not found")
        self.node_id = node_id


class ConfigError(ReuntangleError):
    """Invalid reuntangle configuration."""
