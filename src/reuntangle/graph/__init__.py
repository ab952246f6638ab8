"""Dependency graph construction and flow conversion."""

from reuntangle.graph.builder import build_graph
from reuntangle.graph.flow import build_flow_graph

__all__ = [
    "build_flow_graph",
    "build_graph",
]
