"""Convert a dependency graph into display-ready nodes and edges."""

from __future__ import annotations

from collections.abc import Iterable

from reuntangle.analysis import find_circular_nodes
from reuntangle.metrics import is_root_file
from reuntangle.model import (
    DependencyGraph,
    FlowEdge,
    FlowNode,
    FlowNodeData,
    GraphEdge,
    NodeStyle,
)

CIRCULAR_COLOR = "#ef4444"
ROOT_COLOR = "#8b5cf6"
UNUSED_COLOR = "#9ca3af"
SIMPLE_COLOR = "#22c55e"
STANDARD_COLOR = "#3b82f6"
COMPLEX_COLOR = "#eab308"
VERY_COMPLEX_COLOR = "#f97316"

CIRCULAR_BORDER = "3px solid #dc2626"
DEFAULT_BORDER = "2px solid #fff"

MIN_NODE_SIZE = 40
NODE_SIZE_RANGE = 60


def node_color(
    complexity: int, is_unused: bool, is_circular: bool, is_root: bool
) -> str:
    """Pick a node color.

    Circular beats root, root beats unused, and only then does the
    complexity bucket decide.
    """
    if is_circular:
        return CIRCULAR_COLOR
    if is_root:
        return ROOT_COLOR
    if is_unused:
        return UNUSED_COLOR
    if complexity <= 30:
        return SIMPLE_COLOR
    if complexity <= 60:
        return STANDARD_COLOR
    if complexity <= 80:
        return COMPLEX_COLOR
    return VERY_COMPLEX_COLOR


def node_size(complexity: int) -> float:
    return MIN_NODE_SIZE + (complexity / 100) * NODE_SIZE_RANGE


def flow_edge(edge: GraphEdge) -> FlowEdge:
    return FlowEdge(
        id=f"{edge.source}-{edge.target}",
        source=edge.source,
        target=edge.target,
        strength=edge.strength,
        animated=edge.strength > 1,
        stroke_width=min(edge.strength, 5),
    )


def build_flow_graph(
    graph: DependencyGraph,
    root_file_names: Iterable[str] = ("page", "layout", "route"),
) -> tuple[list[FlowNode], list[FlowEdge]]:
    """Return unpositioned flow nodes and edges for *graph*."""
    circular = find_circular_nodes(graph.nodes)
    root_file_names = tuple(root_file_names)

    nodes: list[FlowNode] = []
    for node_id, node in graph.nodes.items():
        is_unused = not node.dependent_ids
        is_circular = node_id in circular
        is_root = is_root_file(node.unit.file_path, root_file_names)
        size = node_size(node.complexity)

        nodes.append(
            FlowNode(
                id=node_id,
                data=FlowNodeData(
                    label=node.unit.name,
                    unit=node.unit,
                    complexity=node.complexity,
                    dependency_count=len(node.dependency_ids),
                    dependent_count=len(node.dependent_ids),
                    depth=node.depth,
                    is_circular=is_circular,
                    is_root=is_root,
                ),
                style=NodeStyle(
                    background_color=node_color(
                        node.complexity, is_unused, is_circular, is_root
                    ),
                    width=size,
                    height=size,
                    border=CIRCULAR_BORDER if is_circular else DEFAULT_BORDER,
                ),
            )
        )

    return nodes, [flow_edge(e) for e in graph.edges]
