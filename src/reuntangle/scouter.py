"""Scouter mode: focus the graph on one node and its neighbourhood."""

from __future__ import annotations

from dataclasses import replace

from reuntangle.errors import NodeNotFoundError
from reuntangle.model import FlowEdge, FlowNode, RelatedNodes

DEFAULT_NODE_SIZE = 60
CENTER_SCALE = 1.5
CENTER_BORDER = "4px solid #3b82f6"
CENTER_SHADOW = "0 0 20px rgba(59, 130, 246, 0.5)"
CENTER_Z_INDEX = 1000


def extract_related_nodes(
    center_id: str,
    nodes: list[FlowNode],
    edges: list[FlowEdge],
    *,
    show_all_descendants: bool = True,
) -> RelatedNodes:
    """Collect the nodes and edges around *center_id*.

    With *show_all_descendants* the walk follows dependencies and dependents
    transitively; otherwise only direct neighbours are returned.

    Raises NodeNotFoundError if *center_id* is not among *nodes*.
    """
    center = next((n for n in nodes if n.id == center_id), None)
    if center is None:
        raise NodeNotFoundError(center_id)

    if show_all_descendants:
        return _all_descendants(center, nodes, edges)
    return _direct_relations(center, nodes, edges)


def _direct_relations(
    center: FlowNode, nodes: list[FlowNode], edges: list[FlowEdge]
) -> RelatedNodes:
    outgoing = [e for e in edges if e.source == center.id]
    incoming = [e for e in edges if e.target == center.id]
    dependency_ids = {e.target for e in outgoing}
    dependent_ids = {e.source for e in incoming}

    return RelatedNodes(
        center_node=center,
        dependency_nodes=[n for n in nodes if n.id in dependency_ids],
        dependent_nodes=[n for n in nodes if n.id in dependent_ids],
        related_edges=outgoing + incoming,
    )


def _all_descendants(
    center: FlowNode, nodes: list[FlowNode], edges: list[FlowEdge]
) -> RelatedNodes:
    outgoing: dict[str, list[int]] = {}
    incoming: dict[str, list[int]] = {}
    for i, edge in enumerate(edges):
        outgoing.setdefault(edge.source, []).append(i)
        incoming.setdefault(edge.target, []).append(i)

    related_edges: set[int] = set()

    def visit(forward: bool) -> set[str]:
        adjacency = outgoing if forward else incoming
        found: set[str] = set()
        stack = [center.id]
        while stack:
            node_id = stack.pop()
            for i in adjacency.get(node_id, []):
                related_edges.add(i)
                edge = edges[i]
                neighbour = edge.target if forward else edge.source
                if neighbour == center.id or neighbour in found:
                    continue
                found.add(neighbour)
                stack.append(neighbour)
        return found

    dependency_ids = visit(forward=True)
    dependent_ids = visit(forward=False)

    return RelatedNodes(
        center_node=center,
        dependency_nodes=[n for n in nodes if n.id in dependency_ids],
        dependent_nodes=[n for n in nodes if n.id in dependent_ids],
        related_edges=[e for i, e in enumerate(edges) if i in related_edges],
    )


def highlight_center_node(node: FlowNode) -> FlowNode:
    """Return a copy of *node* styled as the scouter centre.

    Presentation only; the node's graph data is untouched.
    """
    width = node.style.width if node.style.width is not None else DEFAULT_NODE_SIZE
    height = node.style.height if node.style.height is not None else DEFAULT_NODE_SIZE

    return replace(
        node,
        data=replace(node.data, is_scouter_center=True),
        style=replace(
            node.style,
            width=width * CENTER_SCALE,
            height=height * CENTER_SCALE,
            border=CENTER_BORDER,
            box_shadow=CENTER_SHADOW,
            z_index=CENTER_Z_INDEX,
        ),
    )


def focus_view(
    related: RelatedNodes,
) -> tuple[list[FlowNode], list[FlowEdge]]:
    """Nodes and edges to display for *related*, centre highlighted first."""
    nodes = [highlight_center_node(related.center_node)]
    seen = {related.center_node.id}
    for node in related.dependency_nodes + related.dependent_nodes:
        if node.id not in seen:
            seen.add(node.id)
            nodes.append(node)
    return nodes, list(related.related_edges)
