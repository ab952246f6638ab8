"""Assign 2D positions to flow nodes."""

from __future__ import annotations

import enum
import logging
import math
from collections import deque
from dataclasses import replace

from reuntangle.model import FlowEdge, FlowNode

logger = logging.getLogger(__name__)

LEVEL_HEIGHT = 200
NODE_WIDTH = 200
TOP_OFFSET = 50
CENTER_X = 400
CENTER_Y = 400
MIN_RADIUS = 200
RADIUS_PER_NODE = 30


class LayoutType(str, enum.Enum):
    TREE = "tree"
    FORCE = "force"


def apply_layout(
    nodes: list[FlowNode], edges: list[FlowEdge], layout_type: LayoutType | str
) -> list[FlowNode]:
    """Return positioned copies of *nodes*; the inputs are not modified.

    Unknown layout types return *nodes* as given.
    """
    if layout_type == LayoutType.TREE:
        return _tree_layout(nodes, edges)
    if layout_type == LayoutType.FORCE:
        return _force_layout(nodes)
    logger.debug("Unknown layout %r, leaving positions unchanged", layout_type)
    return nodes


def _tree_layout(nodes: list[FlowNode], edges: list[FlowEdge]) -> list[FlowNode]:
    """Hierarchical top-down layout.

    Levels come from a BFS over edges starting at every node without an
    incoming edge; the first visit fixes a node's level.  Nodes that no root
    reaches (pure cycles) start their own BFS at level 0, in input order.
    """
    children: dict[str, list[str]] = {}
    for edge in edges:
        children.setdefault(edge.source, []).append(edge.target)

    has_incoming = {edge.target for edge in edges}
    node_ids = [n.id for n in nodes]
    levels: dict[str, int] = {}

    def bfs(seeds: list[str]) -> None:
        queue = deque(seeds)
        for seed in seeds:
            levels[seed] = 0
        while queue:
            node_id = queue.popleft()
            for child in children.get(node_id, []):
                if child not in levels:
                    levels[child] = levels[node_id] + 1
                    queue.append(child)

    bfs([nid for nid in node_ids if nid not in has_incoming])
    for nid in node_ids:
        if nid not in levels:
            bfs([nid])

    level_groups: dict[int, list[str]] = {}
    for node_id, level in levels.items():
        level_groups.setdefault(level, []).append(node_id)
    slot = {
        node_id: i for group in level_groups.values() for i, node_id in enumerate(group)
    }

    positioned = []
    for node in nodes:
        level = levels.get(node.id, 0)
        total = len(level_groups.get(level, ()))
        x = (slot.get(node.id, 0) - total / 2) * NODE_WIDTH + CENTER_X
        y = level * LEVEL_HEIGHT + TOP_OFFSET
        positioned.append(replace(node, position=(x, y)))
    return positioned


def _force_layout(nodes: list[FlowNode]) -> list[FlowNode]:
    """Even placement on a circle whose radius grows with the node count."""
    if not nodes:
        return []
    radius = max(MIN_RADIUS, len(nodes) * RADIUS_PER_NODE)
    angle_step = 2 * math.pi / len(nodes)

    return [
        replace(
            node,
            position=(
                math.cos(i * angle_step) * radius + CENTER_X,
                math.sin(i * angle_step) * radius + CENTER_Y,
            ),
        )
        for i, node in enumerate(nodes)
    ]
