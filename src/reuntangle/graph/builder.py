"""Resolve unit dependency names into a dependency graph."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from reuntangle.analysis import compute_depths
from reuntangle.metrics import complexity_score
from reuntangle.model import DependencyGraph, GraphEdge, GraphNode, Unit

logger = logging.getLogger(__name__)


def build_graph(units: Iterable[Unit]) -> DependencyGraph:
    """Build the dependency graph for one analysis run.

    Names resolve by exact match against every declared unit name; when two
    units share a name the one seen last wins.  Names that resolve to nothing
    (library imports, typos) and self references are dropped.
    """
    units = list(units)
    nodes: dict[str, GraphNode] = {}
    for unit in units:
        nodes[unit.id] = GraphNode(
            id=unit.id,
            unit=unit,
            complexity=complexity_score(unit),
        )

    name_to_id = {unit.name: unit.id for unit in units}

    edges: dict[tuple[str, str], GraphEdge] = {}
    unresolved = 0
    for unit in units:
        node = nodes[unit.id]
        for dep_name in unit.dependency_names:
            dep_id = name_to_id.get(dep_name)
            if dep_id is None:
                unresolved += 1
                continue
            if dep_id == unit.id:
                continue

            key = (unit.id, dep_id)
            edge = edges.get(key)
            if edge is not None:
                edge.strength += 1
                continue

            edges[key] = GraphEdge(source=unit.id, target=dep_id)
            if dep_id not in node.dependency_ids:
                node.dependency_ids.append(dep_id)
            dep_node = nodes[dep_id]
            if unit.id not in dep_node.dependent_ids:
                dep_node.dependent_ids.append(unit.id)

    for node_id, depth in compute_depths(nodes).items():
        nodes[node_id].depth = depth

    logger.debug(
        "Graph: %d nodes, %d edges, %d unresolved names",
        len(nodes),
        len(edges),
        unresolved,
    )
    return DependencyGraph(nodes=nodes, edges=list(edges.values()))
