"""Structural warnings derived from a dependency graph."""

from __future__ import annotations

from collections.abc import Iterable

from reuntangle.analysis import find_cycles
from reuntangle.config import DiagnosticThresholds
from reuntangle.metrics import is_root_file
from reuntangle.model import DependencyGraph, Diagnostic


def detect_diagnostics(
    graph: DependencyGraph,
    thresholds: DiagnosticThresholds | None = None,
    root_file_names: Iterable[str] = ("page", "layout", "route"),
) -> list[Diagnostic]:
    """Report cycles, unused units, deep chains, coupling and complexity hotspots."""
    thresholds = thresholds or DiagnosticThresholds()
    root_file_names = tuple(root_file_names)
    diagnostics: list[Diagnostic] = []

    for i, group in enumerate(find_cycles(graph.nodes)):
        names = " → ".join(graph.nodes[node_id].unit.name for node_id in group)
        diagnostics.append(
            Diagnostic(
                id=f"circular-dependency-{i}",
                type="circular-dependency",
                severity="high",
                node_ids=tuple(group),
                message=f"Circular dependency between {names}",
                suggestion=(
                    "Extract the shared logic into a separate component or hook "
                    "that both sides can import."
                ),
            )
        )

    for node_id, node in graph.nodes.items():
        name = node.unit.name

        if not node.dependent_ids and not is_root_file(
            node.unit.file_path, root_file_names
        ):
            diagnostics.append(
                Diagnostic(
                    id=f"unused-component-{node_id}",
                    type="unused-component",
                    severity="low",
                    node_ids=(node_id,),
                    message=f"{name} is not used by any other component",
                    suggestion="Remove it if it is dead code, or check how it is imported.",
                )
            )

        if node.depth > thresholds.max_depth:
            diagnostics.append(
                Diagnostic(
                    id=f"deep-dependency-{node_id}",
                    type="deep-dependency",
                    severity="medium",
                    node_ids=(node_id,),
                    message=(
                        f"{name} sits {node.depth} levels deep "
                        f"(limit {thresholds.max_depth})"
                    ),
                    suggestion="Flatten the tree with composition or context.",
                )
            )

        coupling = len(node.dependency_ids) + len(node.dependent_ids)
        if coupling > thresholds.max_coupling:
            diagnostics.append(
                Diagnostic(
                    id=f"high-coupling-{node_id}",
                    type="high-coupling",
                    severity="medium",
                    node_ids=(node_id,),
                    message=(
                        f"{name} has {coupling} connections "
                        f"(limit {thresholds.max_coupling})"
                    ),
                    suggestion="Split it into smaller, more focused components.",
                )
            )

        if node.complexity > thresholds.max_complexity:
            diagnostics.append(
                Diagnostic(
                    id=f"high-complexity-{node_id}",
                    type="high-complexity",
                    severity="high",
                    node_ids=(node_id,),
                    message=(
                        f"{name} has complexity {node.complexity} "
                        f"(limit {thresholds.max_complexity})"
                    ),
                    suggestion="Move state and side effects into custom hooks.",
                )
            )

    return diagnostics
