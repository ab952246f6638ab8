"""Complexity scoring and project-level statistics.

The complexity score is a weighted proxy, not cyclomatic complexity: each
input is normalised against a fixed cap and the weighted sum is rounded to
an integer in ``[0, 100]``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from reuntangle.analysis import find_circular_nodes
from reuntangle.model import (
    ComplexityDistribution,
    ComponentRanking,
    DependencyGraph,
    GraphNode,
    ProjectMetrics,
    Unit,
)

LOC_CAP = 200
DEPENDENCY_CAP = 10
HOOK_CAP = 10
PROP_CAP = 15
EXTERNAL_LIBRARY_CAP = 5

# Every unit carries this much complexity before any measurement.
BASE_COMPLEXITY = 20

TOP_N = 10


def _normalise(value: int, cap: int) -> float:
    return min(100.0, value / cap * 100)


def complexity_score(unit: Unit, dependency_count: int | None = None) -> int:
    """Score *unit* on a 0-100 scale.

    *dependency_count* defaults to the number of dependency names the parser
    found, resolved or not.
    """
    if dependency_count is None:
        dependency_count = len(unit.dependency_names)
    inputs = unit.complexity_inputs

    complexity = (
        _normalise(inputs.lines_of_code, LOC_CAP) * 0.25
        + _normalise(dependency_count, DEPENDENCY_CAP) * 0.20
        + _normalise(inputs.hook_count, HOOK_CAP) * 0.20
        + _normalise(inputs.prop_count, PROP_CAP) * 0.15
        + _normalise(inputs.external_library_count, EXTERNAL_LIBRARY_CAP) * 0.05
        + BASE_COMPLEXITY * 0.20
    )
    # round half up, like Math.round
    return max(0, min(100, math.floor(min(100.0, complexity) + 0.5)))


def complexity_band(complexity: int) -> str:
    if complexity <= 30:
        return "simple"
    if complexity <= 60:
        return "standard"
    if complexity <= 80:
        return "complex"
    return "very_complex"


def is_root_file(file_path: str, root_file_names: Iterable[str]) -> bool:
    """True for framework entry points such as ``app/page.tsx``."""
    file_name = file_path.rsplit("/", 1)[-1]
    stem = file_name.rsplit(".", 1)[0]
    return stem in set(root_file_names)


def aggregate(
    graph: DependencyGraph,
    circular_ids: set[str] | None = None,
    root_file_names: Iterable[str] = ("page", "layout", "route"),
) -> ProjectMetrics:
    """Summarise *graph* for reporting."""
    nodes = list(graph.nodes.values())
    if circular_ids is None:
        circular_ids = find_circular_nodes(graph.nodes)
    root_file_names = tuple(root_file_names)

    if not nodes:
        return ProjectMetrics()

    complexities = [n.complexity for n in nodes]
    bands = {"simple": 0, "standard": 0, "complex": 0, "very_complex": 0}
    for c in complexities:
        bands[complexity_band(c)] += 1

    # sorted() is stable, so ties keep encounter order
    by_complexity = sorted(nodes, key=lambda n: n.complexity, reverse=True)
    by_dependents = sorted(
        (n for n in nodes if n.dependent_ids),
        key=lambda n: len(n.dependent_ids),
        reverse=True,
    )

    return ProjectMetrics(
        total_components=len(nodes),
        total_hooks=sum(1 for n in nodes if n.unit.kind == "hook"),
        average_complexity=round(sum(complexities) / len(complexities), 1),
        max_complexity=max(complexities),
        min_complexity=min(complexities),
        circular_dependencies=sum(1 for n in nodes if n.id in circular_ids),
        max_depth=max(n.depth for n in nodes),
        unused_components=sum(
            1 for n in nodes if _is_unused(n, root_file_names)
        ),
        complexity_distribution=ComplexityDistribution(**bands),
        top_complex_components=[
            _ranking(n, n.complexity) for n in by_complexity[:TOP_N]
        ],
        most_depended_on=[
            _ranking(n, len(n.dependent_ids)) for n in by_dependents[:TOP_N]
        ],
    )


def _is_unused(node: GraphNode, root_file_names: tuple[str, ...]) -> bool:
    return not node.dependent_ids and not is_root_file(
        node.unit.file_path, root_file_names
    )


def _ranking(node: GraphNode, value: int) -> ComponentRanking:
    return ComponentRanking(
        name=node.unit.name, file_path=node.unit.file_path, value=value
    )
