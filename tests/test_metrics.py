"""Tests for complexity scoring and aggregate project metrics."""

from __future__ import annotations

import pytest
from conftest import make_node, make_unit

from reuntangle.graph import build_graph
from reuntangle.metrics import (
    aggregate,
    complexity_band,
    complexity_score,
    is_root_file,
)
from reuntangle.model import DependencyGraph, ProjectMetrics


def graph_of(*nodes) -> DependencyGraph:
    return DependencyGraph(nodes={n.id: n for n in nodes})


# ── complexity_score ──────────────────────────────────────────────────────


def test_empty_unit_scores_only_base_complexity():
    assert complexity_score(make_unit("Empty")) == 4


def test_weighted_score():
    unit = make_unit("Card", ["A", "B", "C"], lines_of_code=40, hook_count=1)
    assert complexity_score(unit) == 17


def test_explicit_dependency_count_overrides_names():
    unit = make_unit("Card", ["A", "B", "C"], lines_of_code=40, hook_count=1)
    assert complexity_score(unit, dependency_count=0) == 11


def test_inputs_saturate_at_their_caps():
    unit = make_unit(
        "Huge",
        [f"Dep{i}" for i in range(50)],
        lines_of_code=5000,
        hook_count=40,
        prop_count=60,
        external_library_count=20,
    )
    assert complexity_score(unit) == 89


@pytest.mark.parametrize(
    ("complexity", "band"),
    [
        (0, "simple"),
        (30, "simple"),
        (31, "standard"),
        (60, "standard"),
        (61, "complex"),
        (80, "complex"),
        (81, "very_complex"),
        (100, "very_complex"),
    ],
)
def test_complexity_band(complexity, band):
    assert complexity_band(complexity) == band


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("app/page.tsx", True),
        ("app/dashboard/layout.jsx", True),
        ("app/api/route.ts", True),
        ("src/Page.tsx", False),
        ("src/pages.tsx", False),
        ("src/components/Button.tsx", False),
    ],
)
def test_is_root_file(path, expected):
    assert is_root_file(path, ("page", "layout", "route")) is expected


# ── aggregate ─────────────────────────────────────────────────────────────


def test_empty_graph_gives_zeroed_metrics():
    assert aggregate(DependencyGraph()) == ProjectMetrics()


def test_totals_and_extremes():
    graph = build_graph(
        [
            make_unit("App", ["Header", "useAuth"], lines_of_code=120, hook_count=3),
            make_unit("Header", ["Logo"], lines_of_code=30),
            make_unit("Logo"),
            make_unit("useAuth", hook_count=2),
        ]
    )
    metrics = aggregate(graph)
    complexities = [n.complexity for n in graph.nodes.values()]

    assert metrics.total_components == 4
    assert metrics.total_hooks == 1
    assert metrics.max_complexity == max(complexities)
    assert metrics.min_complexity == min(complexities)
    assert metrics.average_complexity == round(sum(complexities) / 4, 1)
    assert metrics.max_depth == 2
    assert metrics.circular_dependencies == 0
    # only App has no dependents
    assert metrics.unused_components == 1


def test_average_is_rounded_to_one_decimal():
    metrics = aggregate(graph_of(make_node("A", 10), make_node("B", 10), make_node("C", 11)))
    assert metrics.average_complexity == 10.3


def test_distribution_counts_every_node_once():
    graph = graph_of(
        make_node("A", 10),
        make_node("B", 30),
        make_node("C", 45),
        make_node("D", 75),
        make_node("E", 95),
    )
    dist = aggregate(graph).complexity_distribution
    assert (dist.simple, dist.standard, dist.complex, dist.very_complex) == (2, 1, 1, 1)


def test_root_files_are_not_unused():
    graph = graph_of(
        make_node("Home", path="app/page.tsx"),
        make_node("Orphan"),
    )
    assert aggregate(graph).unused_components == 1


def test_circular_count_uses_cycle_membership():
    graph = build_graph(
        [make_unit("A", ["B"]), make_unit("B", ["A"]), make_unit("C", ["A"])]
    )
    assert aggregate(graph).circular_dependencies == 2


def test_top_complex_is_limited_and_stable():
    nodes = [make_node(f"N{i:02d}", complexity=50) for i in range(12)]
    nodes.append(make_node("Top", complexity=90))
    metrics = aggregate(graph_of(*nodes))

    names = [r.name for r in metrics.top_complex_components]
    assert len(names) == 10
    assert names[0] == "Top"
    assert names[1:] == [f"N{i:02d}" for i in range(9)]
    assert metrics.top_complex_components[0].value == 90
    assert metrics.top_complex_components[0].file_path == "src/Top.tsx"


def test_most_depended_on_ranks_by_dependents():
    graph = build_graph(
        [
            make_unit("App", ["Button", "Card"]),
            make_unit("Page", ["Button"]),
            make_unit("Card", ["Button"]),
            make_unit("Button"),
        ]
    )
    ranking = aggregate(graph).most_depended_on
    assert [(r.name, r.value) for r in ranking] == [("Button", 3), ("Card", 1)]
