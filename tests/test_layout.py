"""Tests for tree and force layouts."""

from __future__ import annotations

import pytest
from conftest import flow_edge, make_flow_node

from reuntangle.layout import LayoutType, apply_layout


def positions(nodes):
    return {n.id: n.position for n in nodes}


class TestTreeLayout:
    def test_chain_is_laid_out_top_down(self):
        nodes = [make_flow_node(n) for n in "ABC"]
        edges = [flow_edge("A", "B"), flow_edge("B", "C")]
        pos = positions(apply_layout(nodes, edges, "tree"))
        assert [pos[n][1] for n in "ABC"] == [50, 250, 450]
        assert {pos[n][0] for n in "ABC"} == {300.0}

    def test_siblings_share_a_row(self):
        nodes = [make_flow_node(n) for n in "ABC"]
        edges = [flow_edge("A", "B"), flow_edge("A", "C")]
        pos = positions(apply_layout(nodes, edges, LayoutType.TREE))
        assert pos["B"][1] == pos["C"][1] == 250
        assert pos["B"][0] == 200.0
        assert pos["C"][0] == 400.0

    def test_first_visit_fixes_the_level(self):
        nodes = [make_flow_node(n) for n in "ABCD"]
        edges = [flow_edge("A", "B"), flow_edge("B", "C"), flow_edge("A", "C"), flow_edge("C", "D")]
        pos = positions(apply_layout(nodes, edges, "tree"))
        assert pos["C"][1] == 250
        assert pos["D"][1] == 450

    def test_isolated_node_sits_on_the_top_row(self):
        pos = positions(apply_layout([make_flow_node("Lone")], [], "tree"))
        assert pos["Lone"] == (300.0, 50)

    def test_pure_cycle_gets_distinct_positions(self):
        nodes = [make_flow_node(n) for n in "AB"]
        edges = [flow_edge("A", "B"), flow_edge("B", "A")]
        pos = positions(apply_layout(nodes, edges, "tree"))
        assert pos["A"] != pos["B"]
        assert pos["A"][1] == 50

    def test_every_node_gets_a_unique_position(self):
        nodes = [make_flow_node(n) for n in "ABCDEF"]
        edges = [
            flow_edge("A", "B"),
            flow_edge("A", "C"),
            flow_edge("B", "D"),
            flow_edge("E", "F"),
            flow_edge("F", "E"),
        ]
        laid_out = apply_layout(nodes, edges, "tree")
        assert len({n.position for n in laid_out}) == len(nodes)


class TestForceLayout:
    def test_nodes_are_spread_on_a_circle(self):
        nodes = [make_flow_node(f"N{i}") for i in range(10)]
        laid_out = apply_layout(nodes, [], "force")
        assert len({n.position for n in laid_out}) == 10
        # ten nodes give a radius of 300 around (400, 400)
        x, y = laid_out[0].position
        assert x == pytest.approx(700)
        assert y == pytest.approx(400)

    def test_small_graphs_use_the_minimum_radius(self):
        laid_out = apply_layout([make_flow_node("A"), make_flow_node("B")], [], "force")
        assert laid_out[0].position == pytest.approx((600, 400))
        assert laid_out[1].position == pytest.approx((200, 400))

    def test_empty_input(self):
        assert apply_layout([], [], "force") == []


def test_unknown_layout_returns_input_unchanged():
    nodes = [make_flow_node("A")]
    assert apply_layout(nodes, [], "spiral") is nodes


def test_layout_does_not_mutate_inputs():
    nodes = [make_flow_node(n) for n in "AB"]
    apply_layout(nodes, [flow_edge("A", "B")], "tree")
    apply_layout(nodes, [], "force")
    assert all(n.position == (0.0, 0.0) for n in nodes)
