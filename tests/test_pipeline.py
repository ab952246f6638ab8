"""End-to-end tests: source files in, positioned graph and metrics out."""

from __future__ import annotations

import json

import pytest

from reuntangle.config import AnalysisConfig
from reuntangle.errors import NodeNotFoundError
from reuntangle.model import SourceFile
from reuntangle.pipeline import analyze, focus, parse_all
from reuntangle.renderer.json import render_json, result_to_dict

PAGE = """
import { Header } from '../components/Header';
import { useAuth } from '../hooks/useAuth';

export default function Page() {
  const user = useAuth();
  return <Header user={user} />;
}
"""

HEADER = """
import { Logo } from './Logo';

interface HeaderProps {
  user?: string;
}

export function Header({ user }: HeaderProps) {
  return <nav><Logo />{user}</nav>;
}
"""

LOGO = "export const Logo = () => <img src='/logo.svg' />;\n"

HOOK = """
import { useContext } from 'react';

export function useAuth() {
  return useContext(AuthContext);
}
"""

BROKEN = "export function Oops( {\n  return <div>\n"


@pytest.fixture
def files():
    return [
        SourceFile("app/page.tsx", ".tsx", PAGE),
        SourceFile("components/Header.tsx", ".tsx", HEADER),
        SourceFile("components/Logo.jsx", ".jsx", LOGO),
        SourceFile("hooks/useAuth.ts", ".ts", HOOK),
        SourceFile("components/Broken.jsx", ".jsx", BROKEN),
    ]


def test_analyze_builds_the_whole_picture(files):
    result = analyze(files)

    assert result.files_scanned == 5
    assert result.units_found == 4
    assert set(result.graph.nodes) == {
        "app/page.tsx:Page",
        "components/Header.tsx:Header",
        "components/Logo.jsx:Logo",
        "hooks/useAuth.ts:useAuth",
    }
    assert {(e.source, e.target) for e in result.edges} == {
        ("app/page.tsx:Page", "components/Header.tsx:Header"),
        ("app/page.tsx:Page", "hooks/useAuth.ts:useAuth"),
        ("components/Header.tsx:Header", "components/Logo.jsx:Logo"),
    }
    assert result.graph.nodes["components/Logo.jsx:Logo"].depth == 2

    metrics = result.metrics
    assert metrics.total_components == 4
    assert metrics.total_hooks == 1
    assert metrics.max_depth == 2
    assert metrics.unused_components == 0
    assert metrics.circular_dependencies == 0
    assert result.diagnostics == []

    page = next(n for n in result.nodes if n.id == "app/page.tsx:Page")
    assert page.data.is_root is True
    assert page.position[1] == 50


def test_parse_all_in_parallel_matches_sequential(files):
    sequential = parse_all(files)
    parallel = parse_all(files, workers=3)
    assert [u.id for u in parallel] == [u.id for u in sequential]


def test_force_layout_from_config(files):
    result = analyze(files, AnalysisConfig(layout="force"))
    assert len({n.position for n in result.nodes}) == len(result.nodes)


def test_focus_direct_and_transitive(files):
    result = analyze(files)

    nodes, edges = focus(result, "components/Header.tsx:Header")
    assert [n.id for n in nodes][0] == "components/Header.tsx:Header"
    assert {n.id for n in nodes} == {
        "components/Header.tsx:Header",
        "components/Logo.jsx:Logo",
        "app/page.tsx:Page",
    }
    assert len(edges) == 2
    assert nodes[0].data.is_scouter_center is True

    nodes, _ = focus(result, "components/Logo.jsx:Logo", show_all_descendants=False)
    assert {n.id for n in nodes} == {
        "components/Logo.jsx:Logo",
        "components/Header.tsx:Header",
    }


def test_focus_unknown_node(files):
    with pytest.raises(NodeNotFoundError):
        focus(analyze(files), "nope")


def test_result_to_dict_shape(files):
    result = analyze(files)
    data = result_to_dict(result)

    assert data["filesScanned"] == 5
    assert data["componentsFound"] == 4
    assert len(data["nodes"]) == 4
    assert data["metrics"]["totalComponents"] == 4
    assert data["warnings"] == []
    assert "scouter" not in data

    header = next(n for n in data["nodes"] if n["data"]["label"] == "Header")
    assert set(header["position"]) == {"x", "y"}
    component = header["data"]["component"]
    assert component["filePath"] == "components/Header.tsx"
    assert component["propsInfo"]["properties"] == [
        {"name": "user", "type": "string", "required": False}
    ]
    assert header["style"]["border"] == "2px solid #fff"


def test_render_json_writes_file(files, tmp_path):
    result = analyze(files)
    out = tmp_path / "nested" / "graph.json"

    render_json(result, out, focus=focus(result, "app/page.tsx:Page"))

    data = json.loads(out.read_text())
    assert data["scouter"]["nodes"][0]["data"]["isScouterCenter"] is True
    assert len(data["scouter"]["edges"]) == 3
