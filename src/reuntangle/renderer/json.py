"""Render an AnalysisResult to a JSON document."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from reuntangle.model import AnalysisResult, FlowEdge, FlowNode, Unit


def _unit_to_dict(unit: Unit) -> dict:
    d: dict = {
        "id": unit.id,
        "name": unit.name,
        "filePath": unit.file_path,
        "type": unit.kind,
        "dependencies": list(unit.dependency_names),
        "linesOfCode": unit.lines_of_code,
        "propsCount": unit.prop_count,
    }
    if unit.imports:
        d["imports"] = [
            {
                "source": imp.source,
                "specifiers": list(imp.specifiers),
                "isLikelyComponent": imp.is_likely_component,
            }
            for imp in unit.imports
        ]
    if unit.hooks:
        d["hooks"] = [{"name": h.name, "count": h.count} for h in unit.hooks]
    if unit.props is not None:
        props = []
        for p in unit.props.properties:
            entry = {"name": p.name, "type": p.type, "required": p.required}
            if p.default is not None:
                entry["defaultValue"] = p.default
            props.append(entry)
        d["propsInfo"] = {"name": unit.props.type_name, "properties": props}
    return d


def _node_to_dict(node: FlowNode) -> dict:
    style = {k: v for k, v in asdict(node.style).items() if v is not None}
    d: dict = {
        "id": node.id,
        "position": {"x": node.position[0], "y": node.position[1]},
        "data": {
            "label": node.data.label,
            "component": _unit_to_dict(node.data.unit),
            "complexity": node.data.complexity,
            "dependencyCount": node.data.dependency_count,
            "dependentCount": node.data.dependent_count,
            "depth": node.data.depth,
        },
        "style": style,
    }
    if node.data.is_circular:
        d["data"]["isCircular"] = True
    if node.data.is_root:
        d["data"]["isRoot"] = True
    if node.data.is_scouter_center:
        d["data"]["isScouterCenter"] = True
    return d


def _edge_to_dict(edge: FlowEdge) -> dict:
    return {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "strength": edge.strength,
        "animated": edge.animated,
        "style": {"strokeWidth": edge.stroke_width, "stroke": edge.stroke},
    }


def result_to_dict(
    result: AnalysisResult,
    focus: tuple[list[FlowNode], list[FlowEdge]] | None = None,
) -> dict:
    """Serialise *result* (and an optional scouter view) to plain data."""
    metrics = result.metrics
    data: dict = {
        "filesScanned": result.files_scanned,
        "componentsFound": result.units_found,
        "nodes": [_node_to_dict(n) for n in result.nodes],
        "edges": [_edge_to_dict(e) for e in result.edges],
        "metrics": {
            "totalComponents": metrics.total_components,
            "totalHooks": metrics.total_hooks,
            "averageComplexity": metrics.average_complexity,
            "maxComplexity": metrics.max_complexity,
            "minComplexity": metrics.min_complexity,
            "circularDependencies": metrics.circular_dependencies,
            "maxDepth": metrics.max_depth,
            "unusedComponents": metrics.unused_components,
            "complexityDistribution": asdict(metrics.complexity_distribution),
            "topComplexComponents": [
                {"name": r.name, "filePath": r.file_path, "complexity": r.value}
                for r in metrics.top_complex_components
            ],
            "mostDependedOn": [
                {"name": r.name, "filePath": r.file_path, "dependentCount": r.value}
                for r in metrics.most_depended_on
            ],
        },
        "warnings": [
            {
                "id": d.id,
                "type": d.type,
                "severity": d.severity,
                "componentIds": list(d.node_ids),
                "message": d.message,
                "suggestion": d.suggestion,
            }
            for d in result.diagnostics
        ],
    }
    if focus is not None:
        focus_nodes, focus_edges = focus
        data["scouter"] = {
            "nodes": [_node_to_dict(n) for n in focus_nodes],
            "edges": [_edge_to_dict(e) for e in focus_edges],
        }
    return data


def render_json(
    result: AnalysisResult,
    output_path: Path,
    focus: tuple[list[FlowNode], list[FlowEdge]] | None = None,
) -> None:
    """Write *result* as JSON to *output_path*."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(result_to_dict(result, focus), indent=2))
