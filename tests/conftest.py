"""Shared factories for reuntangle tests."""

from __future__ import annotations

from reuntangle.model import (
    ComplexityInputs,
    FlowEdge,
    FlowNode,
    FlowNodeData,
    GraphNode,
    NodeStyle,
    Unit,
)


def make_unit(
    name: str,
    deps: list[str] | tuple[str, ...] = (),
    path: str | None = None,
    kind: str | None = None,
    **inputs: int,
) -> Unit:
    path = path or f"src/{name}.tsx"
    if kind is None:
        kind = "hook" if name.startswith("use") else "function"
    return Unit(
        id=f"{path}:{name}",
        name=name,
        file_path=path,
        kind=kind,
        dependency_names=tuple(deps),
        lines_of_code=inputs.get("lines_of_code", 0),
        complexity_inputs=ComplexityInputs(**inputs),
    )


def make_node(name: str, complexity: int = 0, path: str | None = None, **kw) -> GraphNode:
    unit = make_unit(name, path=path, kind=kw.pop("kind", None))
    return GraphNode(id=unit.id, unit=unit, complexity=complexity, **kw)


def make_flow_node(node_id: str, width: float | None = None) -> FlowNode:
    unit = make_unit(node_id, path=f"src/{node_id}.tsx")
    return FlowNode(
        id=node_id,
        data=FlowNodeData(label=node_id, unit=unit),
        style=NodeStyle(width=width, height=width),
    )


def flow_edge(source: str, target: str) -> FlowEdge:
    return FlowEdge(id=f"{source}-{target}", source=source, target=target)
