"""Data model for component dependency graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

SUPPORTED_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")


@dataclass(frozen=True)
class SourceFile:
    """A source file that has already been read by the caller."""

    path: str
    extension: str
    content: str

    @classmethod
    def from_path(cls, path: Path, root: Path | None = None) -> SourceFile:
        """Read *path* and key it by its location relative to *root*."""
        content = path.read_text(encoding="utf-8", errors="replace")
        display = path.relative_to(root) if root is not None else path
        return cls(
            path=PurePosixPath(display).as_posix(),
            extension=path.suffix,
            content=content,
        )


@dataclass(frozen=True)
class ImportRecord:
    """One ``import`` statement."""

    source: str
    specifiers: tuple[str, ...] = ()
    is_likely_component: bool = False


@dataclass(frozen=True)
class HookUsage:
    name: str
    count: int


@dataclass(frozen=True)
class PropProperty:
    """A single member of a ``{Name}Props`` interface or type alias."""

    name: str
    type: str
    required: bool
    default: str | None = None


@dataclass(frozen=True)
class PropsInfo:
    type_name: str
    properties: tuple[PropProperty, ...] = ()


@dataclass(frozen=True)
class ComplexityInputs:
    """Raw counts the complexity score is computed from."""

    lines_of_code: int = 0
    hook_count: int = 0
    prop_count: int = 0
    external_library_count: int = 0


@dataclass(frozen=True)
class Unit:
    """A component or custom hook declaration found in a source file."""

    id: str
    name: str
    file_path: str
    kind: str  # "function", "class", "arrow", "hook"
    dependency_names: tuple[str, ...] = ()
    imports: tuple[ImportRecord, ...] = ()
    hooks: tuple[HookUsage, ...] = ()
    props: PropsInfo | None = None
    lines_of_code: int = 0
    complexity_inputs: ComplexityInputs = field(default_factory=ComplexityInputs)

    @property
    def prop_count(self) -> int:
        return len(self.props.properties) if self.props else 0

    @property
    def hook_count(self) -> int:
        return sum(h.count for h in self.hooks)


@dataclass
class GraphNode:
    """A unit plus its resolved position in the dependency graph."""

    id: str
    unit: Unit
    dependency_ids: list[str] = field(default_factory=list)
    dependent_ids: list[str] = field(default_factory=list)
    depth: int = 0
    complexity: int = 0


@dataclass
class GraphEdge:
    """``source`` depends on ``target``; ``strength`` counts collapsed references."""

    source: str
    target: str
    strength: int = 1


@dataclass
class DependencyGraph:
    """Complete dependency graph produced by the graph builder."""

    nodes: dict[str, GraphNode] = field(default_factory=dict)
    edges: list[GraphEdge] = field(default_factory=list)


@dataclass(frozen=True)
class NodeStyle:
    background_color: str = "#9ca3af"
    width: float | None = None
    height: float | None = None
    border: str = "2px solid #fff"
    box_shadow: str = "0 4px 6px rgba(0, 0, 0, 0.1)"
    z_index: int | None = None


@dataclass(frozen=True)
class FlowNodeData:
    label: str
    unit: Unit
    complexity: int = 0
    dependency_count: int = 0
    dependent_count: int = 0
    depth: int = 0
    is_circular: bool = False
    is_root: bool = False
    is_scouter_center: bool = False


@dataclass(frozen=True)
class FlowNode:
    """A graph node ready for display: data, style and a 2D position."""

    id: str
    data: FlowNodeData
    style: NodeStyle = field(default_factory=NodeStyle)
    position: tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class FlowEdge:
    id: str
    source: str
    target: str
    strength: int = 1
    animated: bool = False
    stroke_width: int = 1
    stroke: str = "#94a3b8"


@dataclass
class RelatedNodes:
    """The neighbourhood of one node, as shown in scouter mode."""

    center_node: FlowNode
    dependency_nodes: list[FlowNode] = field(default_factory=list)
    dependent_nodes: list[FlowNode] = field(default_factory=list)
    related_edges: list[FlowEdge] = field(default_factory=list)


@dataclass(frozen=True)
class ComponentRanking:
    name: str
    file_path: str
    value: int


@dataclass(frozen=True)
class ComplexityDistribution:
    simple: int = 0  # 0-30
    standard: int = 0  # 31-60
    complex: int = 0  # 61-80
    very_complex: int = 0  # 81-100


@dataclass
class ProjectMetrics:
    total_components: int = 0
    total_hooks: int = 0
    average_complexity: float = 0.0
    max_complexity: int = 0
    min_complexity: int = 0
    circular_dependencies: int = 0
    max_depth: int = 0
    unused_components: int = 0
    complexity_distribution: ComplexityDistribution = field(
        default_factory=ComplexityDistribution
    )
    top_complex_components: list[ComponentRanking] = field(default_factory=list)
    most_depended_on: list[ComponentRanking] = field(default_factory=list)


@dataclass(frozen=True)
class Diagnostic:
    """A structural problem reported by the analyzer."""

    id: str
    type: str  # "circular-dependency", "unused-component", "deep-dependency", ...
    severity: str  # "high", "medium", "low"
    node_ids: tuple[str, ...]
    message: str
    suggestion: str


@dataclass
class AnalysisResult:
    """Everything one analysis run produces."""

    graph: DependencyGraph
    nodes: list[FlowNode] = field(default_factory=list)
    edges: list[FlowEdge] = field(default_factory=list)
    metrics: ProjectMetrics = field(default_factory=ProjectMetrics)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    files_scanned: int = 0
    units_found: int = 0
