"""Orchestrator: parse → build → style → layout → metrics."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from reuntangle.config import AnalysisConfig
from reuntangle.diagnostics import detect_diagnostics
from reuntangle.graph import build_flow_graph, build_graph
from reuntangle.layout import apply_layout
from reuntangle.metrics import aggregate
from reuntangle.model import AnalysisResult, FlowEdge, FlowNode, SourceFile, Unit
from reuntangle.parser import ComponentParser
from reuntangle.scouter import extract_related_nodes, focus_view

logger = logging.getLogger(__name__)


def parse_all(files: list[SourceFile], workers: int = 1) -> list[Unit]:
    """Parse every file, keeping units in input order.

    With ``workers > 1`` files are parsed on a thread pool; the merge below
    waits for every parse before anything downstream sees the units.
    """
    parser = ComponentParser()
    if workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=min(workers, len(files))) as executor:
            per_file = list(executor.map(parser.parse, files))
    else:
        per_file = [parser.parse(f) for f in files]

    return [unit for units in per_file for unit in units]


def analyze(
    files: Iterable[SourceFile], config: AnalysisConfig | None = None
) -> AnalysisResult:
    """Run a full analysis over already-read source files."""
    config = config or AnalysisConfig()
    files = list(files)

    units = parse_all(files, workers=config.workers)
    logger.debug("Parsed %d files into %d units", len(files), len(units))

    graph = build_graph(units)
    nodes, edges = build_flow_graph(graph, root_file_names=config.root_file_names)
    nodes = apply_layout(nodes, edges, config.layout)

    metrics = aggregate(graph, root_file_names=config.root_file_names)
    diagnostics = detect_diagnostics(
        graph, config.thresholds, root_file_names=config.root_file_names
    )
    logger.debug(
        "Circular nodes: %d, diagnostics: %d",
        metrics.circular_dependencies,
        len(diagnostics),
    )

    return AnalysisResult(
        graph=graph,
        nodes=nodes,
        edges=edges,
        metrics=metrics,
        diagnostics=diagnostics,
        files_scanned=len(files),
        units_found=len(units),
    )


def focus(
    result: AnalysisResult,
    center_id: str,
    *,
    show_all_descendants: bool = True,
    layout: str = "tree",
) -> tuple[list[FlowNode], list[FlowEdge]]:
    """Scouter view of *result* around *center_id*, laid out afresh."""
    related = extract_related_nodes(
        center_id,
        result.nodes,
        result.edges,
        show_all_descendants=show_all_descendants,
    )
    nodes, edges = focus_view(related)
    return apply_layout(nodes, edges, layout), edges
