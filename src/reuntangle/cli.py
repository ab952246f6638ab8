"""Command-line interface for reuntangle."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from reuntangle.config import LAYOUT_TYPES, load_config, load_config_file
from reuntangle.errors import ReuntangleError
from reuntangle.model import SUPPORTED_EXTENSIONS, SourceFile
from reuntangle.pipeline import analyze, focus
from reuntangle.renderer.json import render_json

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="reuntangle",
        description="Component dependency graph analysis for React/TypeScript sources.",
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Source files to analyze (.ts, .tsx, .js, .jsx)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("reuntangle.json"),
        help="Output JSON file path (default: reuntangle.json)",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory file paths are reported relative to, and where config is read from",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Explicit TOML config file (default: .reuntangle.toml or pyproject.toml under --root)",
    )
    parser.add_argument(
        "--layout",
        choices=LAYOUT_TYPES,
        default=None,
        help="Layout algorithm (default: from config, else tree)",
    )
    parser.add_argument(
        "--focus",
        default=None,
        metavar="NODE_ID",
        help="Also emit a scouter view centred on NODE_ID (e.g. src/App.tsx:App)",
    )
    parser.add_argument(
        "--direct-only",
        action="store_true",
        help="Scouter view shows direct neighbours only",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Parse files on N threads",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("reuntangle").setLevel(logging.DEBUG)

    root = args.root.resolve() if args.root else None

    try:
        if args.config is not None:
            config = load_config_file(args.config)
        else:
            config = load_config(root or Path.cwd())
        if args.layout:
            config = replace(config, layout=args.layout)
        if args.workers:
            config = replace(config, workers=args.workers)
        if args.direct_only:
            config = replace(config, show_all_descendants=False)

        files = _read_sources(args.files, root)
        result = analyze(files, config)

        focus_view = None
        if args.focus:
            focus_view = focus(
                result,
                args.focus,
                show_all_descendants=config.show_all_descendants,
                layout=config.layout,
            )

        render_json(result, args.output, focus=focus_view)
    except (ReuntangleError, OSError) as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info(
        "Analyzed %d files, %d units → %s",
        result.files_scanned,
        result.units_found,
        args.output,
    )


def _read_sources(paths: list[Path], root: Path | None) -> list[SourceFile]:
    files: list[SourceFile] = []
    for path in paths:
        if path.suffix not in SUPPORTED_EXTENSIONS:
            logger.debug("Skipping %s: not a JS/TS source", path)
            continue
        resolved = path.resolve()
        try:
            files.append(
                SourceFile.from_path(resolved, root)
                if root and resolved.is_relative_to(root)
                else SourceFile.from_path(path)
            )
        except OSError as e:
            logger.warning("Could not read %s: %s", path, e)
    return files
