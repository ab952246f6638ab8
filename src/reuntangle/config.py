"""Analysis settings, read from ``.reuntangle.toml`` or ``pyproject.toml``."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from reuntangle.errors import ConfigError

logger = logging.getLogger(__name__)

LAYOUT_TYPES = ("tree", "force")


@dataclass(frozen=True)
class DiagnosticThresholds:
    max_depth: int = 5
    max_coupling: int = 10
    max_complexity: int = 80


@dataclass(frozen=True)
class AnalysisConfig:
    layout: str = "tree"
    show_all_descendants: bool = True
    root_file_names: tuple[str, ...] = ("page", "layout", "route")
    workers: int = 1
    thresholds: DiagnosticThresholds = field(default_factory=DiagnosticThresholds)


def load_config(project_dir: Path) -> AnalysisConfig:
    """Read settings for *project_dir*, falling back to defaults.

    ``.reuntangle.toml`` (``[reuntangle]`` table) wins over
    ``[tool.reuntangle]`` in ``pyproject.toml``.
    """
    reuntangle_toml = project_dir / ".reuntangle.toml"
    if reuntangle_toml.exists():
        data = _read_toml(reuntangle_toml)
        return config_from_mapping(data.get("reuntangle", {}))

    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        data = _read_toml(pyproject)
        return config_from_mapping(data.get("tool", {}).get("reuntangle", {}))

    return AnalysisConfig()


def load_config_file(path: Path) -> AnalysisConfig:
    """Read settings from an explicit TOML file."""
    data = _read_toml(path)
    if "tool" in data:
        return config_from_mapping(data["tool"].get("reuntangle", {}))
    return config_from_mapping(data.get("reuntangle", data))


def _read_toml(path: Path) -> dict:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def config_from_mapping(section: dict) -> AnalysisConfig:
    """Validate a config table and build an :class:`AnalysisConfig`."""
    if not isinstance(section, dict):
        raise ConfigError("reuntangle configuration must be a table")

    defaults = AnalysisConfig()

    layout = section.get("layout", defaults.layout)
    if layout not in LAYOUT_TYPES:
        raise ConfigError(
            f"Unknown layout {layout!r}; expected one of {', '.join(LAYOUT_TYPES)}"
        )

    show_all = section.get("show_all_descendants", defaults.show_all_descendants)
    if not isinstance(show_all, bool):
        raise ConfigError("show_all_descendants must be a boolean")

    root_names = section.get("root_file_names", list(defaults.root_file_names))
    if not isinstance(root_names, list) or not all(
        isinstance(n, str) for n in root_names
    ):
        raise ConfigError("root_file_names must be a list of strings")

    workers = _positive_int(section, "workers", defaults.workers)

    raw_thresholds = section.get("thresholds", {})
    if not isinstance(raw_thresholds, dict):
        raise ConfigError("thresholds must be a table")
    base = DiagnosticThresholds()
    thresholds = DiagnosticThresholds(
        max_depth=_positive_int(raw_thresholds, "max_depth", base.max_depth),
        max_coupling=_positive_int(raw_thresholds, "max_coupling", base.max_coupling),
        max_complexity=_positive_int(
            raw_thresholds, "max_complexity", base.max_complexity
        ),
    )

    unknown = set(section) - {
        "layout",
        "show_all_descendants",
        "root_file_names",
        "workers",
        "thresholds",
    }
    if unknown:
        logger.warning("Ignoring unknown reuntangle settings: %s", sorted(unknown))

    return AnalysisConfig(
        layout=layout,
        show_all_descendants=show_all,
        root_file_names=tuple(root_names),
        workers=workers,
        thresholds=thresholds,
    )


def _positive_int(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(f"{key} must be a positive integer")
    return value
