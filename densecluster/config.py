"""Configuration loading and adapter factory.

Reads a YAML config file and instantiates the correct adapter for each
port, then wires them into the ClusteringOrchestrator.

Threshold precedence: explicit arguments > environment
(``DENSECLUSTER_DENSITY_THRESHOLD``, ``DENSECLUSTER_CP_THRESHOLD``) > YAML.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Walk up from this file (densecluster/config.py) to the project root and load .env
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env", override=True)

from densecluster.ports.clustering import ClusteringPort
from densecluster.ports.edge_source import EdgeSourcePort
from densecluster.services.orchestrator import ClusteringOrchestrator

log = logging.getLogger(__name__)

ENV_DENSITY_THRESHOLD = "DENSECLUSTER_DENSITY_THRESHOLD"
ENV_CP_THRESHOLD = "DENSECLUSTER_CP_THRESHOLD"

DEFAULT_DENSITY_THRESHOLD = 0.5
DEFAULT_CP_THRESHOLD = 0.5


def load_config(path: str = "config.yaml") -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(p) as f:
        return yaml.safe_load(f) or {}


def resolve_thresholds(
    cfg: dict[str, Any],
    *,
    density_threshold: float | None = None,
    cp_threshold: float | None = None,
) -> tuple[float, float]:
    """Apply the argument > env > YAML > default precedence to both thresholds."""
    if density_threshold is None:
        density_threshold = _env_or(
            ENV_DENSITY_THRESHOLD, cfg.get("density_threshold", DEFAULT_DENSITY_THRESHOLD)
        )
    if cp_threshold is None:
        cp_threshold = _env_or(ENV_CP_THRESHOLD, cfg.get("cp_threshold", DEFAULT_CP_THRESHOLD))
    return density_threshold, cp_threshold


def _env_or(name: str, fallback: Any) -> Any:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return fallback
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


# ── Adapter factories ──


def build_clustering(cfg: dict[str, Any]) -> ClusteringPort:
    adapter = cfg.get("adapter", "density_periphery")

    if adapter == "density_periphery":
        from densecluster.adapters.clustering.density_periphery import (
            DensityPeripheryClustering,
        )
        return DensityPeripheryClustering()

    raise ValueError(f"Unknown clustering adapter: {adapter}")


def build_edge_source(cfg: dict[str, Any], *, config_dir: str = ".") -> EdgeSourcePort | None:
    adapter = cfg.get("adapter", "text_file")

    if adapter == "text_file":
        path = cfg.get("path")
        if not path:
            return None
        from densecluster.adapters.sources.text_file import TextFileEdgeSource
        resolved = Path(config_dir) / path
        return TextFileEdgeSource(resolved, encoding=cfg.get("encoding", "utf-8"))

    elif adapter == "in_memory":
        from densecluster.adapters.sources.in_memory import InMemoryEdgeSource
        return InMemoryEdgeSource(
            (e["source"], e["target"], float(e.get("weight", 1.0)))
            for e in cfg.get("edges", [])
        )

    raise ValueError(f"Unknown edge_source adapter: {adapter}")


# ── Top-level builder ──


def build_orchestrator(
    config_path: str | None = None,
    *,
    graph_file: str | None = None,
    density_threshold: float | None = None,
    cp_threshold: float | None = None,
) -> ClusteringOrchestrator:
    """Load config (if any) and wire the adapters into the orchestrator.

    ``graph_file`` replaces whatever edge source the config names with a
    text-file source for that path.
    """
    if config_path:
        cfg = load_config(config_path)
        config_dir = str(Path(config_path).resolve().parent)
    else:
        cfg = {}
        config_dir = "."

    clustering_cfg = cfg.get("clustering", {})
    log.debug("building clustering adapter %s", clustering_cfg.get("adapter", "density_periphery"))
    clustering = build_clustering(clustering_cfg)

    if graph_file is not None:
        from densecluster.adapters.sources.text_file import TextFileEdgeSource
        edge_source: EdgeSourcePort | None = TextFileEdgeSource(graph_file)
    else:
        edge_source = build_edge_source(cfg.get("edge_source", {}), config_dir=config_dir)

    density, cp = resolve_thresholds(
        clustering_cfg,
        density_threshold=density_threshold,
        cp_threshold=cp_threshold,
    )

    return ClusteringOrchestrator(
        clustering=clustering,
        edge_source=edge_source,
        density_threshold=density,
        cp_threshold=cp,
    )
