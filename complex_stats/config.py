from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml


@dataclass(frozen=True)
class PlotConfig:
    width: int = 800
    height: int = 600
    margin: int = 40
    tick_steps: int = 10

    point_radius: float = 4.0
    mean_radius: float = 6.0

    background_color: str = "#ffffff"
    grid_color: str = "#e5e7eb"
    axis_color: str = "#374151"
    label_color: str = "#6b7280"
    point_color: str = "#3b82f6"
    point_edge_color: str = "#1e40af"
    mean_color: str = "#ef4444"
    mean_edge_color: str = "#dc2626"

    font_size: int = 12
    tick_font_size: int = 10

    dpi: int = 100  # figure backend only


def load_plot_config(path: str | Path | None = None, base: PlotConfig | None = None) -> PlotConfig:
    """
    Load plot settings from a YAML mapping, falling back to defaults.

    Keys not present in the file keep the value from `base`.
    """
    base = base or PlotConfig()
    if path is None:
        return base

    with open(path, "r") as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ValueError(f"Plot config must be a mapping, got {type(cfg).__name__}")

    known = {f.name: f for f in fields(PlotConfig)}
    unknown = sorted(set(cfg) - set(known))
    if unknown:
        raise ValueError(f"Unknown plot config keys: {', '.join(unknown)}")

    overrides = {}
    for name, value in cfg.items():
        default = getattr(base, name)
        try:
            overrides[name] = type(default)(value)
        except (TypeError, ValueError):
            raise ValueError(f"Bad value for {name}: {value!r}") from None

    return replace(base, **overrides)
