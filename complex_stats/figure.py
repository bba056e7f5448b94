"""
Matplotlib rendition of the complex-plane scatter plot.

Uses the same padded bounds, grid steps and tick labels as the canvas
renderer, so both exports show the same picture.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from complex_stats.config import PlotConfig
from complex_stats.mapping import compute_mapping


def plot_figure(
    values: Sequence[complex],
    outfile: str | Path,
    *,
    mean: Optional[complex] = None,
    config: Optional[PlotConfig] = None,
    title: Optional[str] = None,
) -> Path:
    """Save a scatter plot of `values` (and `mean`) to `outfile`."""
    cfg = config or PlotConfig()
    mapping = compute_mapping(values, cfg.width, cfg.height, cfg.margin, cfg.tick_steps)

    out_path = Path(outfile)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(cfg.width / cfg.dpi, cfg.height / cfg.dpi), dpi=cfg.dpi)
    fig.patch.set_facecolor(cfg.background_color)
    ax.set_facecolor(cfg.background_color)

    if mapping is None:
        ax.set_axis_off()
        fig.savefig(out_path, dpi=cfg.dpi)
        plt.close(fig)
        return out_path

    # grid
    for v in mapping.real_ticks():
        ax.axvline(v, color=cfg.grid_color, linewidth=1, zorder=0)
    for v in mapping.imag_ticks():
        ax.axhline(v, color=cfg.grid_color, linewidth=1, zorder=0)

    # axes through zero, only if visible
    if mapping.real_axis_y() is not None:
        ax.axhline(0.0, color=cfg.axis_color, linewidth=2, zorder=1)
    if mapping.imag_axis_x() is not None:
        ax.axvline(0.0, color=cfg.axis_color, linewidth=2, zorder=1)

    real_labels = mapping.real_tick_labels()
    imag_labels = mapping.imag_tick_labels()
    ax.set_xticks([v for v, _ in real_labels])
    ax.set_xticklabels([s for _, s in real_labels])
    ax.set_yticks([v for v, _ in imag_labels])
    ax.set_yticklabels([s for _, s in imag_labels])
    ax.tick_params(labelsize=cfg.tick_font_size, colors=cfg.label_color)

    z = np.asarray(values, dtype=np.complex128)
    # matplotlib marker size is in points^2
    ax.scatter(
        z.real, z.imag,
        s=(2 * cfg.point_radius) ** 2,
        c=cfg.point_color,
        edgecolors=cfg.point_edge_color,
        linewidths=1,
        zorder=2,
        label="values",
    )

    if mean is not None:
        ax.scatter(
            [mean.real], [mean.imag],
            s=(2 * cfg.mean_radius) ** 2,
            c=cfg.mean_color,
            edgecolors=cfg.mean_edge_color,
            linewidths=2,
            zorder=3,
            label="mean",
        )
        ax.annotate(
            "Mean",
            (mean.real, mean.imag),
            xytext=(10, 10),
            textcoords="offset points",
            color=cfg.mean_edge_color,
            fontsize=cfg.font_size,
            fontweight="bold",
        )

    # set last so autoscaling cannot widen them
    b = mapping.bounds
    ax.set_xlim(b.min_real, b.max_real)
    ax.set_ylim(b.min_imag, b.max_imag)

    ax.set_xlabel("Re(z)", fontsize=cfg.font_size)
    ax.set_ylabel("Im(z)", fontsize=cfg.font_size)
    if title:
        ax.set_title(title, fontsize=cfg.font_size)

    fig.tight_layout()
    fig.savefig(out_path, dpi=cfg.dpi)
    plt.close(fig)
    return out_path
