from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from complex_stats.config import PlotConfig
from complex_stats.mapping import compute_mapping


def _font(size: int):
    return ImageFont.load_default(size=size)


def _draw_vertical_text(img: Image.Image, text: str, center, fill, font):
    """Draw text rotated 90 degrees counter-clockwise (reads bottom to top)."""
    probe = ImageDraw.Draw(img)
    left, top, right, bottom = probe.textbbox((0, 0), text, font=font)
    label = Image.new("RGBA", (right - left + 2, bottom - top + 2), (0, 0, 0, 0))
    ImageDraw.Draw(label).text((1 - left, 1 - top), text, fill=fill, font=font)
    label = label.rotate(90, expand=True)
    cx, cy = center
    img.paste(label, (int(round(cx - label.width / 2)), int(round(cy - label.height / 2))), label)


def _dot(draw: ImageDraw.ImageDraw, x, y, r, fill, outline, width):
    draw.ellipse([x - r, y - r, x + r, y + r], fill=fill, outline=outline, width=width)


def render_plot(
    values: Sequence[complex],
    *,
    mean: Optional[complex] = None,
    config: Optional[PlotConfig] = None,
):
    """
    Render a complex-plane scatter plot to an RGB array (height, width, 3).

    Layout:
      - light grid, 10 steps per axis across the padded bounds
      - real / imaginary axes, only where zero lies inside the plot area
      - one dot per value, plus a larger "Mean" dot if `mean` is given
      - every other grid value labeled along the bottom and left edges

    An empty `values` gives a blank background.
    """
    cfg = config or PlotConfig()
    width, height, margin = cfg.width, cfg.height, cfg.margin

    # validates geometry even when there is nothing to draw
    mapping = compute_mapping(values, width, height, margin, cfg.tick_steps)

    img = Image.new("RGB", (width, height), cfg.background_color)
    if mapping is None:
        return np.asarray(img, dtype=np.uint8)

    draw = ImageDraw.Draw(img)

    # grid
    for x in mapping.to_pixel_x(mapping.real_ticks()):
        draw.line([(x, margin), (x, height - margin)], fill=cfg.grid_color, width=1)
    for y in mapping.to_pixel_y(mapping.imag_ticks()):
        draw.line([(margin, y), (width - margin, y)], fill=cfg.grid_color, width=1)

    # axes
    label_font = _font(cfg.font_size)
    axis_y = mapping.real_axis_y()
    if axis_y is not None:
        draw.line([(margin, axis_y), (width - margin, axis_y)], fill=cfg.axis_color, width=2)
        draw.text((width - 20, axis_y - 5), "Real", fill=cfg.axis_color, font=label_font, anchor="ms")
    axis_x = mapping.imag_axis_x()
    if axis_x is not None:
        draw.line([(axis_x, margin), (axis_x, height - margin)], fill=cfg.axis_color, width=2)
        _draw_vertical_text(img, "Imaginary", (axis_x + 20, 30), cfg.axis_color, label_font)

    # points
    for x, y in mapping.to_pixels(values):
        _dot(draw, x, y, cfg.point_radius, cfg.point_color, cfg.point_edge_color, 1)

    # mean, same mapping as the points
    if mean is not None:
        mx, my = mapping.to_pixel(mean)
        _dot(draw, mx, my, cfg.mean_radius, cfg.mean_color, cfg.mean_edge_color, 2)
        draw.text((mx + 10, my - 10), "Mean", fill=cfg.mean_edge_color, font=label_font, anchor="ls")

    # scale labels
    tick_font = _font(cfg.tick_font_size)
    for value, text in mapping.real_tick_labels():
        x = mapping.to_pixel_x(value)
        draw.text((x, height - 10), text, fill=cfg.label_color, font=tick_font, anchor="ms")
    for value, text in mapping.imag_tick_labels():
        y = mapping.to_pixel_y(value)
        draw.text((margin - 5, y + 3), text, fill=cfg.label_color, font=tick_font, anchor="rs")

    return np.asarray(img, dtype=np.uint8)


def save_png(img, path: str | Path) -> Path:
    """Write an RGB array to a PNG file, creating parent folders."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.asarray(img, dtype=np.uint8)).save(out_path, format="PNG")
    return out_path
