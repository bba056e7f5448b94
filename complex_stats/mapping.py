"""
Data-space -> pixel-space mapping for complex-plane scatter plots.

Given the parsed values and a drawing surface (width x height, with a fixed
margin on every side), compute:
- padded plot bounds (10% of each axis range on both ends)
- affine maps real -> pixel x and imag -> pixel y (y grows downward)
- gridline tick positions and the subset that gets a label
- pixel positions of the real and imaginary axes, if they are on screen

Main entrypoint:
    compute_mapping(values, width, height, margin) -> PlotMapping | None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

PAD_FRACTION = 0.1
DEFAULT_MARGIN = 40
DEFAULT_TICK_STEPS = 10


@dataclass(frozen=True)
class PlotBounds:
    min_real: float
    max_real: float
    min_imag: float
    max_imag: float

    @property
    def real_span(self) -> float:
        return self.max_real - self.min_real

    @property
    def imag_span(self) -> float:
        return self.max_imag - self.min_imag


def padded_bounds(values: Sequence[complex]) -> PlotBounds:
    """
    Min/max of each axis, widened by 10% of the range on both ends.

    A zero range (every value equal on that axis) is treated as 1.
    """
    z = np.asarray(values, dtype=np.complex128)
    min_re, max_re = float(z.real.min()), float(z.real.max())
    min_im, max_im = float(z.imag.min()), float(z.imag.max())

    re_range = (max_re - min_re) or 1.0
    im_range = (max_im - min_im) or 1.0
    re_pad = re_range * PAD_FRACTION
    im_pad = im_range * PAD_FRACTION

    return PlotBounds(
        min_real=min_re - re_pad,
        max_real=max_re + re_pad,
        min_imag=min_im - im_pad,
        max_imag=max_im + im_pad,
    )


@dataclass(frozen=True)
class PlotMapping:
    bounds: PlotBounds
    width: float
    height: float
    margin: float = DEFAULT_MARGIN
    tick_steps: int = DEFAULT_TICK_STEPS

    # ---- forward ----

    def to_pixel_x(self, real):
        b = self.bounds
        return self.margin + (real - b.min_real) / b.real_span * (self.width - 2 * self.margin)

    def to_pixel_y(self, imag):
        b = self.bounds
        return self.height - self.margin - (imag - b.min_imag) / b.imag_span * (self.height - 2 * self.margin)

    def to_pixel(self, z: complex) -> Tuple[float, float]:
        return float(self.to_pixel_x(z.real)), float(self.to_pixel_y(z.imag))

    def to_pixels(self, values: Sequence[complex]) -> np.ndarray:
        """Nx2 array of (x, y) pixel coordinates."""
        z = np.asarray(values, dtype=np.complex128)
        return np.stack([self.to_pixel_x(z.real), self.to_pixel_y(z.imag)], axis=-1)

    # ---- inverse ----

    def from_pixel_x(self, x):
        b = self.bounds
        return b.min_real + (x - self.margin) / (self.width - 2 * self.margin) * b.real_span

    def from_pixel_y(self, y):
        b = self.bounds
        return b.min_imag + (self.height - self.margin - y) / (self.height - 2 * self.margin) * b.imag_span

    # ---- ticks ----

    def real_ticks(self) -> np.ndarray:
        step = self.bounds.real_span / self.tick_steps
        return self.bounds.min_real + np.arange(self.tick_steps + 1) * step

    def imag_ticks(self) -> np.ndarray:
        step = self.bounds.imag_span / self.tick_steps
        return self.bounds.min_imag + np.arange(self.tick_steps + 1) * step

    def real_tick_labels(self) -> List[Tuple[float, str]]:
        """(value, label) for every other real tick."""
        return [(float(v), f"{v:.1f}") for v in self.real_ticks()[::2]]

    def imag_tick_labels(self) -> List[Tuple[float, str]]:
        """(value, label) for every other imaginary tick, skipping ones at ~0."""
        return [(float(v), f"{v:.1f}i") for v in self.imag_ticks()[::2] if abs(v) > 0.01]

    # ---- axes ----

    def real_axis_y(self) -> Optional[float]:
        """Pixel y of the line imag == 0, or None if it is outside the plot area."""
        y = float(self.to_pixel_y(0.0))
        if self.margin <= y <= self.height - self.margin:
            return y
        return None

    def imag_axis_x(self) -> Optional[float]:
        """Pixel x of the line real == 0, or None if it is outside the plot area."""
        x = float(self.to_pixel_x(0.0))
        if self.margin <= x <= self.width - self.margin:
            return x
        return None


def compute_mapping(
    values: Sequence[complex],
    width: float,
    height: float,
    margin: float = DEFAULT_MARGIN,
    tick_steps: int = DEFAULT_TICK_STEPS,
) -> Optional[PlotMapping]:
    """
    Build the pixel mapping for `values` on a width x height surface.

    Returns None for an empty set: there is nothing to draw.
    """
    if margin < 0:
        raise ValueError(f"margin must be >= 0, got {margin}")
    if width <= 2 * margin or height <= 2 * margin:
        raise ValueError(
            f"Drawing area {width}x{height} leaves no room inside margin {margin}."
        )
    if tick_steps < 1:
        raise ValueError(f"tick_steps must be >= 1, got {tick_steps}")

    if len(values) == 0:
        return None

    bounds = padded_bounds(values)
    if not np.all(np.isfinite([
        bounds.min_real, bounds.max_real, bounds.min_imag, bounds.max_imag,
        bounds.real_span, bounds.imag_span,
    ])):
        raise ValueError(f"Values span too wide a range to plot: {bounds}")

    return PlotMapping(
        bounds=bounds,
        width=width,
        height=height,
        margin=margin,
        tick_steps=tick_steps,
    )
