# complex_stats/utils.py
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Sequence

import pandas as pd

from complex_stats.stats import Statistics


def format_complex(z: complex, digits: int = 4) -> str:
    """
    Format like '1.0000+2.0000i'.

    Pure reals drop the imaginary part, pure imaginaries drop the real part.
    """
    if z.imag == 0:
        return f"{z.real:.{digits}f}"
    if z.real == 0:
        return f"{z.imag:.{digits}f}i"
    sign = "+" if z.imag >= 0 else ""
    return f"{z.real:.{digits}f}{sign}{z.imag:.{digits}f}i"


def format_results(stats: Statistics, count: int | None = None, digits: int = 4) -> str:
    """Plain-text summary of the statistics, one item per line."""
    lines = [
        f"Mean: {format_complex(stats.mean, digits)}",
        f"Variance: {stats.variance:.{digits}f}",
    ]
    if count is not None:
        lines.append(f"Count: {count}")
    return "\n".join(lines)


def default_plot_filename(day: dt.date | None = None) -> str:
    day = day or dt.date.today()
    return f"complex_plot_{day.isoformat()}.png"


def save_points_csv(values: Sequence[complex], path: str | Path) -> Path:
    """Write values as a two-column (real, imag) CSV."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(
        {
            "real": [z.real for z in values],
            "imag": [z.imag for z in values],
        },
        columns=["real", "imag"],
    )
    df.to_csv(out_path, index=False)
    return out_path
