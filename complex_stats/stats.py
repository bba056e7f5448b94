"""Mean and variance of a set of complex values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Statistics:
    mean: complex
    variance: float


EMPTY_STATISTICS = Statistics(mean=0j, variance=0.0)


def compute_statistics(values: Sequence[complex]) -> Statistics:
    """
    Centroid mean and mean squared distance to the centroid.

    Real and imaginary parts are averaged independently. The variance is
        (1/n) * sum(|z_k - mean|^2)
    which is always a real number >= 0.

    An empty set gives mean 0 and variance 0.
    """
    if len(values) == 0:
        return EMPTY_STATISTICS

    z = np.asarray(values, dtype=np.complex128)
    re = z.real
    im = z.imag

    mean_re = float(np.mean(re))
    mean_im = float(np.mean(im))

    d_re = re - mean_re
    d_im = im - mean_im
    variance = float(np.mean(d_re * d_re + d_im * d_im))

    return Statistics(mean=complex(mean_re, mean_im), variance=variance)
