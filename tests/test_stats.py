import numpy as np
import pytest
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from complex_stats.stats import Statistics, compute_statistics


def test_empty_set_defaults():
    stats = compute_statistics([])
    assert stats.mean == 0j
    assert stats.variance == 0.0


def test_symmetric_pair():
    stats = compute_statistics([1 + 0j, -1 + 0j])
    assert stats.mean == 0j
    assert stats.variance == 1.0


def test_single_point_has_zero_variance():
    stats = compute_statistics([3 - 4j])
    assert stats.mean == 3 - 4j
    assert stats.variance == 0.0


def test_mean_is_componentwise_centroid():
    values = [1 + 2j, 3 - 4j, 5 + 0j]
    stats = compute_statistics(values)
    np.testing.assert_allclose(stats.mean.real, 3.0)
    np.testing.assert_allclose(stats.mean.imag, -2.0 / 3.0)


def test_variance_is_mean_squared_distance():
    """
    Square corners around the origin: every point is sqrt(2) from the mean,
    so the variance is 2.
    """
    values = [1 + 1j, -1 + 1j, -1 - 1j, 1 - 1j]
    stats = compute_statistics(values)
    np.testing.assert_allclose([stats.mean.real, stats.mean.imag], [0.0, 0.0], atol=1e-15)
    np.testing.assert_allclose(stats.variance, 2.0)


def test_variance_matches_numpy_reference():
    rng = np.random.default_rng(0)
    z = rng.normal(size=50) + 1j * rng.normal(size=50)
    stats = compute_statistics(list(z))
    expected = np.mean(np.abs(z - z.mean()) ** 2)
    np.testing.assert_allclose(stats.variance, expected, rtol=1e-12)
    assert isinstance(stats.variance, float)
    assert stats.variance >= 0.0


def test_idempotent():
    values = [0.1 + 0.2j, -3.3 + 1e-3j, 7 - 2j]
    a = compute_statistics(values)
    b = compute_statistics(values)
    assert a == b
    assert isinstance(a, Statistics)


def test_statistics_is_frozen():
    stats = compute_statistics([1j])
    with pytest.raises(AttributeError):
        stats.variance = 5.0
