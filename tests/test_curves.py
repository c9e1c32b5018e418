import numpy as np
import pytest

from ra_sampling.scripts.curves import (
    calculate_confidence_curve,
    calculate_probability_curve,
)
from ra_sampling.scripts.sample_size import minimum_samples_reqd, rank_cutoff


def test_confidence_curve_shape_and_columns():
    curve = calculate_confidence_curve(1000, 1, 1.0, num_points=10)

    assert list(curve.columns) == ["alpha", "sample_size", "sample_fraction", "speedup"]
    assert len(curve) == 10
    assert curve["alpha"].iloc[0] == pytest.approx(0.5)
    assert curve["alpha"].iloc[-1] == pytest.approx(0.99)


def test_confidence_curve_matches_direct_calls():
    n, k, tau = 5000, 3, 2.0
    curve = calculate_confidence_curve(n, k, tau, num_points=5)

    for _, row in curve.iterrows():
        expected = minimum_samples_reqd(n, k, tau, float(row["alpha"]))
        assert row["sample_size"] == expected
        assert row["sample_fraction"] == pytest.approx(expected / n)
        assert row["speedup"] == pytest.approx(n / expected)


def test_confidence_curve_grows_with_alpha():
    curve = calculate_confidence_curve(10000, 5, 1.0)
    assert curve["sample_size"].is_monotonic_increasing


def test_probability_curve_is_non_decreasing():
    curve = calculate_probability_curve(2000, 5, 2.0)

    assert list(curve.columns) == ["sample_size", "probability", "binomial_sf"]
    assert curve["sample_size"].iloc[0] == 5
    assert curve["sample_size"].iloc[-1] == 2000
    assert np.all(np.diff(curve["probability"].to_numpy()) >= -1e-12)


def test_probability_curve_agrees_with_binomial_before_boundary():
    n, k, tau = 2000, 5, 2.0
    t = rank_cutoff(tau, n)
    curve = calculate_probability_curve(n, k, tau, num_points=80)

    inside = curve[curve["sample_size"] <= n - t + k - 1]
    assert len(inside) > 0
    np.testing.assert_allclose(
        inside["probability"], inside["binomial_sf"], rtol=0, atol=1e-9
    )


def test_probability_curve_custom_range():
    curve = calculate_probability_curve(
        1000, 1, 1.0, min_sample_size=100, max_sample_size=200, num_points=11
    )
    assert curve["sample_size"].tolist() == list(range(100, 201, 10))
