from typing import Optional

import numpy as np
import pandas as pd
from scipy import stats

from ra_sampling.scripts.parameter import (
    curve_max_alpha,
    curve_min_alpha,
    curve_num_alpha_points,
    curve_num_sample_points,
)
from ra_sampling.scripts.probability import success_probability
from ra_sampling.scripts.sample_size import minimum_samples_reqd, rank_cutoff


def calculate_confidence_curve(
    n: int,
    k: int,
    tau: float,
    min_alpha: float = curve_min_alpha,
    max_alpha: float = curve_max_alpha,
    num_points: int = curve_num_alpha_points,
) -> pd.DataFrame:
    """Calculate the sample size needed across a range of confidence levels.

    Shows how the number of candidates grows as the required success
    probability approaches 1, and the resulting speedup over a linear scan.

    Args:
        n: Population size
        k: Number of neighbors required within the rank-approximation
        tau: Rank-approximation as a percentage of n (0-100]
        min_alpha: Lowest confidence level in the curve
        max_alpha: Highest confidence level in the curve
        num_points: Number of points to calculate in curve

    Returns:
        DataFrame with columns: alpha, sample_size, sample_fraction, speedup
    """
    alphas = np.linspace(min_alpha, max_alpha, num_points)

    sample_sizes = [minimum_samples_reqd(n, k, tau, float(alpha)) for alpha in alphas]

    curve_df = pd.DataFrame(
        {
            "alpha": alphas,
            "sample_size": sample_sizes,
            "sample_fraction": [m / n for m in sample_sizes],
            "speedup": [n / m for m in sample_sizes],
        }
    )

    return curve_df


def calculate_probability_curve(
    n: int,
    k: int,
    tau: float,
    min_sample_size: Optional[int] = None,
    max_sample_size: Optional[int] = None,
    num_points: int = curve_num_sample_points,
) -> pd.DataFrame:
    """Calculate success probability vs sample size.

    The model probability is reported next to the exact binomial survival
    function P(X >= k), X ~ Binomial(m, t / n). The two agree except where
    the model treats the remaining budget as a guaranteed success.

    Args:
        n: Population size
        k: Number of neighbors required within the rank-approximation
        tau: Rank-approximation as a percentage of n (0-100]
        min_sample_size: Smallest sample size in the curve (defaults to k)
        max_sample_size: Largest sample size in the curve (defaults to n)
        num_points: Number of points to calculate in curve

    Returns:
        DataFrame with columns: sample_size, probability, binomial_sf
    """
    t = rank_cutoff(tau, n)
    eps = t / n

    if min_sample_size is None:
        min_sample_size = k
    if max_sample_size is None:
        max_sample_size = n

    sample_sizes = np.unique(
        np.linspace(min_sample_size, max_sample_size, num_points).astype(int)
    )

    probability_df = pd.DataFrame(
        {
            "sample_size": sample_sizes,
            "probability": [
                success_probability(n, k, int(m), t) for m in sample_sizes
            ],
            "binomial_sf": stats.binom.sf(k - 1, sample_sizes, eps),
        }
    )

    return probability_df
