import logging

import numpy as np

logger = logging.getLogger("ra_sampling.scripts.distinct")


def obtain_distinct_samples(
    num_samples: int, range_upper_bound: int, rng=None
) -> np.ndarray:
    """Draw samples with replacement and keep the distinct indices.

    This is sampling with replacement followed by deduplication, so the
    result usually holds fewer than ``num_samples`` indices.

    Args:
        num_samples: Number of uniform draws
        range_upper_bound: Draws are taken from [0, range_upper_bound)
        rng: numpy Generator, seed, or None for fresh entropy

    Returns:
        Ascending array of distinct sampled indices

    Raises:
        ValueError: If num_samples is negative or range_upper_bound is not positive
    """
    if num_samples < 0:
        raise ValueError(f"Number of samples must be non-negative, got {num_samples}")
    if range_upper_bound <= 0:
        raise ValueError(
            f"Range upper bound must be positive, got {range_upper_bound}"
        )

    rng = np.random.default_rng(rng)

    # Keep track of how often each point is sampled.
    draws = rng.integers(0, range_upper_bound, size=num_samples)
    sampled_points = np.bincount(draws, minlength=range_upper_bound)

    distinct_samples = np.flatnonzero(sampled_points > 0)
    logger.debug(
        f"Drew {num_samples} samples over {range_upper_bound} points, "
        f"{distinct_samples.size} distinct"
    )
    return distinct_samples
