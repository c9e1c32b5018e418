import logging
import math
from typing import Optional

from ra_sampling.scripts.parameter import probability_tolerance, search_iteration_slack
from ra_sampling.scripts.probability import success_probability

logger = logging.getLogger("ra_sampling.scripts.sample_size")


def rank_cutoff(tau: float, n: int) -> int:
    """Size of the top band accepted as a match: t = ceil(tau * n / 100).

    Args:
        tau: Rank-approximation as a percentage of n (0-100]
        n: Population size

    Returns:
        Rank cutoff t
    """
    return math.ceil(tau * n / 100.0)


def search_iteration_cap(n: int) -> int:
    """Upper bound on binary search iterations for a population of n.

    Every halving step may cost one extra iteration for the lower-bound
    increment, hence the factor two.
    """
    return 2 * int(n).bit_length() + search_iteration_slack


def minimum_samples_reqd(
    n: int,
    k: int,
    tau: float,
    alpha: float,
    max_iterations: Optional[int] = None,
) -> int:
    """Minimum number of random samples so that k of them are rank-approximate.

    Binary search over the integers in [k, n] for the smallest m such that
    success_probability(n, k, m, t) >= alpha, with t = ceil(tau * n / 100).
    The search relies on success_probability being non-decreasing in m; the
    iteration count is capped in case floating point noise breaks that.

    One sample beyond the search result is added as a safety margin.

    Args:
        n: Population size
        k: Number of neighbors required within the rank-approximation
        tau: Rank-approximation as a percentage of n (0-100]
        alpha: Desired success probability (0-1]
        max_iterations: Override for the iteration cap

    Returns:
        Required sample size in [k, n]

    Raises:
        ValueError: If alpha is greater than 1
    """
    if alpha > 1.0:
        raise ValueError(f"Success probability must not exceed 1, got {alpha}")

    # Certainty is only guaranteed by looking at every point
    if alpha == 1.0:
        logger.debug(f"alpha=1 requested, full scan of {n} points required")
        return n

    t = rank_cutoff(tau, n)
    ub = n
    lb = k
    m = lb

    if max_iterations is None:
        max_iterations = search_iteration_cap(n)

    for iteration in range(max_iterations):
        prob = success_probability(n, k, m, t)
        logger.debug(
            f"Iteration {iteration}: m={m}, lb={lb}, ub={ub}, prob={prob:.6f}"
        )

        if prob > alpha:
            if prob - alpha < probability_tolerance or ub < lb + 2:
                break
            ub = m
        elif prob < alpha:
            if m == lb:
                m += 1
                continue
            lb = m
        else:
            break

        m = (ub + lb) // 2
    else:
        logger.warning(
            f"Sample size search for n={n}, k={k}, tau={tau}, alpha={alpha} did "
            f"not converge in {max_iterations} iterations; using upper bound {ub}"
        )
        return min(ub + 1, n)

    return min(m + 1, n)
