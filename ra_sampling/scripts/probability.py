from ra_sampling.scripts.summation import binomial_tail


def success_probability(n: int, k: int, m: int, t: int) -> float:
    """Probability that at least k of m uniform samples fall in the top t of n.

    Args:
        n: Population size
        k: Number of samples required inside the top-t band (k >= 1)
        m: Number of samples drawn
        t: Rank cutoff, size of the top band (t <= n)

    Returns:
        Success probability (0-1), non-decreasing in m
    """
    # Faster implementation for k = 1.
    if k == 1:
        if m > n - t:
            return 1.0

        eps = t / n
        return 1.0 - (1.0 - eps) ** m

    if m < k:
        return 0.0

    if m > n - t + k - 1:
        return 1.0

    if t == 0:
        return 0.0

    return binomial_tail(m, k, t / n)
