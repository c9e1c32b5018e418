import numpy as np


def log_binomial_coefficients(m: int, j) -> np.ndarray:
    """Compute log C(m, j) for every entry of ``j``.

    The coefficient is built with the multiplicative recurrence

        C(m, j) = m x (m - 1) / 2 x ... x (m - j' + 1) / j'

    where j' = min(j, m - j), i.e. starting at m and multiplying by
    (m - i + 1) / i for i = 2..j'. The factors are accumulated as logarithms
    so that no intermediate value overflows for large m.

    Args:
        m: Number of draws
        j: Integer or array of integers in [0, m]

    Returns:
        Array of log coefficients with the shape of ``j``
    """
    j = np.asarray(j, dtype=np.int64)
    j_trans = np.minimum(j, m - j)

    i = np.arange(1, m // 2 + 1, dtype=np.float64)
    log_factors = np.log(m - i + 1) - np.log(i)
    log_coeffs = np.concatenate(([0.0], np.cumsum(log_factors)))

    return log_coeffs[j_trans]


def binomial_terms(m: int, j, eps: float) -> np.ndarray:
    """Binomial probability mass C(m, j) eps^j (1 - eps)^(m - j) for each j.

    Args:
        m: Number of draws
        j: Integer or array of integers in [0, m]
        eps: Per-draw hit probability (0-1)

    Returns:
        Array of probabilities with the shape of ``j``
    """
    j = np.asarray(j, dtype=np.int64)

    # log(0) is -inf here, which exp() maps back to an exact zero term
    with np.errstate(divide="ignore", invalid="ignore"):
        log_eps = np.log(eps)
        log_miss = np.log1p(-eps)
        hits = np.where(j > 0, j * log_eps, 0.0)
        misses = np.where(m - j > 0, (m - j) * log_miss, 0.0)

    return np.exp(log_binomial_coefficients(m, j) + hits + misses)
