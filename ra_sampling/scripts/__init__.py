"""Rank-approximation scripts package.

Contains the probability model, sample size search and sampling helpers.
"""

from .binomial import (
    binomial_terms,
    log_binomial_coefficients,
)
from .curves import (
    calculate_confidence_curve,
    calculate_probability_curve,
)
from .distinct import obtain_distinct_samples
from .probability import success_probability
from .sample_size import (
    minimum_samples_reqd,
    rank_cutoff,
    search_iteration_cap,
)
from .summation import (
    SummationMethod,
    TailSummationStrategy,
    binomial_tail,
    get_summation_strategy,
    select_summation_method,
)

__all__ = [
    # Probability model
    "log_binomial_coefficients",
    "binomial_terms",
    "binomial_tail",
    "success_probability",
    "SummationMethod",
    "TailSummationStrategy",
    "get_summation_strategy",
    "select_summation_method",
    # Sample size search
    "rank_cutoff",
    "search_iteration_cap",
    "minimum_samples_reqd",
    # Sampling
    "obtain_distinct_samples",
    # Curves
    "calculate_confidence_curve",
    "calculate_probability_curve",
]
