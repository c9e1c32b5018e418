"""Binomial tail summation strategies.

The probability that at least k of m draws land in the rank-approximate band
is

    sum_{j = k}^{m} C(m, j) eps^j (1 - eps)^(m - j)

which also equals

    1 - sum_{j = 0}^{k - 1} C(m, j) eps^j (1 - eps)^(m - j)

So it is either an (m - k) term or a k term summation. Each form is a
strategy class; the cheaper one is picked with ``select_summation_method``.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional, Tuple, Type

import numpy as np

from ra_sampling.scripts.binomial import binomial_terms

logger = logging.getLogger("ra_sampling.scripts.summation")


class SummationMethod(Enum):
    """Available forms of the binomial tail."""

    COMPLEMENT = "complement"
    TAIL = "tail"

    @classmethod
    def from_string(cls, value: str) -> "SummationMethod":
        """Convert string to SummationMethod enum."""
        for method in cls:
            if method.value == value.lower():
                return method
        raise ValueError(f"Unknown summation method: {value}")


class TailSummationStrategy(ABC):
    """Abstract base class for binomial tail summation strategies.

    A strategy seeds the running sum with one closed-form term, accumulates
    the terms in ``term_bounds`` and post-processes the total.
    """

    @property
    @abstractmethod
    def method(self) -> SummationMethod:
        """Return the summation method this strategy handles."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Which sum this strategy evaluates."""
        pass

    @abstractmethod
    def term_bounds(self, k: int, m: int) -> Tuple[int, int]:
        """Half-open range of j values accumulated by the loop."""
        pass

    @abstractmethod
    def seed_term(self, m: int, eps: float) -> float:
        """Term added to the sum before the loop."""
        pass

    def finalize(self, total: float) -> float:
        return total

    def term_count(self, k: int, m: int) -> int:
        lb, ub = self.term_bounds(k, m)
        return max(ub - lb, 0)

    def evaluate(self, m: int, k: int, eps: float) -> float:
        """Evaluate P(at least k of m draws hit) with hit probability eps.

        Args:
            m: Number of draws
            k: Required number of hits
            eps: Per-draw hit probability (0-1)

        Returns:
            Probability clipped to [0, 1]
        """
        lb, ub = self.term_bounds(k, m)
        total = self.seed_term(m, eps)

        if ub > lb:
            j = np.arange(lb, ub)
            total += float(np.sum(binomial_terms(m, j, eps)))

        return min(max(self.finalize(total), 0.0), 1.0)


class ComplementSummationStrategy(TailSummationStrategy):
    """1 - sum_{j = 0}^{k - 1}, used when 2k < m.

    Sums j = 1..k-1 and adds the j = 0 term (1 - eps)^m separately.
    """

    @property
    def method(self) -> SummationMethod:
        return SummationMethod.COMPLEMENT

    @property
    def description(self) -> str:
        return "1 - sum_{j=0}^{k-1} C(m, j) eps^j (1 - eps)^(m - j)"

    def term_bounds(self, k: int, m: int) -> Tuple[int, int]:
        return 1, k

    def seed_term(self, m: int, eps: float) -> float:
        return (1.0 - eps) ** m

    def finalize(self, total: float) -> float:
        return 1.0 - total


class TailDirectSummationStrategy(TailSummationStrategy):
    """sum_{j = k}^{m} directly, used when m <= 2k.

    Sums j = k..m-1 and adds the j = m term eps^m separately.
    """

    @property
    def method(self) -> SummationMethod:
        return SummationMethod.TAIL

    @property
    def description(self) -> str:
        return "sum_{j=k}^{m} C(m, j) eps^j (1 - eps)^(m - j)"

    def term_bounds(self, k: int, m: int) -> Tuple[int, int]:
        return k, m

    def seed_term(self, m: int, eps: float) -> float:
        return eps**m


# Registry of available strategies
_STRATEGY_REGISTRY: Dict[SummationMethod, Type[TailSummationStrategy]] = {
    SummationMethod.COMPLEMENT: ComplementSummationStrategy,
    SummationMethod.TAIL: TailDirectSummationStrategy,
}

# Cached strategy instances
_strategy_instances: Dict[SummationMethod, TailSummationStrategy] = {}


def get_summation_strategy(method: SummationMethod) -> TailSummationStrategy:
    """Get the summation strategy for a given method.

    Args:
        method: The summation method

    Returns:
        The corresponding TailSummationStrategy instance

    Raises:
        ValueError: If the method is not supported
    """
    if method not in _STRATEGY_REGISTRY:
        raise ValueError(f"Unsupported summation method: {method}")

    if method not in _strategy_instances:
        _strategy_instances[method] = _STRATEGY_REGISTRY[method]()

    return _strategy_instances[method]


def select_summation_method(k: int, m: int) -> SummationMethod:
    """Pick the form with fewer terms: the k term complement when 2k < m."""
    if 2 * k < m:
        return SummationMethod.COMPLEMENT
    return SummationMethod.TAIL


def binomial_tail(
    m: int, k: int, eps: float, method: Optional[SummationMethod] = None
) -> float:
    """Probability that at least k of m draws hit, with hit probability eps.

    Args:
        m: Number of draws
        k: Required number of hits (k >= 1)
        eps: Per-draw hit probability (0-1)
        method: Force a summation form; chosen by term count when None

    Returns:
        Probability in [0, 1]
    """
    if method is None:
        method = select_summation_method(k, m)

    strategy = get_summation_strategy(method)
    prob = strategy.evaluate(m, k, eps)
    logger.debug(
        f"Binomial tail m={m}, k={k}, eps={eps:.6g} via {method.value} "
        f"({strategy.term_count(k, m)} terms): {prob:.6g}"
    )
    return prob
