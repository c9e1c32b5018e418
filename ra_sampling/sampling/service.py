"""Sample size service for rank-approximate neighbor search.

This module provides the main entry points for callers that size a
candidate sampling pass and then pick which points to examine.
"""

import logging
from typing import List, Optional

import numpy as np

from ra_sampling.sampling.types import CurvePoint, RankApproxInputs, SampleSizeResults
from ra_sampling.scripts.curves import calculate_confidence_curve
from ra_sampling.scripts.distinct import obtain_distinct_samples
from ra_sampling.scripts.probability import success_probability
from ra_sampling.scripts.sample_size import minimum_samples_reqd
from ra_sampling.scripts.summation import select_summation_method

logger = logging.getLogger("ra_sampling.sampling.service")


class RankApproxService:
    """High-level service for rank-approximate sample sizing."""

    @staticmethod
    def validate_inputs(inputs: RankApproxInputs) -> List[str]:
        """Validate inputs for a sample size calculation.

        Args:
            inputs: Inputs to validate

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if inputs.n <= 0:
            errors.append("Population size must be greater than 0")

        if inputs.k < 1:
            errors.append("Number of neighbors must be at least 1")
        elif inputs.n > 0 and inputs.k > inputs.n:
            errors.append("Number of neighbors must not exceed the population size")

        if inputs.tau <= 0:
            errors.append("Rank-approximation must be greater than 0%")
        elif inputs.tau > 100.0:
            errors.append("Rank-approximation must not exceed 100%")

        if inputs.alpha <= 0:
            errors.append("Success probability must be greater than 0")
        elif inputs.alpha > 1.0:
            errors.append("Success probability must not exceed 1")

        return errors

    @staticmethod
    def is_ready(inputs: RankApproxInputs) -> bool:
        return len(RankApproxService.validate_inputs(inputs)) == 0

    @staticmethod
    def calculate(
        inputs: RankApproxInputs, include_curve: bool = False
    ) -> SampleSizeResults:
        """Calculate the minimum sample size for the given inputs.

        Args:
            inputs: Sample size inputs
            include_curve: Also compute the confidence curve

        Returns:
            SampleSizeResults; an error result if the inputs are invalid
        """
        errors = RankApproxService.validate_inputs(inputs)
        if errors:
            return SampleSizeResults.error("; ".join(errors))

        try:
            n, k = inputs.n, inputs.k
            t = inputs.rank_cutoff

            sample_size = minimum_samples_reqd(n, k, inputs.tau, inputs.alpha)
            achieved = success_probability(n, k, sample_size, t)

            confidence_curve = []
            if include_curve:
                curve_df = calculate_confidence_curve(n, k, inputs.tau)
                confidence_curve = [
                    CurvePoint(
                        alpha=float(row["alpha"]),
                        sample_size=int(row["sample_size"]),
                        sample_fraction=float(row["sample_fraction"]),
                        speedup=float(row["speedup"]),
                    )
                    for _, row in curve_df.iterrows()
                ]

            logger.info(
                f"n={n}, k={k}, tau={inputs.tau}%, alpha={inputs.alpha}: "
                f"{sample_size} samples (t={t}, P={achieved:.4f})"
            )

            return SampleSizeResults(
                success=True,
                n=n,
                k=k,
                tau=inputs.tau,
                alpha=inputs.alpha,
                rank_cutoff=t,
                sample_size=sample_size,
                achieved_probability=achieved,
                summation_method=(
                    select_summation_method(k, sample_size) if k > 1 else None
                ),
                confidence_curve=confidence_curve,
            )

        except Exception as e:
            logger.error(f"Error in sample size calculation: {e}")
            return SampleSizeResults.error(str(e))

    @staticmethod
    def draw_candidates(
        inputs: RankApproxInputs, rng=None, sample_size: Optional[int] = None
    ) -> np.ndarray:
        """Size the sampling pass and draw the distinct candidate indices.

        Args:
            inputs: Sample size inputs
            rng: numpy Generator or seed; falls back to inputs.seed
            sample_size: Result of an earlier calculate(); searched again when None

        Returns:
            Ascending array of distinct indices in [0, n)

        Raises:
            ValueError: If the inputs are invalid
        """
        errors = RankApproxService.validate_inputs(inputs)
        if errors:
            raise ValueError("; ".join(errors))

        if rng is None:
            rng = inputs.seed

        if sample_size is None:
            sample_size = minimum_samples_reqd(
                inputs.n, inputs.k, inputs.tau, inputs.alpha
            )
        return obtain_distinct_samples(sample_size, inputs.n, rng)
