"""Sample sizing service module.

Usage:
    from ra_sampling.sampling import RankApproxInputs, RankApproxService

    inputs = RankApproxInputs(n=100000, k=10, tau=5.0, alpha=0.95)
    if RankApproxService.is_ready(inputs):
        results = RankApproxService.calculate(inputs)
"""

from ra_sampling.sampling.service import RankApproxService
from ra_sampling.sampling.types import (
    CurvePoint,
    RankApproxInputs,
    SampleSizeResults,
)

__all__ = [
    "CurvePoint",
    "RankApproxInputs",
    "RankApproxService",
    "SampleSizeResults",
]
