"""Type definitions for rank-approximate sample sizing.

Contains data classes that define the inputs and outputs of the service.
This provides a clear contract between callers (CLI, search code) and the
calculation logic.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ra_sampling.scripts.sample_size import rank_cutoff as compute_rank_cutoff
from ra_sampling.scripts.summation import SummationMethod


@dataclass
class RankApproxInputs:
    """Input parameters for a sample size calculation."""

    n: int  # Population size
    k: int  # Neighbors required within the rank-approximation
    tau: float  # As percentage of n (e.g., 5.0 for the top 5%)
    alpha: float  # As decimal (e.g., 0.95)
    seed: Optional[int] = None  # For drawing candidates

    @property
    def rank_cutoff(self) -> int:
        """Size of the top band, t = ceil(tau * n / 100)."""
        return compute_rank_cutoff(self.tau, self.n)

    @property
    def alpha_percent(self) -> float:
        """Success probability as percentage (0-100)."""
        return self.alpha * 100.0

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "RankApproxInputs":
        """Build inputs from a plain mapping, e.g. parsed JSON."""
        seed = values.get("seed")
        return cls(
            n=int(values["n"]),
            k=int(values["k"]),
            tau=float(values["tau"]),
            alpha=float(values["alpha"]),
            seed=int(seed) if seed is not None else None,
        )


@dataclass
class CurvePoint:
    """A single point on the confidence curve."""

    alpha: float
    sample_size: int
    sample_fraction: float
    speedup: float


@dataclass
class SampleSizeResults:
    """Results from a sample size calculation."""

    # Metadata
    success: bool = True
    error_message: Optional[str] = None

    # Echoed inputs
    n: int = 0
    k: int = 0
    tau: float = 0.0
    alpha: float = 0.0

    # Core results
    rank_cutoff: int = 0
    sample_size: int = 0
    achieved_probability: Optional[float] = None
    summation_method: Optional[SummationMethod] = None

    confidence_curve: List[CurvePoint] = field(default_factory=list)

    @property
    def sample_fraction(self) -> float:
        """Share of the population that is examined."""
        if self.n <= 0:
            return 0.0
        return self.sample_size / self.n

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to dictionary for JSON output."""
        result = {
            "success": self.success,
            "error_message": self.error_message,
            "n": self.n,
            "k": self.k,
            "tau": self.tau,
            "alpha": self.alpha,
            "rank_cutoff": self.rank_cutoff,
            "sample_size": self.sample_size,
            "sample_fraction": self.sample_fraction,
            "achieved_probability": self.achieved_probability,
            "summation_method": (
                self.summation_method.value if self.summation_method else None
            ),
        }

        if self.confidence_curve:
            result["confidence_curve"] = [
                {
                    "alpha": p.alpha,
                    "sample_size": p.sample_size,
                    "sample_fraction": p.sample_fraction,
                    "speedup": p.speedup,
                }
                for p in self.confidence_curve
            ]
        else:
            result["confidence_curve"] = None

        return result

    @classmethod
    def error(cls, message: str) -> "SampleSizeResults":
        """Create an error result."""
        return cls(success=False, error_message=message)
