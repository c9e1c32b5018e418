# ra_sampling/__init__.py

# Sample sizing for rank-approximate nearest-neighbor search.

from .scripts import (
    minimum_samples_reqd,
    obtain_distinct_samples,
    success_probability,
)

__version__ = "0.1.0"

__all__ = [
    "minimum_samples_reqd",
    "obtain_distinct_samples",
    "success_probability",
]
