"""Co-membership similarity scoring between cluster-label assignments."""

from .similarity import (
    similarity,
    comembership_sums,
    CoMembershipSums,
    InvalidInput,
    BACKENDS
)
from .batch import similarity_matrix
from .config import ScoringConfig

__all__ = [
    "similarity",
    "comembership_sums",
    "CoMembershipSums",
    "InvalidInput",
    "BACKENDS",
    "similarity_matrix",
    "ScoringConfig"
]
