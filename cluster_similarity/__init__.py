"""
Cluster Similarity - co-membership correlation scoring

This package scores the agreement between two cluster-label assignments over
the same items, using the correlation between their induced co-membership
matrices (Ben-Hur, Elisseeff & Guyon, 2004). It is meant to be called by a
clustering-stability procedure that compares label assignments from repeated
subsample-and-cluster runs.

Key Design Decisions:
- Co-membership matrices are never built; only their dot products are summed
- Labels are categorical identifiers compared by equality only
- Mismatched label-vector lengths fail fast with InvalidInput
"""

from .scoring import similarity, comembership_sums, similarity_matrix, InvalidInput

__version__ = "1.0.0"

__all__ = ["similarity", "comembership_sums", "similarity_matrix", "InvalidInput"]
