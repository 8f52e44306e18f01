"""
Co-membership correlation between two cluster-label assignments.

Given two label vectors over the same q items, each induces a q x q
co-membership matrix C where C[i][j] = 1 iff items i and j share a label.
The similarity is the correlation between the two matrices as defined by
Ben-Hur, Elisseeff & Guyon (2004):

    S11 = <C1, C1>,  S22 = <C2, C2>,  S12 = <C1, C2>
    similarity = S12 / max(1, sqrt(S11 * S22))

Key Design Decisions:
- The matrices are never materialized; only the three dot products are
  accumulated, over pairs i < j and doubled for the symmetric half
- The diagonal is excluded from all three sums
- The max(1, ...) guard maps all-singleton partitions to 0.0 instead of 0/0
- Labels are categorical: only equality is used, never ordering or magnitude
- Missing labels (None, NaN) are never co-membered with any other item

Backends:
- "pairwise": the literal O(q^2) loop, works for any equality-comparable labels
- "contingency": closed form from the pair confusion matrix, O(q) after
  factorization, needs hashable labels
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np
import pandas as pd
from sklearn.metrics.cluster import pair_confusion_matrix

logger = logging.getLogger(__name__)

BACKENDS = ("pairwise", "contingency")


class InvalidInput(ValueError):
    """Raised when two label vectors do not describe the same items."""


@dataclass(frozen=True)
class CoMembershipSums:
    """Dot products between two implicit co-membership matrices."""
    n_items: int
    s11: int
    s22: int
    s12: int

    @property
    def score(self) -> float:
        return self.s12 / max(1.0, math.sqrt(self.s11 * self.s22))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_items": int(self.n_items),
            "s11": int(self.s11),
            "s22": int(self.s22),
            "s12": int(self.s12),
            "score": float(self.score)
        }


def _check_lengths(l1: Sequence[Any], l2: Sequence[Any]) -> int:
    if len(l1) != len(l2):
        raise InvalidInput(
            f"Label vectors must have equal length, got {len(l1)} and {len(l2)}"
        )
    return len(l1)


def _is_missing(label: Any) -> bool:
    return pd.api.types.is_scalar(label) and bool(pd.isna(label))


def _as_label_list(labels: Sequence[Any]) -> List[Any]:
    """
    Copy labels into a positional list.

    Series are read by position, not by index label. Each missing label
    becomes a fresh sentinel equal only to itself, so it forms a singleton
    cluster in both backends.
    """
    if isinstance(labels, (pd.Series, pd.Index, np.ndarray)):
        labels = labels.tolist()
    return [object() if _is_missing(label) else label for label in labels]


def _pairwise_sums(l1: Sequence[Any], l2: Sequence[Any], q: int) -> CoMembershipSums:
    s11 = s22 = s12 = 0
    for i in range(q):
        l1_i = l1[i]
        l2_i = l2[i]
        for j in range(i + 1, q):
            same_1 = l1_i == l1[j]
            same_2 = l2_i == l2[j]
            # x2 for the (j, i) half of each symmetric matrix
            if same_1:
                s11 += 2
            if same_2:
                s22 += 2
            if same_1 and same_2:
                s12 += 2
    return CoMembershipSums(n_items=q, s11=s11, s22=s22, s12=s12)


def _as_codes(labels: List[Any]) -> np.ndarray:
    """Factorize labels by equality into integer cluster codes."""
    values = np.empty(len(labels), dtype=object)
    values[:] = labels
    codes, _ = pd.factorize(values)
    return codes


def _contingency_sums(l1: List[Any], l2: List[Any], q: int) -> CoMembershipSums:
    # pair_confusion_matrix counts ordered pairs, which already matches the
    # doubled sums of the pairwise loop
    confusion = pair_confusion_matrix(_as_codes(l1), _as_codes(l2))
    s12 = int(confusion[1, 1])
    return CoMembershipSums(
        n_items=q,
        s11=int(confusion[1, 0]) + s12,
        s22=int(confusion[0, 1]) + s12,
        s12=s12
    )


def comembership_sums(
    l1: Sequence[Any],
    l2: Sequence[Any],
    backend: str = "pairwise"
) -> CoMembershipSums:
    """
    Accumulate S11, S22 and S12 for two label vectors.

    Args:
        l1: Cluster labels of the first assignment, one per item
        l2: Cluster labels of the second assignment, same items in the same order
        backend: "pairwise" or "contingency"

    Returns:
        CoMembershipSums instance

    Raises:
        InvalidInput: If the label vectors differ in length
        ValueError: If the backend is unknown
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown similarity backend: {backend}")

    q = _check_lengths(l1, l2)
    if q < 2:
        return CoMembershipSums(n_items=q, s11=0, s22=0, s12=0)

    l1 = _as_label_list(l1)
    l2 = _as_label_list(l2)

    if backend == "contingency":
        sums = _contingency_sums(l1, l2, q)
    else:
        sums = _pairwise_sums(l1, l2, q)

    logger.debug(f"Co-membership sums ({backend}, q={q}): "
                 f"S11={sums.s11} S22={sums.s22} S12={sums.s12}")
    return sums


def similarity(
    l1: Sequence[Any],
    l2: Sequence[Any],
    backend: str = "pairwise"
) -> float:
    """
    Correlation between the co-membership matrices of two label vectors.

    Returns a value in [0, 1]: 1.0 for identical partitions with at least one
    shared pair, 0.0 when either assignment has no co-membered pair at all.

    Args:
        l1: Cluster labels of the first assignment
        l2: Cluster labels of the second assignment
        backend: "pairwise" or "contingency"

    Returns:
        Similarity score

    Raises:
        InvalidInput: If the label vectors differ in length
    """
    return comembership_sums(l1, l2, backend=backend).score
