"""
Scoring every pair in a collection of label vectors.

Each pair is an independent call to the pairwise similarity, so pairs are
dispatched through joblib. The result is the raw symmetric score matrix;
no summary statistics are computed here.
"""

import logging
from itertools import combinations
from typing import Any, Dict, List, Mapping, Sequence, Union

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from .similarity import BACKENDS, InvalidInput, similarity

logger = logging.getLogger(__name__)

LabelCollection = Union[pd.DataFrame, Mapping[str, Sequence[Any]]]


def _as_label_lists(label_vectors: LabelCollection) -> Dict[str, List[Any]]:
    """Normalize a DataFrame or mapping into name -> plain list of labels."""
    if isinstance(label_vectors, pd.DataFrame):
        return {str(col): label_vectors[col].tolist() for col in label_vectors.columns}

    result = {}
    for name, labels in label_vectors.items():
        if isinstance(labels, (pd.Series, np.ndarray)):
            result[str(name)] = labels.tolist()
        else:
            result[str(name)] = list(labels)
    return result


def similarity_matrix(
    label_vectors: LabelCollection,
    backend: str = "pairwise",
    n_jobs: int = 1
) -> pd.DataFrame:
    """
    Compute the similarity of every pair of label vectors.

    Args:
        label_vectors: DataFrame whose columns are label vectors, or a mapping
            of name -> label vector. All vectors must cover the same items.
        backend: Similarity backend ("pairwise" or "contingency")
        n_jobs: Number of joblib workers (1 runs in-process, -1 uses all cores)

    Returns:
        Symmetric DataFrame of scores indexed and columned by vector name.
        The diagonal holds each vector's self-similarity.

    Raises:
        InvalidInput: If the vectors differ in length
        ValueError: If the backend is unknown or there are no vectors
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown similarity backend: {backend}")

    labels = _as_label_lists(label_vectors)
    names = list(labels.keys())
    if not names:
        raise ValueError("No label vectors provided")

    lengths = {name: len(vec) for name, vec in labels.items()}
    if len(set(lengths.values())) > 1:
        raise InvalidInput(f"Label vectors must have equal length, got {lengths}")

    index_pairs = [(i, i) for i in range(len(names))] + list(combinations(range(len(names)), 2))
    logger.info(f"Scoring {len(index_pairs)} label-vector pairs "
                f"({len(names)} vectors, {lengths[names[0]]} items, backend={backend})")

    scores = Parallel(n_jobs=n_jobs)(
        delayed(similarity)(labels[names[i]], labels[names[j]], backend)
        for i, j in index_pairs
    )

    matrix = np.zeros((len(names), len(names)))
    for (i, j), score in zip(index_pairs, scores):
        matrix[i, j] = score
        matrix[j, i] = score

    return pd.DataFrame(matrix, index=names, columns=names)
