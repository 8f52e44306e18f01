"""
Data loading functions for cluster-label tables.

A label table is a CSV file where each row is one item and each column is
one clustering run's label assignment over those items. Rows must already be
aligned: row i in every column refers to the same item.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def load_label_table(
    filepath: str,
    delimiter: str = ",",
    columns: Optional[List[str]] = None
) -> pd.DataFrame:
    """
    Load a table of cluster-label assignments from CSV.

    Args:
        filepath: Path to the label file
        delimiter: Field delimiter
        columns: Columns to keep (None or empty keeps every column)

    Returns:
        DataFrame with one column per label assignment

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or a requested column is missing
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Label file not found: {filepath}")

    logger.info(f"Loading label table from {filepath} (delimiter: {repr(delimiter)})")
    df = pd.read_csv(filepath, sep=delimiter)

    if df.empty:
        raise ValueError(f"Label file is empty: {filepath}")

    if columns:
        missing = [col for col in columns if col not in df.columns]
        if missing:
            raise ValueError(f"Label file {filepath} missing columns: {missing}")
        df = df[columns]

    logger.info(f"Loaded {len(df)} items with {len(df.columns)} label columns")
    return df


def validate_label_table(df: pd.DataFrame) -> List[str]:
    """
    Check a label table for problems that would make scores meaningless.

    Args:
        df: Label table as returned by load_label_table

    Returns:
        List of issue descriptions (empty if valid)
    """
    issues = []

    if len(df.columns) < 2:
        issues.append(f"Need at least 2 label columns to compare, got {len(df.columns)}")

    missing_counts = df.isna().sum()
    for col, n_missing in missing_counts.items():
        if n_missing > 0:
            issues.append(f"Column '{col}' has {n_missing} missing labels")

    return issues
