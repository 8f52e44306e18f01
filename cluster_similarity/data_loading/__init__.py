"""Data loading module for cluster-label tables."""

from .loaders import load_label_table, validate_label_table

__all__ = ["load_label_table", "validate_label_table"]
