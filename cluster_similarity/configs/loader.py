"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that all required fields are present.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

from ..scoring.similarity import BACKENDS

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "data", "scoring"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Read a scoring configuration from YAML.

    Args:
        filepath: Location of the YAML file

    Returns:
        Parsed configuration mapping

    Raises:
        FileNotFoundError: If there is no file at filepath
        ValueError: If the file holds no document or its top level is not a mapping
        yaml.YAMLError: If the file is not valid YAML
    """
    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"No scoring config at {filepath}")

    logger.info(f"Reading scoring config {filepath}")
    with path.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Scoring config {filepath} is empty")
    if not isinstance(config, dict):
        raise ValueError(
            f"Scoring config {filepath} must be a mapping, got {type(config).__name__}"
        )

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    if "data" in config:
        labels = config["data"].get("labels", {})
        if "path" not in labels:
            issues.append("Missing data.labels.path")
        columns = labels.get("columns", [])
        if columns is not None and not isinstance(columns, list):
            issues.append(f"data.labels.columns must be a list, got {type(columns).__name__}")

    if "scoring" in config:
        scoring = config["scoring"]
        backend = scoring.get("backend", "pairwise")
        if backend not in BACKENDS:
            issues.append(f"Unknown scoring.backend: {backend} (expected one of {list(BACKENDS)})")

        n_jobs = scoring.get("n_jobs", 1)
        if not isinstance(n_jobs, int) or isinstance(n_jobs, bool) or n_jobs == 0 or n_jobs < -1:
            issues.append(f"scoring.n_jobs must be a positive integer or -1, got {n_jobs}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Look up a setting by its dotted key, e.g. "data.labels.delimiter".

    Returns default as soon as a segment is absent or lands on a non-mapping,
    so "scoring.n_jobs" falls back cleanly when the scoring section is missing.
    """
    node: Any = config
    for segment in path.split("."):
        if not isinstance(node, dict) or segment not in node:
            return default
        node = node[segment]
    return node
