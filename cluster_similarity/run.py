"""
Command-line runner for co-membership similarity scoring.

Usage:
    python -m cluster_similarity.run --config configs/config.yaml

The runner performs the following steps:
1. Load and validate configuration
2. Load the label table (one column per clustering run)
3. Score every pair of label columns
4. Save the score matrix and run metadata
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional
from datetime import datetime
import json

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def run_scoring(
    config_path: str,
    labels_path: Optional[str] = None,
    backend: Optional[str] = None,
    n_jobs: Optional[int] = None,
    output_dir: Optional[str] = None
) -> Dict[str, Any]:
    """
    Score all pairs of label assignments described by a configuration file.

    Args:
        config_path: Path to the configuration YAML file
        labels_path: If provided, read labels from this file instead of config default
        backend: If provided, overrides scoring.backend
        n_jobs: If provided, overrides scoring.n_jobs
        output_dir: If provided, write outputs to this directory instead of config default

    Returns:
        Dictionary with the score matrix and paths to written files
    """
    from .configs import load_config, validate_config, get_config_value
    from .data_loading import load_label_table, validate_label_table
    from .scoring import ScoringConfig, similarity_matrix

    config = load_config(config_path)
    issues = validate_config(config)
    for issue in issues:
        logger.warning(f"Config issue: {issue}")

    setup_logging(get_config_value(config, "global.log_level", "INFO"))

    scoring_config = ScoringConfig.from_config(config)
    if backend is not None:
        scoring_config.backend = backend
    if n_jobs is not None:
        scoring_config.n_jobs = n_jobs
    scoring_config.validate()

    effective_labels = labels_path or get_config_value(config, "data.labels.path")
    if effective_labels is None:
        raise ValueError("No label file given (set data.labels.path or pass --labels)")

    df_labels = load_label_table(
        effective_labels,
        delimiter=get_config_value(config, "data.labels.delimiter", ","),
        columns=get_config_value(config, "data.labels.columns", [])
    )
    for issue in validate_label_table(df_labels):
        logger.warning(f"Label table issue: {issue}")

    matrix = similarity_matrix(
        df_labels,
        backend=scoring_config.backend,
        n_jobs=scoring_config.n_jobs
    )

    out_dir = Path(output_dir or get_config_value(config, "global.output_dir", "artifacts"))
    out_dir.mkdir(parents=True, exist_ok=True)

    matrix_path = out_dir / "similarity_matrix.csv"
    matrix.to_csv(matrix_path)
    logger.info(f"Saved similarity matrix to {matrix_path}")

    scoring_config.save(str(out_dir / "scoring_config.json"))

    metadata = {
        "run_timestamp": datetime.now().isoformat(),
        "config_path": config_path,
        "labels_path": str(effective_labels),
        "backend": scoring_config.backend,
        "n_items": len(df_labels),
        "columns": [str(col) for col in df_labels.columns]
    }
    metadata_path = out_dir / "run_metadata.json"
    with open(metadata_path, "w") as f:
        json.dump(metadata, f, indent=2)
    logger.info(f"Saved run metadata to {metadata_path}")

    return {
        "output_dir": str(out_dir),
        "matrix": matrix,
        "metadata": metadata
    }


def main(argv=None):
    """Main entry point for the scorer."""
    parser = argparse.ArgumentParser(
        description="Score agreement between clustering runs by co-membership correlation"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--labels",
        type=str,
        default=None,
        help="Label CSV file (overrides config)"
    )
    parser.add_argument(
        "--backend",
        type=str,
        choices=["pairwise", "contingency"],
        default=None,
        help="Similarity backend (overrides config)"
    )
    parser.add_argument(
        "--n-jobs",
        type=int,
        default=None,
        help="Number of parallel workers (overrides config)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        result = run_scoring(
            args.config,
            labels_path=args.labels,
            backend=args.backend,
            n_jobs=args.n_jobs,
            output_dir=args.output_dir
        )
        logger.info(f"Scoring completed successfully, outputs in {result['output_dir']}")
        return 0
    except Exception as e:
        logger.exception(f"Scoring failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
