"""Scoring settings shared by the CLI and library callers."""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any
import json

from .similarity import BACKENDS

logger = logging.getLogger(__name__)


@dataclass
class ScoringConfig:
    """
    Configuration for similarity scoring.

    Stored alongside scoring output so a score matrix can be reproduced.
    """
    backend: str = "pairwise"
    n_jobs: int = 1

    def validate(self) -> None:
        """Validate configuration values."""
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown similarity backend: {self.backend}")
        if self.n_jobs == 0 or self.n_jobs < -1:
            raise ValueError(f"n_jobs must be a positive integer or -1, got {self.n_jobs}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScoringConfig":
        """Create from dictionary."""
        return cls(**d)

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved scoring config to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "ScoringConfig":
        """Load configuration from JSON file."""
        with open(filepath, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ScoringConfig":
        """
        Create from main config dictionary.

        Args:
            config: Main config dictionary

        Returns:
            ScoringConfig instance
        """
        scoring_config = config.get("scoring", {})
        return cls(
            backend=scoring_config.get("backend", "pairwise"),
            n_jobs=scoring_config.get("n_jobs", 1)
        )
