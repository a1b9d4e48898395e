"""Configuration for ranking calls.

Usage:
    from embedrank import find_nearest, RankingConfig

    # Default config (cosine, single best match)
    results = find_nearest(query, samples)

    # Custom config
    config = RankingConfig(method="euclidean", top_k=3)
    results = find_nearest(query, samples, config)

    # From file
    config = RankingConfig.from_json("ranking.json")
"""

from typing import Dict, Any, Optional
from enum import Enum
import json
import numbers
from dataclasses import dataclass, asdict

from embedrank.exceptions import InvalidOptionError


class Metric(str, Enum):
    """Comparison methods understood by the ranking engine."""

    COSINE = "cosine"
    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"

    @classmethod
    def parse(cls, value: Any) -> "Metric":
        """Coerce a Metric or its string name, rejecting anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        valid = [m.value for m in cls]
        raise InvalidOptionError(f"method must be one of {valid}, got {value!r}")


@dataclass
class RankingConfig:
    """Configuration for find_nearest / rank_all.

    Options:
        method: Metric to compare with ("cosine", "euclidean" or "manhattan")
        top_k: Maximum results for find_nearest. None means 1 when no threshold
               is set, otherwise every sample within the threshold.
        threshold: Similarity floor (cosine) or distance ceiling (euclidean,
                   manhattan). None keeps every sample.

    Metadata:
        config_name: Label used in repr and saved files
    """

    method: Metric = Metric.COSINE
    top_k: Optional[int] = None
    threshold: Optional[float] = None

    # Metadata
    config_name: str = "default"

    def __post_init__(self):
        """Validate and coerce configuration."""
        self.method = Metric.parse(self.method)

        if self.top_k is not None:
            if isinstance(self.top_k, bool) or not isinstance(self.top_k, numbers.Integral):
                raise InvalidOptionError(f"top_k must be an integer or None, got {self.top_k!r}")
            self.top_k = int(self.top_k)

        if self.threshold is not None:
            if isinstance(self.threshold, bool) or not isinstance(self.threshold, numbers.Real):
                raise InvalidOptionError(f"threshold must be a number or None, got {self.threshold!r}")
            self.threshold = float(self.threshold)

    def resolve_top_k(self, sample_count: int) -> int:
        """Effective top_k for find_nearest over sample_count candidates."""
        if self.top_k is not None:
            return self.top_k
        if self.threshold is None:
            return 1
        return sample_count

    def replace(self, **overrides: Any) -> "RankingConfig":
        """Copy of this config with the non-None overrides applied."""
        values = self.to_dict()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return RankingConfig.from_dict(values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        values = asdict(self)
        values["method"] = self.method.value
        return values

    def to_json(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RankingConfig':
        """Load configuration from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_json(cls, filepath: str) -> 'RankingConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    def __repr__(self) -> str:
        """String representation."""
        options = [self.method.value]
        if self.top_k is not None:
            options.append(f"top_k={self.top_k}")
        if self.threshold is not None:
            options.append(f"threshold={self.threshold}")

        return f"RankingConfig({self.config_name}, {', '.join(options)})"


# Preset configurations

def get_default_config() -> RankingConfig:
    """Default configuration: cosine similarity, best single match."""
    return RankingConfig(config_name="default")


def get_euclidean_config(top_k: Optional[int] = None) -> RankingConfig:
    """Configuration ranking by straight-line distance."""
    return RankingConfig(config_name="euclidean", method=Metric.EUCLIDEAN, top_k=top_k)


def get_manhattan_config(top_k: Optional[int] = None) -> RankingConfig:
    """Configuration ranking by sum of absolute differences."""
    return RankingConfig(config_name="manhattan", method=Metric.MANHATTAN, top_k=top_k)
