"""
Brute-force neighbor ranking.

This module scores a query vector against a collection of labeled samples and
returns them best match first. The search is exact: every sample is compared
with the query using the configured metric.

The ranking flow:
1. Resolve the config (method, top_k, threshold) up front
2. Look up the metric's function, score field and sort direction
3. Score every sample, dropping those that fail the threshold
4. Stable-sort by score (descending for similarity, ascending for distance)
5. Keep the first top_k results (find_nearest only)

Samples are mappings with an "embedding" key and any other metadata, e.g.
{"embedding": [1.0, 0.0], "label": "A"}.
"""

from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence
from dataclasses import dataclass
import copy
import logging

from embedrank.config import Metric, RankingConfig, get_default_config
from embedrank.distance import (
    VectorLike,
    as_vector,
    cosine_similarity,
    euclidean_distance,
    manhattan_distance,
)
from embedrank.exceptions import InvalidOptionError

logger = logging.getLogger(__name__)

Sample = Mapping[str, Any]

SIMILARITY_FIELD = "similarity_score"
DISTANCE_FIELD = "distance"


@dataclass(frozen=True)
class MetricSpec:
    """How to score with a metric and which way its scores sort."""

    function: Callable[[VectorLike, VectorLike], float]
    score_field: str
    descending: bool

    def passes(self, score: float, threshold: Optional[float]) -> bool:
        """Whether score satisfies the threshold in this metric's direction."""
        if threshold is None:
            return True
        if self.descending:
            return score >= threshold
        return score <= threshold


METRICS: Dict[Metric, MetricSpec] = {
    Metric.COSINE: MetricSpec(cosine_similarity, SIMILARITY_FIELD, descending=True),
    Metric.EUCLIDEAN: MetricSpec(euclidean_distance, DISTANCE_FIELD, descending=False),
    Metric.MANHATTAN: MetricSpec(manhattan_distance, DISTANCE_FIELD, descending=False),
}


@dataclass(frozen=True, eq=False)
class ScoredSample:
    """
    A sample together with its score against a query.

    Exactly one of similarity_score / distance is set, depending on whether
    the metric measures similarity (cosine) or distance (euclidean, manhattan).
    The wrapped sample is a deep copy, so results never share mutable fields
    with the caller's samples. Score fields already present in a sample (e.g.
    when re-ranking earlier results) are dropped from the copy.

    Supports read-only mapping access over the original fields plus the score
    field, e.g. result["label"] or result["similarity_score"].
    """

    sample: Dict[str, Any]
    similarity_score: Optional[float] = None
    distance: Optional[float] = None

    def __post_init__(self):
        if (self.similarity_score is None) == (self.distance is None):
            raise ValueError("ScoredSample needs exactly one of similarity_score or distance")

    @property
    def score_field(self) -> str:
        return SIMILARITY_FIELD if self.similarity_score is not None else DISTANCE_FIELD

    @property
    def score(self) -> float:
        """The active score, whichever field it lives in."""
        return self.similarity_score if self.similarity_score is not None else self.distance

    @property
    def embedding(self) -> Any:
        return self.sample["embedding"]

    @property
    def label(self) -> Any:
        return self.sample.get("label")

    def to_dict(self) -> Dict[str, Any]:
        """Flattened record: original fields plus the score field."""
        record = dict(self.sample)
        record[self.score_field] = self.score
        return record

    def __getitem__(self, key: str) -> Any:
        if key == self.score_field:
            return self.score
        return self.sample[key]

    def __contains__(self, key: object) -> bool:
        return key == self.score_field or key in self.sample

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def keys(self):
        return self.to_dict().keys()

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default


def _resolve_config(config: Optional[RankingConfig], **overrides: Any) -> RankingConfig:
    """Merge keyword overrides into the config (explicit params take precedence)."""
    if config is None:
        config = get_default_config()
    elif not isinstance(config, RankingConfig):
        raise InvalidOptionError(f"config must be a RankingConfig, got {type(config).__name__}")
    return config.replace(**overrides)


def _score_samples(
    query: VectorLike,
    samples: Sequence[Sample],
    spec: MetricSpec,
    threshold: Optional[float] = None,
) -> List[ScoredSample]:
    """Score every sample against the query and sort best match first."""
    query_vec = as_vector(query)

    scored: List[ScoredSample] = []
    for i, sample in enumerate(samples):
        try:
            embedding = sample["embedding"]
        except (KeyError, TypeError) as exc:
            raise InvalidOptionError(f"Sample {i} has no 'embedding' field") from exc

        score = spec.function(query_vec, embedding)
        if not spec.passes(score, threshold):
            continue

        record = copy.deepcopy({
            key: value
            for key, value in dict(sample).items()
            if key not in (SIMILARITY_FIELD, DISTANCE_FIELD)
        })
        scored.append(ScoredSample(sample=record, **{spec.score_field: score}))

    # sorted() is stable, and stays stable with reverse=True
    return sorted(scored, key=lambda s: s.score, reverse=spec.descending)


def find_nearest(
    query: VectorLike,
    samples: Sequence[Sample],
    config: Optional[RankingConfig] = None,
    *,
    method: Optional[str] = None,
    top_k: Optional[int] = None,
    threshold: Optional[float] = None,
) -> List[ScoredSample]:
    """
    Find the samples most similar to a query vector.

    Args:
        query: Query vector
        samples: Mappings with an "embedding" key and arbitrary metadata
        config: RankingConfig to use (default: cosine, top_k resolved below)
        method: Override config.method
        top_k: Override config.top_k. When neither sets it, 1 result is returned
               without a threshold and every match is returned with one.
        threshold: Override config.threshold. Similarity metrics keep
                   score >= threshold, distance metrics keep distance <= threshold.

    Returns:
        At most top_k ScoredSample results, best match first. top_k <= 0 or an
        empty sample collection gives an empty list.

    Raises:
        InvalidOptionError: Unknown method, bad option types or a sample without an embedding
        DimensionMismatchError: A sample's embedding doesn't match the query's dimension

    Example:
        >>> samples = [
        ...     {"embedding": [1, 0], "label": "A"},
        ...     {"embedding": [0, 1], "label": "B"},
        ...     {"embedding": [1, 1], "label": "C"},
        ... ]
        >>> [r.label for r in find_nearest([1, 1], samples, top_k=2)]
        ['C', 'A']
    """
    config = _resolve_config(config, method=method, top_k=top_k, threshold=threshold)
    limit = config.resolve_top_k(len(samples))
    if limit <= 0:
        return []

    spec = METRICS[config.method]
    results = _score_samples(query, samples, spec, threshold=config.threshold)

    logger.debug(
        "find_nearest method=%s candidates=%d kept=%d top_k=%d",
        config.method.value, len(samples), len(results), limit,
    )
    return results[:limit]


def rank_all(
    query: VectorLike,
    samples: Sequence[Sample],
    config: Optional[RankingConfig] = None,
    *,
    method: Optional[str] = None,
) -> List[ScoredSample]:
    """
    Score and sort every sample against a query.

    Unlike find_nearest, threshold and top_k are ignored: the result always has
    one entry per sample. Useful for inspecting the full ranking.

    Args:
        query: Query vector
        samples: Mappings with an "embedding" key and arbitrary metadata
        config: RankingConfig to take the method from (default: cosine)
        method: Override config.method

    Returns:
        One ScoredSample per sample, best match first
    """
    config = _resolve_config(config, method=method)
    spec = METRICS[config.method]
    results = _score_samples(query, samples, spec)

    logger.debug("rank_all method=%s candidates=%d", config.method.value, len(samples))
    return results


def rank_by_similarity(query: VectorLike, samples: Sequence[Sample]) -> List[ScoredSample]:
    """Rank every sample by cosine similarity to the query (highest first)."""
    return rank_all(query, samples, method=Metric.COSINE)
