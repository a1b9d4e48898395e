"""
EmbedRank - Embedding Similarity and Neighbor Ranking

A small library for comparing embedding vectors (cosine similarity, Euclidean and
Manhattan distance) and ranking a collection of labeled samples against a query.
"""

__version__ = "0.1.0"

from embedrank.distance import cosine_similarity, euclidean_distance, manhattan_distance
from embedrank.vector_utils import normalize_vector, is_normalized, mean_vector
from embedrank.config import (
    Metric,
    RankingConfig,
    get_default_config,
    get_euclidean_config,
    get_manhattan_config,
)
from embedrank.ranking import ScoredSample, find_nearest, rank_all, rank_by_similarity
from embedrank.sample_set import SampleSet
from embedrank.exceptions import EmbedRankError, DimensionMismatchError, InvalidOptionError

__all__ = [
    "cosine_similarity",
    "euclidean_distance",
    "manhattan_distance",
    "normalize_vector",
    "is_normalized",
    "mean_vector",
    "Metric",
    "RankingConfig",
    "get_default_config",
    "get_euclidean_config",
    "get_manhattan_config",
    "ScoredSample",
    "find_nearest",
    "rank_all",
    "rank_by_similarity",
    "SampleSet",
    "EmbedRankError",
    "DimensionMismatchError",
    "InvalidOptionError",
]
