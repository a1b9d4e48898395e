"""
Distance and similarity metrics for vector comparisons.

This module provides functions to measure how similar or different two vectors are.
They are the building blocks of the ranking engine, which scores every candidate
sample against a query with one of them.

Cosine similarity measures the angle between vectors (ranges from -1 to 1, where 1 means
identical direction). It's commonly used for text embeddings since it ignores magnitude
and focuses on semantic similarity. Euclidean and Manhattan distance measure how far
apart two points are, so lower values mean closer matches.

All metrics reject vectors of different dimensions with DimensionMismatchError.
"""

from typing import Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt

from embedrank.exceptions import DimensionMismatchError

Vector = npt.NDArray[np.float64]
VectorLike = Union[Vector, Sequence[float]]


def as_vector(v: VectorLike) -> Vector:
    """Convert a vector-like input to a 1D float64 array (never mutates the input)."""
    arr = np.asarray(v, dtype=np.float64)
    if arr.ndim != 1:
        raise DimensionMismatchError(f"Expected a 1D vector, got array with shape {arr.shape}")
    return arr


def check_dimensions(v1: VectorLike, v2: VectorLike) -> Tuple[Vector, Vector]:
    """
    Convert both inputs to arrays and verify they have the same dimension.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Tuple of the two vectors as float64 arrays

    Raises:
        DimensionMismatchError: If the dimensions differ
    """
    a = as_vector(v1)
    b = as_vector(v2)
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(
            f"Vector dimension {a.shape[0]} doesn't match vector dimension {b.shape[0]}"
        )
    return a, b


def cosine_similarity(v1: VectorLike, v2: VectorLike) -> float:
    """
    Compute cosine similarity between two vectors.

    Cosine similarity measures the cosine of the angle between two vectors.
    It ranges from -1 (opposite directions) to 1 (same direction).
    For normalized vectors, this is equivalent to their dot product.

    Args:
        v1: First vector (list or 1D numpy array)
        v2: Second vector (same dimension as v1)

    Returns:
        Similarity score between -1 and 1 (higher means more similar).
        Returns 0.0 if either vector has zero magnitude.

    Example:
        >>> cosine_similarity([1.0, 0.0], [1.0, 0.0])
        1.0
        >>> cosine_similarity([0.0, 0.0], [1.0, 2.0])
        0.0
    """
    a, b = check_dimensions(v1, v2)

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)

    # Zero magnitude has no direction
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))


def euclidean_distance(v1: VectorLike, v2: VectorLike) -> float:
    """
    Compute Euclidean (L2) distance between two vectors.

    This is the straight-line distance between two points. It ranges from
    0 (identical vectors) to infinity.

    Args:
        v1: First vector
        v2: Second vector (same dimension as v1)

    Returns:
        Distance (lower means more similar)

    Example:
        >>> euclidean_distance([1.0, 2.0], [4.0, 6.0])
        5.0
    """
    a, b = check_dimensions(v1, v2)
    return float(np.linalg.norm(a - b))


def manhattan_distance(v1: VectorLike, v2: VectorLike) -> float:
    """
    Compute Manhattan (L1) distance between two vectors.

    Sum of absolute per-dimension differences. Less sensitive to a single
    large difference than Euclidean distance.

    Args:
        v1: First vector
        v2: Second vector (same dimension as v1)

    Returns:
        Distance (lower means more similar)

    Example:
        >>> manhattan_distance([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        9.0
    """
    a, b = check_dimensions(v1, v2)
    return float(np.sum(np.abs(a - b)))
