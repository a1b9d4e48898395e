"""
Vector helper functions that work independently of ranking.

- Normalization: scale a vector to unit length (useful before cosine comparisons)
- Normalization check: test whether a vector already has unit length
- Centroid: compute the per-dimension mean of a collection of vectors
"""

from typing import Iterable

import numpy as np

from embedrank.distance import Vector, VectorLike, as_vector
from embedrank.exceptions import DimensionMismatchError


def normalize_vector(v: VectorLike) -> Vector:
    """
    Normalize a vector to unit length (L2 norm = 1).

    Normalization is useful for cosine similarity since it allows us to use
    simple dot products instead of the full cosine formula.

    Args:
        v: Input vector (list or 1D numpy array)

    Returns:
        New vector with L2 norm = 1. A zero vector comes back as an
        unmodified copy.

    Example:
        >>> normalize_vector([3.0, 4.0])
        array([0.6, 0.8])
    """
    arr = as_vector(v)
    norm = np.linalg.norm(arr)

    # Avoid division by zero
    if norm == 0.0:
        return arr.copy()

    return arr / norm


def is_normalized(v: VectorLike, epsilon: float = 1e-6) -> bool:
    """
    Check whether a vector has unit length.

    Compares the squared L2 norm against 1, so no square root is taken.
    Zero and empty vectors are never normalized.

    Args:
        v: Input vector
        epsilon: Tolerance for the floating-point comparison

    Returns:
        True if the squared norm is within epsilon of 1
    """
    arr = as_vector(v)
    sum_squares = float(np.dot(arr, arr))
    return abs(sum_squares - 1.0) <= epsilon


def mean_vector(vectors: Iterable[VectorLike]) -> Vector:
    """
    Compute the mean (centroid) of a collection of vectors.

    Args:
        vectors: Vectors of equal dimension

    Returns:
        Per-dimension arithmetic mean. An empty collection gives an empty vector.

    Raises:
        DimensionMismatchError: If the vectors don't all share one dimension

    Example:
        >>> mean_vector([[1, 2], [3, 4], [5, 6]])
        array([3., 4.])
    """
    arrays = [as_vector(v) for v in vectors]
    if not arrays:
        return np.array([], dtype=np.float64)

    dimension = arrays[0].shape[0]
    for i, arr in enumerate(arrays):
        if arr.shape[0] != dimension:
            raise DimensionMismatchError(
                f"Vector {i} has dimension {arr.shape[0]}, expected {dimension}"
            )

    return np.mean(np.stack(arrays), axis=0)
