"""
Tests for vector utility functions.

These tests verify the helpers that work on vectors outside of ranking:
- Normalization to unit length
- Checking whether a vector is normalized
- Centroid (mean vector) computation
"""

import numpy as np
import pytest
from embedrank.vector_utils import normalize_vector, is_normalized, mean_vector
from embedrank.exceptions import DimensionMismatchError


def test_normalize_vector():
    """Normalized vector should have L2 norm of 1.0"""
    v = [3.0, 4.0]  # Magnitude is 5.0
    normalized = normalize_vector(v)

    assert np.isclose(np.linalg.norm(normalized), 1.0), "Normalized vector should have norm 1.0"

    # Check direction is preserved (just scaled)
    assert np.allclose(normalized, [0.6, 0.8]), "Direction should be preserved"


def test_normalize_3d_vector():
    """Each component of [1, 1, 1] becomes 1/sqrt(3)"""
    normalized = normalize_vector([1.0, 1.0, 1.0])
    assert np.allclose(normalized, 1.0 / np.sqrt(3))


def test_normalize_zero_vector():
    """Normalizing zero vector should return an unchanged copy"""
    v = np.array([0.0, 0.0, 0.0])
    normalized = normalize_vector(v)

    assert np.array_equal(normalized, v), "Zero vector should remain zero after normalization"
    assert normalized is not v, "Zero vector should still come back as a new object"


def test_normalize_empty_vector():
    """Empty vector normalizes to an empty vector"""
    assert normalize_vector([]).shape == (0,)


def test_normalize_does_not_mutate_input():
    """The original vector should be left untouched"""
    v = np.array([5.0, 0.0])
    normalize_vector(v)
    assert np.array_equal(v, [5.0, 0.0])


def test_normalize_is_idempotent(sample_vectors):
    """Normalizing twice gives the same result as normalizing once"""
    for v in sample_vectors:
        once = normalize_vector(v)
        assert np.allclose(normalize_vector(once), once)


def test_is_normalized_unit_vectors():
    """Axis-aligned unit vectors are normalized"""
    assert is_normalized([1.0, 0.0, 0.0])
    assert is_normalized([0.0, 1.0, 0.0])


def test_is_normalized_approximate():
    """Vectors within epsilon of unit length count as normalized"""
    assert is_normalized([0.6, 0.8])
    assert is_normalized([0.7071067, 0.7071067])


def test_is_normalized_rejects_other_lengths():
    """Vectors whose length is not close to 1 are not normalized"""
    assert not is_normalized([3.0, 4.0])
    assert not is_normalized([2.0, 0.0])


def test_is_normalized_zero_and_empty():
    """Zero and empty vectors are never normalized"""
    assert not is_normalized([0.0, 0.0, 0.0])
    assert not is_normalized([])


def test_is_normalized_custom_epsilon():
    """Tighter epsilon rejects what a looser one accepts"""
    v = [0.999999, 0.0]  # squared norm is ~0.999998
    assert not is_normalized(v, epsilon=1e-7)
    assert is_normalized(v, epsilon=1e-5)


def test_normalized_vectors_pass_check(sample_vectors):
    """Every normalized non-zero vector passes is_normalized"""
    for v in sample_vectors:
        assert is_normalized(normalize_vector(v))


def test_mean_vector_basic():
    """Centroid of three 2D points"""
    assert np.allclose(mean_vector([[1, 2], [3, 4], [5, 6]]), [3.0, 4.0])


def test_mean_vector_empty():
    """Empty collection gives an empty vector"""
    result = mean_vector([])
    assert result.shape == (0,)
    assert result.tolist() == []


def test_mean_vector_single():
    """Mean of one vector is that vector"""
    assert np.allclose(mean_vector([[1.5, -2.0, 3.0]]), [1.5, -2.0, 3.0])


def test_mean_vector_accepts_2d_array(sample_vectors):
    """A 2D numpy array is treated as a collection of rows"""
    assert np.allclose(mean_vector(sample_vectors), sample_vectors.mean(axis=0))


def test_mean_vector_accepts_generator():
    """Any iterable of vectors works"""
    result = mean_vector(np.array([float(i), 0.0]) for i in range(3))
    assert np.allclose(result, [1.0, 0.0])


def test_mean_vector_does_not_mutate_inputs():
    """Input vectors should be left untouched"""
    vectors = [np.array([1.0, 2.0]), np.array([3.0, 4.0])]
    mean_vector(vectors)
    assert np.array_equal(vectors[0], [1.0, 2.0])
    assert np.array_equal(vectors[1], [3.0, 4.0])


def test_mean_vector_dimension_mismatch():
    """Vectors of different dimensions are rejected"""
    with pytest.raises(DimensionMismatchError):
        mean_vector([[1.0, 2.0], [1.0, 2.0, 3.0]])
