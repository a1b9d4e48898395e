"""
Pytest configuration and shared fixtures for EmbedRank tests
"""

import pytest
import numpy as np
from typing import Dict, List


@pytest.fixture
def abc_samples() -> List[Dict]:
    """Three labeled 2D samples: A on the x axis, B on the y axis, C on the diagonal."""
    return [
        {"embedding": [1.0, 0.0], "label": "A"},
        {"embedding": [0.0, 1.0], "label": "B"},
        {"embedding": [1.0, 1.0], "label": "C"},
    ]


@pytest.fixture
def sample_vectors() -> np.ndarray:
    """Generate sample vectors for testing."""
    np.random.seed(42)
    return np.random.rand(10, 16)


@pytest.fixture
def dimension() -> int:
    """Standard vector dimension for testing."""
    return 16
