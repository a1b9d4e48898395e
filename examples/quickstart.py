"""Quick start guide for EmbedRank - Embedding Similarity and Ranking.

This example shows the minimal code needed to:
1. Compare two vectors with each metric
2. Find the nearest labeled samples to a query
3. Rank a whole collection and compute its centroid
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from embedrank import (
    SampleSet,
    cosine_similarity,
    euclidean_distance,
    manhattan_distance,
    find_nearest,
    get_euclidean_config,
)


def main():
    print("="*60)
    print("EmbedRank Quick Start")
    print("="*60)

    # Step 1: Pairwise metrics
    print("\n1. Comparing two vectors...")
    a, b = [1.0, 2.0], [4.0, 6.0]
    print(f"   cosine similarity:  {cosine_similarity(a, b):.4f}")
    print(f"   euclidean distance: {euclidean_distance(a, b):.4f}")
    print(f"   manhattan distance: {manhattan_distance(a, b):.4f}")

    # Step 2: Nearest neighbors over plain sample records
    print("\n2. Finding nearest samples...")
    samples = [
        {"embedding": [1.0, 0.0], "label": "A"},
        {"embedding": [0.0, 1.0], "label": "B"},
        {"embedding": [1.0, 1.0], "label": "C"},
    ]

    for result in find_nearest([1.0, 1.0], samples, top_k=2):
        print(f"   {result.label}: similarity={result.similarity_score:.3f}")

    for result in find_nearest([1.0, 0.0], samples, get_euclidean_config(top_k=2)):
        print(f"   {result.label}: distance={result.distance:.3f}")

    # Step 3: A labeled collection of random embeddings
    print("\n3. Ranking a sample set...")
    np.random.seed(42)
    vectors = np.random.randn(20, 32)

    sample_set = SampleSet(dimension=32, normalize=True)
    sample_set.add(vectors, labels=[f"item_{i}" for i in range(len(vectors))])

    query = vectors[3] + 0.1 * np.random.randn(32)
    ranking = sample_set.rank_all(query)

    print(f"   Best match: {ranking[0].label} ({ranking[0].similarity_score:.3f})")
    print(f"   Worst match: {ranking[-1].label} ({ranking[-1].similarity_score:.3f})")
    print(f"   Centroid norm: {np.linalg.norm(sample_set.centroid()):.3f}")

    print("\n" + "="*60)
    print("Done!")
    print("="*60)


if __name__ == "__main__":
    main()
