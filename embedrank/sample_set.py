"""
In-memory collection of labeled sample vectors.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
import logging
import numpy as np

from embedrank.config import RankingConfig, get_default_config
from embedrank.distance import Vector, VectorLike, as_vector
from embedrank.exceptions import DimensionMismatchError
from embedrank.ranking import ScoredSample, find_nearest, rank_all
from embedrank.vector_utils import mean_vector, normalize_vector

logger = logging.getLogger(__name__)


class SampleSet:
    """
    In-memory set of labeled vectors with exact nearest-neighbor ranking.

    Every query is compared against every stored sample, so this suits small
    and medium collections. Nothing is persisted; the set lives as long as
    the object does.

    IMPORTANT: This class operates on pre-embedded vectors. Converting text or
    images to vectors is the caller's responsibility.

    Example:
        >>> samples = SampleSet(dimension=2)
        >>> samples.add([[1.0, 0.0], [0.0, 1.0]], labels=["east", "north"])
        ['east', 'north']
        >>> samples.find_nearest([0.9, 0.1])[0].label
        'east'
    """

    def __init__(
        self,
        dimension: int,
        normalize: bool = False,
        config: Optional[RankingConfig] = None,
    ) -> None:
        """
        Initialize the sample set.

        Args:
            dimension: Dimensionality of vectors
            normalize: Whether to normalize vectors (and queries) to unit length
            config: Default RankingConfig for queries on this set
        """
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")

        if config is None:
            config = get_default_config()
        self.config = config

        self.dimension = dimension
        self.normalize = normalize

        # label -> stored sample record ({"embedding", "label", "metadata"})
        self._samples: Dict[str, Dict[str, Any]] = {}

        # Track next auto-generated label
        self._next_id = 0

    def _prepare(self, vector: VectorLike) -> Vector:
        """Validate dimension and apply normalization if enabled."""
        vec = as_vector(vector)
        if vec.shape[0] != self.dimension:
            raise DimensionMismatchError(
                f"Vector dimension {vec.shape[0]} doesn't match set dimension {self.dimension}"
            )

        if self.normalize:
            if not np.any(vec):
                logger.warning("Zero-magnitude vector can't be normalized; leaving it unchanged")
            vec = normalize_vector(vec)
        else:
            vec = vec.copy()

        return vec

    def add(
        self,
        vectors: Union[VectorLike, Sequence[VectorLike]],
        labels: Optional[List[str]] = None,
        metadata: Optional[List[dict]] = None,
    ) -> List[str]:
        """
        Add vectors to the set with optional labels and metadata.

        Args:
            vectors: Single vector or list of vectors of shape (dimension,)
            labels: Optional list of labels (auto-generated if not provided)
            metadata: Optional list of metadata dicts (one per vector)

        Returns:
            List of labels assigned to the added vectors

        Raises:
            DimensionMismatchError: If vector dimensions don't match set dimension
            ValueError: If number of labels or metadata doesn't match number of vectors,
                        a label is already in use, or a metadata entry is not a dict
        """
        # Handle single vector case
        if isinstance(vectors, np.ndarray):
            if vectors.ndim == 1:
                vectors = [vectors]
        elif len(vectors) > 0 and np.isscalar(vectors[0]):
            vectors = [vectors]

        num_vectors = len(vectors)

        # Auto-generate labels if not provided
        next_id = self._next_id
        if labels is None:
            labels, next_id = self._generate_labels(num_vectors)
        elif len(labels) != num_vectors:
            raise ValueError(f"Number of labels ({len(labels)}) doesn't match number of vectors ({num_vectors})")

        # Validate labels are unique
        if len(set(labels)) != len(labels):
            raise ValueError("Labels must be unique")
        for label in labels:
            if label in self._samples:
                raise ValueError(f"Label '{label}' already exists in the set")

        # Handle metadata
        if metadata is None:
            metadata = [{} for _ in range(num_vectors)]
        elif len(metadata) != num_vectors:
            raise ValueError(f"Number of metadata dicts ({len(metadata)}) doesn't match number of vectors ({num_vectors})")

        # Build every record before inserting anything
        records = []
        for vec, label, meta in zip(vectors, labels, metadata):
            try:
                meta = dict(meta)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Metadata for '{label}' must be a dict, got {type(meta).__name__}") from exc
            records.append({"embedding": self._prepare(vec), "label": label, "metadata": meta})

        for record in records:
            self._samples[record["label"]] = record
        self._next_id = next_id
        logger.debug("Added %d samples (total %d)", num_vectors, len(self._samples))

        return list(labels)

    def _generate_labels(self, count: int) -> Tuple[List[str], int]:
        """Next `count` unused sample_<n> labels and the counter value after them."""
        labels = []
        next_id = self._next_id
        while len(labels) < count:
            label = f"sample_{next_id}"
            next_id += 1
            if label not in self._samples:
                labels.append(label)
        return labels, next_id

    def remove(self, labels: Union[str, List[str]]) -> None:
        """
        Remove samples from the set. Unknown labels are ignored.

        Args:
            labels: Single label or list of labels to remove
        """
        # Handle single label case
        if isinstance(labels, str):
            labels = [labels]

        for label in labels:
            self._samples.pop(label, None)

    def get(self, label: str) -> Dict[str, Any]:
        """
        Get a copy of the stored sample record for a label.

        Raises:
            KeyError: If the label is not in the set
        """
        record = self._samples[label]
        return {
            "embedding": record["embedding"].copy(),
            "label": label,
            "metadata": dict(record["metadata"]),
        }

    def samples(self) -> List[Dict[str, Any]]:
        """Copies of all stored sample records, in insertion order."""
        return [self.get(label) for label in self._samples]

    def find_nearest(
        self,
        query: VectorLike,
        top_k: Optional[int] = None,
        threshold: Optional[float] = None,
        method: Optional[str] = None,
    ) -> List[ScoredSample]:
        """
        Find the stored samples closest to a query.

        Args:
            query: Query vector of shape (dimension,)
            top_k: Override the set's configured top_k
            threshold: Override the set's configured threshold
            method: Override the set's configured method

        Returns:
            ScoredSample results, best match first

        Raises:
            DimensionMismatchError: If query dimension doesn't match set dimension
        """
        query = self._prepare(query)
        return find_nearest(
            query, list(self._samples.values()), self.config,
            method=method, top_k=top_k, threshold=threshold,
        )

    def rank_all(self, query: VectorLike, method: Optional[str] = None) -> List[ScoredSample]:
        """
        Rank every stored sample against a query.

        Args:
            query: Query vector of shape (dimension,)
            method: Override the set's configured method

        Returns:
            One ScoredSample per stored sample, best match first
        """
        query = self._prepare(query)
        return rank_all(query, list(self._samples.values()), self.config, method=method)

    def centroid(self, labels: Optional[List[str]] = None) -> Vector:
        """
        Mean vector of the stored samples.

        Args:
            labels: Restrict to these labels (default: all samples)

        Returns:
            Centroid vector, or an empty vector if the set is empty

        Raises:
            KeyError: If a label is not in the set
        """
        if labels is None:
            records = list(self._samples.values())
        else:
            records = [self._samples[label] for label in labels]
        return mean_vector(record["embedding"] for record in records)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about the sample set.

        Returns:
            Dictionary with size, dimension and ranking configuration
        """
        return {
            "total_samples": self.size(),
            "dimension": self.dimension,
            "normalize": self.normalize,
            "method": self.config.method.value,
            "config_name": self.config.config_name,
        }

    def size(self) -> int:
        """
        Get the number of samples in the set.

        Returns:
            Number of samples stored
        """
        return len(self._samples)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, label: object) -> bool:
        return label in self._samples
