"""Vector similarity calculation utilities."""

import numpy as np


def cosine_similarity(vec1: list[float], vec2: list[float]) -> float:
    """Calculate cosine similarity between two vectors.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Cosine similarity in [-1, 1]. Returns 0.0 when either vector has zero
        norm, when either is empty, or when dimensions differ.
    """
    if len(vec1) != len(vec2) or not vec1:
        return 0.0

    v1 = np.asarray(vec1, dtype=np.float64)
    v2 = np.asarray(vec2, dtype=np.float64)

    norm1 = np.linalg.norm(v1)
    norm2 = np.linalg.norm(v2)

    if norm1 == 0 or norm2 == 0:
        return 0.0

    score = float(np.dot(v1, v2) / (norm1 * norm2))
    if np.isnan(score):
        return 0.0

    # Clamp to [-1, 1] to handle floating point errors
    return max(-1.0, min(1.0, score))


def normalize(vector: np.ndarray) -> np.ndarray:
    """Scale a vector to unit Euclidean length; a zero vector is returned as-is."""
    magnitude = np.linalg.norm(vector)
    if magnitude == 0:
        return vector
    return vector / magnitude
