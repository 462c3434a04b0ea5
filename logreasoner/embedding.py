"""Embedding of log group patterns and vector similarity."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .backends import EmbeddingBackend
from .models import LogGroup


class EmbeddingGenerator:
    """Produces embeddings for log groups through a backend."""

    def __init__(self, backend: EmbeddingBackend) -> None:
        self.backend = backend

    def embed_groups(self, groups: Sequence[LogGroup]) -> list[tuple[int, list[float]]]:
        """Return ``(group_index, vector)`` pairs for the patterns of ``groups``."""
        print(f"Generating embeddings for {len(groups)} patterns...")
        vectors = self.backend.embed([group.pattern for group in groups])
        result = list(enumerate(vectors))
        print(f"✓ Generated {len(result)} embeddings")
        return result


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between ``a`` and ``b``; 0.0 for mismatched or zero vectors."""
    if len(a) != len(b):
        return 0.0
    dot = sum(x * y for x, y in zip(a, b))
    magnitude_a = math.sqrt(sum(x * x for x in a))
    magnitude_b = math.sqrt(sum(y * y for y in b))
    if magnitude_a == 0.0 or magnitude_b == 0.0:
        return 0.0
    return dot / (magnitude_a * magnitude_b)