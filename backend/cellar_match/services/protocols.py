"""
Protocols for the external collaborators of the pairing search.

Implementations live outside this package (database, embedding API,
vector index). They are passed in, never created here.
"""

from dataclasses import dataclass
from typing import Protocol

from ..models.wine import WineCharacteristics


@dataclass
class VectorSearchHit:
    """One wine returned by a vector similarity search."""
    wine: WineCharacteristics
    distance: float  # Cosine distance: 0 = identical, 2 = opposite


class CandidateSource(Protocol):
    """Supplies the wines currently in a user's cellar."""

    def list_cellar_wines(self, user_id: str) -> list[WineCharacteristics]:
        """
        Get every in-cellar wine for the user with its characteristics.

        Returns:
            Wines with quantity > 0, in a stable order
        """
        ...


class TextEmbedder(Protocol):
    """Turns text into a fixed-dimension embedding vector."""

    def embed(self, text: str) -> list[float]:
        ...


class VectorSearch(Protocol):
    """Nearest-neighbour search over the user's wine embeddings."""

    def has_embeddings(self, user_id: str) -> bool:
        """True if at least one of the user's wines has an embedding."""
        ...

    def search(self, vector: list[float], user_id: str, limit: int) -> list[VectorSearchHit]:
        """
        Find the user's wines closest to the vector.

        Returns:
            At most `limit` hits, nearest first
        """
        ...
