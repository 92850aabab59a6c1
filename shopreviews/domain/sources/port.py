"""Review source port: abstract interface for external review providers.

Ingestion programs against the port; adapters are chosen via the
REVIEW_SOURCE setting (see shopreviews.api.deps).
"""

from abc import ABC, abstractmethod

from shopreviews.domain.models.review import ExternalReview


class ReviewSource(ABC):
    """Abstract interface for review source adapters."""

    name: str = "abstract"

    @abstractmethod
    async def fetch(self, product_id: int) -> list[ExternalReview]:
        """Return every review the provider currently holds for a product.

        An unknown product yields an empty list, not an error.
        Raises SourceError when the provider cannot be reached or answers
        with an unusable payload.
        """
        ...

    async def aclose(self) -> None:
        """Release any held resources (connections)."""
        return None
