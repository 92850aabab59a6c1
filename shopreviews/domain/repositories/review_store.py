# shopreviews/domain/repositories/review_store.py
"""
Review store contract and its in-memory implementation.

The Mongo-backed implementation lives in review_repo.py; both honour the
same ordering (created_at desc, then id desc) and error semantics.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections import Counter
from datetime import datetime, timezone
from itertools import count
from typing import Any, Callable, Mapping, NamedTuple, Optional

from shopreviews.core.errors import NotFoundError, ValidationError
from shopreviews.domain.models.review import Review, ReviewDraft, ReviewFilter

DEFAULT_LIMIT = 50


class RatingRow(NamedTuple):
    """One grouped row: how many reviews from `source` carry `rating`."""
    source: str
    rating: int
    count: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReviewStore(ABC):

    @abstractmethod
    async def insert(self, data: ReviewDraft | Mapping[str, Any]) -> Review:
        """Validate and store a review; the store assigns id and created_at."""

    @abstractmethod
    async def list(
        self,
        filt: Optional[ReviewFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Review]:
        """Newest first; at most `limit` (default 50) reviews after skipping `offset`."""

    @abstractmethod
    async def get(self, review_id: int) -> Review:
        ...

    @abstractmethod
    async def delete(self, review_id: int) -> None:
        ...

    @abstractmethod
    async def delete_for_product(self, product_id: int) -> int:
        """Remove every review of a product; returns how many were removed."""

    @abstractmethod
    async def rating_rows(self, product_id: int) -> list[RatingRow]:
        """Full (unpaginated) per-(source, rating) counts for one product."""

    @abstractmethod
    async def has_external(self, source: str, external_id: str) -> bool:
        ...


def check_page(limit: Optional[int], offset: int) -> int:
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit < 1:
        raise ValidationError("limit must be >= 1")
    if offset < 0:
        raise ValidationError("offset must be >= 0")
    return limit


class InMemoryReviewStore(ReviewStore):
    """Process-local store. Used by tests and STORAGE_BACKEND=memory."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._rows: dict[int, Review] = {}
        self._ids = count(1)
        self._clock = clock

    async def insert(self, data: ReviewDraft | Mapping[str, Any]) -> Review:
        draft = ReviewDraft.coerce(data)
        if draft.external_id and await self.has_external(draft.source, draft.external_id):
            raise ValidationError(f"Review {draft.source}/{draft.external_id} already stored")
        review = Review(id=next(self._ids), created_at=self._clock(), **draft.model_dump())
        self._rows[review.id] = review
        return review

    async def list(self, filt=None, limit=None, offset=0) -> list[Review]:
        limit = check_page(limit, offset)
        filt = filt or ReviewFilter()
        rows = [r for r in self._rows.values() if filt.matches(r)]
        rows.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return rows[offset:offset + limit]

    async def get(self, review_id: int) -> Review:
        try:
            return self._rows[review_id]
        except KeyError:
            raise NotFoundError("Review", review_id) from None

    async def delete(self, review_id: int) -> None:
        if self._rows.pop(review_id, None) is None:
            raise NotFoundError("Review", review_id)

    async def delete_for_product(self, product_id: int) -> int:
        doomed = [rid for rid, r in self._rows.items() if r.product_id == product_id]
        for rid in doomed:
            del self._rows[rid]
        return len(doomed)

    async def rating_rows(self, product_id: int) -> list[RatingRow]:
        counts = Counter((r.source, r.rating) for r in self._rows.values() if r.product_id == product_id)
        return [RatingRow(source, rating, n) for (source, rating), n in counts.items()]

    async def has_external(self, source: str, external_id: str) -> bool:
        return any(r.source == source and r.external_id == external_id for r in self._rows.values())
