"""In-memory review source serving canned retailer data."""

from typing import Iterable, Mapping, Optional

from shopreviews.domain.models.review import ExternalReview
from shopreviews.domain.sources.port import ReviewSource
from shopreviews.domain.sources.sample_reviews import SAMPLE_EXTERNAL_REVIEWS, SAMPLE_FIELDS


def _load(raw: Mapping[int, Iterable[tuple]]) -> dict[int, list[ExternalReview]]:
    return {
        int(pid): [ExternalReview.model_validate(dict(zip(SAMPLE_FIELDS, row))) for row in rows]
        for pid, rows in raw.items()
    }


class MemoryReviewSource(ReviewSource):
    """Serves a fixed mapping of product id -> reviews. Deterministic; never fails."""

    name = "memory"

    def __init__(self, reviews: Optional[Mapping[int, Iterable[ExternalReview]]] = None):
        if reviews is None:
            self._reviews = _load(SAMPLE_EXTERNAL_REVIEWS)
        else:
            self._reviews = {int(pid): list(items) for pid, items in reviews.items()}

    async def fetch(self, product_id: int) -> list[ExternalReview]:
        return list(self._reviews.get(product_id, []))

