"""
Review aggregation: overall mean, per-source breakdown and star histogram.

Rounding rule: every mean is computed from its exact integer sum and count
and rounded once, half-up, to one decimal digit. Means are never derived
from other rounded means.
"""
from __future__ import annotations
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable
import logging
import time

from shopreviews.core.errors import AggregationError
from shopreviews.domain.models.aggregate import OverallStats, ReviewAggregate, SourceSummary
from shopreviews.domain.models.review import RATING_VALUES
from shopreviews.domain.repositories.review_store import RatingRow, ReviewStore

logger = logging.getLogger(__name__)

ONE_DECIMAL = Decimal("0.1")


def format_mean(total: int, count: int) -> str:
    """Mean of integer ratings as a one-decimal string; '0.0' for no data."""
    if count == 0:
        return "0.0"
    mean = (Decimal(total) / Decimal(count)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return str(mean)


def summarize(product_id: int, rows: Iterable[RatingRow]) -> ReviewAggregate:
    """Fold grouped (source, rating, count) rows into a ReviewAggregate."""
    histogram = {rating: 0 for rating in RATING_VALUES}
    per_source: dict[str, list[int]] = defaultdict(lambda: [0, 0])  # source -> [count, rating sum]
    total = rating_sum = 0

    for source, rating, n in rows:
        if n <= 0:
            continue
        histogram[rating] += n
        acc = per_source[source]
        acc[0] += n
        acc[1] += rating * n
        total += n
        rating_sum += rating * n

    present = [r for r in RATING_VALUES if histogram[r]]
    overall = OverallStats(
        average_rating=format_mean(rating_sum, total),
        total_reviews=total,
        min_rating=present[0] if present else 0,
        max_rating=present[-1] if present else 0,
    )
    breakdown = [
        SourceSummary(source=source, count=n, average_rating=format_mean(s, n))
        for source, (n, s) in sorted(per_source.items())
    ]
    return ReviewAggregate(
        product_id=product_id,
        overall=overall,
        source_breakdown=breakdown,
        rating_histogram=histogram,
    )


class ReviewAggregator:
    """Stateless read-through over the review store; nothing is cached."""

    def __init__(self, store: ReviewStore):
        self.store = store

    async def aggregate(self, product_id: int) -> ReviewAggregate:
        t0 = time.perf_counter()
        logger.info("aggregate start product_id=%s", product_id)
        try:
            rows = await self.store.rating_rows(product_id)
        except Exception as e:
            logger.error("aggregate store_error product_id=%s err=%s", product_id, e)
            raise AggregationError(product_id, e) from e

        result = summarize(product_id, rows)
        logger.info(
            "aggregate done product_id=%s total=%s avg=%s time=%.3fs",
            product_id, result.overall.total_reviews, result.overall.average_rating, time.perf_counter() - t0,
        )
        return result
