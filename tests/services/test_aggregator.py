"""ReviewAggregator against the in-memory store."""

import pytest

from shopreviews.core.errors import AggregationError
from shopreviews.domain.repositories.review_store import InMemoryReviewStore
from shopreviews.domain.services.aggregation_svc import ReviewAggregator
from shopreviews.domain.services.ingest_svc import ingest_product_reviews


class BrokenStore(InMemoryReviewStore):
    async def rating_rows(self, product_id):
        raise ConnectionError("mongo down")


async def test_no_reviews(review_store):
    agg = await ReviewAggregator(review_store).aggregate(77)
    assert agg.overall.total_reviews == 0
    assert agg.overall.average_rating == "0.0"
    assert agg.source_breakdown == []
    assert set(agg.rating_histogram) == {1, 2, 3, 4, 5}
    assert all(v == 0 for v in agg.rating_histogram.values())


async def test_three_reviews(review_store, make_review):
    await review_store.insert(make_review(source="Amazon", rating=5))
    await review_store.insert(make_review(source="Amazon", rating=3))
    await review_store.insert(make_review(source="BestBuy", rating=4))
    await review_store.insert(make_review(product_id=2, source="Walmart", rating=1))

    agg = await ReviewAggregator(review_store).aggregate(1)

    assert agg.product_id == 1
    assert agg.overall.total_reviews == 3
    assert agg.overall.average_rating == "4.0"
    assert (agg.overall.min_rating, agg.overall.max_rating) == (3, 5)
    assert [(s.source, s.count, s.average_rating) for s in agg.source_breakdown] == [
        ("Amazon", 2, "4.0"),
        ("BestBuy", 1, "4.0"),
    ]
    assert agg.rating_histogram == {1: 0, 2: 0, 3: 1, 4: 1, 5: 1}


async def test_repeatable_without_writes(review_store, make_review):
    await review_store.insert(make_review(rating=2))
    aggregator = ReviewAggregator(review_store)
    assert await aggregator.aggregate(1) == await aggregator.aggregate(1)


async def test_reflects_writes_immediately(review_store, make_review):
    aggregator = ReviewAggregator(review_store)
    first = await review_store.insert(make_review(rating=5))
    assert (await aggregator.aggregate(1)).overall.total_reviews == 1

    await review_store.insert(make_review(rating=1))
    after_insert = await aggregator.aggregate(1)
    assert after_insert.overall.total_reviews == 2
    assert after_insert.overall.average_rating == "3.0"

    await review_store.delete(first.id)
    after_delete = await aggregator.aggregate(1)
    assert after_delete.overall.average_rating == "1.0"


async def test_store_failure_becomes_aggregation_error():
    with pytest.raises(AggregationError) as exc:
        await ReviewAggregator(BrokenStore()).aggregate(1)
    assert exc.value.status_code == 500
    assert isinstance(exc.value.__cause__, ConnectionError)


@pytest.mark.parametrize("product_id", [1, 2, 3])
async def test_totals_consistent_over_sample_data(review_store, review_source, product_id):
    await ingest_product_reviews(review_store, review_source, product_id)
    agg = await ReviewAggregator(review_store).aggregate(product_id)

    fetched = await review_source.fetch(product_id)
    assert agg.overall.total_reviews == len(fetched)
    assert sum(agg.rating_histogram.values()) == len(fetched)
    assert sum(s.count for s in agg.source_breakdown) == len(fetched)
    sources = [s.source for s in agg.source_breakdown]
    assert sources == sorted(sources)
    assert 1.0 <= float(agg.overall.average_rating) <= 5.0
