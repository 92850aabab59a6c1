"""Mongo document mapping and the rating pipeline (no server needed)."""

from datetime import date, datetime, timezone

from shopreviews.domain.models.review import Review
from shopreviews.domain.repositories.review_repo import _from_document, _to_document, rating_rows_pipeline


def _review(**kw):
    base = dict(
        id=3, product_id=1, source="Walmart", author="Amanda White", rating=4,
        title="Solid purchase", body="Good quality charger.",
        created_at=datetime(2025, 9, 2, 8, 30, tzinfo=timezone.utc),
    )
    base.update(kw)
    return Review(**base)


def test_review_date_stored_as_utc_midnight():
    doc = _to_document(_review(review_date=date(2025, 9, 1)))
    assert doc["review_date"] == datetime(2025, 9, 1, tzinfo=timezone.utc)
    assert doc["source"] == "Walmart"
    assert _from_document(doc).review_date == date(2025, 9, 1)


def test_document_without_review_date():
    review = _review()
    assert _from_document(_to_document(review)) == review


def test_pipeline_groups_by_source_and_rating():
    stages = rating_rows_pipeline(7)
    assert stages[0] == {"$match": {"product_id": 7}}
    group = stages[1]["$group"]
    assert group["_id"] == {"source": "$source", "rating": "$rating"}
    assert group["count"] == {"$sum": 1}
    assert stages[2]["$project"]["_id"] == 0
