# shopreviews/domain/repositories/review_repo.py

from __future__ import annotations
from datetime import datetime, timezone, date
from typing import Any, Mapping, Optional
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError

from shopreviews.core.errors import NotFoundError, ValidationError
from shopreviews.db.sequences import next_id
from shopreviews.domain.models.review import Review, ReviewDraft, ReviewFilter
from shopreviews.domain.repositories.review_store import RatingRow, ReviewStore, check_page

logger = logging.getLogger(__name__)

SORT_NEWEST_FIRST = [("created_at", DESCENDING), ("id", DESCENDING)]


def rating_rows_pipeline(product_id: int) -> list[dict]:
    """Group one product's reviews by (source, rating) in a single pass."""
    return [
        {"$match": {"product_id": product_id}},
        {"$group": {
            "_id": {"source": "$source", "rating": "$rating"},
            "count": {"$sum": 1},
        }},
        {"$project": {
            "_id": 0,
            "source": "$_id.source",
            "rating": "$_id.rating",
            "count": 1,
        }},
    ]


def _to_document(review: Review) -> dict:
    doc = review.model_dump()
    # BSON has no date type; keep the calendar day as midnight UTC
    if isinstance(doc.get("review_date"), date):
        d = doc["review_date"]
        doc["review_date"] = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    return doc


def _from_document(doc: dict) -> Review:
    if isinstance(doc.get("review_date"), datetime):
        doc = {**doc, "review_date": doc["review_date"].date()}
    return Review.model_validate(doc)


class MongoReviewRepo(ReviewStore):
    """
    Review store backed by the 'reviews' collection.
    Documents carry an integer `id` allocated from the 'counters' collection;
    Mongo's own _id is never exposed.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "reviews"):
        self.db = db
        self.col = db[collection_name]
        self.sequence = collection_name

    async def ensure_indexes(self) -> None:
        await self.col.create_index([("id", ASCENDING)], unique=True)
        await self.col.create_index([("product_id", ASCENDING), ("created_at", DESCENDING)])
        await self.col.create_index([("source", ASCENDING)])
        await self.col.create_index([("rating", ASCENDING)])
        await self.col.create_index(
            [("source", ASCENDING), ("external_id", ASCENDING)],
            unique=True,
            partialFilterExpression={"external_id": {"$type": "string"}},
        )

    async def insert(self, data: ReviewDraft | Mapping[str, Any]) -> Review:
        draft = ReviewDraft.coerce(data)
        review = Review(
            id=await next_id(self.db, self.sequence),
            created_at=datetime.now(timezone.utc),
            **draft.model_dump(),
        )
        try:
            await self.col.insert_one(_to_document(review))
        except DuplicateKeyError as e:
            raise ValidationError(f"Review {draft.source}/{draft.external_id} already stored") from e
        logger.debug("review inserted id=%s product_id=%s source=%s", review.id, review.product_id, review.source)
        return review

    async def list(self, filt: Optional[ReviewFilter] = None, limit: Optional[int] = None, offset: int = 0) -> list[Review]:
        limit = check_page(limit, offset)
        query = (filt or ReviewFilter()).to_mongo()
        cursor = self.col.find(query, {"_id": 0}).sort(SORT_NEWEST_FIRST).skip(offset).limit(limit)
        return [_from_document(doc) async for doc in cursor]

    async def get(self, review_id: int) -> Review:
        doc = await self.col.find_one({"id": review_id}, {"_id": 0})
        if not doc:
            raise NotFoundError("Review", review_id)
        return _from_document(doc)

    async def delete(self, review_id: int) -> None:
        res = await self.col.delete_one({"id": review_id})
        if res.deleted_count == 0:
            raise NotFoundError("Review", review_id)

    async def delete_for_product(self, product_id: int) -> int:
        res = await self.col.delete_many({"product_id": product_id})
        return res.deleted_count

    async def rating_rows(self, product_id: int) -> list[RatingRow]:
        docs = await self.col.aggregate(rating_rows_pipeline(product_id)).to_list(length=None)
        return [RatingRow(d["source"], int(d["rating"]), int(d["count"])) for d in docs]

    async def has_external(self, source: str, external_id: str) -> bool:
        doc = await self.col.find_one({"source": source, "external_id": external_id}, {"_id": 1})
        return doc is not None
