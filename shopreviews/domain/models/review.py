from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, Field, ValidationError as PydanticValidationError

from shopreviews.core.errors import ValidationError

MIN_RATING = 1
MAX_RATING = 5
RATING_VALUES = tuple(range(MIN_RATING, MAX_RATING + 1))


class ReviewSourceName(str, Enum):
    """Retailers a review can come from (closed set)."""
    AMAZON = "Amazon"
    BESTBUY = "BestBuy"
    WALMART = "Walmart"


class ReviewDraft(BaseModel):
    """A review before the store assigns it an id and a timestamp."""
    product_id: int = Field(ge=1)
    source: ReviewSourceName
    author: str = Field(min_length=1, max_length=255, validation_alias=AliasChoices("author", "reviewer_name"))
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING, strict=True)
    title: str = Field(min_length=1, max_length=500)
    body: str = Field(min_length=1, validation_alias=AliasChoices("body", "content"))
    review_date: Optional[date] = None
    external_id: Optional[str] = None
    verified_purchase: bool = False
    helpful_votes: int = Field(default=0, ge=0)

    model_config = {"frozen": True, "str_strip_whitespace": True, "use_enum_values": True}

    @classmethod
    def coerce(cls, data: ReviewDraft | Mapping[str, Any]) -> ReviewDraft:
        """Return a validated draft; pydantic errors become ValidationError."""
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
            raise ValidationError(
                f"Invalid review: {', '.join(fields)}",
                details=e.errors(include_url=False, include_context=False, include_input=False),
            ) from e


class Review(BaseModel):
    id: int
    product_id: int
    source: ReviewSourceName
    author: str
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING, strict=True)
    title: str
    body: str
    review_date: Optional[date] = None
    external_id: Optional[str] = None
    verified_purchase: bool = False
    helpful_votes: int = Field(default=0, ge=0)
    created_at: datetime

    model_config = {"frozen": True, "use_enum_values": True}  # reviews are never edited


class ReviewFilter(BaseModel):
    """Conjunction of optional predicates; None means 'no constraint'."""
    product_id: Optional[int] = None
    source: Optional[ReviewSourceName] = None
    min_rating: Optional[int] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)
    max_rating: Optional[int] = Field(default=None, ge=MIN_RATING, le=MAX_RATING)

    model_config = {"frozen": True, "use_enum_values": True}

    def matches(self, review: Review) -> bool:
        if self.product_id is not None and review.product_id != self.product_id:
            return False
        if self.source is not None and review.source != self.source:
            return False
        if self.min_rating is not None and review.rating < self.min_rating:
            return False
        if self.max_rating is not None and review.rating > self.max_rating:
            return False
        return True

    def to_mongo(self) -> dict:
        query: dict[str, Any] = {}
        if self.product_id is not None:
            query["product_id"] = self.product_id
        if self.source is not None:
            query["source"] = self.source
        rating: dict[str, int] = {}
        if self.min_rating is not None:
            rating["$gte"] = self.min_rating
        if self.max_rating is not None:
            rating["$lte"] = self.max_rating
        if rating:
            query["rating"] = rating
        return query


class ExternalReview(BaseModel):
    """A review as reported by an external source (scraper payload)."""
    review_id: str
    source: ReviewSourceName
    author: str
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING, strict=True)
    title: str
    body: str
    created_at: Optional[datetime] = None
    verified_purchase: bool = False

    model_config = {"frozen": True, "use_enum_values": True}

    def to_draft(self, product_id: int) -> ReviewDraft:
        return ReviewDraft(
            product_id=product_id,
            source=self.source,
            author=self.author,
            rating=self.rating,
            title=self.title,
            body=self.body,
            review_date=self.created_at.date() if self.created_at else None,
            external_id=self.review_id,
            verified_purchase=self.verified_purchase,
        )
