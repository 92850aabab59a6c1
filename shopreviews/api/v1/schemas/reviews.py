# shopreviews/api/v1/schemas/reviews.py
from pydantic import BaseModel, Field
from typing import List

from shopreviews.domain.models.review import Review, ReviewDraft


class ReviewIn(ReviewDraft):
    """Request body for POST /reviews (`reviewer_name`/`content` accepted as aliases)."""
    model_config = {
        **ReviewDraft.model_config,
        "json_schema_extra": {
            "example": {
                "product_id": 1,
                "source": "Amazon",
                "author": "Sarah Johnson",
                "rating": 5,
                "title": "Excellent quality!",
                "body": "Fast charging and solid build quality.",
                "verified_purchase": True,
            }
        },
    }


class PageMeta(BaseModel):
    count: int
    limit: int
    offset: int


class ReviewPageOut(BaseModel):
    data: List[Review]
    meta: PageMeta


class IngestResultOut(BaseModel):
    product_id: int
    fetched: int = Field(ge=0)
    inserted: int = Field(ge=0)
    skipped: int = Field(ge=0)
