from pydantic import BaseModel, Field
from typing import Dict, List


class OverallStats(BaseModel):
    average_rating: str = "0.0"     # one decimal digit, e.g. "4.3"
    total_reviews: int = Field(default=0, ge=0)
    min_rating: int = 0             # 0 when there are no reviews
    max_rating: int = 0
    model_config = {"frozen": True}


class SourceSummary(BaseModel):
    source: str
    count: int = Field(ge=1)
    average_rating: str
    model_config = {"frozen": True}


class ReviewAggregate(BaseModel):
    """Derived view over one product's reviews. Never persisted."""
    product_id: int
    overall: OverallStats
    source_breakdown: List[SourceSummary]
    rating_histogram: Dict[int, int]
    model_config = {"frozen": True}
