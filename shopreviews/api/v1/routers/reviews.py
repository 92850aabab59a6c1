# shopreviews/api/v1/routers/reviews.py
from typing import Optional
import logging
import time

from fastapi import APIRouter, Depends, Query, Response

from shopreviews.api.deps import catalog_store, review_aggregator, review_source, review_store
from shopreviews.api.v1.schemas.reviews import IngestResultOut, PageMeta, ReviewIn, ReviewPageOut
from shopreviews.core.config import get_settings
from shopreviews.core.errors import ValidationError
from shopreviews.domain.models.aggregate import ReviewAggregate
from shopreviews.domain.models.review import MAX_RATING, MIN_RATING, Review, ReviewFilter, ReviewSourceName
from shopreviews.domain.repositories.catalog_store import CatalogStore
from shopreviews.domain.repositories.review_store import ReviewStore
from shopreviews.domain.services.aggregation_svc import ReviewAggregator
from shopreviews.domain.services.ingest_svc import ingest_product_reviews
from shopreviews.domain.sources.port import ReviewSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


def _page_limit(limit: Optional[int]) -> int:
    settings = get_settings()
    if limit is None:
        return settings.default_page_limit
    if limit > settings.max_page_limit:
        raise ValidationError(f"limit must be <= {settings.max_page_limit}")
    return limit


@router.get("/aggregate/{product_id}", response_model=ReviewAggregate)
async def get_review_aggregate(
    product_id: int,
    aggregator: ReviewAggregator = Depends(review_aggregator),
):
    """
    Average rating, per-source breakdown and 1-5 histogram for one product.
    A product without reviews yields an all-zero aggregate, not a 404.
    """
    return await aggregator.aggregate(product_id)


@router.get("", response_model=ReviewPageOut)
async def list_reviews(
    product_id: Optional[int] = Query(None, ge=1),
    source: Optional[ReviewSourceName] = Query(None),
    min_rating: Optional[int] = Query(None, ge=MIN_RATING, le=MAX_RATING),
    max_rating: Optional[int] = Query(None, ge=MIN_RATING, le=MAX_RATING),
    limit: Optional[int] = Query(None, ge=1, description="Page size (default 50)"),
    offset: int = Query(0, ge=0),
    store: ReviewStore = Depends(review_store),
):
    """Newest reviews first, filtered by any combination of the query parameters."""
    limit = _page_limit(limit)
    filt = ReviewFilter(product_id=product_id, source=source, min_rating=min_rating, max_rating=max_rating)
    logger.info("Request: list_reviews filter=%s limit=%s offset=%s", filt.model_dump(exclude_none=True), limit, offset)
    rows = await store.list(filt, limit=limit, offset=offset)
    return ReviewPageOut(data=rows, meta=PageMeta(count=len(rows), limit=limit, offset=offset))


@router.get("/{review_id}", response_model=Review)
async def get_review(review_id: int, store: ReviewStore = Depends(review_store)):
    return await store.get(review_id)


@router.post("", status_code=201, response_model=Review)
async def create_review(
    body: ReviewIn,
    store: ReviewStore = Depends(review_store),
    catalog: CatalogStore = Depends(catalog_store),
):
    """
    Store a new review. Out-of-range ratings or missing fields answer 400,
    an unknown product_id answers 404.
    """
    await catalog.get_product(body.product_id)
    review = await store.insert(body)
    logger.info("Response: create_review id=%s product_id=%s rating=%s", review.id, review.product_id, review.rating)
    return review


@router.delete("/{review_id}", status_code=204)
async def delete_review(review_id: int, store: ReviewStore = Depends(review_store)):
    await store.delete(review_id)
    logger.info("Response: delete_review id=%s", review_id)
    return Response(status_code=204)


@router.post("/fetch/{product_id}", response_model=IngestResultOut)
async def fetch_reviews(
    product_id: int,
    store: ReviewStore = Depends(review_store),
    catalog: CatalogStore = Depends(catalog_store),
    source: ReviewSource = Depends(review_source),
):
    """
    Pull the product's reviews from the configured review source.
    Reviews already stored (same source + external id) are skipped.
    """
    start_time = time.perf_counter()
    await catalog.get_product(product_id)  # 404 for unknown products
    res = await ingest_product_reviews(store, source, product_id)
    logger.info(
        "Response: fetch_reviews product_id=%s inserted=%s elapsed_time=%.4fs",
        product_id, res["inserted"], time.perf_counter() - start_time,
    )
    return res
