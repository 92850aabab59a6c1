# shopreviews/api/deps.py
from fastapi import Depends, Request

from shopreviews.core.config import get_settings
from shopreviews.db.redis import get_redis
from shopreviews.domain.repositories.catalog_store import CatalogStore
from shopreviews.domain.repositories.product_cache_repo import ProductCacheRepo
from shopreviews.domain.repositories.review_store import ReviewStore
from shopreviews.domain.services.aggregation_svc import ReviewAggregator
from shopreviews.domain.services.catalog_svc import CatalogService
from shopreviews.domain.sources.port import ReviewSource

# Stores and the review source are built once in the lifespan and parked on app.state

def review_store(request: Request) -> ReviewStore:
    return request.app.state.review_store

def catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store

def review_source(request: Request) -> ReviewSource:
    return request.app.state.review_source

# Redis client or None (cache disabled)
def redis_dep():
    return get_redis()

def review_aggregator(store: ReviewStore = Depends(review_store)) -> ReviewAggregator:
    return ReviewAggregator(store)

def catalog_service(
    store: CatalogStore = Depends(catalog_store),
    reviews: ReviewStore = Depends(review_store),
    redis = Depends(redis_dep),
) -> CatalogService:
    settings = get_settings()
    cache = ProductCacheRepo(redis, key_prefix=settings.product_cache_prefix, ttl=settings.product_cache_ttl)
    return CatalogService(store, reviews, cache)
