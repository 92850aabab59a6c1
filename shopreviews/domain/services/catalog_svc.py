import logging
from typing import Optional

from shopreviews.domain.models.product import Category, Product, ProductDraft, ProductPage
from shopreviews.domain.repositories.catalog_store import CatalogStore
from shopreviews.domain.repositories.product_cache_repo import ProductCacheRepo
from shopreviews.domain.repositories.review_store import ReviewStore

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Product/category CRUD.
    Single-product reads go through the Redis cache when one is configured;
    writes invalidate it. Deleting a product also deletes its reviews.
    """

    def __init__(self, store: CatalogStore, reviews: ReviewStore, cache: Optional[ProductCacheRepo] = None):
        self.store = store
        self.reviews = reviews
        self.cache = cache or ProductCacheRepo(None)

    async def list_products(self, page: int, per_page: int, category_id: Optional[int] = None) -> ProductPage:
        return await self.store.list_products(page=page, per_page=per_page, category_id=category_id)

    async def get_product(self, product_id: int) -> Product:
        cached = await self.cache.get(product_id)
        if cached is not None:
            logger.debug("catalog cache_hit product_id=%s", product_id)
            return cached
        product = await self.store.get_product(product_id)
        await self.cache.set(product)
        return product

    async def create_product(self, draft: ProductDraft) -> Product:
        product = await self.store.create_product(draft)
        logger.info("catalog product created id=%s name=%s", product.id, product.name)
        return product

    async def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        product = await self.store.update_product(product_id, draft)
        await self.cache.delete(product_id)
        logger.info("catalog product updated id=%s", product_id)
        return product

    async def delete_product(self, product_id: int) -> int:
        """Delete the product and cascade to its reviews; returns reviews removed."""
        await self.store.delete_product(product_id)
        await self.cache.delete(product_id)
        removed = await self.reviews.delete_for_product(product_id)
        logger.info("catalog product deleted id=%s reviews_removed=%s", product_id, removed)
        return removed

    async def list_categories(self) -> list[Category]:
        return await self.store.list_categories()
