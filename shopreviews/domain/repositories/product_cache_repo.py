from typing import Optional
import json
import logging

from redis.asyncio import Redis
from shopreviews.domain.models.product import Product

logger = logging.getLogger(__name__)

class ProductCacheRepo:
    """
    Read-through cache for single products in Redis.
    Every Redis failure is logged and treated as a miss, so the catalog keeps
    serving from the primary store when Redis is down.
    """
    def __init__(self, redis: Optional[Redis], key_prefix: str = "product", ttl: int = 600):
        """
        Args:
            redis: Redis client instance, or None to disable caching
            key_prefix: Namespace for cache keys (e.g. 'product')
            ttl: Expiration in seconds
        """
        self.cache = redis
        self.prefix = key_prefix
        self.ttl = ttl

    @property
    def enabled(self) -> bool:
        return self.cache is not None

    def key(self, product_id: int) -> str:
        return f"{self.prefix}:{product_id}"

    async def get(self, product_id: int) -> Optional[Product]:
        if not self.enabled:
            return None
        key = self.key(product_id)
        try:
            raw = await self.cache.get(key)
        except Exception as e:
            logger.warning("product_cache get error key=%s err=%s", key, e)
            return None
        if not raw:
            return None
        try:
            return Product.model_validate(json.loads(raw))
        except ValueError as e:
            logger.warning("product_cache decode error key=%s err=%s", key, e)
            return None

    async def set(self, product: Product) -> None:
        if not self.enabled:
            return
        key = self.key(product.id)
        try:
            await self.cache.set(key, product.model_dump_json(), ex=self.ttl)
        except Exception as e:
            logger.warning("product_cache set error key=%s err=%s", key, e)

    async def delete(self, product_id: int) -> None:
        if not self.enabled:
            return
        key = self.key(product_id)
        try:
            await self.cache.delete(key)
        except Exception as e:
            logger.warning("product_cache delete error key=%s err=%s", key, e)
