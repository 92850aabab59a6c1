"""CatalogService: CRUD, cascade delete, read-through cache and seeding."""

import pytest

from shopreviews.core.errors import NotFoundError, ValidationError
from shopreviews.domain.models.product import ProductDraft
from shopreviews.domain.repositories.product_cache_repo import ProductCacheRepo
from shopreviews.domain.services.catalog_svc import CatalogService
from shopreviews.domain.services.seed_svc import SAMPLE_REVIEWS, seed_sample_data


class FakeRedis:
    def __init__(self):
        self.data = {}
        self.gets = 0

    async def get(self, key):
        self.gets += 1
        return self.data.get(key)

    async def set(self, key, value, ex=None):
        self.data[key] = value

    async def delete(self, key):
        self.data.pop(key, None)


class DownRedis:
    async def get(self, key):
        raise ConnectionError("redis down")

    async def set(self, key, value, ex=None):
        raise ConnectionError("redis down")

    async def delete(self, key):
        raise ConnectionError("redis down")


@pytest.fixture()
def svc(catalog_store, review_store):
    return CatalogService(catalog_store, review_store)


async def test_create_get_update(svc, catalog_store):
    audio = await catalog_store.create_category("Audio")
    created = await svc.create_product(ProductDraft(name="Headphones", price=89.99, category_id=audio.id))
    assert created.id == 1
    assert (await svc.get_product(created.id)).name == "Headphones"

    updated = await svc.update_product(created.id, ProductDraft(name="Headphones Pro", price=129.0, category_id=audio.id))
    assert updated.name == "Headphones Pro"
    assert updated.created_at == created.created_at
    assert (await svc.get_product(created.id)).price == 129.0


async def test_unknown_category_rejected(svc):
    with pytest.raises(ValidationError):
        await svc.create_product(ProductDraft(name="Lamp", price=10, category_id=99))


async def test_missing_product(svc):
    with pytest.raises(NotFoundError):
        await svc.get_product(5)
    with pytest.raises(NotFoundError):
        await svc.update_product(5, ProductDraft(name="x", price=1))
    with pytest.raises(NotFoundError):
        await svc.delete_product(5)


async def test_delete_cascades_to_reviews(svc, review_store, make_review):
    product = await svc.create_product(ProductDraft(name="Charger", price=29.99))
    other = await svc.create_product(ProductDraft(name="Bulb", price=14.99))
    await review_store.insert(make_review(product_id=product.id))
    await review_store.insert(make_review(product_id=product.id, rating=2))
    await review_store.insert(make_review(product_id=other.id))

    assert await svc.delete_product(product.id) == 2
    assert [r.product_id for r in await review_store.list()] == [other.id]
    with pytest.raises(NotFoundError):
        await svc.get_product(product.id)


async def test_paging_and_category_filter(svc, catalog_store):
    audio = await catalog_store.create_category("Audio")
    for i in range(5):
        await svc.create_product(ProductDraft(name=f"p{i}", price=1, category_id=audio.id if i % 2 else None))

    page = await svc.list_products(page=2, per_page=2)
    assert [p.name for p in page.items] == ["p2", "p3"]
    assert page.total == 5
    assert page.total_pages == 3

    only_audio = await svc.list_products(page=1, per_page=9, category_id=audio.id)
    assert [p.name for p in only_audio.items] == ["p1", "p3"]

    empty = await svc.list_products(page=1, per_page=9, category_id=12)
    assert empty.items == []
    assert empty.total_pages == 1


async def test_invalid_page(svc):
    with pytest.raises(ValidationError):
        await svc.list_products(page=0, per_page=9)


async def test_categories_sorted_by_name(svc, catalog_store):
    await catalog_store.create_category("Smart Home")
    await catalog_store.create_category("Audio")
    assert [c.name for c in await svc.list_categories()] == ["Audio", "Smart Home"]
    with pytest.raises(ValidationError):
        await catalog_store.create_category("  ")


class TestProductCache:
    async def test_read_through(self, catalog_store, review_store):
        redis = FakeRedis()
        svc = CatalogService(catalog_store, review_store, ProductCacheRepo(redis, key_prefix="product", ttl=60))
        product = await svc.create_product(ProductDraft(name="Charger", price=29.99))

        assert await svc.get_product(product.id) == product
        assert "product:1" in redis.data
        # served from cache even if the store row changes underneath
        await catalog_store.update_product(product.id, ProductDraft(name="Renamed", price=1))
        assert (await svc.get_product(product.id)).name == "Charger"

    async def test_writes_invalidate(self, catalog_store, review_store):
        redis = FakeRedis()
        svc = CatalogService(catalog_store, review_store, ProductCacheRepo(redis))
        product = await svc.create_product(ProductDraft(name="Charger", price=29.99))
        await svc.get_product(product.id)

        await svc.update_product(product.id, ProductDraft(name="Charger v2", price=24.99))
        assert "product:1" not in redis.data
        assert (await svc.get_product(product.id)).name == "Charger v2"

        await svc.delete_product(product.id)
        assert redis.data == {}

    async def test_redis_failure_is_a_miss(self, catalog_store, review_store):
        svc = CatalogService(catalog_store, review_store, ProductCacheRepo(DownRedis()))
        product = await svc.create_product(ProductDraft(name="Charger", price=29.99))
        assert await svc.get_product(product.id) == product
        await svc.delete_product(product.id)


async def test_seed_is_idempotent(catalog_store, review_store):
    assert await seed_sample_data(catalog_store, review_store) is True
    assert await catalog_store.count_products() == 3
    assert len(await catalog_store.list_categories()) == 3
    reviews = await review_store.list()
    assert len(reviews) == len(SAMPLE_REVIEWS)
    assert {r.product_id for r in reviews} == {1}

    assert await seed_sample_data(catalog_store, review_store) is False
    assert await catalog_store.count_products() == 3
    assert len(await review_store.list()) == len(SAMPLE_REVIEWS)
