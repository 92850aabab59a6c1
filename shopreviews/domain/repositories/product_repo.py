# shopreviews/domain/repositories/product_repo.py

from __future__ import annotations
from typing import Optional
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from shopreviews.core.errors import NotFoundError, ValidationError
from shopreviews.db.sequences import next_id
from shopreviews.domain.models.product import Category, Product, ProductDraft, ProductPage
from shopreviews.domain.repositories.catalog_store import CatalogStore, check_product_page

class ProductRepo(CatalogStore):
    """
    Catalog repository backed by the 'products' and 'categories' collections.
    Both use integer `id`s allocated from 'counters'; Mongo's _id is projected out.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "products", categories_name: str = "categories"):
        self.db = db
        self.col = db[collection_name]
        self.categories = db[categories_name]

    async def ensure_indexes(self) -> None:
        await self.col.create_index([("id", ASCENDING)], unique=True)
        await self.col.create_index([("category_id", ASCENDING), ("id", ASCENDING)])
        await self.categories.create_index([("id", ASCENDING)], unique=True)
        await self.categories.create_index([("name", ASCENDING)], unique=True)

    async def _check_category(self, category_id: Optional[int]) -> None:
        if category_id is None:
            return
        if not await self.categories.find_one({"id": category_id}, {"_id": 1}):
            raise ValidationError(f"Unknown category_id {category_id}")

    async def list_products(self, page: int = 1, per_page: int = 9, category_id: Optional[int] = None) -> ProductPage:
        check_product_page(page, per_page)
        query = {} if category_id is None else {"category_id": category_id}
        total = await self.col.count_documents(query)
        cursor = (
            self.col.find(query, {"_id": 0})
            .sort("id", ASCENDING)
            .skip((page - 1) * per_page)
            .limit(per_page)
        )
        items = [Product.model_validate(doc) async for doc in cursor]
        return ProductPage(items=items, total=total, page=page, per_page=per_page)

    async def get_product(self, product_id: int) -> Product:
        doc = await self.col.find_one({"id": product_id}, {"_id": 0})
        if not doc:
            raise NotFoundError("Product", product_id)
        return Product.model_validate(doc)

    async def create_product(self, draft: ProductDraft) -> Product:
        await self._check_category(draft.category_id)
        now = datetime.now(timezone.utc)
        product = Product(id=await next_id(self.db, "products"), created_at=now, updated_at=now, **draft.model_dump())
        await self.col.insert_one(product.model_dump())
        return product

    async def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        await self._check_category(draft.category_id)
        doc = await self.col.find_one_and_update(
            {"id": product_id},
            {"$set": {**draft.model_dump(), "updated_at": datetime.now(timezone.utc)}},
            projection={"_id": 0},
            return_document=ReturnDocument.AFTER,
        )
        if not doc:
            raise NotFoundError("Product", product_id)
        return Product.model_validate(doc)

    async def delete_product(self, product_id: int) -> None:
        res = await self.col.delete_one({"id": product_id})
        if res.deleted_count == 0:
            raise NotFoundError("Product", product_id)

    async def list_categories(self) -> list[Category]:
        cursor = self.categories.find({}, {"_id": 0}).sort("name", ASCENDING)
        return [Category.model_validate(doc) async for doc in cursor]

    async def create_category(self, name: str) -> Category:
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        category = Category(id=await next_id(self.db, "categories"), name=name)
        await self.categories.insert_one(category.model_dump())
        return category

    async def count_products(self) -> int:
        return await self.col.count_documents({})
