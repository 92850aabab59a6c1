# shopreviews/domain/repositories/catalog_store.py
from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from itertools import count
from typing import Optional

from shopreviews.core.errors import NotFoundError, ValidationError
from shopreviews.domain.models.product import Category, Product, ProductDraft, ProductPage


class CatalogStore(ABC):
    """Products and categories. Reviews only ever consume Product.id."""

    @abstractmethod
    async def list_products(self, page: int = 1, per_page: int = 9, category_id: Optional[int] = None) -> ProductPage:
        ...

    @abstractmethod
    async def get_product(self, product_id: int) -> Product:
        ...

    @abstractmethod
    async def create_product(self, draft: ProductDraft) -> Product:
        ...

    @abstractmethod
    async def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        ...

    @abstractmethod
    async def delete_product(self, product_id: int) -> None:
        ...

    @abstractmethod
    async def list_categories(self) -> list[Category]:
        ...

    @abstractmethod
    async def create_category(self, name: str) -> Category:
        ...

    @abstractmethod
    async def count_products(self) -> int:
        ...


def check_product_page(page: int, per_page: int) -> None:
    if page < 1:
        raise ValidationError("page must be >= 1")
    if per_page < 1:
        raise ValidationError("per_page must be >= 1")


class InMemoryCatalogStore(CatalogStore):

    def __init__(self):
        self._products: dict[int, Product] = {}
        self._categories: dict[int, Category] = {}
        self._product_ids = count(1)
        self._category_ids = count(1)

    async def _check_category(self, category_id: Optional[int]) -> None:
        if category_id is not None and category_id not in self._categories:
            raise ValidationError(f"Unknown category_id {category_id}")

    async def list_products(self, page=1, per_page=9, category_id=None) -> ProductPage:
        check_product_page(page, per_page)
        rows = [p for p in self._products.values() if category_id is None or p.category_id == category_id]
        rows.sort(key=lambda p: p.id)
        start = (page - 1) * per_page
        return ProductPage(items=rows[start:start + per_page], total=len(rows), page=page, per_page=per_page)

    async def get_product(self, product_id: int) -> Product:
        try:
            return self._products[product_id]
        except KeyError:
            raise NotFoundError("Product", product_id) from None

    async def create_product(self, draft: ProductDraft) -> Product:
        await self._check_category(draft.category_id)
        now = datetime.now(timezone.utc)
        product = Product(id=next(self._product_ids), created_at=now, updated_at=now, **draft.model_dump())
        self._products[product.id] = product
        return product

    async def update_product(self, product_id: int, draft: ProductDraft) -> Product:
        current = await self.get_product(product_id)
        await self._check_category(draft.category_id)
        updated = current.model_copy(update={**draft.model_dump(), "updated_at": datetime.now(timezone.utc)})
        self._products[product_id] = updated
        return updated

    async def delete_product(self, product_id: int) -> None:
        if self._products.pop(product_id, None) is None:
            raise NotFoundError("Product", product_id)

    async def list_categories(self) -> list[Category]:
        return sorted(self._categories.values(), key=lambda c: c.name)

    async def create_category(self, name: str) -> Category:
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        category = Category(id=next(self._category_ids), name=name)
        self._categories[category.id] = category
        return category

    async def count_products(self) -> int:
        return len(self._products)
