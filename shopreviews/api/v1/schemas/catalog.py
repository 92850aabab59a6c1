# shopreviews/api/v1/schemas/catalog.py
from pydantic import BaseModel
from typing import List

from shopreviews.domain.models.product import Product


class ProductPageMeta(BaseModel):
    total: int
    page: int
    per_page: int
    total_pages: int


class ProductListOut(BaseModel):
    data: List[Product]
    meta: ProductPageMeta
