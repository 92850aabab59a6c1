# shopreviews/api/v1/routers/products.py

from fastapi import APIRouter, Depends, Query, Response
from typing import Optional

from shopreviews.api.deps import catalog_service
from shopreviews.api.v1.schemas.catalog import ProductListOut, ProductPageMeta
from shopreviews.domain.models.product import Category, Product, ProductDraft
from shopreviews.domain.services.catalog_svc import CatalogService

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


@router.get("/products", response_model=ProductListOut)
async def list_products(
    page: int = Query(1, ge=1),
    per_page: int = Query(9, ge=1, le=100),
    category_id: Optional[int] = Query(None, ge=1, description="Only products of this category"),
    svc: CatalogService = Depends(catalog_service),
):
    res = await svc.list_products(page=page, per_page=per_page, category_id=category_id)
    meta = ProductPageMeta(total=res.total, page=res.page, per_page=res.per_page, total_pages=res.total_pages)
    return ProductListOut(data=res.items, meta=meta)


@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: int, svc: CatalogService = Depends(catalog_service)):
    return await svc.get_product(product_id)


@router.post("/products", status_code=201, response_model=Product)
async def create_product(body: ProductDraft, svc: CatalogService = Depends(catalog_service)):
    return await svc.create_product(body)


@router.put("/products/{product_id}", response_model=Product)
async def update_product(product_id: int, body: ProductDraft, svc: CatalogService = Depends(catalog_service)):
    return await svc.update_product(product_id, body)


@router.delete("/products/{product_id}", status_code=204)
async def delete_product(product_id: int, svc: CatalogService = Depends(catalog_service)):
    """Delete a product together with all of its reviews."""
    removed = await svc.delete_product(product_id)
    logger.info("Response: delete_product id=%s reviews_removed=%s", product_id, removed)
    return Response(status_code=204)


@router.get("/categories", response_model=list[Category], tags=["categories"])
async def list_categories(svc: CatalogService = Depends(catalog_service)):
    return await svc.list_categories()
