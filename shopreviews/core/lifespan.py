# shopreviews/core/lifespan.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shopreviews.core.config import get_settings
from shopreviews.db import mongo, redis as r
from shopreviews.domain.repositories.catalog_store import InMemoryCatalogStore
from shopreviews.domain.repositories.product_repo import ProductRepo
from shopreviews.domain.repositories.review_repo import MongoReviewRepo
from shopreviews.domain.repositories.review_store import InMemoryReviewStore
from shopreviews.domain.services.seed_svc import seed_sample_data
from shopreviews.domain.sources.factory import build_review_source

logger = logging.getLogger(__name__)


async def _open_stores(app: FastAPI) -> None:
    settings = get_settings()

    if settings.STORAGE_BACKEND == "memory":
        logger.warning("Using in-memory storage: data is lost on restart")
        app.state.review_store = InMemoryReviewStore()
        app.state.catalog_store = InMemoryCatalogStore()
        return

    if not settings.MONGO_URI:
        raise RuntimeError("STORAGE_BACKEND=mongo requires MONGO_URI")

    await mongo.connect()
    db = mongo.get_db()
    reviews, catalog = MongoReviewRepo(db), ProductRepo(db)
    try:
        await reviews.ensure_indexes()
        await catalog.ensure_indexes()
    except Exception as e:
        logger.warning("Mongo index creation failed: %s", e)
    app.state.review_store = reviews
    app.state.catalog_store = catalog


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    await _open_stores(app)
    await r.connect()
    app.state.review_source = build_review_source(settings)
    logger.info(
        "Startup storage=%s review_source=%s redis=%s",
        settings.STORAGE_BACKEND, app.state.review_source.name, bool(r.get_redis()),
    )

    if settings.SEED_SAMPLE_DATA:
        await seed_sample_data(app.state.catalog_store, app.state.review_store)

    # Application runs
    yield

    # --- Shutdown ---
    await app.state.review_source.aclose()
    await r.disconnect()
    if settings.STORAGE_BACKEND == "mongo":
        await mongo.disconnect()
        logger.info("Mongo disconnected")
